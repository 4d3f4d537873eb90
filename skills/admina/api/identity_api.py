"""
Identity and people API wrappers.
"""

from __future__ import annotations

from typing import Any

from ..client import get_client
from ..schemas.identity import (
  CheckIdentityManagementType,
  CreateIdentity,
  CreateIdentityCustomField,
  DeleteIdentity,
  DeleteIdentityCustomField,
  GetIdentity,
  GetIdentityConfig,
  GetIdentityFieldConfiguration,
  IdentityFilters,
  MergeIdentities,
  PeopleAccountsFilters,
  UpdateIdentity,
  UpdateIdentityCustomField,
)

# ---------------------------------------------------------------------------
# Identities
# ---------------------------------------------------------------------------


async def get_identities(filters: IdentityFilters) -> Any:
  return await get_client().get("/identity", filters.to_query())


async def get_identity(params: GetIdentity) -> Any:
  query = params.to_query(exclude={"identity_id"})
  return await get_client().get(f"/identity/{params.identity_id}", query)


async def create_identity(params: CreateIdentity) -> Any:
  return await get_client().post("/identity", body=params.to_body())


async def update_identity(params: UpdateIdentity) -> Any:
  """Replaces the identity (PUT) with the supplied attributes."""
  body = params.to_body(exclude={"identity_id"})
  return await get_client().put(f"/identity/{params.identity_id}", body)


async def delete_identity(params: DeleteIdentity) -> Any:
  return await get_client().delete(f"/identity/{params.identity_id}")


async def merge_identities(params: MergeIdentities) -> Any:
  return await get_client().post("/identity/merge", body=params.to_body(exclude_none=True))


async def check_identity_management_type(params: CheckIdentityManagementType) -> Any:
  return await get_client().get("/identity/check", params.to_query())


async def get_identities_stats() -> Any:
  return await get_client().get("/identity/stats")


# ---------------------------------------------------------------------------
# Identity field configuration
# ---------------------------------------------------------------------------


async def get_identity_field_configuration(params: GetIdentityFieldConfiguration) -> Any:
  return await get_client().get("/identity/configuration/configuration", params.to_query())


async def get_identity_config(params: GetIdentityConfig) -> Any:
  return await get_client().get(f"/identity/configuration/configuration/{params.identity_id}")


# ---------------------------------------------------------------------------
# Identity custom fields
# ---------------------------------------------------------------------------


async def get_identity_custom_fields() -> Any:
  return await get_client().get("/identity/fields/custom")


async def create_identity_custom_field(params: CreateIdentityCustomField) -> Any:
  """Configuration is only meaningful for dropdowns; other kinds send null."""
  configuration = None
  if params.kind == "dropdown" and params.configuration is not None:
    configuration = params.configuration.model_dump(mode="json", by_alias=True, exclude_none=True)
  body = {
    "kind": params.kind,
    "serviceSource": {
      "serviceFieldId": params.service_source.service_field_id,
      "workspaceId": params.service_source.workspace_id,
    },
    "attributeName": params.attribute_name,
    "attributeCode": params.attribute_code,
    "configuration": configuration,
  }
  return await get_client().post("/identity/fields/custom", body=body)


async def update_identity_custom_field(params: UpdateIdentityCustomField) -> Any:
  body = params.to_body(exclude={"custom_field_id"})
  return await get_client().patch(f"/identity/fields/custom/{params.custom_field_id}", body)


async def delete_identity_custom_field(params: DeleteIdentityCustomField) -> Any:
  return await get_client().delete(f"/identity/fields/custom/{params.custom_field_id}")


# ---------------------------------------------------------------------------
# People
# ---------------------------------------------------------------------------


async def get_people_accounts(filters: PeopleAccountsFilters) -> Any:
  query = filters.to_query(exclude={"people_id"})
  return await get_client().get(f"/people/{filters.people_id}/accounts", query)
