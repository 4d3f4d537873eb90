"""
Service, service account and provisioning API wrappers.
"""

from __future__ import annotations

from typing import Any

from ..client import get_client
from ..schemas.service import CreateServiceAccount, ProvisioningMetaFilters, ServiceAccountFilters, ServiceFilters


async def get_services(filters: ServiceFilters) -> Any:
  return await get_client().get("/services", filters.to_query())


async def get_service_accounts(filters: ServiceAccountFilters) -> Any:
  query = filters.to_query(exclude={"service_id"})
  return await get_client().get(f"/services/{filters.service_id}/accounts", query)


# ---------------------------------------------------------------------------
# Provisioning
#
# These paths carry their own /organizations/{id} segment and are still
# appended below the configured organization.
# ---------------------------------------------------------------------------


def _workspace_path(organization_id: int, workspace_id: int, suffix: str) -> str:
  return f"/organizations/{organization_id}/workspaces/{workspace_id}/{suffix}"


async def get_provisioning_meta(filters: ProvisioningMetaFilters) -> Any:
  path = _workspace_path(filters.organization_id, filters.workspace_id, "provisioning-meta")
  return await get_client().get(path, {"lang": filters.lang})


async def create_service_account(params: CreateServiceAccount) -> Any:
  path = _workspace_path(params.organization_id, params.workspace_id, "accounts")
  body = params.to_body(include={"data", "workflow_run_id"}, exclude_none=True)
  return await get_client().post(path, {"lang": params.lang}, body)
