"""
Identity and people tools.
"""

from __future__ import annotations

from mcp.types import Tool

from ..schemas import (
  CheckIdentityManagementType,
  CreateIdentity,
  CreateIdentityCustomField,
  DeleteIdentity,
  DeleteIdentityCustomField,
  EmptyParams,
  GetIdentity,
  GetIdentityConfig,
  GetIdentityFieldConfiguration,
  IdentityFilters,
  MergeIdentities,
  PeopleAccountsFilters,
  UpdateIdentity,
  UpdateIdentityCustomField,
)

identity_tools: list[Tool] = [
  Tool(
    name="get_identities",
    description=(
      "Return a list of identities. Can be filtered by the status, department and type. "
      "Can also search by the email or name by keyword"
    ),
    inputSchema=IdentityFilters.model_json_schema(),
  ),
  Tool(
    name="get_identity",
    description="Return a single identity by ID.",
    inputSchema=GetIdentity.model_json_schema(),
  ),
  Tool(
    name="create_identity",
    description="Create a new identity (employee record).",
    inputSchema=CreateIdentity.model_json_schema(),
  ),
  Tool(
    name="update_identity",
    description="Replace the attributes of an existing identity.",
    inputSchema=UpdateIdentity.model_json_schema(),
  ),
  Tool(
    name="delete_identity",
    description="Delete an identity.",
    inputSchema=DeleteIdentity.model_json_schema(),
  ),
  Tool(
    name="merge_identities",
    description="Merge people or identities into a target. Provide merges, identityMerges, or both (1-50 items each).",
    inputSchema=MergeIdentities.model_json_schema(),
  ),
  Tool(
    name="check_identity_management_type",
    description="Check which management type an email or existing identity would get.",
    inputSchema=CheckIdentityManagementType.model_json_schema(),
  ),
  Tool(
    name="get_identities_stats",
    description="Return identity counts by status and type for the organization.",
    inputSchema=EmptyParams.model_json_schema(),
  ),
  Tool(
    name="get_identity_field_configuration",
    description="Return the identity field configuration, optionally as effective for one identity.",
    inputSchema=GetIdentityFieldConfiguration.model_json_schema(),
  ),
  Tool(
    name="get_identity_config",
    description="Return the field configuration for a specific identity.",
    inputSchema=GetIdentityConfig.model_json_schema(),
  ),
  Tool(
    name="get_identity_custom_fields",
    description="Return the custom fields defined for identities.",
    inputSchema=EmptyParams.model_json_schema(),
  ),
  Tool(
    name="create_identity_custom_field",
    description="Create an identity custom field backed by a service field.",
    inputSchema=CreateIdentityCustomField.model_json_schema(),
  ),
  Tool(
    name="update_identity_custom_field",
    description="Update an identity custom field's label, code or dropdown values.",
    inputSchema=UpdateIdentityCustomField.model_json_schema(),
  ),
  Tool(
    name="delete_identity_custom_field",
    description="Delete an identity custom field.",
    inputSchema=DeleteIdentityCustomField.model_json_schema(),
  ),
  Tool(
    name="get_people_accounts",
    description="Return the service accounts linked to a person. Can be filtered by role, 2FA, service, workspace and status.",
    inputSchema=PeopleAccountsFilters.model_json_schema(),
  ),
]
