"""
Service and provisioning tools.
"""

from __future__ import annotations

from mcp.types import Tool

from ..schemas import CreateServiceAccount, ProvisioningMetaFilters, ServiceAccountFilters, ServiceFilters

service_tools: list[Tool] = [
  Tool(
    name="get_services",
    description=(
      "Return a list of services, along with the preview of the accounts. "
      "Can be searched by the service name by keyword"
    ),
    inputSchema=ServiceFilters.model_json_schema(),
  ),
  Tool(
    name="get_service_accounts",
    description=(
      "Return a list of accounts for a specific service. The serviceId can be obtained from the "
      "get_services tool. Can be searched by email/name of the account by keyword"
    ),
    inputSchema=ServiceAccountFilters.model_json_schema(),
  ),
  Tool(
    name="get_provisioning_meta",
    description=(
      "Step 1 of provisioning: Get provisioning metadata for a workspace. Returns required fields "
      "and constraints for creating service accounts. Use organizationId and workspaceId to specify "
      "the target workspace."
    ),
    inputSchema=ProvisioningMetaFilters.model_json_schema(),
  ),
  Tool(
    name="create_service_account",
    description=(
      "Step 2 of provisioning: Create a service account in a workspace. First call "
      "get_provisioning_meta to get required fields, then use this tool with the constructed data "
      "object based on the metadata response."
    ),
    inputSchema=CreateServiceAccount.model_json_schema(),
  ),
]
