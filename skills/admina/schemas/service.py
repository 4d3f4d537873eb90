"""
Service, service account and provisioning tool inputs.
"""

from __future__ import annotations

from typing import Literal, Union
from uuid import UUID

from pydantic import Field

from .common import AdminaModel, EmployeeType, EmploymentStatus, Language


class ServiceFilters(AdminaModel):
  limit: int | None = None
  cursor: str | None = None
  keyword: str | None = Field(None, description="Search services by name")
  sort_by: str | None = None
  sort_order: str | None = None


class ServiceAccountFilters(AdminaModel):
  service_id: int = Field(description="Service ID, from the get_services tool")
  limit: int | None = None
  cursor: str | None = None
  keyword: str | None = Field(None, description="Search accounts by email or name")
  sort_by: str | None = None
  sort_order: str | None = None
  workspace_ids: list[int] | None = None
  two_fa: bool | None = None
  roles: list[Literal["admin", "guest", "other"]] | None = Field(None, min_length=1, max_length=1)
  service_roles: list[str] | None = None
  types: list[Literal["employee", "guest", "system", "unknown"]] | None = None
  employee_types: list[EmployeeType] | None = Field(None, min_length=1, max_length=1)
  employee_statuses: list[EmploymentStatus] | None = Field(None, min_length=1, max_length=1)
  statuses: list[EmploymentStatus] | None = Field(None, min_length=1, max_length=1)
  include_deleted: bool | None = None
  expand_identities: bool | None = None
  only_inactive: bool | None = None
  licenses: list[str] | None = None
  alert_type: Literal[
    "retired_account", "inactive_account", "on_leave_account", "unknown_account", "public_files"
  ] | None = None
  alert_status: Literal["muted", "unmuted"] | None = None


class ProvisioningMetaFilters(AdminaModel):
  organization_id: int = Field(description="Organization ID where the workspace belongs")
  workspace_id: int = Field(description="Workspace ID to get provisioning metadata for")
  lang: Language = Field("ja", description="Language for field descriptions")


class CreateServiceAccount(AdminaModel):
  organization_id: int = Field(description="Organization ID where the workspace belongs")
  workspace_id: int = Field(description="Workspace ID to create the account in")
  data: dict[str, Union[str, list[str]]] = Field(
    description="Account data built from the get_provisioning_meta response"
  )
  workflow_run_id: UUID | None = Field(None, description="Optional workflow run ID for tracking")
  lang: Language = Field("ja", description="Language for responses")
