"""
Identity and people tool inputs.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from .common import (
  AdminaModel,
  CustomFieldKind,
  Department,
  DropdownConfiguration,
  EmployeeStatus,
  EmployeeType,
  EmploymentStatus,
  Lifecycle,
  ManagementType,
  Manager,
  SortOrder,
)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class IdentityFilters(AdminaModel):
  limit: int | None = None
  cursor: str | None = None
  types: list[str] | None = None
  statuses: list[EmployeeStatus] | None = Field(
    None, min_length=1, max_length=1, description="Exactly one status to filter by"
  )
  departments: list[str] | None = None
  keyword: str | None = Field(None, description="Search identities by email or name")


class GetIdentity(AdminaModel):
  identity_id: str = Field(description="The ID of the identity to retrieve")
  expands: list[Literal["customFieldsMetadata"]] | None = Field(
    None, description="Expand other datasets when fetching the identity (e.g. customFieldsMetadata)"
  )


class IdentityAttributes(AdminaModel):
  """Attributes shared by identity create and update."""

  management_type: ManagementType | None = Field(None, description="Management type of the employee")
  display_name: str | None = Field(None, description="Display name of the employee")
  primary_email: str | None = Field(None, description="Primary email of the employee")
  secondary_emails: list[str] | None = Field(None, description="Secondary emails of the employee")
  company_name: str | None = Field(None, description="Company name of the employee")
  work_location: str | None = Field(None, description="Work location of the employee")
  department: Department | None = Field(None, description="Department of the employee")
  job_title: str | None = Field(None, description="Job title of the employee")
  employee_id: str | None = Field(None, description="Employee ID of the employee")
  lifecycle: Lifecycle | None = Field(None, description="Lifecycle of the employee")
  note: str | None = Field(None, description="Notes of the employee")
  custom_fields: dict[str, Any] | None = Field(None, description="Custom fields of the employee")
  manager: Manager | None = Field(None, description="Manager of the employee")


class CreateIdentity(IdentityAttributes):
  employee_status: EmployeeStatus = Field(description="Extended status of the employee")
  employee_type: EmployeeType = Field(description="Type of the employee")
  first_name: str = Field(description="First name of the employee")
  last_name: str = Field(description="Last name of the employee")


class UpdateIdentity(IdentityAttributes):
  identity_id: str = Field(description="The ID of the identity to update")
  employee_status: EmployeeStatus | None = Field(None, description="Extended status of the employee")
  employee_type: EmployeeType | None = Field(None, description="Type of the employee")
  first_name: str | None = Field(None, description="First name of the employee")
  last_name: str | None = Field(None, description="Last name of the employee")


class DeleteIdentity(AdminaModel):
  identity_id: str = Field(description="The ID of the identity to delete")


class MergePeople(AdminaModel):
  from_people_id: int = Field(gt=0, description="Source people ID to merge from")
  to_people_id: int = Field(gt=0, description="Target people ID to merge into")


class MergeIdentity(AdminaModel):
  from_identity_id: str = Field(description="Source identity ID to merge from")
  to_identity_id: str = Field(description="Target identity ID to merge into")


class MergeIdentities(AdminaModel):
  merges: list[MergePeople] | None = Field(
    None, min_length=1, max_length=50, description="People merge operations (1-50 items)"
  )
  identity_merges: list[MergeIdentity] | None = Field(
    None, min_length=1, max_length=50, description="Identity merge operations (1-50 items)"
  )


class CheckIdentityManagementType(AdminaModel):
  email: str | None = Field(None, pattern=EMAIL_PATTERN, description="Email of the new identity to check")
  identity_id: str | None = Field(None, description="Identity ID to be checked")


class GetIdentityFieldConfiguration(AdminaModel):
  identity_id: str | None = Field(
    None, description="Optional identity ID to get the effective configuration for a specific identity"
  )


class GetIdentityConfig(AdminaModel):
  identity_id: str = Field(description="Identity ID whose configuration to fetch")


class ServiceSource(AdminaModel):
  service_field_id: str = Field(
    description=(
      "Service field backing the custom field. Pick a service and one of its workspaces "
      "from the get_services tool"
    )
  )
  workspace_id: int = Field(description="Workspace ID for the service source, from the get_services tool")


class CreateIdentityCustomField(AdminaModel):
  kind: CustomFieldKind = Field(description="The type of the custom field")
  configuration: DropdownConfiguration | None = Field(
    None, description="Dropdown configuration. Only used for dropdown fields."
  )
  attribute_name: str = Field(description="Display label for the custom field")
  attribute_code: str = Field(
    description="Unique identifier for the custom field. Lowercase letters, numbers, and underscores only"
  )
  service_source: ServiceSource


class UpdateIdentityCustomField(AdminaModel):
  custom_field_id: int = Field(description="The ID of the custom field to update")
  attribute_name: str | None = Field(None, description="Display label for the custom field")
  attribute_code: str | None = Field(
    None, description="Unique identifier for the custom field. Lowercase letters, numbers, and underscores only"
  )
  configuration: DropdownConfiguration | None = Field(
    None,
    description="Dropdown configuration (values can be added, removed, reordered, or modified). Dropdown fields only.",
  )


class DeleteIdentityCustomField(AdminaModel):
  custom_field_id: int = Field(
    description=(
      "The ID of the custom field to delete. Make sure the user wants to delete an identity "
      "custom field and not a device custom field"
    )
  )


class PeopleAccountsFilters(AdminaModel):
  people_id: int
  limit: int | None = None
  cursor: str | None = None
  role: Literal["admin", "guest", "other"] | None = None
  two_fa: bool | None = None
  keyword: str | None = None
  service_ids: list[int] | None = None
  workspace_ids: list[int] | None = None
  sort_by: Literal["service", "twoFa", "lastActivity"] | None = None
  sort_order: SortOrder | None = None
  licenses: list[str] | None = None
  status: EmploymentStatus | None = None
