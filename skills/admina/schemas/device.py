"""
Device tool inputs.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import ConfigDict, Field

from .common import AdminaModel, CustomFieldKind, DropdownConfiguration, EmploymentStatus, Language, SortOrder

DeviceStatus = Literal["in_stock", "pre_use", "active", "missing", "malfunction", "decommissioned", "on_order"]
DeviceType = Literal["pc", "phone", "other"]
DeviceSubtype = Literal[
  "desktop_pc", "laptop_pc", "tablet_pc", "phone", "monitor", "server", "peripheral_device", "other"
]


class DeviceFilters(AdminaModel):
  """GET /devices filters (all sent as query parameters)."""

  status: Literal["in_stock", "pre_use", "active", "missing", "malfunction", "decommissioned"] | None = None
  asset_number: str | None = Field(None, alias="asset_number")
  serial_number: str | None = Field(None, alias="serial_number")
  identity_id: str | None = Field(
    None, description="Filter by assigned identity (from the get_identities tool)"
  )
  people_id: int | None = None
  locale: Language = "ja"
  limit: int | None = None
  cursor: str | None = None
  type: str | None = None


class DeviceFilterOptions(AdminaModel):
  min_date: str | None = Field(None, description="Only supported by fields with `date` kind")
  max_date: str | None = Field(None, description="Only supported by fields with `date` kind")
  min_number: int | float | None = Field(
    None, description="Only supported by fields with `number` kind and few special fields such as `$age`"
  )
  max_number: int | float | None = Field(
    None, description="Only supported by fields with `number` kind and few special fields such as `$age`"
  )
  eq: str | None = Field(None, description="Only supported by fields with `dropdown` kind")


class DeviceSearch(AdminaModel):
  """POST /devices/search: paging and sorting in the query, filters in the body."""

  limit: int | None = Field(None, le=200, description="Maximum number of items to return per page")
  cursor: str | None = Field(None, description="Base64-encoded cursor for pagination")
  sort_by: str | None = Field(
    None, description="Sort by field. Format: `<preset | custom>.<unique field name>` or `people.displayName`"
  )
  sort_order: SortOrder | None = Field(None, description="Sort order for the results")
  expands: list[Literal["relatedIdentity", "customFieldsMetadata"]] | None = Field(
    None, description="Expand other datasets when fetching devices"
  )

  people_id: int | None = Field(None, description="Filter devices by the people ID assigned to them")
  type: DeviceType | None = Field(None, description="Filter devices by device type")
  employee_status: EmploymentStatus | None = Field(
    None, description="Filter devices by the employment status of the assigned person"
  )
  search_term: str | None = Field(None, description="Search term to filter devices")
  search_fields: list[str] | None = Field(
    None,
    description=(
      "Field names to search within when using searchTerm. "
      "Supports memo, people fields, preset fields, and custom fields"
    ),
  )
  filters: dict[str, DeviceFilterOptions] | None = Field(
    None,
    description=(
      "Advanced filters. Keys look like `preset.<unique field name>`. "
      "There are certain extra virtual fields, such as `$age`"
    ),
  )


SEARCH_QUERY_FIELDS = frozenset({"limit", "cursor", "sort_by", "sort_order", "expands"})


class DeviceFields(AdminaModel):
  """Device field values keyed by `preset.*` / `custom.*` names."""

  model_config = ConfigDict(extra="allow", populate_by_name=True, protected_namespaces=())

  __pydantic_extra__: dict[str, Union[str, int, float, None]]

  asset_number: str = Field(alias="preset.asset_number", description="Asset number (REQUIRED)")
  subtype: DeviceSubtype = Field(alias="preset.subtype", description="Device subtype (REQUIRED)")
  model_name: str = Field(alias="preset.model_name", description="Model name (REQUIRED)")

  serial_number: str | None = Field(None, alias="preset.serial_number", description="Serial number")
  model_number: str | None = Field(None, alias="preset.model_number", description="Model number")
  memory: str | None = Field(None, alias="preset.memory", description="Memory specification")
  hdd_ssd: str | None = Field(None, alias="preset.hdd_ssd", description="Storage specification")
  cpu: str | None = Field(None, alias="preset.cpu", description="CPU specification")
  os: str | None = Field(None, alias="preset.os", description="Operating system")
  size: str | None = Field(None, alias="preset.size", description="Size/dimensions")
  manufacturer: str | None = Field(None, alias="preset.manufacturer", description="Manufacturer name")
  supplier: str | None = Field(None, alias="preset.supplier", description="Supplier name")
  procurement_method: Literal["purchase", "lease", "rental", "other"] | None = Field(
    None, alias="preset.procurement_method", description="Procurement method"
  )
  purchase_date: str | None = Field(None, alias="preset.purchase_date", description="Purchase date (YYYY-MM-DD)")
  purchase_cost: int | float | None = Field(None, alias="preset.purchase_cost", description="Purchase cost")
  warranty_period: str | None = Field(None, alias="preset.warranty_period", description="Warranty period")
  decommission_date: str | None = Field(
    None, alias="preset.decommission_date", description="Decommission date (YYYY-MM-DD)"
  )
  scheduled_return_date: str | None = Field(
    None, alias="preset.scheduled_return_date", description="Scheduled return date (YYYY-MM-DD)"
  )
  fixed_asset: Literal["yes", "no"] | None = Field(None, alias="preset.fixed_asset", description="Fixed asset status")
  phone_number: str | None = Field(None, alias="preset.phone_number", description="Phone number (phones)")
  sim_number: str | None = Field(None, alias="preset.sim_number", description="SIM number (phones)")
  mobile_plan: str | None = Field(None, alias="preset.mobile_plan", description="Mobile plan (phones)")
  hostname: str | None = Field(None, alias="preset.hostname", description="Hostname")
  version: str | None = Field(None, alias="preset.version", description="Version")
  keyboard_layout: Literal["us", "uk", "jis", "other"] | None = Field(
    None, alias="preset.keyboard_layout", description="Keyboard layout"
  )
  usage_start_date: str | None = Field(
    None, alias="preset.usage_start_date", description="Usage start date (YYYY-MM-DD)"
  )
  usage_end_date: str | None = Field(None, alias="preset.usage_end_date", description="Usage end date (YYYY-MM-DD)")


class CreateDevice(AdminaModel):
  fields: DeviceFields = Field(
    description="Device field values. preset.asset_number, preset.subtype and preset.model_name are required"
  )
  memo: str | None = Field(None, description="Additional notes or memo about the device")


class UpdateDevice(AdminaModel):
  device_id: int = Field(description="The ID of the device to update")
  fields: DeviceFields = Field(
    description="Device field values. preset.asset_number, preset.subtype and preset.model_name are always required"
  )
  memo: str | None = Field(None, description="Additional notes or memo about the device")


class UpdateDeviceMeta(AdminaModel):
  device_id: int = Field(description="The ID of the device to update")
  status: DeviceStatus | None = Field(
    None,
    description="Device status. If 'in_stock' or 'decommissioned', the device is unassigned and assignment dates cleared",
  )
  people_id: int | None = Field(
    None,
    description=(
      "People ID to assign the device to. Set to null to unassign. "
      "Cannot assign if status is 'in_stock' or 'decommissioned'"
    ),
  )
  assignment_start_date: str | None = Field(None, description="Assignment start date (YYYY-MM-DD)")
  assignment_end_date: str | None = Field(None, description="Assignment end date (YYYY-MM-DD)")
  location1: str | None = Field(None, description="Primary location information")
  location2: str | None = Field(None, description="Secondary location information")


class CreateDeviceCustomField(AdminaModel):
  attribute_name: str = Field(description="Display label for the custom field")
  attribute_code: str = Field(
    description="Unique identifier for the custom field. Lowercase letters, numbers, and underscores only"
  )
  kind: CustomFieldKind = Field(description="The type of the custom field")
  configuration: DropdownConfiguration | None = Field(
    None, description="Dropdown configuration with values. Only required for 'dropdown' kind fields."
  )


class UpdateDeviceCustomField(AdminaModel):
  custom_field_id: int = Field(description="The ID of the custom field to update")
  visible_for_type: list[DeviceType] | None = Field(
    None, description="List of device types this field is visible for"
  )
  configuration: DropdownConfiguration | None = Field(
    None,
    description="Dropdown configuration (values can be added, removed, reordered, or modified). Dropdown fields only.",
  )
  attribute_name: str | None = Field(None, description="Display label for the custom field")
  attribute_code: str | None = Field(
    None, description="Unique identifier for the custom field. Lowercase letters, numbers, and underscores only"
  )


class DeleteDeviceCustomField(AdminaModel):
  custom_field_id: int = Field(
    description=(
      "The ID of the custom field to delete. Make sure the user wants to delete a device "
      "custom field and not an identity custom field"
    )
  )
