"""
Shared pydantic building blocks for Admina tool inputs.

Attributes are snake_case; the wire format (and the JSON Schema shown to the
model) is camelCase via aliases.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..params import filters_to_params

EmployeeStatus = Literal["active", "on_leave", "draft", "preactive", "retired", "untracked", "archived"]
EmploymentStatus = Literal["active", "on_leave", "draft", "preactive", "retired", "untracked"]
EmployeeType = Literal[
  "board_member",
  "full_time_employee",
  "fixed_time_employee",
  "temporary_employee",
  "part_time_employee",
  "secondment_employee",
  "contract_employee",
  "collaborator",
  "group_address",
  "shared_address",
  "test_address",
  "other",
  "unknown",
  "unregistered",
]
ManagementType = Literal["managed", "external", "system", "unknown", "unregistered"]
CustomFieldKind = Literal["text", "number", "date", "dropdown"]
SortOrder = Literal["ASC", "DESC"]
Language = Literal["ja", "en"]


class AdminaModel(BaseModel):
  """Base for tool inputs: camelCase aliases, unknown keys ignored."""

  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

  def to_query(
    self,
    include: Collection[str] | None = None,
    exclude: Collection[str] = (),
    comma_joined: Collection[str] = (),
  ) -> list[tuple[str, str]]:
    """Serialize (a subset of) the fields as query string pairs."""
    data = self.model_dump(
      mode="json",
      by_alias=True,
      include=set(include) if include is not None else None,
      exclude=set(exclude),
    )
    return filters_to_params(data, comma_joined)

  def to_body(
    self,
    include: Collection[str] | None = None,
    exclude: Collection[str] = (),
    exclude_none: bool = False,
  ) -> dict[str, Any]:
    """Serialize the fields the caller supplied as a JSON body."""
    return self.model_dump(
      mode="json",
      by_alias=True,
      exclude_unset=True,
      exclude_none=exclude_none,
      include=set(include) if include is not None else None,
      exclude=set(exclude),
    )


class EmptyParams(AdminaModel):
  """Tools that take no arguments."""

  pass


class DropdownValue(AdminaModel):
  id: str = Field(description="Stable identifier for the option")
  value: str = Field(description="Display name for the option")
  group: str | None = Field(None, description="Optional group for the option")


class DropdownConfiguration(AdminaModel):
  values: list[DropdownValue] = Field(
    description="Dropdown items with id (stable identifier) and value (display name)"
  )


class Department(AdminaModel):
  name: str | None = None


class Lifecycle(AdminaModel):
  contract_start_at: str | None = Field(None, description="Contract start date (YYYY-MM-DD)")
  contract_end_at: str | None = Field(None, description="Contract end date (YYYY-MM-DD)")
  suspension_start_at: str | None = Field(None, description="Suspension start date (YYYY-MM-DD)")
  suspension_end_at: str | None = Field(None, description="Suspension end date (YYYY-MM-DD)")


class Manager(AdminaModel):
  id: str | None = Field(None, description="Manager identity ID")
