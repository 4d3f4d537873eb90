"""
Identity and people domain tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..api import identity_api
from ..helpers import ErrorCategory, ToolResult, format_json, log_and_format_error
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
from ..validation import ValidationError, parse_args


async def get_identities(args: dict[str, Any]) -> ToolResult:
  try:
    filters = parse_args(IdentityFilters, args)
    result = await identity_api.get_identities(filters)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_identities", e, ErrorCategory.IDENTITY)


async def get_identity(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(GetIdentity, args)
    result = await identity_api.get_identity(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_identity", e, ErrorCategory.IDENTITY)


async def create_identity(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(CreateIdentity, args)
    result = await identity_api.create_identity(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("create_identity", e, ErrorCategory.IDENTITY)


async def update_identity(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(UpdateIdentity, args)
    result = await identity_api.update_identity(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("update_identity", e, ErrorCategory.IDENTITY)


async def delete_identity(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(DeleteIdentity, args)
    result = await identity_api.delete_identity(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("delete_identity", e, ErrorCategory.IDENTITY)


async def merge_identities(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(MergeIdentities, args)
    if not params.merges and not params.identity_merges:
      raise ValidationError([("(root)", "Provide merges or identityMerges")])
    result = await identity_api.merge_identities(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("merge_identities", e, ErrorCategory.IDENTITY)


async def check_identity_management_type(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(CheckIdentityManagementType, args)
    result = await identity_api.check_identity_management_type(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("check_identity_management_type", e, ErrorCategory.IDENTITY)


async def get_identities_stats(args: dict[str, Any]) -> ToolResult:
  try:
    result = await identity_api.get_identities_stats()
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_identities_stats", e, ErrorCategory.IDENTITY)


async def get_identity_field_configuration(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(GetIdentityFieldConfiguration, args)
    result = await identity_api.get_identity_field_configuration(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_identity_field_configuration", e, ErrorCategory.IDENTITY)


async def get_identity_config(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(GetIdentityConfig, args)
    result = await identity_api.get_identity_config(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_identity_config", e, ErrorCategory.IDENTITY)


async def get_identity_custom_fields(args: dict[str, Any]) -> ToolResult:
  try:
    result = await identity_api.get_identity_custom_fields()
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_identity_custom_fields", e, ErrorCategory.IDENTITY)


async def create_identity_custom_field(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(CreateIdentityCustomField, args)
    result = await identity_api.create_identity_custom_field(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("create_identity_custom_field", e, ErrorCategory.IDENTITY)


async def update_identity_custom_field(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(UpdateIdentityCustomField, args)
    result = await identity_api.update_identity_custom_field(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("update_identity_custom_field", e, ErrorCategory.IDENTITY)


async def delete_identity_custom_field(args: dict[str, Any]) -> ToolResult:
  try:
    params = parse_args(DeleteIdentityCustomField, args)
    result = await identity_api.delete_identity_custom_field(params)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("delete_identity_custom_field", e, ErrorCategory.IDENTITY)


async def get_people_accounts(args: dict[str, Any]) -> ToolResult:
  try:
    filters = parse_args(PeopleAccountsFilters, args)
    result = await identity_api.get_people_accounts(filters)
    return ToolResult(content=format_json(result))
  except Exception as e:
    return log_and_format_error("get_people_accounts", e, ErrorCategory.PEOPLE)
