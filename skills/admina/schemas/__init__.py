"""
Input models for every Admina tool.
"""

from __future__ import annotations

from .common import AdminaModel, EmptyParams
from .device import (
  CreateDevice,
  CreateDeviceCustomField,
  DeleteDeviceCustomField,
  DeviceFilters,
  DeviceSearch,
  UpdateDevice,
  UpdateDeviceCustomField,
  UpdateDeviceMeta,
)
from .identity import (
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
from .service import CreateServiceAccount, ProvisioningMetaFilters, ServiceAccountFilters, ServiceFilters

__all__ = [
  "AdminaModel",
  "CheckIdentityManagementType",
  "CreateDevice",
  "CreateDeviceCustomField",
  "CreateIdentity",
  "CreateIdentityCustomField",
  "CreateServiceAccount",
  "DeleteDeviceCustomField",
  "DeleteIdentity",
  "DeleteIdentityCustomField",
  "DeviceFilters",
  "DeviceSearch",
  "EmptyParams",
  "GetIdentity",
  "GetIdentityConfig",
  "GetIdentityFieldConfiguration",
  "IdentityFilters",
  "MergeIdentities",
  "PeopleAccountsFilters",
  "ProvisioningMetaFilters",
  "ServiceAccountFilters",
  "ServiceFilters",
  "UpdateDevice",
  "UpdateDeviceCustomField",
  "UpdateDeviceMeta",
  "UpdateIdentity",
  "UpdateIdentityCustomField",
]
