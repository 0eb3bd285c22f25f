"""Client library for the Moki device-management API."""

from .client import (
    MokiClient,
    action,
    device_managed_apps,
    device_profiles,
    ios_profiles,
    perform_action,
    tenant_managed_apps,
)
from .config import MokiConfig
from .error import (
    ConfigurationError,
    DecodeError,
    InvalidIdentifierError,
    MissingArgumentError,
    MokiError,
    TransportError,
)
from .identifier import DeviceId, DeviceIdKind, classify_device_id
from .model.data import Action, DeviceManagedApp, IOSProfile, TenantManagedApp
from .requests import MokiAPI

__version__ = "0.1.0"
__all__ = [
    "Action",
    "ConfigurationError",
    "DecodeError",
    "DeviceId",
    "DeviceIdKind",
    "DeviceManagedApp",
    "IOSProfile",
    "InvalidIdentifierError",
    "MissingArgumentError",
    "MokiAPI",
    "MokiClient",
    "MokiConfig",
    "MokiError",
    "TenantManagedApp",
    "TransportError",
    "action",
    "classify_device_id",
    "device_managed_apps",
    "device_profiles",
    "ios_profiles",
    "perform_action",
    "tenant_managed_apps",
]
