"""Client implementation, returning typed records."""

from collections.abc import Mapping
from typing import Any, TypeVar

from .config import MokiConfig
from .error import DecodeError
from .model.data import Action, DeviceManagedApp, IOSProfile, Record, TenantManagedApp
from .requests import MokiAPI

RecordT = TypeVar("RecordT", bound=Record)


class MokiClient:
    """Client for a Moki tenant.

    Wraps a `MokiAPI` dispatcher and maps its JSON into records.
    """

    def __init__(self, config: MokiConfig, api: MokiAPI | None = None):
        """MokiClient constructor.

        :param config: base url, tenant id and API key
        :param api: dispatcher to use, built from `config` when not given
        """
        self._api = api if api is not None else MokiAPI(config)

    @property
    def api(self) -> MokiAPI:
        """The underlying dispatcher."""
        return self._api

    def ios_profiles(self) -> list[IOSProfile]:
        """List the iOS profiles of the tenant."""
        return _to_records(IOSProfile, self._api.ios_profiles())

    def device_profiles(self, device_id: str) -> list[IOSProfile]:
        """List the profiles installed on a device."""
        return _to_records(IOSProfile, self._api.device_profile_list(device_id))

    def device_managed_apps(self, device_id: str) -> list[DeviceManagedApp]:
        """List the managed apps installed on a device."""
        return _to_records(
            DeviceManagedApp, self._api.device_managed_app_list(device_id)
        )

    def tenant_managed_apps(self) -> list[TenantManagedApp]:
        """List the managed apps available to the tenant."""
        return _to_records(TenantManagedApp, self._api.tenant_managed_app_list())

    def action(self, device_id: str, action_id: str | None = None) -> Action:
        """Get an action sent to a device."""
        return Action.from_hash(self._api.action(device_id, action_id))

    def perform_action(
        self, device_id: str, body: Mapping[str, Any] | Action | None
    ) -> Action:
        """Send an action to a device and return it as acknowledged by the API."""
        if isinstance(body, Action):
            body = body.to_hash()

        return Action.from_hash(self._api.perform_action(device_id, body))


def _to_records(record_type: type[RecordT], content: Any) -> list[RecordT]:
    """Map a decoded JSON array to records, keeping the order."""
    if content is None:
        return []

    if not isinstance(content, list):
        raise DecodeError(
            f"Expected a JSON array of {record_type.__name__}, "
            f"got {type(content).__name__}"
        )

    return [record_type.from_hash(item) for item in content]


def ios_profiles() -> list[IOSProfile]:
    """List the iOS profiles, configured from the environment."""
    return MokiClient(MokiConfig.from_env()).ios_profiles()


def device_profiles(device_id: str) -> list[IOSProfile]:
    """List the profiles of a device, configured from the environment."""
    return MokiClient(MokiConfig.from_env()).device_profiles(device_id)


def device_managed_apps(device_id: str) -> list[DeviceManagedApp]:
    """List the managed apps of a device, configured from the environment."""
    return MokiClient(MokiConfig.from_env()).device_managed_apps(device_id)


def tenant_managed_apps() -> list[TenantManagedApp]:
    """List the managed apps of the tenant, configured from the environment."""
    return MokiClient(MokiConfig.from_env()).tenant_managed_apps()


def action(device_id: str, action_id: str | None = None) -> Action:
    """Get an action, configured from the environment."""
    return MokiClient(MokiConfig.from_env()).action(device_id, action_id)


def perform_action(
    device_id: str, body: Mapping[str, Any] | Action | None
) -> Action:
    """Send an action, configured from the environment."""
    return MokiClient(MokiConfig.from_env()).perform_action(device_id, body)
