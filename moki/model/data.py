# ruff: noqa: D101
"""Data models for the Moki API using Pydantic.

Fields mirror what the API returns. Payloads use camelCase keys, the records
use snake_case attributes, both spellings are accepted on input. Fields hold
whatever JSON value the API sends, no type is enforced. Unknown fields are
ignored.
"""

from collections.abc import Mapping
from typing import Any, Self

import pydantic
from pydantic import BaseModel, ConfigDict, Field, JsonValue

from ..error import DecodeError


class Record(BaseModel):
    """Base class of the records returned by the Moki API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_hash(cls, data: Mapping[str, Any]) -> Self:
        """Build a record from a decoded JSON object.

        Raises:
            DecodeError: if `data` is not a JSON object.

        """
        if not isinstance(data, Mapping):
            raise DecodeError(
                f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
            )

        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as error:
            raise DecodeError(f"Invalid {cls.__name__}") from error

    def to_hash(self) -> dict[str, Any]:
        """Serialize the known fields that were set, using the API keys."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class IOSProfile(Record):
    id: JsonValue = None
    display_name: JsonValue = Field(default=None, alias="displayName")
    identifier: JsonValue = None
    profile_data: JsonValue = Field(default=None, alias="profileData")


class DeviceManagedApp(Record):
    app_identifier: JsonValue = Field(default=None, alias="appIdentifier")
    version: JsonValue = None


class TenantManagedApp(Record):
    id: JsonValue = None
    name: JsonValue = None
    app_identifier: JsonValue = Field(default=None, alias="appIdentifier")
    version: JsonValue = None
    manifest_url: JsonValue = Field(default=None, alias="ManifestURL")
    ios_manifest: JsonValue = Field(default=None, alias="iOSManifest")


class Action(Record):
    id: JsonValue = None
    last_seen: JsonValue = Field(default=None, alias="lastSeen")
    action: JsonValue = None
    status: JsonValue = None
    client_name: JsonValue = Field(default=None, alias="clientName")
    item_name: JsonValue = Field(default=None, alias="itemName")
    third_party_user: JsonValue = Field(default=None, alias="thirdPartyUser")
    payload: JsonValue = None
    notify: JsonValue = None
