"""Classification of device and action identifiers."""

import enum
import re
from dataclasses import dataclass
from urllib.parse import quote

from .error import InvalidIdentifierError, MissingArgumentError
from .globals import SERIAL_PREFIX

_UDID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)
_SERIAL_PATTERN = re.compile(r"[0-9a-z]{10,12}", re.IGNORECASE | re.ASCII)


class DeviceIdKind(enum.Enum):
    """Shape of a device identifier."""

    UDID = "udid"
    SERIAL = "serial"
    INVALID = "invalid"


@dataclass(frozen=True)
class DeviceId:
    """A classified device identifier.

    `value` is the raw UDID or the bare serial number, without prefix.
    """

    kind: DeviceIdKind
    value: str

    @property
    def path_segment(self) -> str:
        """Render the identifier as used in the API paths."""
        match self.kind:
            case DeviceIdKind.UDID:
                return self.value
            case DeviceIdKind.SERIAL:
                return f"{SERIAL_PREFIX}{self.value.upper()}"

        raise InvalidIdentifierError(f"Invalid device id {self.value!r}")


def classify_device_id(device_id: str) -> DeviceId:
    """Tell a UDID from a serial number.

    A serial number may already carry the `sn-!-` prefix.
    Never raises: unknown shapes give a `DeviceIdKind.INVALID` identifier.
    """
    if _UDID_PATTERN.fullmatch(device_id):
        return DeviceId(DeviceIdKind.UDID, device_id)

    serial = device_id.removeprefix(SERIAL_PREFIX)
    if _SERIAL_PATTERN.fullmatch(serial):
        return DeviceId(DeviceIdKind.SERIAL, serial)

    return DeviceId(DeviceIdKind.INVALID, device_id)


def device_path_segment(device_id: str | None) -> str:
    """Classify and render a device identifier, raise if it is invalid."""
    if not device_id:
        raise InvalidIdentifierError("No device id given")

    return classify_device_id(device_id).path_segment


def action_path_segment(action_id: str | None) -> str:
    """Render an action id as a single, escaped path segment.

    Raises:
        MissingArgumentError: if no action id is given.
        InvalidIdentifierError: for "." and "..", which would change the path.

    """
    if not action_id:
        raise MissingArgumentError("An action id is required")

    if action_id in (".", ".."):
        raise InvalidIdentifierError(f"Invalid action id {action_id!r}")

    return quote(action_id, safe="")
