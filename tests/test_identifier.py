import pytest

from moki.error import InvalidIdentifierError, MissingArgumentError
from moki.identifier import (
    DeviceId,
    DeviceIdKind,
    action_path_segment,
    classify_device_id,
    device_path_segment,
)

UDID = "abcd1234-1234-1234-1234-abcdef123456"
ACTION_ID = "b4d71a15-183b-4971-a3bd-d139754a40fe"


@pytest.mark.parametrize(
    "device_id",
    [UDID, UDID.upper(), "00000000-0000-0000-0000-000000000000"],
)
def test_udid_is_kept_as_is(device_id):
    assert classify_device_id(device_id) == DeviceId(DeviceIdKind.UDID, device_id)
    assert device_path_segment(device_id) == device_id


@pytest.mark.parametrize(
    ("device_id", "segment"),
    [
        ("ABCDEFGHIJ12", "sn-!-ABCDEFGHIJ12"),
        ("abcdefghij12", "sn-!-ABCDEFGHIJ12"),
        ("C02XK1ZZJG5", "sn-!-C02XK1ZZJG5"),
        ("F17XQ2ABCD", "sn-!-F17XQ2ABCD"),
        ("sn-!-ABCDEFGHIJ12", "sn-!-ABCDEFGHIJ12"),
    ],
)
def test_serial_is_prefixed_once(device_id, segment):
    assert classify_device_id(device_id).kind is DeviceIdKind.SERIAL
    assert device_path_segment(device_id) == segment


def test_prefixed_serial_value_has_no_prefix():
    assert classify_device_id("sn-!-ABCDEFGHIJ12").value == "ABCDEFGHIJ12"


@pytest.mark.parametrize(
    "device_id",
    [
        "ermishness-nope",
        "ABC",
        "ABCDEFGHIJ1234",
        "abcd1234-1234-1234-1234-abcdef12345",
        "abcd1234-1234-1234-1234-abcdef12345g",
        "sn-!-",
        "sn-!-sn-!-ABCDEFGHIJ12",
        "ABCDEF HIJ12",
        "",
    ],
)
def test_unknown_shapes_are_invalid(device_id):
    assert classify_device_id(device_id).kind is DeviceIdKind.INVALID
    with pytest.raises(InvalidIdentifierError):
        device_path_segment(device_id)


def test_none_is_invalid():
    with pytest.raises(InvalidIdentifierError):
        device_path_segment(None)


@pytest.mark.parametrize(
    ("action_id", "segment"),
    [
        (ACTION_ID, ACTION_ID),
        ("../iosmanagedapps", "..%2Fiosmanagedapps"),
        ("a b?c#d", "a%20b%3Fc%23d"),
    ],
)
def test_action_id_is_one_escaped_segment(action_id, segment):
    assert action_path_segment(action_id) == segment


@pytest.mark.parametrize("action_id", [".", ".."])
def test_dot_action_ids_are_invalid(action_id):
    with pytest.raises(InvalidIdentifierError):
        action_path_segment(action_id)


@pytest.mark.parametrize("action_id", [None, ""])
def test_missing_action_id(action_id):
    with pytest.raises(MissingArgumentError):
        action_path_segment(action_id)
