from __future__ import annotations

from shavtzak._redact import mask_id, redact_for_log


def test_redact_for_log_masks_personal_numbers() -> None:
    payload = {
        "idNumber": "1234567",
        "fullName": "Dana Levi",
        "assignments": [{"vehicleId": "12345", "personId": "7654321", "stay": True}],
    }

    redacted = redact_for_log(payload)
    assert redacted["idNumber"] == "*****67"
    assert redacted["fullName"] == "Dana Levi"
    assert redacted["assignments"][0]["personId"] == "*****21"
    assert redacted["assignments"][0]["vehicleId"] == "12345"
    assert redacted["assignments"][0]["stay"] is True


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_passes_scalars_through() -> None:
    payload = {"vehicleId": "12345", "stay": False, "count": 3, "note": None}
    assert redact_for_log(payload) == payload


def test_redact_for_log_masks_inside_tuples() -> None:
    assert redact_for_log(({"personId": "1234567"},)) == [{"personId": "*****67"}]


def test_mask_id_short_values() -> None:
    assert mask_id("12") == "**"
    assert mask_id("") == ""
