# SPDX-License-Identifier: Apache-2.0
"""Security helpers: sanitize_text, sha3_256_hex, error payloads."""
from ceremony.core.exceptions import CapacityExceeded, Incomplete, UnknownParticipant
from ceremony.core.security import sanitize_text, sha3_256_hex


def test_sanitize_text_empty():
    assert sanitize_text("") == ""


def test_sanitize_text_strips_html():
    assert "<script>" not in sanitize_text("Hello <script>alert(1)</script> world")
    assert sanitize_text("Hello <b>bold</b>") == "Hello bold"


def test_sanitize_text_strips_control_chars():
    assert sanitize_text("Bar\x00ry\n") == "Barry"


def test_sanitize_text_enforces_max_len():
    assert len(sanitize_text("a" * 3000, max_len=100)) == 100


def test_sha3_256_hex_hex_output():
    h = sha3_256_hex("test")
    assert len(h) == 64
    assert all(c in "0123456789abcdef" for c in h)
    assert sha3_256_hex(b"te", "st") == h


def test_error_payloads():
    assert CapacityExceeded(3).to_payload()["kind"] == "CapacityExceeded"
    assert UnknownParticipant(4).reason == "4 hasn't registered yet"
    payload = Incomplete(1, 3).to_payload()
    assert payload == {
        "status": "fail",
        "kind": "Incomplete",
        "reason": "1 of 3 participants have submitted",
        "submitted": 1,
        "required": 3,
    }
