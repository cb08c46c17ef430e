# SPDX-License-Identifier: Apache-2.0
"""SDK-specific exceptions."""


class CeremonySDKError(Exception):
    """Base exception for SDK."""


class ProtocolError(CeremonySDKError):
    """Local step called out of order (e.g. submit before register)."""


class APIError(CeremonySDKError):
    """API request failed (HTTP or validation)."""

    def __init__(self, kind: str, reason: str, status_code: int | None = None):
        super().__init__(f"{kind}: {reason}")
        self.kind = kind
        self.reason = reason
        self.status_code = status_code
