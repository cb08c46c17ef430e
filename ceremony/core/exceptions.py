# SPDX-License-Identifier: Apache-2.0
"""Custom exception classes."""
from __future__ import annotations


class CeremonyError(Exception):
    """Base exception for the session coordinator.

    Every subclass carries a machine-readable ``kind`` and the HTTP status the
    API reports it with; the message is the human-readable reason.
    """

    kind = "CeremonyError"
    http_status = 400

    def __init__(self, reason: str = ""):
        super().__init__(reason or self.kind)
        self.reason = reason or self.kind

    def to_payload(self) -> dict:
        return {"status": "fail", "kind": self.kind, "reason": self.reason}


class InvalidRequest(CeremonyError):
    """Request is well-formed JSON but not acceptable (e.g. empty name)."""

    kind = "InvalidRequest"
    http_status = 422


class CapacityExceeded(CeremonyError):
    """Register attempted after the group is already full."""

    kind = "CapacityExceeded"
    http_status = 409

    def __init__(self, capacity: int):
        super().__init__(f"session is full: all {capacity} participant slots are taken")
        self.capacity = capacity


class UnknownParticipant(CeremonyError):
    """Submit references an identifier never issued."""

    kind = "UnknownParticipant"
    http_status = 404

    def __init__(self, participant_id: int):
        super().__init__(f"{participant_id} hasn't registered yet")
        self.participant_id = participant_id


class AlreadyKeySubmitted(CeremonyError):
    """Submit attempted twice for the same identifier."""

    kind = "AlreadyKeySubmitted"
    http_status = 409

    def __init__(self, participant_id: int):
        super().__init__(f"participant {participant_id} already submitted a key share")
        self.participant_id = participant_id


class Incomplete(CeremonyError):
    """Run attempted before all participants submitted."""

    kind = "Incomplete"
    http_status = 409

    def __init__(self, submitted: int, required: int):
        super().__init__(f"{submitted} of {required} participants have submitted")
        self.submitted = submitted
        self.required = required

    def to_payload(self) -> dict:
        return {**super().to_payload(), "submitted": self.submitted, "required": self.required}


class AlreadyRun(CeremonyError):
    """Run attempted after the session already completed."""

    kind = "AlreadyRun"
    http_status = 409

    def __init__(self):
        super().__init__("aggregation has already run for this session")


class ResultUnavailable(CeremonyError):
    """Result requested before a successful run."""

    kind = "ResultUnavailable"
    http_status = 409


class BackendFailure(CeremonyError):
    """The external aggregation/evaluation call failed."""

    kind = "BackendFailure"
    http_status = 502


class BackendError(Exception):
    """Raised by crypto backends on malformed or inconsistent input."""


class RateLimited(CeremonyError):
    """Too many requests from one client for a rate-limited endpoint."""

    kind = "RateLimited"
    http_status = 429


class InternalError(CeremonyError):
    """Unexpected server-side failure; details are logged, not returned."""

    kind = "InternalError"
    http_status = 500
