# SPDX-License-Identifier: Apache-2.0
"""Validates register/submit requests and applies them to the registry."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ceremony.core.exceptions import CeremonyError, InvalidRequest
from ceremony.core.security import sanitize_text
from ceremony.services.registry import ParticipantRegistry

logger = logging.getLogger("ceremony")


@dataclass(frozen=True)
class Outcome:
    """Result of a coordinator call: either ok with data, or the error that rejected it."""

    participant_id: int | None = None
    name: str | None = None
    error: CeremonyError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> str:
        return "ok" if self.ok else "fail"


class RegistrationCoordinator:
    def __init__(self, registry: ParticipantRegistry, max_name_length: int = 200):
        self.registry = registry
        self.max_name_length = max_name_length

    def register(self, name: str) -> Outcome:
        clean = sanitize_text(name, max_len=len(name))
        try:
            if not clean:
                raise InvalidRequest("display name must not be empty")
            if len(clean) > self.max_name_length:
                raise InvalidRequest(f"display name is longer than {self.max_name_length} characters")
            with self.registry.exclusive():
                record = self.registry.register(clean)
        except CeremonyError as exc:
            logger.warning("Registration rejected (%s): %s", exc.kind, exc.reason)
            return Outcome(name=clean, error=exc)
        logger.info("Registered participant %d (%s)", record.identifier, record.name)
        return Outcome(participant_id=record.identifier, name=record.name)

    def submit(self, participant_id: int, key_share: bytes, cipher_text: bytes) -> Outcome:
        try:
            if not key_share or not cipher_text:
                raise InvalidRequest("key_share and cipher_text must not be empty")
            with self.registry.exclusive():
                record = self.registry.submit(participant_id, key_share, cipher_text)
        except CeremonyError as exc:
            logger.warning("Submission for %s rejected (%s): %s", participant_id, exc.kind, exc.reason)
            return Outcome(participant_id=participant_id, error=exc)
        logger.info(
            "Participant %d submitted key share (%d bytes) and ciphertext (%d bytes)",
            record.identifier,
            len(key_share),
            len(cipher_text),
        )
        return Outcome(participant_id=record.identifier, name=record.name)
