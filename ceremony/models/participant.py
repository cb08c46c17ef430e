# SPDX-License-Identifier: Apache-2.0
"""Participant record and its registration state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Acquired:
    """Identifier issued, no submission yet."""

    label = "acquired"


@dataclass(frozen=True)
class KeySubmitted:
    """Key share and ciphertext received. Terminal."""

    key_share: bytes = field(repr=False)
    cipher_text: bytes = field(repr=False)

    label = "key_submitted"


RegistrationState = Union[Acquired, KeySubmitted]


@dataclass(frozen=True)
class ParticipantRecord:
    identifier: int
    name: str
    state: RegistrationState = field(default_factory=Acquired)

    @property
    def submitted(self) -> bool:
        return isinstance(self.state, KeySubmitted)

    def with_submission(self, key_share: bytes, cipher_text: bytes) -> ParticipantRecord:
        return ParticipantRecord(self.identifier, self.name, KeySubmitted(key_share, cipher_text))
