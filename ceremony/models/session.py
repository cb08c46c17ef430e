# SPDX-License-Identifier: Apache-2.0
"""Session-wide value types."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field

from ceremony.core.security import sha3_256_hex


@dataclass(frozen=True)
class SessionParameters:
    seed: bytes = field(repr=False)

    @property
    def fingerprint(self) -> str:
        """SHA3-256 of the seed; safe to log."""
        return sha3_256_hex(self.seed)


@dataclass(frozen=True)
class Completeness:
    submitted: int
    required: int

    @property
    def is_complete(self) -> bool:
        return self.submitted == self.required


class CompletionFlag(str, enum.Enum):
    NOT_RUN = "not_run"
    RUN = "run"


class SessionState(str, enum.Enum):
    COLLECTING = "collecting"
    READY = "ready"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"
