# SPDX-License-Identifier: Apache-2.0
"""
Ordered, in-memory participant registry.

The registry is the single source of truth for who registered and who
submitted. Every mutation happens under ``exclusive()``; the same lock also
guards the aggregation gate's completion flag, so a record can never change
between the gate's completeness check and its flag flip.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from ceremony.core.exceptions import AlreadyKeySubmitted, CapacityExceeded, UnknownParticipant
from ceremony.models import Completeness, KeySubmitted, ParticipantRecord


class ParticipantRegistry:
    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._records: list[ParticipantRecord] = []
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        with self._lock:
            yield

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def register(self, name: str) -> ParticipantRecord:
        """Append a record in state Acquired; its identifier is the current length."""
        with self._lock:
            if len(self._records) >= self.capacity:
                raise CapacityExceeded(self.capacity)
            record = ParticipantRecord(identifier=len(self._records), name=name)
            self._records.append(record)
            return record

    def submit(self, identifier: int, key_share: bytes, cipher_text: bytes) -> ParticipantRecord:
        """Move a record from Acquired to KeySubmitted. Resubmission is rejected."""
        with self._lock:
            record = self._get(identifier)
            if isinstance(record.state, KeySubmitted):
                raise AlreadyKeySubmitted(identifier)
            record = record.with_submission(bytes(key_share), bytes(cipher_text))
            self._records[identifier] = record
            return record

    def get(self, identifier: int) -> ParticipantRecord:
        with self._lock:
            return self._get(identifier)

    def _get(self, identifier: int) -> ParticipantRecord:
        if not 0 <= identifier < len(self._records):
            raise UnknownParticipant(identifier)
        return self._records[identifier]

    def completeness(self) -> Completeness:
        with self._lock:
            submitted = sum(1 for r in self._records if r.submitted)
            return Completeness(submitted=submitted, required=self.capacity)

    def snapshot(self) -> tuple[ParticipantRecord, ...]:
        """Records in identifier order. Records are immutable, so the tuple is a consistent copy."""
        with self._lock:
            return tuple(self._records)
