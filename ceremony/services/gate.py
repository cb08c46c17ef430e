# SPDX-License-Identifier: Apache-2.0
"""One-shot aggregation + evaluation over a complete submission set."""
from __future__ import annotations

import logging

from ceremony.backends import CryptoBackend
from ceremony.core.exceptions import AlreadyRun, BackendFailure, Incomplete, ResultUnavailable
from ceremony.models import CompletionFlag, SessionState
from ceremony.services.registry import ParticipantRegistry

logger = logging.getLogger("ceremony")


class AggregationGate:
    """Runs the backend at most once per session, and only on a complete registry.

    The completion flag is read and written only under the registry's
    exclusive section. The backend itself is called outside it, on a snapshot
    captured while the flag was flipped.
    """

    def __init__(self, registry: ParticipantRegistry, backend: CryptoBackend, rollback_on_failure: bool = True):
        self.registry = registry
        self.backend = backend
        self.rollback_on_failure = rollback_on_failure
        self._flag = CompletionFlag.NOT_RUN
        self._result: bytes | None = None
        self._failed = False

    @property
    def flag(self) -> CompletionFlag:
        with self.registry.exclusive():
            return self._flag

    def run(self) -> bytes:
        with self.registry.exclusive():
            if self._flag is CompletionFlag.RUN:
                raise AlreadyRun()
            completeness = self.registry.completeness()
            if not completeness.is_complete:
                raise Incomplete(completeness.submitted, completeness.required)
            states = [record.state for record in self.registry.snapshot()]
            self._flag = CompletionFlag.RUN
        key_shares = [s.key_share for s in states]
        cipher_texts = [s.cipher_text for s in states]

        logger.info("Aggregating %d key shares with backend %s", len(key_shares), self.backend.name)
        try:
            aggregated_key = self.backend.aggregate_shares(key_shares)
            logger.info("Evaluating over %d ciphertexts", len(cipher_texts))
            result = self.backend.evaluate(aggregated_key, cipher_texts)
        except Exception as exc:
            logger.error("Backend failed during run: %s", exc, exc_info=True)
            with self.registry.exclusive():
                if self.rollback_on_failure:
                    self._flag = CompletionFlag.NOT_RUN
                else:
                    self._failed = True
            raise BackendFailure(f"backend {self.backend.name} failed: {exc}") from exc

        with self.registry.exclusive():
            self._result = result
        logger.info("Session computation finished (%d result bytes)", len(result))
        return result

    def result(self) -> bytes:
        with self.registry.exclusive():
            if self._result is None:
                raise ResultUnavailable("the session computation has not completed")
            return self._result

    def state(self) -> SessionState:
        with self.registry.exclusive():
            if self._flag is CompletionFlag.RUN:
                if self._result is not None:
                    return SessionState.DONE
                return SessionState.FAILED if self._failed else SessionState.RUNNING
            if self.registry.completeness().is_complete:
                return SessionState.READY
            return SessionState.COLLECTING
