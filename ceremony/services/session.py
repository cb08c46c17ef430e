# SPDX-License-Identifier: Apache-2.0
"""Owns one session: parameters, registry, coordinator, gate."""
from __future__ import annotations

from ceremony.backends import CryptoBackend, get_backend
from ceremony.config import Settings
from ceremony.services.coordinator import RegistrationCoordinator
from ceremony.services.gate import AggregationGate
from ceremony.services.parameter_service import ParameterPublisher
from ceremony.services.registry import ParticipantRegistry


class CeremonySession:
    def __init__(self, settings: Settings, backend: CryptoBackend | None = None, seed: bytes | None = None):
        self.settings = settings
        self.backend = backend or get_backend(settings.backend)
        self.publisher = ParameterPublisher(settings.seed_size, seed=seed)
        self.registry = ParticipantRegistry(settings.participant_count)
        self.coordinator = RegistrationCoordinator(self.registry, settings.max_name_length)
        self.gate = AggregationGate(self.registry, self.backend, settings.rollback_on_backend_failure)

    def status(self) -> dict:
        with self.registry.exclusive():
            completeness = self.registry.completeness()
            state = self.gate.state()
            registered = len(self.registry)
        return {
            "state": state.value,
            "submitted": completeness.submitted,
            "required": completeness.required,
            "registered": registered,
            "seed_fingerprint": self.publisher.publish().fingerprint,
            "backend": self.backend.name,
        }
