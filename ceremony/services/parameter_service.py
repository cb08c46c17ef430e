# SPDX-License-Identifier: Apache-2.0
"""Shared setup parameters, generated once per session."""
from __future__ import annotations

import logging
import secrets

from ceremony.models import SessionParameters

logger = logging.getLogger("ceremony")


class ParameterPublisher:
    """Holds the session seed. Generated in the constructor, read-only after."""

    def __init__(self, seed_size: int = 32, seed: bytes | None = None):
        if seed is None:
            seed = secrets.token_bytes(seed_size)
        elif len(seed) != seed_size:
            raise ValueError(f"seed must be {seed_size} bytes, got {len(seed)}")
        self._parameters = SessionParameters(seed=bytes(seed))
        logger.info("Session parameters generated (seed fingerprint %s)", self._parameters.fingerprint)

    def publish(self) -> SessionParameters:
        return self._parameters
