# SPDX-License-Identifier: Apache-2.0
"""Participant-side workflow: seed -> client key -> id -> key share + ciphertext -> submit."""
from __future__ import annotations

import logging
from typing import Sequence

from ceremony.backends import CryptoBackend

from .client import CeremonyClient
from .exceptions import ProtocolError

logger = logging.getLogger("ceremony.client")


class Participant:
    """One party's local state. Secret material (client key, values) never leaves this object
    except as the backend's key share and ciphertext."""

    def __init__(self, name: str, backend: CryptoBackend):
        self.name = name
        self.backend = backend
        self.seed: bytes | None = None
        self.client_key: bytes | None = None
        self.participant_id: int | None = None
        self.values: list[int] | None = None
        self.key_share: bytes | None = None
        self.cipher_text: bytes | None = None

    def fetch_seed(self, client: CeremonyClient) -> Participant:
        self.seed = client.parameters()
        return self

    def generate_client_key(self) -> Participant:
        if self.seed is None:
            raise ProtocolError("fetch the session seed before generating a client key")
        self.client_key = self.backend.generate_client_key()
        return self

    def register(self, client: CeremonyClient) -> Participant:
        self.participant_id = client.register(self.name)
        logger.info("%s registered as participant %d", self.name, self.participant_id)
        return self

    def assign_values(self, values: Sequence[int]) -> Participant:
        self.values = list(values)
        return self

    def generate_key_share(self, total: int) -> Participant:
        if self.client_key is None or self.participant_id is None:
            raise ProtocolError("a key share needs a client key and a participant id")
        self.key_share = self.backend.generate_key_share(self.seed, self.client_key, self.participant_id, total)
        return self

    def encrypt(self) -> Participant:
        if self.client_key is None or self.values is None:
            raise ProtocolError("encryption needs a client key and assigned values")
        self.cipher_text = self.backend.encrypt(self.seed, self.client_key, self.values)
        return self

    def submit(self, client: CeremonyClient) -> dict:
        if self.participant_id is None:
            raise ProtocolError("register before submitting")
        if self.key_share is None or self.cipher_text is None:
            raise ProtocolError("generate a key share and ciphertext before submitting")
        return client.submit(self.participant_id, self.key_share, self.cipher_text)
