# SPDX-License-Identifier: Apache-2.0
"""Capability interface the coordinator uses for all cryptography."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class CryptoBackend(ABC):
    """Narrow interface over a multi-party FHE scheme.

    The participant-side methods (client key, key share, encryption) are used
    by the SDK; the coordinator only ever calls ``aggregate_shares`` and
    ``evaluate``. All key material crosses this boundary as opaque bytes.
    """

    name: str = ""
    lanes: int = 1  # values each participant encrypts

    @abstractmethod
    def generate_client_key(self) -> bytes:
        ...

    @abstractmethod
    def generate_key_share(self, seed: bytes, client_key: bytes, participant_id: int, total: int) -> bytes:
        ...

    @abstractmethod
    def encrypt(self, seed: bytes, client_key: bytes, values: Sequence[int]) -> bytes:
        ...

    @abstractmethod
    def aggregate_shares(self, key_shares: Sequence[bytes]) -> bytes:
        """Combine the key shares, ordered by participant id, into one evaluation key."""

    @abstractmethod
    def evaluate(self, aggregated_key: bytes, cipher_texts: Sequence[bytes]) -> bytes:
        """Run the shared computation over the ciphertexts, ordered by participant id."""

    @abstractmethod
    def decode_result(self, result: bytes) -> list[int]:
        ...
