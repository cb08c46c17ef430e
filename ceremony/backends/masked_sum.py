# SPDX-License-Identifier: Apache-2.0
"""
Reference backend: element-wise sum of every participant's vector.

Each participant derives a uint32 mask from the shared seed and a private
client key. The key share is the mask, the ciphertext is ``values + mask``.
Aggregation sums the masks; evaluation sums the ciphertexts and removes the
aggregated mask. Arithmetic wraps modulo 2**32.

This scheme gives NO confidentiality (the key share reveals the mask). It
exists so the coordinator can be exercised end to end without a real
threshold FHE library.
"""
from __future__ import annotations

import hashlib
import secrets
import struct
from typing import Sequence

import numpy as np

from ceremony.backends.base import CryptoBackend
from ceremony.core.exceptions import BackendError

LANE_DTYPE = np.dtype("<u4")
CLIENT_KEY_BYTES = 32
_SHARE_HEADER = struct.Struct("<II")  # participant_id, total
_MASK_DOMAIN = b"ceremony/masked-sum/v1"


class MaskedSumBackend(CryptoBackend):
    name = "masked-sum"

    def __init__(self, lanes: int = 4):
        if lanes < 1:
            raise ValueError("lanes must be >= 1")
        self.lanes = lanes

    @property
    def vector_bytes(self) -> int:
        return self.lanes * LANE_DTYPE.itemsize

    def _mask(self, seed: bytes, client_key: bytes) -> np.ndarray:
        if len(client_key) != CLIENT_KEY_BYTES:
            raise BackendError(f"client key must be {CLIENT_KEY_BYTES} bytes")
        stream = hashlib.shake_256(_MASK_DOMAIN + seed + client_key).digest(self.vector_bytes)
        return np.frombuffer(stream, dtype=LANE_DTYPE)

    def _vector(self, blob: bytes, what: str) -> np.ndarray:
        if len(blob) != self.vector_bytes:
            raise BackendError(f"{what} must be {self.vector_bytes} bytes, got {len(blob)}")
        return np.frombuffer(blob, dtype=LANE_DTYPE)

    def generate_client_key(self) -> bytes:
        return secrets.token_bytes(CLIENT_KEY_BYTES)

    def generate_key_share(self, seed: bytes, client_key: bytes, participant_id: int, total: int) -> bytes:
        if not 0 <= participant_id < total:
            raise BackendError(f"participant id {participant_id} outside group of {total}")
        return _SHARE_HEADER.pack(participant_id, total) + self._mask(seed, client_key).tobytes()

    def encrypt(self, seed: bytes, client_key: bytes, values: Sequence[int]) -> bytes:
        if len(values) != self.lanes:
            raise BackendError(f"expected {self.lanes} values, got {len(values)}")
        if any(v < 0 or v > 0xFFFFFFFF for v in values):
            raise BackendError("values must fit in an unsigned 32-bit lane")
        plain = np.asarray(values, dtype=LANE_DTYPE)
        return (plain + self._mask(seed, client_key)).astype(LANE_DTYPE).tobytes()

    def aggregate_shares(self, key_shares: Sequence[bytes]) -> bytes:
        if not key_shares:
            raise BackendError("no key shares to aggregate")
        total = len(key_shares)
        masks = []
        for expected_id, share in enumerate(key_shares):
            if len(share) != _SHARE_HEADER.size + self.vector_bytes:
                raise BackendError(f"key share {expected_id} has wrong length {len(share)}")
            participant_id, share_total = _SHARE_HEADER.unpack_from(share)
            if participant_id != expected_id or share_total != total:
                raise BackendError(
                    f"key share at position {expected_id} was generated for "
                    f"participant {participant_id} of {share_total}"
                )
            masks.append(self._vector(share[_SHARE_HEADER.size:], "key share mask"))
        return np.sum(masks, axis=0, dtype=LANE_DTYPE).tobytes()

    def evaluate(self, aggregated_key: bytes, cipher_texts: Sequence[bytes]) -> bytes:
        if not cipher_texts:
            raise BackendError("no ciphertexts to evaluate")
        key = self._vector(aggregated_key, "aggregated key")
        vectors = [self._vector(c, f"ciphertext {i}") for i, c in enumerate(cipher_texts)]
        total = np.sum(vectors, axis=0, dtype=LANE_DTYPE)
        return (total - key).astype(LANE_DTYPE).tobytes()

    def decode_result(self, result: bytes) -> list[int]:
        return [int(v) for v in self._vector(result, "result")]
