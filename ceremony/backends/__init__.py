# SPDX-License-Identifier: Apache-2.0
"""Registered crypto backends, looked up by name from settings."""
from __future__ import annotations

from ceremony.backends.base import CryptoBackend
from ceremony.backends.masked_sum import MaskedSumBackend

BACKENDS: dict[str, type[CryptoBackend]] = {
    MaskedSumBackend.name: MaskedSumBackend,
}


def get_backend(name: str, **options) -> CryptoBackend:
    if name not in BACKENDS:
        raise ValueError(f"Unknown backend: {name}. Allowed: {list(BACKENDS.keys())}")
    return BACKENDS[name](**options)


__all__ = ["BACKENDS", "CryptoBackend", "MaskedSumBackend", "get_backend"]
