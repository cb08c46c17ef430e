# SPDX-License-Identifier: Apache-2.0
"""pytest fixtures: a fresh session and app per test."""
import pytest
from fastapi.testclient import TestClient

from ceremony.backends import CryptoBackend, MaskedSumBackend
from ceremony.config import Settings
from ceremony.main import create_app
from ceremony_client import CeremonyClient

NAMES = ["Barry", "Justin", "Brian"]


class RecordingBackend(CryptoBackend):
    """Fake backend: counts coordinator calls, optionally fails."""

    name = "recording"

    def __init__(self, fail_times: int = 0):
        self.fail_times = fail_times
        self.aggregate_calls = []
        self.evaluate_calls = []

    def generate_client_key(self):
        return b"k"

    def generate_key_share(self, seed, client_key, participant_id, total):
        return f"share-{participant_id}".encode()

    def encrypt(self, seed, client_key, values):
        return bytes(values)

    def aggregate_shares(self, key_shares):
        self.aggregate_calls.append(list(key_shares))
        if self.fail_times:
            self.fail_times -= 1
            raise RuntimeError("aggregation exploded")
        return b"|".join(key_shares)

    def evaluate(self, aggregated_key, cipher_texts):
        self.evaluate_calls.append((aggregated_key, list(cipher_texts)))
        return b"".join(cipher_texts)

    def decode_result(self, result):
        return list(result)


@pytest.fixture
def settings():
    return Settings(participant_count=3)


@pytest.fixture
def backend():
    return MaskedSumBackend()


@pytest.fixture
def app(settings, backend):
    return create_app(settings, backend=backend)


@pytest.fixture
def client(app):
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def sdk(client):
    """SDK client talking to the in-process app."""
    return CeremonyClient("http://testserver", http=client)


@pytest.fixture
def recording_backend():
    return RecordingBackend()
