# SPDX-License-Identifier: Apache-2.0
"""Main SDK class: CeremonyClient. Thin wrapper over the coordinator HTTP API."""
from __future__ import annotations

import base64
from typing import Any

import requests

from .exceptions import APIError


class CeremonyClient:
    """Client for the coordinator API.

    ``http`` is anything with requests-style ``get``/``post`` (a
    ``requests.Session`` by default; FastAPI's ``TestClient`` works too).
    """

    def __init__(self, api_base_url: str = "http://localhost:8000", http: Any = None, timeout: float = 30.0):
        self.api_base_url = api_base_url.rstrip("/")
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.api_base_url}{path}"

    def _handle(self, resp) -> Any:
        try:
            payload = resp.json()
        except ValueError:
            payload = None
        if resp.status_code >= 400:
            if isinstance(payload, dict) and payload.get("status") == "fail":
                raise APIError(payload.get("kind", "error"), payload.get("reason", ""), resp.status_code)
            detail = payload.get("detail", payload) if isinstance(payload, dict) else resp.text
            raise APIError("HTTPError", str(detail), resp.status_code)
        return payload

    def _get(self, path: str) -> Any:
        return self._handle(self.http.get(self._url(path), timeout=self.timeout))

    def _post(self, path: str, data: dict | None = None) -> Any:
        return self._handle(self.http.post(self._url(path), json=data, timeout=self.timeout))

    def parameters(self) -> bytes:
        """Shared session seed."""
        return base64.b64decode(self._get("/parameters")["seed"])

    def register(self, name: str) -> int:
        """Register a display name; returns the assigned participant id."""
        return int(self._post("/register", {"name": name})["participant_id"])

    def submit(self, participant_id: int, key_share: bytes, cipher_text: bytes) -> dict:
        return self._post(
            "/submit",
            {
                "participant_id": participant_id,
                "key_share": base64.b64encode(key_share).decode("ascii"),
                "cipher_text": base64.b64encode(cipher_text).decode("ascii"),
            },
        )

    def run(self) -> dict:
        return self._post("/run")

    def result(self) -> bytes:
        return base64.b64decode(self._get("/result")["result"])

    def status(self) -> dict:
        return self._get("/status")

    def participants(self) -> list[dict]:
        return self._get("/participants")
