# SPDX-License-Identifier: Apache-2.0
"""Pydantic request/response schemas. Byte fields travel as standard base64."""
from __future__ import annotations

import base64
import binascii
from typing import Literal

from pydantic import BaseModel, Field as PydanticField, field_validator


def b64encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def b64decode(value: str | bytes) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("not valid base64") from exc


class ParametersOut(BaseModel):
    seed: str


class RegisterRequest(BaseModel):
    name: str = PydanticField(..., max_length=2000)


class RegisterOut(BaseModel):
    name: str
    participant_id: int


class SubmitRequest(BaseModel):
    participant_id: int
    key_share: bytes
    cipher_text: bytes

    @field_validator("key_share", "cipher_text", mode="before")
    @classmethod
    def _decode(cls, value):
        if isinstance(value, str):
            return b64decode(value)
        raise ValueError("expected a base64 string")


class SubmitOut(BaseModel):
    status: Literal["ok"] = "ok"
    participant_id: int


class RunOut(BaseModel):
    status: Literal["ok"] = "ok"


class ResultOut(BaseModel):
    status: Literal["ok"] = "ok"
    result: str


class FailureOut(BaseModel):
    status: Literal["fail"] = "fail"
    kind: str
    reason: str


class StatusOut(BaseModel):
    state: str
    submitted: int
    required: int
    registered: int
    seed_fingerprint: str
    backend: str


class ParticipantOut(BaseModel):
    participant_id: int
    name: str
    state: str
