# SPDX-License-Identifier: Apache-2.0
"""Participant SDK for the ceremony coordinator."""
from .client import CeremonyClient
from .exceptions import APIError, CeremonySDKError, ProtocolError
from .participant import Participant

__all__ = ["APIError", "CeremonyClient", "CeremonySDKError", "Participant", "ProtocolError"]
