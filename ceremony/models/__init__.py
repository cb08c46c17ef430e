# SPDX-License-Identifier: Apache-2.0
"""Domain records held in memory by the session."""
from ceremony.models.participant import Acquired, KeySubmitted, ParticipantRecord, RegistrationState
from ceremony.models.session import Completeness, CompletionFlag, SessionParameters, SessionState

__all__ = [
    "Acquired",
    "Completeness",
    "CompletionFlag",
    "KeySubmitted",
    "ParticipantRecord",
    "RegistrationState",
    "SessionParameters",
    "SessionState",
]
