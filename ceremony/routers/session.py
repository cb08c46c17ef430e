# SPDX-License-Identifier: Apache-2.0
"""Session endpoints: parameters, register, submit, run, result, status, participants."""
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from ceremony.core.security import get_limiter
from ceremony.schemas import (
    FailureOut,
    ParametersOut,
    ParticipantOut,
    RegisterOut,
    RegisterRequest,
    ResultOut,
    RunOut,
    StatusOut,
    SubmitOut,
    SubmitRequest,
    b64encode,
)
from ceremony.services.coordinator import Outcome
from ceremony.services.session import CeremonySession

router = APIRouter(tags=["session"])

_FAILURES = {
    404: {"model": FailureOut},
    409: {"model": FailureOut},
    422: {"model": FailureOut},
}


def get_ceremony(request: Request) -> CeremonySession:
    """The session owned by this app instance (for FastAPI Depends)."""
    return request.app.state.ceremony


def _rejected(outcome: Outcome) -> JSONResponse:
    return JSONResponse(status_code=outcome.error.http_status, content=outcome.error.to_payload())


@router.get("/parameters", response_model=ParametersOut)
def get_parameters(ceremony: CeremonySession = Depends(get_ceremony)):
    """Shared session seed; identical on every call."""
    return ParametersOut(seed=b64encode(ceremony.publisher.publish().seed))


@router.post("/register", response_model=RegisterOut, responses=_FAILURES)
def register(body: RegisterRequest, ceremony: CeremonySession = Depends(get_ceremony)):
    """Register a display name and receive the next participant id."""
    outcome = ceremony.coordinator.register(body.name)
    if not outcome.ok:
        return _rejected(outcome)
    return RegisterOut(name=outcome.name, participant_id=outcome.participant_id)


@router.post("/submit", response_model=SubmitOut, responses=_FAILURES)
def submit(body: SubmitRequest, ceremony: CeremonySession = Depends(get_ceremony)):
    """Submit a key share and ciphertext for a registered participant."""
    outcome = ceremony.coordinator.submit(body.participant_id, body.key_share, body.cipher_text)
    if not outcome.ok:
        return _rejected(outcome)
    return SubmitOut(participant_id=outcome.participant_id)


def run(request: Request, ceremony: CeremonySession = Depends(get_ceremony)):
    """Aggregate key shares and evaluate, once, after every participant submitted.

    Failures (Incomplete, AlreadyRun, BackendFailure) propagate to the
    CeremonyError handler registered in core.security.
    """
    ceremony.gate.run()
    return RunOut()


def include_run_route(app: FastAPI, limit: str) -> None:
    """Mount POST /run on ``app``, rate limited by the app's own limiter."""
    limited = get_limiter(app).limit(limit)(run)
    app.add_api_route(
        "/run",
        limited,
        methods=["POST"],
        response_model=RunOut,
        responses={409: {"model": FailureOut}, 429: {"model": FailureOut}, 502: {"model": FailureOut}},
        tags=["session"],
    )


@router.get("/result", response_model=ResultOut, responses={409: {"model": FailureOut}})
def result(ceremony: CeremonySession = Depends(get_ceremony)):
    return ResultOut(result=b64encode(ceremony.gate.result()))


@router.get("/status", response_model=StatusOut)
def status(ceremony: CeremonySession = Depends(get_ceremony)):
    return ceremony.status()


@router.get("/participants", response_model=list[ParticipantOut])
def participants(ceremony: CeremonySession = Depends(get_ceremony)):
    """Registered participants in id order. Key material is never listed."""
    return [
        ParticipantOut(participant_id=r.identifier, name=r.name, state=r.state.label)
        for r in ceremony.registry.snapshot()
    ]
