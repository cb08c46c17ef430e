# SPDX-License-Identifier: Apache-2.0
"""Health and version endpoints."""
import sys

import fastapi
from fastapi import APIRouter

from ceremony import __version__

router = APIRouter(tags=["system"])


@router.get("/health")
def health():
    """Liveness/readiness."""
    return {"status": "ok"}


@router.get("/version")
def version():
    return {
        "version": __version__,
        "fastapi_version": getattr(fastapi, "__version__", "unknown"),
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
    }
