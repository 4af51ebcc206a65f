"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...data.catalogue import CatalogueStore
from ...services.advisor import is_configured
from ..dependencies import get_store

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root(store: CatalogueStore = Depends(get_store)) -> dict:
    """Simple health check reporting the size of the loaded catalogue."""
    return {"status": "ok", "schools": len(store.records)}


@router.get("/health/advisor", status_code=status.HTTP_200_OK)
def health_advisor() -> dict:
    """Report whether the Gemini advisor has credentials."""
    configured = is_configured()
    return {
        "service": "advisor",
        "configured": configured,
        "message": None if configured else "Set DSD_GEMINI_API_KEY to enable the advisor.",
    }
