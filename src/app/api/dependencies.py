"""Request-scoped accessors for the process-wide session."""

from __future__ import annotations

from fastapi import Request

from ..data.catalogue import CatalogueStore
from ..services.session import AppSession


def get_session(request: Request) -> AppSession:
    return request.app.state.session


def get_store(request: Request) -> CatalogueStore:
    return request.app.state.session.store
