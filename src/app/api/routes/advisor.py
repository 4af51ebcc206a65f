"""Natural-language advisor endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...data.catalogue import CatalogueStore
from ...schemas.schools import AdvisorRequest, AdvisorResponse
from ...services import advisor
from ...services.catalogue import filter_schools
from ..dependencies import get_store

router = APIRouter(prefix="/advisor", tags=["advisor"])


@router.post("/ask", response_model=AdvisorResponse, status_code=status.HTTP_200_OK)
async def ask(request: AdvisorRequest, store: CatalogueStore = Depends(get_store)) -> AdvisorResponse:
    schools = filter_schools(store.records, store.get_criteria())
    answer = await advisor.ask_advisor(request.question, schools)
    return AdvisorResponse(answer=answer, contextSize=len(schools))
