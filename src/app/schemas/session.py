"""Session and share API schemas."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

from ..services.session import AppState
from .schools import SchoolModel


class SessionStateModel(BaseModel):
    tab: Literal["list", "hierarchy", "map", "stats"]
    drawerOpen: bool
    selectedSchool: Optional[SchoolModel] = None
    toast: Optional[str] = None
    showResults: bool

    @classmethod
    def from_state(cls, state: AppState, selected: Optional[SchoolModel]) -> "SessionStateModel":
        return cls(
            tab=state.tab,
            drawerOpen=state.drawer_open,
            selectedSchool=selected,
            toast=state.toast.message if state.toast else None,
            showResults=state.show_results,
        )


class TabRequest(BaseModel):
    tab: Literal["list", "hierarchy", "map", "stats"]


class DrawerRequest(BaseModel):
    open: bool


class SelectSchoolRequest(BaseModel):
    schoolId: Optional[str] = None


class DeepLinkRequest(BaseModel):
    schoolId: Optional[str] = None


class ShareResponse(BaseModel):
    url: str
    message: str
    copied: bool
