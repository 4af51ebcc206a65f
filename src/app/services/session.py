"""UI session state: a reducer over discrete actions plus navigation wiring.

The browser client renders whatever ``AppSession.snapshot()`` returns. All
transitions go through ``reduce`` so each one is a plain function of
(state, action). URL and history handling sit behind ``NavigationState``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Literal, Optional, Protocol, Union

from ..config import settings
from ..data.catalogue import CatalogueStore
from ..models.domain import RegionFilter, School

logger = logging.getLogger(__name__)

Tab = Literal["list", "hierarchy", "map", "stats"]
TABS: tuple[str, ...] = ("list", "hierarchy", "map", "stats")


@dataclass(frozen=True)
class Toast:
    message: str
    expires_at: float


@dataclass(frozen=True)
class AppState:
    tab: Tab = "list"
    drawer_open: bool = False
    selected_school_id: Optional[str] = None
    toast: Optional[Toast] = None
    show_results: bool = False


@dataclass(frozen=True)
class SelectTab:
    tab: Tab


@dataclass(frozen=True)
class OpenDrawer:
    pass


@dataclass(frozen=True)
class CloseDrawer:
    pass


@dataclass(frozen=True)
class SelectSchool:
    school_id: Optional[str]


@dataclass(frozen=True)
class ShowToast:
    message: str
    expires_at: float


@dataclass(frozen=True)
class ExpireToast:
    now: float


@dataclass(frozen=True)
class RevealResults:
    pass


Action = Union[SelectTab, OpenDrawer, CloseDrawer, SelectSchool, ShowToast, ExpireToast, RevealResults]


def reduce(state: AppState, action: Action) -> AppState:
    match action:
        case SelectTab(tab=tab):
            if tab not in TABS:
                raise ValueError(f"Unknown tab '{tab}'.")
            return replace(state, tab=tab)
        case OpenDrawer():
            return replace(state, drawer_open=True)
        case CloseDrawer():
            return replace(state, drawer_open=False)
        case SelectSchool(school_id=school_id):
            return replace(state, selected_school_id=school_id)
        case ShowToast(message=message, expires_at=expires_at):
            return replace(state, toast=Toast(message, expires_at))
        case ExpireToast(now=now):
            if state.toast is not None and now >= state.toast.expires_at:
                return replace(state, toast=None)
            return state
        case RevealResults():
            return replace(state, show_results=True)
        case _:
            raise ValueError(f"Unsupported action {action!r}")


@dataclass(frozen=True)
class HistoryEntry:
    params: dict[str, str] = field(default_factory=dict)
    state: dict = field(default_factory=dict)


Listener = Callable[[HistoryEntry], None]


class NavigationState(Protocol):
    def get(self, name: str) -> Optional[str]: ...

    def set(self, name: str, value: Optional[str]) -> None: ...

    def push_state(self, state: dict) -> None: ...

    def subscribe(self, listener: Listener) -> Callable[[], None]: ...


class InMemoryNavigation:
    """History stack of query-parameter snapshots, like a browser tab."""

    def __init__(self, params: Optional[dict[str, str]] = None) -> None:
        self._entries: list[HistoryEntry] = [HistoryEntry(dict(params or {}))]
        self._listeners: list[Listener] = []

    @property
    def current(self) -> HistoryEntry:
        return self._entries[-1]

    @property
    def depth(self) -> int:
        return len(self._entries)

    def get(self, name: str) -> Optional[str]:
        return self.current.params.get(name)

    def set(self, name: str, value: Optional[str]) -> None:
        params = dict(self.current.params)
        if value is None:
            params.pop(name, None)
        else:
            params[name] = value
        self._entries.append(HistoryEntry(params))

    def push_state(self, state: dict) -> None:
        self._entries.append(HistoryEntry(dict(self.current.params), dict(state)))

    def back(self) -> bool:
        if len(self._entries) < 2:
            return False
        self._entries.pop()
        for listener in list(self._listeners):
            listener(self.current)
        return True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class AppSession:
    """Single-user session binding the reducer to the store and navigation."""

    def __init__(
        self,
        store: CatalogueStore,
        navigation: Optional[NavigationState] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.navigation = navigation or InMemoryNavigation()
        self._clock = clock
        self._state = AppState()
        self._drawer_unsubscribe: Optional[Callable[[], None]] = None

    def dispatch(self, action: Action) -> AppState:
        self._state = reduce(self._state, action)
        return self._state

    def snapshot(self) -> AppState:
        return self.dispatch(ExpireToast(self._clock()))

    @property
    def selected_school(self) -> Optional[School]:
        if self._state.selected_school_id is None:
            return None
        return self.store.find(self._state.selected_school_id)

    def select_tab(self, tab: Tab) -> AppState:
        return self.dispatch(SelectTab(tab))

    def open_drawer(self) -> AppState:
        if self._state.drawer_open:
            return self._state
        self.navigation.push_state({"drawer": True})
        self._drawer_unsubscribe = self.navigation.subscribe(self._on_history_back)
        return self.dispatch(OpenDrawer())

    def close_drawer(self) -> AppState:
        self._release_drawer_listener()
        return self.dispatch(CloseDrawer())

    def _on_history_back(self, _entry: HistoryEntry) -> None:
        self.close_drawer()

    def _release_drawer_listener(self) -> None:
        if self._drawer_unsubscribe is not None:
            self._drawer_unsubscribe()
            self._drawer_unsubscribe = None

    def select_school(self, school_id: Optional[str]) -> AppState:
        """Select a school (or clear with None) and mirror it into the URL."""

        if school_id is not None and self.store.find(school_id) is None:
            raise LookupError(f"School '{school_id}' not found.")
        self.navigation.set(settings.share_param, school_id)
        return self.dispatch(SelectSchool(school_id))

    def resolve_deep_link(self) -> Optional[School]:
        """Auto-select the school named by the URL; unknown ids are ignored."""

        school_id = self.navigation.get(settings.share_param)
        if not school_id:
            return None
        school = self.store.find(school_id)
        if school is None:
            logger.debug(f"Deep link to unknown school id {school_id} ignored")
            return None
        self.dispatch(SelectSchool(school.id))
        return school

    def show_toast(self, message: str) -> AppState:
        expires_at = self._clock() + settings.toast_duration_seconds
        return self.dispatch(ShowToast(message, expires_at))

    def select_region(self, region: RegionFilter) -> AppState:
        self.store.select_region(region)
        self.dispatch(RevealResults())
        return self.dispatch(SelectTab("list"))

    def toggle_filter(self, name: str, value: object) -> AppState:
        self.store.toggle_filter(name, value)
        return self.dispatch(RevealResults())

    def update_criteria(self, **partial: object) -> AppState:
        self.store.set_criteria(**partial)
        if partial.get("query"):
            self.dispatch(RevealResults())
        return self._state
