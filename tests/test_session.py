import logging

import pytest

from src.app.config import settings
from src.app.data.catalogue import CatalogueStore
from src.app.models.domain import ALL, Gender, Region, School, SchoolType, Shift, Wilayat
from src.app.services.session import (
    AppSession,
    AppState,
    CloseDrawer,
    ExpireToast,
    InMemoryNavigation,
    OpenDrawer,
    SelectTab,
    ShowToast,
    reduce,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _school(sid: str, wilayat: Wilayat = Wilayat.SALALAH) -> School:
    return School(
        id=sid,
        name=f"School {sid}",
        region=Region.SALALAH_SECTOR if wilayat is Wilayat.SALALAH else Region.THUMRAIT_SECTOR,
        wilayat=wilayat,
        category=SchoolType.GOVERNMENT,
        grades="1-4",
        gender=Gender.BOYS,
        shift=Shift.MORNING,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(clock: FakeClock) -> AppSession:
    store = CatalogueStore([_school("A"), _school("B", Wilayat.THUMRAIT)])
    return AppSession(store, InMemoryNavigation(), clock=clock)


def test_reducer_is_pure():
    state = AppState()

    updated = reduce(state, SelectTab("map"))

    assert state.tab == "list"
    assert updated.tab == "map"


def test_reducer_rejects_unknown_tab():
    with pytest.raises(ValueError):
        reduce(AppState(), SelectTab("settings"))


def test_drawer_open_and_close_actions():
    state = reduce(AppState(), OpenDrawer())
    assert state.drawer_open

    assert not reduce(state, CloseDrawer()).drawer_open


def test_toast_expires_only_after_deadline():
    state = reduce(AppState(), ShowToast("hi", expires_at=10.0))

    assert reduce(state, ExpireToast(9.9)).toast is not None
    assert reduce(state, ExpireToast(10.0)).toast is None


def test_session_toast_lasts_configured_duration(session: AppSession, clock: FakeClock):
    session.show_toast("تم")
    assert session.snapshot().toast.message == "تم"

    clock.now += settings.toast_duration_seconds
    assert session.snapshot().toast is None


def test_back_navigation_closes_drawer(session: AppSession):
    navigation = session.navigation
    session.open_drawer()
    assert navigation.current.state == {"drawer": True}

    assert navigation.back()

    assert not session.snapshot().drawer_open


def test_closing_drawer_detaches_back_listener(session: AppSession):
    session.open_drawer()
    session.close_drawer()
    session.select_tab("stats")

    session.navigation.back()

    assert session.snapshot().tab == "stats"


def test_select_school_mirrors_id_into_url(session: AppSession):
    session.select_school("A")

    assert session.navigation.get(settings.share_param) == "A"
    assert session.selected_school.id == "A"

    session.select_school(None)
    assert session.navigation.get(settings.share_param) is None


def test_select_unknown_school_raises(session: AppSession):
    with pytest.raises(LookupError):
        session.select_school("missing")


def test_deep_link_selects_known_school(clock: FakeClock):
    store = CatalogueStore([_school("A")])
    session = AppSession(store, InMemoryNavigation({settings.share_param: "A"}), clock=clock)

    school = session.resolve_deep_link()

    assert school.id == "A"
    assert session.snapshot().selected_school_id == "A"


def test_deep_link_to_unknown_school_is_ignored(clock: FakeClock):
    store = CatalogueStore([_school("A")])
    session = AppSession(store, InMemoryNavigation({settings.share_param: "nope"}), clock=clock)

    assert session.resolve_deep_link() is None
    assert session.snapshot().selected_school_id is None


def test_region_shortcut_reveals_list(session: AppSession):
    session.select_tab("stats")

    state = session.select_region(Region.SALALAH_SECTOR)

    assert state.tab == "list"
    assert state.show_results
    assert session.store.get_criteria().category == SchoolType.GOVERNMENT


def test_typing_reveals_results_but_clearing_does_not(session: AppSession):
    assert not session.update_criteria(query="").show_results
    assert session.update_criteria(query="School").show_results


def test_toggle_filter_reveals_results(session: AppSession):
    state = session.toggle_filter("gender", Gender.BOYS)

    assert state.show_results
    assert session.store.get_criteria().gender == Gender.BOYS
    session.toggle_filter("gender", Gender.BOYS)
    assert session.store.get_criteria().gender == ALL


def test_ignored_deep_link_is_logged(clock: FakeClock, caplog):
    store = CatalogueStore([_school("A")])
    session = AppSession(store, InMemoryNavigation({settings.share_param: "nope"}), clock=clock)

    with caplog.at_level(logging.DEBUG, logger="src.app.services.session"):
        session.resolve_deep_link()

    assert "Deep link to unknown school id nope ignored" in caplog.text
