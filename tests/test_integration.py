import csv
import io

import pytest
from fastapi.testclient import TestClient

from src.app.data.catalogue import CatalogueStore
from src.app.main import create_app
from src.app.models.domain import (
    WILAYAT_REGION,
    ContactInfo,
    Coordinates,
    Gender,
    Region,
    School,
    SchoolType,
    Shift,
    Wilayat,
)
from src.app.services import advisor
from src.app.services.session import InMemoryNavigation


def _school(
    sid: str,
    name: str,
    wilayat: Wilayat,
    category: SchoolType = SchoolType.GOVERNMENT,
    gender: Gender = Gender.BOYS,
    coordinates: Coordinates | None = None,
) -> School:
    return School(
        id=sid,
        name=name,
        region=WILAYAT_REGION[wilayat],
        wilayat=wilayat,
        category=category,
        grades="1-12",
        gender=gender,
        shift=Shift.MORNING,
        coordinates=coordinates,
        contact=ContactInfo(phone="23290000"),
    )


SAMPLE = [
    _school("S1", "مدرسة الحافة", Wilayat.SALALAH, coordinates=Coordinates(17.01, 54.09)),
    _school("S2", "مدرسة النهضة الخاصة", Wilayat.SALALAH, SchoolType.PRIVATE, Gender.MIXED, Coordinates(17.03, 54.1)),
    _school("S3", "روضة البراعم", Wilayat.TAQAH, SchoolType.KINDERGARTEN, Gender.MIXED),
    _school("T1", "مدرسة ثمريت", Wilayat.THUMRAIT, gender=Gender.GIRLS, coordinates=Coordinates(17.66, 54.02)),
    _school("R1", "مدرسة رخيوت", Wilayat.RAKHYUT),
]


@pytest.fixture
def client() -> TestClient:
    app = create_app(store=CatalogueStore(SAMPLE), navigation=InMemoryNavigation())
    return TestClient(app)


def test_health_reports_catalogue_size(client: TestClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "schools": 5}


def test_list_schools_in_original_order(client: TestClient):
    payload = client.get("/api/schools").json()

    assert [item["id"] for item in payload["items"]] == ["S1", "S2", "S3", "T1", "R1"]
    assert payload["total"] == 5
    assert payload["showResults"] is False
    assert payload["items"][0]["type"] == SchoolType.GOVERNMENT.value


def test_list_limit_caps_items_but_not_total(client: TestClient):
    payload = client.get("/api/schools", params={"limit": 2}).json()

    assert len(payload["items"]) == 2
    assert payload["total"] == 5


def test_search_query_reveals_results(client: TestClient):
    client.patch("/api/filters", json={"query": "مدرسة"})

    payload = client.get("/api/schools").json()

    assert payload["showResults"] is True
    assert [item["id"] for item in payload["items"]] == ["S1", "S2", "T1", "R1"]


def test_toggle_filter_twice_returns_to_all(client: TestClient):
    first = client.post("/api/filters/toggle", json={"field": "type", "value": SchoolType.PRIVATE.value})
    second = client.post("/api/filters/toggle", json={"field": "type", "value": SchoolType.PRIVATE.value})

    assert first.json()["type"] == SchoolType.PRIVATE.value
    assert second.json()["type"] == "All"


def test_toggle_rejects_unknown_value(client: TestClient):
    response = client.post("/api/filters/toggle", json={"field": "gender", "value": "unknown"})

    assert response.status_code == 400


def test_region_shortcut_selects_government_schools(client: TestClient):
    criteria = client.post("/api/filters/region", json={"region": Region.SALALAH_SECTOR.value}).json()
    schools = client.get("/api/schools").json()
    session = client.get("/api/session").json()

    assert criteria["type"] == SchoolType.GOVERNMENT.value
    assert [item["id"] for item in schools["items"]] == ["S1"]
    assert session["tab"] == "list"
    assert session["showResults"] is True


def test_available_wilayats_follow_region(client: TestClient):
    client.patch("/api/filters", json={"region": Region.RAKHYUT_SECTOR.value})

    wilayats = client.get("/api/filters/wilayats").json()

    assert Wilayat.RAKHYUT.value in wilayats
    assert Wilayat.SALALAH.value not in wilayats


def test_reset_filters(client: TestClient):
    client.patch("/api/filters", json={"query": "x", "gender": Gender.GIRLS.value})

    criteria = client.post("/api/filters/reset").json()

    assert criteria == {"query": "", "region": "All", "wilayat": "All", "type": "All", "gender": "All"}


def test_school_detail_and_missing_school(client: TestClient):
    assert client.get("/api/schools/T1").json()["name"] == "مدرسة ثمريت"
    assert client.get("/api/schools/none").status_code == 404


def test_map_link_points_at_search(client: TestClient):
    url = client.get("/api/schools/S1/map-link").json()["url"]

    assert url.startswith("https://www.google.com/maps/search/?api=1&query=")


def test_export_csv_uses_current_filters(client: TestClient):
    client.patch("/api/filters", json={"region": Region.THUMRAIT_SECTOR.value})

    response = client.get("/api/schools/export", params={"format": "csv"})
    rows = list(csv.DictReader(io.StringIO(response.text)))

    assert response.headers["content-type"].startswith("text/csv")
    assert [row["id"] for row in rows] == ["T1"]


def test_export_xlsx_returns_workbook(client: TestClient):
    response = client.get("/api/schools/export", params={"format": "xlsx"})

    assert response.status_code == 200
    assert response.content[:2] == b"PK"


def test_stats_summary_ignores_filters(client: TestClient):
    client.patch("/api/filters", json={"region": Region.RAKHYUT_SECTOR.value})

    payload = client.get("/api/stats/summary").json()

    assert payload["total"] == 5
    assert {entry["region"]: entry["count"] for entry in payload["regions"]} == {
        Region.SALALAH_SECTOR.value: 3,
        Region.THUMRAIT_SECTOR.value: 1,
        Region.RAKHYUT_SECTOR.value: 1,
    }


def test_category_chart_relaxes_category_filter(client: TestClient):
    client.patch("/api/filters", json={"region": Region.SALALAH_SECTOR.value, "type": SchoolType.PRIVATE.value})

    chart = client.get("/api/stats/categories").json()

    assert {entry["name"]: entry["value"] for entry in chart} == {
        SchoolType.GOVERNMENT.value: 1,
        SchoolType.PRIVATE.value: 1,
        SchoolType.KINDERGARTEN.value: 1,
    }


def test_browse_hierarchy(client: TestClient):
    regions = client.get("/api/browse/regions").json()
    categories = client.get(f"/api/browse/wilayats/{Wilayat.SALALAH.value}/categories").json()
    leaf = client.get(
        f"/api/browse/wilayats/{Wilayat.SALALAH.value}/schools",
        params={"category": "مدارس حكومية (ذكور)"},
    ).json()
    tree = client.get("/api/browse/tree").json()

    assert regions[0] == {"label": Region.SALALAH_SECTOR.value, "count": 3}
    assert [node["label"] for node in categories] == ["مدارس حكومية (ذكور)", SchoolType.PRIVATE.value]
    assert [school["id"] for school in leaf] == ["S1"]
    assert sum(region["count"] for region in tree) == 5


def test_map_view_bounds_and_preview(client: TestClient):
    payload = client.get("/api/map", params={"preview_limit": 2}).json()

    assert len(payload["markers"]["features"]) == 3
    assert payload["bounds"] == {"southWest": [17.01, 54.02], "northEast": [17.66, 54.1]}
    assert payload["center"] is None
    assert len(payload["preview"]) == 2
    assert payload["total"] == 5


def test_map_view_without_markers_uses_default_centre(client: TestClient):
    client.patch("/api/filters", json={"wilayat": Wilayat.RAKHYUT.value})

    payload = client.get("/api/map").json()

    assert payload["bounds"] is None
    assert payload["center"] == [17.015, 54.092]
    assert payload["zoom"] == 9


def test_advisor_receives_filtered_schools(client: TestClient, monkeypatch):
    captured = {}

    async def fake_ask(question, schools):
        captured["ids"] = [school.id for school in schools]
        return "جواب"

    monkeypatch.setattr(advisor, "ask_advisor", fake_ask)
    client.patch("/api/filters", json={"region": Region.SALALAH_SECTOR.value})

    payload = client.post("/api/advisor/ask", json={"question": "ما المدارس؟"}).json()

    assert payload == {"answer": "جواب", "contextSize": 3}
    assert captured["ids"] == ["S1", "S2", "S3"]


def test_advisor_rejects_empty_question(client: TestClient):
    assert client.post("/api/advisor/ask", json={"question": ""}).status_code == 422


def test_session_tab_drawer_and_selection(client: TestClient):
    assert client.post("/api/session/tab", json={"tab": "map"}).json()["tab"] == "map"
    assert client.post("/api/session/drawer", json={"open": True}).json()["drawerOpen"] is True
    assert client.post("/api/session/drawer", json={"open": False}).json()["drawerOpen"] is False

    selected = client.post("/api/session/select", json={"schoolId": "S2"}).json()
    assert selected["selectedSchool"]["id"] == "S2"
    assert client.post("/api/session/select", json={"schoolId": "missing"}).status_code == 404


def test_deep_link_selects_school_and_ignores_unknown(client: TestClient):
    unknown = client.post("/api/session/deep-link", json={"schoolId": "missing"}).json()
    assert unknown["selectedSchool"] is None

    known = client.post("/api/session/deep-link", json={"schoolId": "T1"}).json()
    assert known["selectedSchool"]["id"] == "T1"


def test_share_school_sets_toast(client: TestClient):
    payload = client.post("/api/share/schools/S1").json()

    assert payload["copied"] is True
    assert payload["message"] == "تم نسخ رابط مدرسة الحافة"
    assert "schoolId=S1" in payload["url"]
    assert client.get("/api/session").json()["toast"] == payload["message"]
    assert client.post("/api/share/schools/none").status_code == 404


def test_share_app(client: TestClient):
    payload = client.post("/api/share/app").json()

    assert payload["message"] == "تم نسخ رابط التطبيق بنجاح!"
    assert "?" not in payload["url"]


def test_route_modules_do_not_shadow_builtins():
    from src.app import main as main_module
    from src.app.api import routes

    assert "map" not in vars(main_module)
    assert "map" not in vars(routes)
    assert main_module.map_view.router.prefix == "/map"
