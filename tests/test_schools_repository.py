import json

import pytest

from src.app.data.schools_repository import load_schools, parse_school
from src.app.models.domain import Region, SchoolType, Wilayat


@pytest.fixture(autouse=True)
def _clear_cache():
    load_schools.cache_clear()
    yield
    load_schools.cache_clear()


def _row(sid: str = "X-1", **overrides) -> dict:
    row = {
        "id": sid,
        "name": "مدرسة تجريبية",
        "region": Region.SALALAH_SECTOR.value,
        "wilayat": Wilayat.SALALAH.value,
        "type": SchoolType.GOVERNMENT.value,
        "grades": "1-4",
        "gender": "ذكور",
        "shift": "صباحي",
        "coordinates": {"lat": 17.0, "lng": 54.1},
        "contact": {"phone": " 23290000 ", "managerName": ""},
        "qualityScore": 80,
        "source": "وزارة التربية والتعليم",
        "isVerified": True,
    }
    row.update(overrides)
    return row


def _write(tmp_path, rows) -> object:
    path = tmp_path / "schools.json"
    path.write_text(json.dumps(rows, ensure_ascii=False), encoding="utf-8")
    return path


def test_bundled_dataset_loads():
    schools = load_schools()

    assert len(schools) == 24
    assert len({school.id for school in schools}) == 24
    regions = {school.region for school in schools}
    assert regions == set(Region)


def test_parse_school_maps_type_and_cleans_contact():
    school = parse_school(_row())

    assert school.category is SchoolType.GOVERNMENT
    assert school.contact.phone == "23290000"
    assert school.contact.manager_name is None
    assert school.has_contact
    assert school.coordinates.lat == 17.0


def test_missing_or_malformed_coordinates_become_none():
    assert parse_school(_row(coordinates=None)).coordinates is None
    assert parse_school(_row(coordinates={"lat": "17", "lng": 54})).coordinates is None


def test_missing_required_field_raises_value_error():
    row = _row()
    del row["region"]

    with pytest.raises(ValueError):
        parse_school(row)


def test_load_from_custom_file(tmp_path):
    path = _write(tmp_path, [_row("A"), _row("B", coordinates=None)])

    schools = load_schools(path)

    assert [school.id for school in schools] == ["A", "B"]


def test_duplicate_ids_are_rejected(tmp_path):
    path = _write(tmp_path, [_row("A"), _row("A")])

    with pytest.raises(ValueError, match="Duplicate"):
        load_schools(path)


def test_wilayat_under_wrong_region_is_rejected(tmp_path):
    path = _write(tmp_path, [_row("A", wilayat=Wilayat.THUMRAIT.value)])

    with pytest.raises(ValueError):
        load_schools(path)


def test_non_array_payload_is_rejected(tmp_path):
    path = _write(tmp_path, {"schools": []})

    with pytest.raises(ValueError):
        load_schools(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_schools(tmp_path / "absent.json")
