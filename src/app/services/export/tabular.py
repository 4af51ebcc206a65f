"""CSV and Excel serialisation of school lists."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from openpyxl import Workbook

from ...models.domain import School

EXPORT_COLUMNS = [
    "id",
    "name",
    "region",
    "wilayat",
    "area",
    "type",
    "grades",
    "gender",
    "shift",
    "latitude",
    "longitude",
    "phone",
    "managerName",
    "email",
    "website",
    "qualityScore",
    "isVerified",
]


def school_to_row(school: School) -> dict:
    coordinates = school.coordinates
    return {
        "id": school.id,
        "name": school.name,
        "region": school.region.value,
        "wilayat": school.wilayat.value,
        "area": school.area or "",
        "type": school.category.value,
        "grades": school.grades,
        "gender": school.gender.value,
        "shift": school.shift.value,
        "latitude": coordinates.lat if coordinates else "",
        "longitude": coordinates.lng if coordinates else "",
        "phone": school.contact.phone or "",
        "managerName": school.contact.manager_name or "",
        "email": school.contact.email or "",
        "website": school.contact.website or "",
        "qualityScore": school.quality_score,
        "isVerified": school.is_verified,
    }


def schools_to_csv(schools: Sequence[School]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=EXPORT_COLUMNS)
    writer.writeheader()
    for school in schools:
        writer.writerow(school_to_row(school))
    return buffer.getvalue()


def schools_to_xlsx(schools: Sequence[School]) -> bytes:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "schools"
    worksheet.sheet_view.rightToLeft = True
    worksheet.append(EXPORT_COLUMNS)
    for school in schools:
        row = school_to_row(school)
        worksheet.append([row[column] for column in EXPORT_COLUMNS])
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
