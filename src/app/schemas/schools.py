"""School catalogue API schemas."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..models.domain import FilterCriteria, Gender, Region, School, SchoolType, Shift, Wilayat

AllLiteral = Literal["All"]


class CoordinatesModel(BaseModel):
    lat: float
    lng: float


class ContactModel(BaseModel):
    phone: str | None = None
    managerName: str | None = None
    assistantName: str | None = None
    assistantPhone: str | None = None
    email: str | None = None
    website: str | None = None


class SchoolModel(BaseModel):
    id: str
    name: str
    region: Region
    wilayat: Wilayat
    area: str | None = None
    type: SchoolType
    grades: str
    gender: Gender
    shift: Shift
    coordinates: CoordinatesModel | None = None
    contact: ContactModel
    qualityScore: int
    source: str
    isVerified: bool

    @classmethod
    def from_domain(cls, school: School) -> "SchoolModel":
        coordinates = school.coordinates
        return cls(
            id=school.id,
            name=school.name,
            region=school.region,
            wilayat=school.wilayat,
            area=school.area,
            type=school.category,
            grades=school.grades,
            gender=school.gender,
            shift=school.shift,
            coordinates=CoordinatesModel(lat=coordinates.lat, lng=coordinates.lng) if coordinates else None,
            contact=ContactModel(
                phone=school.contact.phone,
                managerName=school.contact.manager_name,
                assistantName=school.contact.assistant_name,
                assistantPhone=school.contact.assistant_phone,
                email=school.contact.email,
                website=school.contact.website,
            ),
            qualityScore=school.quality_score,
            source=school.source,
            isVerified=school.is_verified,
        )


class SchoolListResponse(BaseModel):
    items: List[SchoolModel]
    total: int
    showResults: bool


class FilterCriteriaModel(BaseModel):
    query: str = ""
    region: Union[Region, AllLiteral] = "All"
    wilayat: Union[Wilayat, AllLiteral] = "All"
    type: Union[SchoolType, AllLiteral] = "All"
    gender: Union[Gender, AllLiteral] = "All"

    @classmethod
    def from_domain(cls, criteria: FilterCriteria) -> "FilterCriteriaModel":
        return cls(
            query=criteria.query,
            region=criteria.region,
            wilayat=criteria.wilayat,
            type=criteria.category,
            gender=criteria.gender,
        )


class FilterUpdateRequest(BaseModel):
    """Partial criteria update; omitted fields keep their value."""

    query: Optional[str] = None
    region: Optional[Union[Region, AllLiteral]] = None
    wilayat: Optional[Union[Wilayat, AllLiteral]] = None
    type: Optional[Union[SchoolType, AllLiteral]] = None
    gender: Optional[Union[Gender, AllLiteral]] = None

    def to_partial(self) -> dict:
        values = self.model_dump(exclude_none=True)
        if "type" in values:
            values["category"] = values.pop("type")
        return values


class ToggleFilterRequest(BaseModel):
    field: Literal["region", "wilayat", "type", "gender"]
    value: str


class RegionSelectRequest(BaseModel):
    region: Union[Region, AllLiteral]


class RegionCountModel(BaseModel):
    region: Region
    count: int


class SummaryResponse(BaseModel):
    total: int
    regions: List[RegionCountModel]


class CategorySliceModel(BaseModel):
    name: str
    value: int
    color: str


class HierarchyNodeModel(BaseModel):
    label: str
    count: int


class WilayatTreeModel(BaseModel):
    wilayat: str
    count: int
    schools: List[SchoolModel]


class RegionTreeModel(BaseModel):
    region: str
    count: int
    wilayats: List[WilayatTreeModel]


class MapBoundsModel(BaseModel):
    southWest: List[float]
    northEast: List[float]


class MapViewResponse(BaseModel):
    markers: dict
    bounds: MapBoundsModel | None = None
    center: List[float] | None = None
    zoom: int | None = None
    preview: List[SchoolModel]
    total: int


class MapLinkResponse(BaseModel):
    url: str


class AdvisorRequest(BaseModel):
    question: str = Field(..., min_length=1, description="Free-text question about the listed schools.")


class AdvisorResponse(BaseModel):
    answer: str
    contextSize: int
