"""Domain models for school records and the static geography of Dhofar."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class SchoolType(str, Enum):
    GOVERNMENT = "حكومي"
    PRIVATE = "خاص"
    KINDERGARTEN = "روضة"


class Region(str, Enum):
    """Geographic sectors of the governorate."""

    SALALAH_SECTOR = "قطاع صلالة"
    THUMRAIT_SECTOR = "قطاع ثمريت"
    RAKHYUT_SECTOR = "قطاع رخيوت"


class Wilayat(str, Enum):
    # Salalah sector
    SALALAH = "صلالة"
    TAQAH = "طاقة"
    MIRBAT = "مرباط"
    SADAH = "سدح"

    # Thumrait sector
    THUMRAIT = "ثمريت"
    AL_MAZYUNAH = "المزيونة"
    MUQSHIN = "مقشن"
    SHALIM_HALLANIYAT = "شليم وجزر الحلانيات"

    # Rakhyut sector
    RAKHYUT = "رخيوت"
    DHALKUT = "ضلكوت"


class Shift(str, Enum):
    MORNING = "صباحي"
    EVENING = "مسائي"
    MIXED = "مشترك"


class Gender(str, Enum):
    BOYS = "ذكور"
    GIRLS = "إناث"
    MIXED = "مختلط"


REGION_WILAYATS: dict[Region, tuple[Wilayat, ...]] = {
    Region.SALALAH_SECTOR: (Wilayat.SALALAH, Wilayat.TAQAH, Wilayat.MIRBAT, Wilayat.SADAH),
    Region.THUMRAIT_SECTOR: (
        Wilayat.THUMRAIT,
        Wilayat.AL_MAZYUNAH,
        Wilayat.MUQSHIN,
        Wilayat.SHALIM_HALLANIYAT,
    ),
    Region.RAKHYUT_SECTOR: (Wilayat.RAKHYUT, Wilayat.DHALKUT),
}

WILAYAT_REGION: dict[Wilayat, Region] = {
    wilayat: region for region, wilayats in REGION_WILAYATS.items() for wilayat in wilayats
}

ALL = "All"


@dataclass(frozen=True, slots=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class ContactInfo:
    phone: Optional[str] = None
    manager_name: Optional[str] = None
    assistant_name: Optional[str] = None
    assistant_phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


@dataclass(frozen=True, slots=True)
class School:
    """Represents a school record from the bundled directory dataset."""

    id: str
    name: str
    region: Region
    wilayat: Wilayat
    category: SchoolType
    grades: str
    gender: Gender
    shift: Shift
    area: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    contact: ContactInfo = field(default_factory=ContactInfo)
    quality_score: int = 0
    source: str = ""
    is_verified: bool = False

    @property
    def has_contact(self) -> bool:
        return bool(self.contact.phone)


RegionFilter = Union[Region, str]
WilayatFilter = Union[Wilayat, str]
CategoryFilter = Union[SchoolType, str]
GenderFilter = Union[Gender, str]


@dataclass(slots=True)
class FilterCriteria:
    """Live search and filter selection. ``ALL`` disables a condition."""

    query: str = ""
    region: RegionFilter = ALL
    wilayat: WilayatFilter = ALL
    category: CategoryFilter = ALL
    gender: GenderFilter = ALL


FILTER_FIELDS = ("query", "region", "wilayat", "category", "gender")
