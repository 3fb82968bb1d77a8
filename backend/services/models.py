# backend/services/models.py
"""
Doctor records and the filter criteria applied to them.

ConsultMode and SortKey values are the exact strings used in the page
address (consultType / sortBy); NONE is the empty string, meaning the
parameter is absent.
"""
import re
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


class ConsultMode(str, Enum):
    NONE = ""
    REMOTE = "Video Consult"
    IN_PERSON = "In Clinic"


class SortKey(str, Enum):
    NONE = ""
    FEES = "fees"
    EXPERIENCE = "experience"


def _coerce_number(value):
    # "₹ 500" or "13 Years of experience" still carry a usable number
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    m = _NUMBER_RE.search(str(value))
    return float(m.group(0)) if m else 0


class Provider(BaseModel):
    """A doctor as listed in the directory. Never mutated by the filters."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = ""
    speciality: Tuple[str, ...] = ()
    experience: int = 0
    fees: float = 0
    supports_remote_consult: bool = Field(False, alias="videoConsult")
    image_url: Optional[str] = Field(None, alias="image")

    @field_validator("speciality", mode="before")
    @classmethod
    def _speciality_list(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, (list, tuple, set, frozenset)):
            return ()
        return tuple(str(v) for v in value if v is not None)

    @field_validator("experience", mode="before")
    @classmethod
    def _experience_number(cls, value):
        return max(int(_coerce_number(value)), 0)

    @field_validator("fees", mode="before")
    @classmethod
    def _fees_number(cls, value):
        return max(float(_coerce_number(value)), 0.0)

    @field_validator("supports_remote_consult", mode="before")
    @classmethod
    def _remote_flag(cls, value):
        return bool(value)


class Criteria(BaseModel):
    """Snapshot of the selected filters."""
    model_config = ConfigDict(frozen=True)

    mode: ConsultMode = ConsultMode.NONE
    specialties: FrozenSet[str] = frozenset()
    sort_key: SortKey = SortKey.NONE

    def as_dict(self) -> dict:
        return {
            "consultType": self.mode.value or None,
            "specialties": sorted(self.specialties),
            "sortBy": self.sort_key.value or None,
        }
