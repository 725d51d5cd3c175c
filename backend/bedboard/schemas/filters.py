"""
Bed map filter criteria.
"""
from pydantic import BaseModel, field_validator

from bedboard.models.enums import BedStatusEnum, BedTypeEnum, FILTER_ALL

_STATUS_VALUES = {s.value for s in BedStatusEnum}
_TYPE_VALUES = {t.value for t in BedTypeEnum}


class FilterCriteria(BaseModel):
    """
    The five bed map filters.

    Frozen and hashable: it is the memoization key of the filter engine.
    Every field except `search` accepts "all" for "no constraint".
    """

    search: str = ""
    floor: str = FILTER_ALL
    ward: str = FILTER_ALL
    status: str = FILTER_ALL
    bed_type: str = FILTER_ALL

    @field_validator('search', mode='before')
    @classmethod
    def none_search_is_blank(cls, v):
        return v or ""

    @field_validator('floor', 'ward', mode='before')
    @classmethod
    def none_is_all(cls, v):
        return v or FILTER_ALL

    @field_validator('status', mode='before')
    @classmethod
    def validate_status(cls, v):
        v = getattr(v, "value", v) or FILTER_ALL
        if v != FILTER_ALL and v not in _STATUS_VALUES:
            raise ValueError(
                f"Unknown status '{v}'. Valid values: all, {', '.join(sorted(_STATUS_VALUES))}"
            )
        return v

    @field_validator('bed_type', mode='before')
    @classmethod
    def validate_bed_type(cls, v):
        v = getattr(v, "value", v) or FILTER_ALL
        if v != FILTER_ALL and v not in _TYPE_VALUES:
            raise ValueError(
                f"Unknown bed type '{v}'. Valid values: all, {', '.join(sorted(_TYPE_VALUES))}"
            )
        return v

    def without_search(self) -> "FilterCriteria":
        """Same criteria with the search text cleared."""
        return self.model_copy(update={"search": ""})

    class Config:
        frozen = True
