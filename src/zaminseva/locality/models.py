from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class CityData:
    """Base scores for one city table entry."""
    base: int
    walkability: int
    amenities: int


@dataclass(frozen=True)
class TypeModifier:
    """Per-score deltas for a property type."""
    locality: int
    walk: int
    amenities: int


@dataclass(frozen=True)
class LocalityScores:
    locality_score: int
    walk_score: int
    amenities_score: int

    def as_dict(self) -> Dict[str, int]:
        """camelCase form shown on the property badges."""
        return {
            'localityScore': self.locality_score,
            'walkScore': self.walk_score,
            'amenitiesScore': self.amenities_score,
        }


@dataclass(frozen=True)
class PropertyInput:
    """Property record as supplied by the listing pages.

    Coordinates are accepted for forward compatibility but do not
    influence any score yet.
    """
    id: str
    location: str
    price: float
    type: str
    area: Optional[float] = None
    year_built: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> 'PropertyInput':
        """Build from a listing dict (camelCase or snake_case keys).

        Optional numeric fields that are blank or unparseable become None;
        a missing price becomes 0.
        """
        year = _first(record, 'year_built', 'yearBuilt')
        id_ = _first(record, 'id')
        return cls(
            id=str(id_) if id_ is not None else '',
            location=str(record.get('location') or ''),
            price=_float(record.get('price')) or 0,
            type=str(_first(record, 'type', 'property_type', 'propertyType') or ''),
            area=_float(record.get('area')),
            year_built=_int(year),
            latitude=_float(record.get('latitude')),
            longitude=_float(record.get('longitude')),
        )


PropertyLike = Union[PropertyInput, Mapping[str, Any]]


def as_property(prop: PropertyLike) -> PropertyInput:
    if isinstance(prop, PropertyInput):
        return prop
    return PropertyInput.from_mapping(prop)


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for k in keys:
        if record.get(k) not in (None, ''):
            return record[k]
    return None


def _float(v: Any) -> Optional[float]:
    try:
        if v is None:
            return None
        s = str(v).strip().replace(',', '')
        if s == '':
            return None
        f = float(s)
    except ValueError:
        return None
    return f if math.isfinite(f) else None


def _int(v: Any) -> Optional[int]:
    f = _float(v)
    if f is None:
        return None
    return int(f)
