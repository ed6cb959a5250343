from __future__ import annotations
import datetime
import logging
import math
import random
from typing import Optional, Protocol, Sequence, Tuple

from .config import (
    CITY_SCORING_DATA,
    DEFAULT_CITY,
    PREMIUM_AREA_KEYWORDS,
    COMMERCIAL_HUB_KEYWORDS,
    PREMIUM_AREA_BONUS,
    COMMERCIAL_HUB_BONUS,
    MAX_AREA_PREMIUM,
    PRICE_PER_SQFT_LADDER,
    ABSOLUTE_PRICE_LADDER,
    PROPERTY_TYPE_MODIFIERS,
    NEUTRAL_TYPE_MODIFIER,
    AGE_BANDS,
    OLDEST_AGE_MODIFIER,
    WALK_WEIGHTS,
    AMENITIES_WEIGHTS,
    MAX_VARIANCE,
    SCORE_RANGES,
)
from .models import CityData, LocalityScores, PropertyLike, TypeModifier, as_property

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


# Shared generator used when callers don't inject one
_rng = random.Random()


def seed(value: Optional[int]) -> None:
    """Reseed the shared generator (None -> system entropy)."""
    _rng.seed(value)


def get_city_from_location(location: Optional[str]) -> str:
    """Return the first known city named in ``location`` or ``'default'``."""
    location_lower = (location or '').lower()
    for city in CITY_SCORING_DATA:
        if city != DEFAULT_CITY and city in location_lower:
            return city
    return DEFAULT_CITY


def get_city_data(location: Optional[str]) -> CityData:
    city = get_city_from_location(location)
    return CITY_SCORING_DATA.get(city, CITY_SCORING_DATA[DEFAULT_CITY])


def _first_match(text: str, keywords: Sequence[str]) -> Optional[str]:
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


def calculate_area_premium(location: Optional[str]) -> int:
    """Keyword bonus for premium neighbourhoods and commercial hubs.

    Each category counts at most once; the combined bonus is capped.
    """
    location_lower = (location or '').lower()
    premium = 0
    if _first_match(location_lower, PREMIUM_AREA_KEYWORDS):
        premium += PREMIUM_AREA_BONUS
    if _first_match(location_lower, COMMERCIAL_HUB_KEYWORDS):
        premium += COMMERCIAL_HUB_BONUS
    return min(premium, MAX_AREA_PREMIUM)


def _ladder(value: float, ladder: Sequence[Tuple[float, int]]) -> int:
    for threshold, modifier in ladder:
        if value > threshold:
            return modifier
    return 0


def calculate_price_modifier(price: float, area: Optional[float] = None) -> int:
    """Price premium from price per sq ft, or absolute price when area is unknown."""
    if area and area > 0:
        return _ladder(price / area, PRICE_PER_SQFT_LADDER)
    return _ladder(price, ABSOLUTE_PRICE_LADDER)


def calculate_property_type_modifier(property_type: Optional[str]) -> TypeModifier:
    type_lower = (property_type or '').strip().lower()
    return PROPERTY_TYPE_MODIFIERS.get(type_lower, NEUTRAL_TYPE_MODIFIER)


def calculate_age_modifier(year_built: Optional[int], current_year: Optional[int] = None) -> int:
    """Construction-age adjustment applied to the locality score only."""
    if not year_built:
        return 0
    if current_year is None:
        current_year = datetime.date.today().year
    age = current_year - year_built
    for upper, modifier in AGE_BANDS:
        if age < upper:
            return modifier
    return OLDEST_AGE_MODIFIER


def round_half_up(value: float) -> int:
    # Matches the listing front-end: 2.5 -> 3, -2.5 -> -2
    return int(math.floor(value + 0.5))


def add_variance(score: float, max_variance: float, rng: Optional[RandomSource] = None) -> int:
    """Jitter ``score`` uniformly within +/- ``max_variance`` and round."""
    rng = rng or _rng
    return round_half_up(score + rng.uniform(-max_variance, max_variance))


def clamp_score(score: float, min_score: int = 30, max_score: int = 99) -> int:
    return int(max(min_score, min(max_score, score)))


def calculate_locality_scores(
    prop: PropertyLike,
    rng: Optional[RandomSource] = None,
    variance: bool = True,
) -> LocalityScores:
    """Compute locality, walkability and amenities scores for one property.

    Scores are the city base plus keyword, price, type and age modifiers,
    jittered by a small uniform variance (unless ``variance`` is False) and
    clamped to their ranges. Not cached; see ``get_cached_locality_scores``.
    """
    p = as_property(prop)
    city_data = get_city_data(p.location)

    area_premium = calculate_area_premium(p.location)
    price_modifier = calculate_price_modifier(p.price, p.area)
    type_modifier = calculate_property_type_modifier(p.type)
    age_modifier = calculate_age_modifier(p.year_built)

    locality = city_data.base + area_premium + price_modifier + type_modifier.locality + age_modifier
    walk = (
        city_data.walkability
        + area_premium * WALK_WEIGHTS['premium']
        + price_modifier * WALK_WEIGHTS['price']
        + type_modifier.walk
    )
    amenities = (
        city_data.amenities
        + area_premium * AMENITIES_WEIGHTS['premium']
        + price_modifier * AMENITIES_WEIGHTS['price']
        + type_modifier.amenities
    )
    logger.debug(
        "Scoring %s: city=%s premium=%s price=%s type=%s age=%s",
        p.id, get_city_from_location(p.location), area_premium, price_modifier, type_modifier, age_modifier,
    )

    if variance:
        locality = add_variance(locality, MAX_VARIANCE['locality'], rng)
        walk = add_variance(walk, MAX_VARIANCE['walk'], rng)
        amenities = add_variance(amenities, MAX_VARIANCE['amenities'], rng)
    else:
        locality = round_half_up(locality)
        walk = round_half_up(walk)
        amenities = round_half_up(amenities)

    return LocalityScores(
        locality_score=clamp_score(locality, *SCORE_RANGES['locality']),
        walk_score=clamp_score(walk, *SCORE_RANGES['walk']),
        amenities_score=clamp_score(amenities, *SCORE_RANGES['amenities']),
    )
