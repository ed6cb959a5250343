from __future__ import annotations
from typing import Dict, Sequence, Tuple

from .models import CityData, TypeModifier

DEFAULT_CITY = 'default'

# Ordered: the first city whose name appears in the location wins
CITY_SCORING_DATA: Dict[str, CityData] = {
    # Metros
    'mumbai': CityData(85, 80, 90),
    'delhi': CityData(82, 75, 88),
    'bangalore': CityData(80, 70, 85),
    'hyderabad': CityData(78, 68, 82),
    'pune': CityData(76, 72, 80),
    'chennai': CityData(75, 70, 78),
    'kolkata': CityData(74, 75, 76),
    'ahmedabad': CityData(72, 65, 74),
    'jaipur': CityData(70, 60, 72),
    'lucknow': CityData(68, 58, 70),
    'kanpur': CityData(66, 55, 68),
    'nagpur': CityData(65, 57, 67),
    'indore': CityData(64, 56, 66),
    'thane': CityData(78, 72, 82),
    'bhopal': CityData(62, 54, 64),
    'visakhapatnam': CityData(61, 53, 63),
    'pimpri': CityData(74, 68, 76),
    'patna': CityData(58, 50, 60),
    'vadodara': CityData(67, 60, 69),
    'ghaziabad': CityData(65, 58, 67),
    # Smaller cities and towns
    DEFAULT_CITY: CityData(60, 50, 62),
}

PREMIUM_AREA_KEYWORDS: Sequence[str] = [
    'bandra', 'juhu', 'powai', 'hiranandani', 'worli', 'lower parel', 'bkc',
    'gurgaon', 'cyber city', 'mg road', 'connaught place', 'vasant kunj',
    'koramangala', 'indiranagar', 'whitefield', 'electronic city', 'hsr layout',
    'banjara hills', 'jubilee hills', 'gachibowli', 'hitec city',
    'boat club road', 'kalyani nagar', 'aundh', 'viman nagar',
    'anna nagar', 't nagar', 'adyar', 'velachery',
    'salt lake', 'new town', 'rajarhat',
    'vastrapur', 'prahlad nagar', 'satellite',
    'civil lines', 'cantonment', 'gomti nagar',
]

COMMERCIAL_HUB_KEYWORDS: Sequence[str] = [
    'it park', 'tech park', 'cyber', 'software', 'business district',
    'commercial', 'mall', 'metro', 'station', 'airport', 'highway',
    'expressway', 'ring road', 'main road', 'market', 'hospital',
    'school', 'college', 'university',
]

PREMIUM_AREA_BONUS = 8
COMMERCIAL_HUB_BONUS = 5
MAX_AREA_PREMIUM = 15

# (exclusive lower bound, modifier), checked top-down
PRICE_PER_SQFT_LADDER: Sequence[Tuple[float, int]] = [
    (15_000, 10),  # premium
    (10_000, 7),   # high-end
    (7_000, 4),    # mid-range
    (4_000, 2),    # budget+
]
ABSOLUTE_PRICE_LADDER: Sequence[Tuple[float, int]] = [
    (50_000_000, 8),  # 5+ Cr
    (20_000_000, 6),  # 2-5 Cr
    (10_000_000, 4),  # 1-2 Cr
    (5_000_000, 2),   # 50L-1Cr
]

NEUTRAL_TYPE_MODIFIER = TypeModifier(0, 0, 0)
PROPERTY_TYPE_MODIFIERS: Dict[str, TypeModifier] = {
    'villa': TypeModifier(5, -5, -2),
    'house': TypeModifier(5, -5, -2),
    'apartment': TypeModifier(3, 5, 5),
    'condo': TypeModifier(3, 5, 5),
    'townhouse': TypeModifier(2, 0, 2),
    'commercial': TypeModifier(-2, 8, 8),
    'land': TypeModifier(-5, -10, -8),
}

# (exclusive upper bound on age in years, modifier); older than all bands -> OLDEST_AGE_MODIFIER
AGE_BANDS: Sequence[Tuple[int, int]] = [
    (5, 3),
    (10, 1),
    (20, 0),
    (30, -2),
]
OLDEST_AGE_MODIFIER = -4

# Share of the premium / price modifier carried into walk and amenities
WALK_WEIGHTS: Dict[str, float] = {'premium': 0.6, 'price': 0.5}
AMENITIES_WEIGHTS: Dict[str, float] = {'premium': 0.8, 'price': 0.7}

MAX_VARIANCE: Dict[str, float] = {
    'locality': 3,
    'walk': 4,
    'amenities': 3,
}

SCORE_RANGES: Dict[str, Tuple[int, int]] = {
    'locality': (40, 99),
    'walk': (30, 99),
    'amenities': (35, 99),
}

CACHE_MAX_ENTRIES = 1000
