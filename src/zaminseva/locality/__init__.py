"""Locality scoring package.

Public API:
    calculate_locality_scores(property, ...)
    get_cached_locality_scores(property)
    ScoringService(max_entries, rng, variance)
    score_properties(properties) / export_scored_properties(rows, ...)
    summarize_scores(scores)
"""
from .models import PropertyInput, LocalityScores, CityData  # noqa: F401
from .scoring import calculate_locality_scores  # noqa: F401
from .cache import ScoringService, get_cached_locality_scores  # noqa: F401
from .export import score_properties, export_scored_properties  # noqa: F401
from .stats import summarize_scores  # noqa: F401

__all__ = [
    "PropertyInput",
    "LocalityScores",
    "CityData",
    "calculate_locality_scores",
    "get_cached_locality_scores",
    "ScoringService",
    "score_properties",
    "export_scored_properties",
    "summarize_scores",
]
