"""zaminseva package root.

Lazy export of the scoring entry points. ``import zaminseva`` stays cheap
(no pydantic-settings or pandas import) until a caller actually scores a
property; the first call pulls in ``zaminseva.locality``.

Downstream code can still ``from zaminseva import get_cached_locality_scores``.
"""

__all__ = ["calculate_locality_scores", "get_cached_locality_scores"]

def calculate_locality_scores(*args, **kwargs):  # type: ignore[no-untyped-def]
	from .locality import calculate_locality_scores as _calculate  # noqa: WPS433
	return _calculate(*args, **kwargs)

def get_cached_locality_scores(*args, **kwargs):  # type: ignore[no-untyped-def]
	from .locality import get_cached_locality_scores as _cached  # noqa: WPS433
	return _cached(*args, **kwargs)
