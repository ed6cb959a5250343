from __future__ import annotations
import math
from typing import Any, Dict, Iterable, List, Mapping, Union

from .models import LocalityScores

SCORE_FIELDS = ('localityScore', 'walkScore', 'amenitiesScore')


def _basic(series: List[float]) -> Dict[str, Any]:
    if not series:
        return {'count': 0}
    s = sorted(series); n = len(s); mean = sum(s) / n
    med = s[n//2] if n % 2 == 1 else (s[n//2-1] + s[n//2]) / 2
    std = math.sqrt(sum((x - mean) ** 2 for x in s) / n)
    return {'count': n, 'mean': round(mean, 2), 'median': round(med, 2), 'min': s[0], 'max': s[-1], 'std': round(std, 2)}


def summarize_scores(scores: Iterable[Union[LocalityScores, Mapping[str, Any]]]) -> Dict[str, Dict[str, Any]]:
    """Per-badge summary (count/mean/median/min/max/std) over a batch.

    Accepts ``LocalityScores`` or rows carrying camelCase score columns;
    rows missing a column are skipped for that column only.
    """
    columns: Dict[str, List[float]] = {f: [] for f in SCORE_FIELDS}
    for row in scores:
        values = row.as_dict() if isinstance(row, LocalityScores) else row
        for f in SCORE_FIELDS:
            v = values.get(f)
            if v not in (None, ''):
                columns[f].append(float(v))
    return {f: _basic(columns[f]) for f in SCORE_FIELDS}
