from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional
import csv, os, datetime, logging

from .cache import ScoringService, get_default_service
from .models import PropertyLike, as_property

logger = logging.getLogger(__name__)

PREFERRED_COLUMNS = [
    "id",
    "location",
    "price",
    "area",
    "type",
    "yearBuilt",
    "localityScore",
    "walkScore",
    "amenitiesScore",
]


def score_properties(
    properties: Iterable[PropertyLike],
    service: Optional[ScoringService] = None,
) -> List[Dict[str, Any]]:
    """Score a batch through the cached accessor and flatten each to a row."""
    if service is None:
        service = get_default_service()
    rows: List[Dict[str, Any]] = []
    for prop in properties:
        p = as_property(prop)
        row: Dict[str, Any] = {
            "id": p.id,
            "location": p.location,
            "price": p.price,
            "area": p.area,
            "type": p.type,
            "yearBuilt": p.year_built,
        }
        row.update(service.get_scores(p).as_dict())
        rows.append(row)
    return rows


def export_scored_properties(
    rows: List[Dict[str, Any]],
    out_dir: str | os.PathLike[str] | None = None,
    fmt: str = "csv",
) -> str:
    """Export scored property rows.

    Args:
        rows: Output of :func:`score_properties` (extra keys are kept).
        out_dir: Output directory (created if missing); defaults to the
            ``EXPORT_DIR`` setting.
        fmt: 'csv' (default) or 'xlsx' (requires pandas + openpyxl).

    Returns:
        Path to generated export file.
    """
    fmt = fmt.lower()
    if fmt not in ("csv", "xlsx"):
        raise ValueError(f"Unsupported export format: {fmt}")
    if out_dir is None:
        from zaminseva.config.settings import get_settings

        out_dir = get_settings().EXPORT_DIR
    out_dir = os.fspath(out_dir)
    os.makedirs(out_dir, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    base = f"locality_scores_{timestamp}"

    fieldnames = sorted({k for r in rows for k in r.keys()})
    ordered = [c for c in PREFERRED_COLUMNS if c in fieldnames]
    ordered += [c for c in fieldnames if c not in ordered]

    if fmt == "xlsx":
        try:
            import pandas as pd

            df = pd.DataFrame(rows, columns=ordered)
            xlsx_path = os.path.join(out_dir, base + ".xlsx")
            try:
                df.to_excel(xlsx_path, index=False)
                return xlsx_path
            except Exception as e:
                logger.warning("XLSX export failed (%s); falling back to CSV", e)
        except ImportError:  # pragma: no cover - pandas not installed
            logger.info("pandas not available; falling back to CSV export")

    csv_path = os.path.join(out_dir, base + ".csv")
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=ordered, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    logger.info("Exported %d scored properties to %s", len(rows), csv_path)
    return csv_path
