from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, Sequence

from ..core.constants import EXPORT_HEADER

if TYPE_CHECKING:
    from .service import SummaryRow


def write_summary_csv(rows: Sequence["SummaryRow"]) -> str:
    """Summary rows as CSV text with the fixed header.

    Fields holding commas or quotes are quoted by the csv module.
    """
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for row in rows:
        writer.writerow([row.period, row.user, str(row.total_hours), str(row.total_pay)])
    return out.getvalue()
