"""CSV export of the journal."""

import csv
import io
from collections.abc import Iterable

from .journal.models import Entry

CSV_HEADER = ["Date", "Mood", "Person", "Location", "Note"]


def generate_csv(entries: Iterable[Entry]) -> str:
    """Render entries as CSV text, one row per entry in the given order."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for entry in entries:
        writer.writerow([
            entry.timestamp.isoformat(),
            entry.mood or "",
            entry.person or "",
            entry.location or "",
            entry.note or "",
        ])
    return buffer.getvalue()
