"""Date labels and timeline compaction."""

from __future__ import annotations

from datetime import datetime

from commit_network.layout.types import PositionedCommit, TimelineTick

_FALLBACK_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d")
INVALID_DATE_LABEL = "Invalid Date"


def _parse_date(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def format_date_label(value: str) -> str:
    """Short month + day ("Jan 5").

    The day is read in the offset the timestamp carries, with no conversion to
    the local zone. Empty or unparseable input labels as "Invalid Date".
    """
    parsed = _parse_date(value)
    if parsed is None:
        return INVALID_DATE_LABEL
    return f"{parsed.strftime('%b')} {parsed.day}"


def compact_timeline(nodes: list[PositionedCommit]) -> list[TimelineTick]:
    """One tick per run of consecutive nodes sharing a date label.

    Each tick sits at the y of the first node in its run.
    """
    ticks: list[TimelineTick] = []
    last_label: str | None = None
    for node in nodes:
        if node.date_label != last_label:
            ticks.append(TimelineTick(label=node.date_label, y=node.y))
            last_label = node.date_label
    return ticks
