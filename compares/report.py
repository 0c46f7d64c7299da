"""
Plain-text reports for document comparisons.
"""
from datetime import datetime, timezone
from typing import Optional

from compares.comparison import ComparisonResult


def _key_lines(title: str, marker: str, keys: tuple) -> list[str]:
    if not keys:
        return []
    lines = [f"{title} ({len(keys)}):"]
    for key in keys:
        lines.append(f"  {marker} {key}")
    lines.append("")
    return lines


def generate_report(
    x_name: str,
    y_name: str,
    result: ComparisonResult,
    encoding: str,
    timestamp: Optional[datetime] = None
) -> str:
    """
    Generate a text report for a comparison of two documents.

    Args:
        x_name: Label of the baseline document (usually a filename)
        y_name: Label of the document compared against it
        result: Result of the comparison
        encoding: Encoding both documents were decoded with
        timestamp: Report time, defaults to now (UTC)
    """
    from config import settings

    timestamp = timestamp or datetime.now(timezone.utc)

    lines = [
        "=" * 70,
        "DOCUMENT COMPARISON REPORT",
        f"{settings.APP_NAME} v{settings.APP_VERSION}",
        "=" * 70,
        "",
        f"Timestamp:        {timestamp.isoformat()}",
        f"Encoding:         {encoding.upper()}",
        f"Before (x):       {x_name}",
        f"After (y):        {y_name}",
        "",
    ]

    if result.equal:
        lines.extend([
            "-" * 40,
            "RESULT: NO DIFFERENCES FOUND",
            "-" * 40,
            "",
            "The two documents have the same top-level keys and values.",
            "",
        ])
    else:
        lines.extend([
            "-" * 40,
            f"RESULT: {result.change_count} DIFFERENCE(S) FOUND",
            "-" * 40,
            "",
        ])
        lines.extend(_key_lines("New keys", "+", result.new_keys))
        lines.extend(_key_lines("Deleted keys", "-", result.deleted_keys))
        lines.extend(_key_lines("Changed keys", "~", result.changed_keys))

    lines.extend([
        "=" * 70,
        "END OF REPORT",
        "=" * 70,
    ])

    return "\n".join(lines)
