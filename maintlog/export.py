"""Plain-text rendering and export of maintenance records."""

from pathlib import Path
from typing import List, Union

from .index import MaintenanceIndex
from .logging_setup import get_logger
from .record import MaintenanceRecord

logger = get_logger("maintlog.export")

RECORDS_HEADER = "=== Maintenance Records (by Date) ==="
RECORDS_FOOTER = "======================================"


def format_cost(cost: float) -> str:
    """Format cost with six significant digits (e.g. 49.99, 50, 1234.5)."""
    return f"{cost:g}"


def format_record(record: MaintenanceRecord) -> str:
    """Format a record as a single export/display line."""
    return (
        f"Date: {record.date} | Description: {record.description} "
        f"| Cost: ${format_cost(record.cost)}"
    )


def render_records(
    index: MaintenanceIndex,
    header: str = RECORDS_HEADER,
    footer: str = RECORDS_FOOTER,
) -> List[str]:
    """Header line, one line per record in date order, footer line."""
    lines = [header]
    index.export(lambda record: lines.append(format_record(record)))
    lines.append(footer)
    return lines


def export_records(
    index: MaintenanceIndex,
    filename: Union[str, Path],
    header: str = RECORDS_HEADER,
    footer: str = RECORDS_FOOTER,
) -> int:
    """
    Write the rendered records to a text file, replacing any existing file.

    Returns the number of records written. Raises OSError when the file
    cannot be opened or written.
    """
    lines = render_records(index, header, footer)
    try:
        with open(filename, "w", encoding="utf-8") as fp:
            for line in lines:
                fp.write(line + "\n")
    except OSError as e:
        logger.warning("Export to %s failed: %s", filename, e)
        raise
    logger.info("Exported %d records to %s", len(index), filename)
    return len(index)
