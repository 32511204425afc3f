"""MaintenanceRecord dataclass for a single dated service record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MaintenanceRecord:
    """A record of maintenance performed on a given date."""

    date: str
    description: str
    cost: float = 0
