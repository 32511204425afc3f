"""
Car maintenance record keeping.

This package provides:
- MaintenanceRecord: A dated service record (description, cost)
- MaintenanceIndex: AVL tree of records keyed by date
- InsertOutcome, UpdateOutcome, DeleteOutcome: Operation results
- ModelRegistry: One index per vehicle model
- Export helpers: Plain-text rendering and file export
- Settings: Optional YAML configuration
"""

from .record import MaintenanceRecord
from .outcome import InsertOutcome, UpdateOutcome, DeleteOutcome
from .index import MaintenanceIndex
from .registry import ModelRegistry
from .export import (
    RECORDS_HEADER,
    RECORDS_FOOTER,
    format_cost,
    format_record,
    render_records,
    export_records,
)
from .settings import Settings, SettingsError, load_settings

__all__ = [
    "MaintenanceRecord",
    "InsertOutcome",
    "UpdateOutcome",
    "DeleteOutcome",
    "MaintenanceIndex",
    "ModelRegistry",
    "RECORDS_HEADER",
    "RECORDS_FOOTER",
    "format_cost",
    "format_record",
    "render_records",
    "export_records",
    "Settings",
    "SettingsError",
    "load_settings",
]
