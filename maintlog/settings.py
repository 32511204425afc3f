"""Loading and validation of the optional YAML settings file."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from jsonschema import ValidationError, validate

from .export import RECORDS_FOOTER, RECORDS_HEADER

CONFIG_ENV = "MAINT_CONFIG"
DEFAULT_EXPORT_FILE = "maintenance_records.txt"
DEFAULT_LOG_LEVEL = "WARNING"

SETTINGS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "logLevel": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        },
        "exportHeader": {"type": "string"},
        "exportFooter": {"type": "string"},
        "defaultExportFile": {"type": "string", "minLength": 1},
    },
}


class SettingsError(Exception):
    """Settings file could not be read or failed validation."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class Settings:
    """Runtime settings for the console application."""

    def __init__(
        self,
        log_level: str = DEFAULT_LOG_LEVEL,
        export_header: str = RECORDS_HEADER,
        export_footer: str = RECORDS_FOOTER,
        default_export_file: str = DEFAULT_EXPORT_FILE,
    ):
        self.log_level = log_level
        self.export_header = export_header
        self.export_footer = export_footer
        self.default_export_file = default_export_file


def validate_settings(data: Any) -> List[str]:
    """Validate parsed settings data. Returns list of errors."""
    errors = []
    try:
        validate(instance=data, schema=SETTINGS_SCHEMA)
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    return errors


def _parse_settings(dct: Dict[str, Any]) -> Settings:
    return Settings(
        dct.get("logLevel", DEFAULT_LOG_LEVEL),
        dct.get("exportHeader", RECORDS_HEADER),
        dct.get("exportFooter", RECORDS_FOOTER),
        dct.get("defaultExportFile", DEFAULT_EXPORT_FILE),
    )


def load_settings(filename: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a YAML file.

    The path falls back to the MAINT_CONFIG environment variable; with
    neither set, defaults are returned. An empty file also yields defaults.
    """
    if filename is None:
        filename = os.getenv(CONFIG_ENV)
    if not filename:
        return Settings()

    try:
        with open(filename) as fp:
            data = yaml.safe_load(fp)
    except yaml.YAMLError as e:
        raise SettingsError([f"YAML parse error: {e}"]) from e
    except OSError as e:
        raise SettingsError([f"Cannot read settings file: {e}"]) from e

    if data is None:
        return Settings()

    errors = validate_settings(data)
    if errors:
        raise SettingsError(errors)
    return _parse_settings(data)
