"""Runtime utilities for export, output, validation, and version helpers."""

from .export import (
    ExportReport,
    FileOutcome,
    Notification,
    export_atlas,
    log_notification,
)
from .output import setup_output_directory, write_bytes
from .validation import validate_base_name, validate_input_paths
from .version import resolve_project_version

__all__ = [
    "ExportReport",
    "FileOutcome",
    "Notification",
    "export_atlas",
    "log_notification",
    "resolve_project_version",
    "setup_output_directory",
    "validate_base_name",
    "validate_input_paths",
    "write_bytes",
]
