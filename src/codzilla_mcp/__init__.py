"""codzilla - UI component metadata over the Model Context Protocol."""

from codzilla_mcp.component_parser import parse_component
from codzilla_mcp.component_scanner import ComponentScanner, scan_directory
from codzilla_mcp.errors import (
    CodzillaError,
    NotFoundError,
    UnknownOperationError,
    ValidationError,
)
from codzilla_mcp.models import ComponentRecord, PropInfo

__version__ = "1.0.0"

__all__ = [
    "CodzillaError",
    "ComponentRecord",
    "ComponentScanner",
    "NotFoundError",
    "PropInfo",
    "UnknownOperationError",
    "ValidationError",
    "parse_component",
    "scan_directory",
]
