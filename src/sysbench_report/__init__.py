"""Turn sysbench benchmark reports into one-line plain, CSV or JSON summaries."""

__version__ = "1.0.0"

from .formatter import OutputFormat, format_csv, format_json, format_plain, render
from .parser import MARKERS, parse_file, parse_line, parse_lines, parse_text
from .result import FIELD_NAMES, SysbenchResult

__all__ = [
    "SysbenchResult",
    "FIELD_NAMES",
    "MARKERS",
    "parse_line",
    "parse_lines",
    "parse_text",
    "parse_file",
    "OutputFormat",
    "format_plain",
    "format_csv",
    "format_json",
    "render",
]
