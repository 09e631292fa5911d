"""Render a SysbenchResult as a plain line, a CSV row or JSON."""

import json
from enum import Enum
from typing import Any, List, Union

from .result import SysbenchResult


class OutputFormat(str, Enum):
    PLAIN = "plain"
    CSV = "csv"
    JSON = "json"


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


def _formatted_values(result: SysbenchResult) -> List[str]:
    return [_format_value(v) for v in result.values()]


def format_plain(result: SysbenchResult) -> str:
    """All 23 fields separated by single spaces, floats at 3 decimals."""
    return " ".join(_formatted_values(result))


def format_csv(result: SysbenchResult) -> str:
    """All 23 fields separated by ``", "``. Nothing is quoted or escaped."""
    return ", ".join(_formatted_values(result))


def format_json(result: SysbenchResult) -> str:
    return json.dumps(result.to_dict())


def render(result: SysbenchResult, fmt: Union[OutputFormat, str] = OutputFormat.PLAIN) -> str:
    """Render in *fmt*; plain strings such as ``"csv"`` are accepted too.

    An unknown format name raises ``ValueError``.
    """
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.CSV:
        return format_csv(result)
    if fmt is OutputFormat.JSON:
        return format_json(result)
    return format_plain(result)
