"""Line classifier and field extractor for sysbench reports.

A sysbench run prints a block like::

    SQL statistics:
        queries performed:
            read:                            24833060
            ...
        transactions:                        1773770 (5912.46 per sec.)

Each line is identified by a marker substring. The first marker in
``MARKERS`` found in the line wins, and its field rules pull whitespace
separated tokens into a :class:`SysbenchResult`.

Extraction is best effort: a token that is missing or does not convert is
skipped and the field keeps whatever value it already had.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple, Union

from .result import SysbenchResult

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"[ \t]+")

Converter = Callable[[str], Union[int, float, str]]

# Plain ASCII numbers only: no digit separators, no padding, no non-ASCII digits
_INT = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


def to_int(token: str) -> int:
    if not _INT.fullmatch(token):
        raise ValueError(f"invalid integer: {token!r}")
    return int(token)


def to_float(token: str) -> float:
    if not _FLOAT.fullmatch(token):
        raise ValueError(f"invalid number: {token!r}")
    return float(token)


@dataclass(frozen=True)
class FieldRule:
    """Pull token ``index`` of a normalized line into ``field``."""

    field: str
    index: int
    convert: Converter
    strip: str = ""                 # character removed everywhere in the token
    part: Optional[int] = None      # take this piece of an "x/y" token

    def apply(self, result: SysbenchResult, tokens: Tuple[str, ...]) -> None:
        try:
            token = tokens[self.index]
            if self.strip:
                token = token.replace(self.strip, "")
            if self.part is not None:
                token = token.split("/")[self.part]
            value = self.convert(token)
        except (IndexError, ValueError) as exc:
            logger.debug("Skipping %s: %s (%s)", self.field, exc, " ".join(tokens).strip())
            return
        setattr(result, self.field, value)


@dataclass(frozen=True)
class Marker:
    """A marker substring and the fields a matching line fills in."""

    text: str
    rules: Tuple[FieldRule, ...]

    def matches(self, line: str) -> bool:
        return self.text in line

    def extract(self, result: SysbenchResult, line: str) -> None:
        tokens = tuple(line.split(" "))
        for rule in self.rules:
            rule.apply(result, tokens)


# Evaluation order matters: several markers are substrings of lines that
# belong to a later marker. "total:" fires before "transactions:", so a report
# fills total_transactions from the queries "total:" line and then overwrites
# it with the "transactions:" line that follows.
MARKERS: Tuple[Marker, ...] = (
    Marker("sysbench", (
        FieldRule("engine_version", 1, str),
        FieldRule("runtime_version", 5, str, strip=")"),
    )),
    Marker("Number of threads", (FieldRule("threads", 3, to_int),)),
    Marker("read:", (FieldRule("total_read", 2, to_int),)),
    Marker("write:", (FieldRule("total_write", 2, to_int),)),
    Marker("other:", (FieldRule("total_other", 2, to_int),)),
    Marker("total:", (FieldRule("total_transactions", 2, to_int),)),
    Marker("transactions:", (
        FieldRule("total_transactions", 2, to_int),
        FieldRule("transactions_per_second", 3, to_float, strip="("),
    )),
    Marker("queries:", (
        FieldRule("total_queries", 2, to_int),
        FieldRule("queries_per_second", 3, to_float, strip="("),
    )),
    Marker("errors:", (FieldRule("ignored_errors", 3, to_int),)),
    Marker("reconnects:", (FieldRule("reconnects", 2, to_int),)),
    Marker("time:", (FieldRule("total_time_seconds", 3, to_float, strip="s"),)),
    Marker("events:", (FieldRule("total_events", 5, to_int),)),
    Marker("min:", (FieldRule("min_latency_ms", 2, to_float),)),
    Marker("avg:", (FieldRule("avg_latency_ms", 2, to_float),)),
    Marker("max:", (FieldRule("max_latency_ms", 2, to_float),)),
    Marker("percentile:", (FieldRule("p95_latency_ms", 3, to_float),)),
    Marker("sum:", (FieldRule("sum_latency_ms", 2, to_float),)),
    Marker("events (avg/stddev):", (
        FieldRule("per_thread_events_avg", 3, to_float, part=0),
        FieldRule("per_thread_events_stddev", 3, to_float, part=1),
    )),
    Marker("time (avg/stddev):", (
        FieldRule("per_thread_exec_time_avg", 4, to_float, part=0),
        FieldRule("per_thread_exec_time_stddev", 4, to_float, part=1),
    )),
)


def normalize(line: str) -> str:
    """Drop the line terminator and collapse spaces/tabs to single spaces."""
    return _WHITESPACE.sub(" ", line.rstrip("\r\n"))


def classify(line: str) -> Optional[Marker]:
    """Return the first marker found in a normalized line, if any."""
    for marker in MARKERS:
        if marker.matches(line):
            return marker
    return None


def parse_line(result: SysbenchResult, line: str) -> None:
    """Update *result* in place from one report line. Never raises on bad input."""
    line = normalize(line)
    marker = classify(line)
    if marker is not None:
        marker.extract(result, line)


def parse_lines(lines: Iterable[str]) -> SysbenchResult:
    result = SysbenchResult()
    for line in lines:
        parse_line(result, line)
    return result


def parse_text(text: str) -> SysbenchResult:
    return parse_lines(text.split("\n"))


def parse_file(path: str) -> SysbenchResult:
    """Parse a report file. ``OSError`` from opening or reading propagates.

    Undecodable bytes are replaced, so a garbled line only affects itself.
    """
    logger.debug("Reading report from %s", path)
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        return parse_lines(fh)
