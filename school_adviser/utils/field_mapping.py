"""
Field coercion utilities
Converts loosely-typed NEIS row fields (strings) into structured values
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

# NEIS uses "<br/>" inside text fields as a line separator
LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)

_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_INT_RE = re.compile(r"[+-]?\d+")

Rule = Callable[[str], Any]


def parse_float(value: str) -> float | None:
    """Parse the leading decimal number of a string ("60.6 g" -> 60.6)."""
    match = _FLOAT_RE.match(value.strip())
    return float(match.group()) if match else None


def parse_int(value: str) -> int | None:
    """Parse the leading integer of a string ("110000원" -> 110000)."""
    match = _INT_RE.match(value.strip())
    return int(match.group()) if match else None


def parse_flag(value: str) -> bool:
    """"Y" is True, every other string is False."""
    return value == "Y"


def split_segments(value: str, separator: str | re.Pattern[str] = LINE_BREAK_RE) -> list[str]:
    """Split on separator, trim each segment and drop empty ones."""
    if isinstance(separator, re.Pattern):
        parts = separator.split(value)
    else:
        parts = value.split(separator)
    return [part.strip() for part in parts if part.strip()]


def split_lines(value: str) -> list[str]:
    """Split a <br/>-delimited field into trimmed lines."""
    return split_segments(value)


def pair_list(
    label_key: str,
    value_key: str,
    value_parser: Callable[[str], Any] | None = None,
    separator: str | re.Pattern[str] = LINE_BREAK_RE,
) -> Rule:
    """
    Build a rule turning "label: value<sep>label: value" into a list of dicts.

    Only the first colon of a segment separates label from value. A segment
    without a colon keeps the whole text as label and None as value.

    Args:
        label_key: dict key for the label part
        value_key: dict key for the value part
        value_parser: optional converter for the value part (parse_float, parse_int)
        separator: segment separator (default: <br/>)
    """

    def rule(value: str) -> list[dict[str, Any]]:
        pairs = []
        for segment in split_segments(value, separator):
            label, colon, raw = segment.partition(":")
            parsed: Any = None
            if colon:
                raw = raw.strip()
                parsed = value_parser(raw) if value_parser else raw
            pairs.append({label_key: label.strip(), value_key: parsed})
        return pairs

    return rule


def strip_prefix(prefix: str) -> Rule:
    """Build a rule removing one leading occurrence of prefix."""

    def rule(value: str) -> str:
        return value[len(prefix):] if value.startswith(prefix) else value

    return rule


def apply_rules(record: dict[str, Any], rules: Mapping[str, Rule]) -> dict[str, Any]:
    """
    Apply coercion rules to one row in place.

    A rule only runs when the field currently holds a string, so absent
    fields and already-converted values are left untouched.

    Args:
        record: raw NEIS row
        rules: field name -> rule

    Returns:
        The same (mutated) record
    """
    for field, rule in rules.items():
        value = record.get(field)
        if isinstance(value, str):
            record[field] = rule(value)
    return record


def normalize_rows(
    rows: list[dict[str, Any]], rules: Mapping[str, Rule]
) -> list[dict[str, Any]]:
    """Apply rules to every row of a NEIS result."""
    for row in rows:
        apply_rules(row, rules)
    return rows

