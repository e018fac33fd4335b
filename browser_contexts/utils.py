"""
Utility functions for the browser step contexts
"""

import json
import re
from typing import Any

# Array index keys in step tables: 0, 1, 2, ...
INDEX_PATTERN = re.compile(r"^(0|[1-9]\d*)$")


def json_encode(value: Any) -> str:
    """Encode a value as compact JSON."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def get_raw_or_json(value: Any) -> Any:
    """
    Return literal values as-is, JSON-encode everything else

    Args:
        value: A decoded JSON value

    Returns:
        The value itself for scalars, the compact JSON encoding for lists and dicts
    """
    if isinstance(value, (dict, list, tuple)):
        return json_encode(value)
    return value


def format_value(value: Any) -> str:
    """
    Format a value for a failure message

    Strings are shown as they are, everything else as JSON.
    """
    if isinstance(value, str):
        return value
    try:
        return json_encode(value)
    except TypeError:
        return repr(value)


def values_match(actual: Any, expected: Any) -> bool:
    """
    Loosely compare a browser value with a step's expected value

    Step tables always hand over strings while the browser returns typed
    values, so a string matches a number with the same numeric value, a
    bool written as "true"/"false", and null written as "null" or "".

    Args:
        actual: Value returned by the browser
        expected: Value from the step

    Returns:
        True if the values match
    """
    # True == 1 in Python; a bool only matches a bool
    if actual == expected:
        return isinstance(actual, bool) == isinstance(expected, bool)

    if isinstance(actual, str) and not isinstance(expected, str):
        actual, expected = expected, actual
    if not isinstance(expected, str) or isinstance(actual, str):
        return False

    # expected is a string, actual is not
    if actual is None:
        return expected in ("", "null")
    if isinstance(actual, bool):
        return expected.lower() == ("true" if actual else "false")
    if isinstance(actual, (int, float)):
        try:
            return float(expected) == actual
        except ValueError:
            return False
    return False


def rows_hash(table) -> dict[str, str]:
    """
    Read a two column behave table as a key/value mapping

    behave treats the first row as headings, so it is read as a pair too.

    Args:
        table: behave Table with rows of | key | value |

    Returns:
        Mapping of first column to second column

    Raises:
        ValueError: If the table does not have exactly two columns
    """
    if len(table.headings) != 2:
        raise ValueError(
            f"Expected a table with 2 columns, got {len(table.headings)}: {table.headings}"
        )

    result = {table.headings[0]: table.headings[1]}
    for row in table:
        result[row[0]] = row[1]
    return result


def table_hash(table) -> list[dict[str, str]]:
    """Read a behave table as one dict per row, keyed by the headings."""
    return [dict(zip(table.headings, row.cells)) for row in table]


def lookup_json_key(data: Any, key: str) -> Any:
    """
    Look up a table key in a decoded JSON value

    Objects are looked up by key, arrays by a non-negative index key such
    as "0".

    Returns:
        The value, or None if the key is missing or the value is null
    """
    if isinstance(data, dict):
        return data.get(key)
    if isinstance(data, list) and INDEX_PATTERN.match(key):
        index = int(key)
        if index < len(data):
            return data[index]
    return None
