"""
Type casting for step arguments.

Step arguments arrive as strings. ``TypeCaster.cast`` turns int, float and
bool looking strings into those types and strips the quotes off quoted
strings, so a step can say ``"1"`` when it really means the string "1".
"""

import re

import parse
from behave import register_type

INT_PATTERN = re.compile(r"^(0|-?[1-9]\d*)$")
FLOAT_PATTERN = re.compile(r"^\d*\.\d+$")
BOOL_PATTERN = re.compile(r"^(true|false)$", re.IGNORECASE)
QUOTED_STRING_PATTERN = re.compile(r"""^('([^']|\\')*'|"([^"]|\\")*")$""")

# A step placeholder: a double or single quoted string, or a bare word
TOKEN_PATTERN = r""""[^"]*"|'[^']*'|[^\s"']+"""


class TypeCaster:
    """Casts step arguments from strings to scalars."""

    def cast_string_to_int(self, string: str) -> int | str:
        """
        Cast an int-like string to an int.

        Strings too long for int() are returned unmodified.
        """
        try:
            intval = int(string)
        except ValueError:
            return string
        return intval if str(intval) == string else string

    def cast_string_to_float(self, string: str) -> float:
        return float(string)

    def cast_string_to_bool(self, string: str) -> bool:
        """Cast "true" or "false" (any case) to a bool. 0 and 1 are not bools."""
        return string.lower() == "true"

    def cast_quoted_string_to_string(self, string: str) -> str:
        """
        Strip the surrounding quotes off a quoted string.

        Lets a step with an unquoted placeholder such as
        ``the value is {value}`` receive ``"1"`` as the string 1 instead
        of the int 1.
        """
        return string[1:-1]

    def cast(self, value):
        """
        Cast a step argument using the first matching transform.

        Non-strings and strings matching no transform are returned unchanged.
        """
        if not isinstance(value, str):
            return value
        for pattern, transform in (
            (INT_PATTERN, self.cast_string_to_int),
            (FLOAT_PATTERN, self.cast_string_to_float),
            (BOOL_PATTERN, self.cast_string_to_bool),
            (QUOTED_STRING_PATTERN, self.cast_quoted_string_to_string),
        ):
            if pattern.match(value):
                return transform(value)
        return value


_caster = TypeCaster()


def cast_step_argument(value):
    """Cast a step argument with the default TypeCaster."""
    return _caster.cast(value)


def unquote(token: str) -> str:
    """Strip one pair of matching outer quotes from a placeholder value."""
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"'":
        return token[1:-1]
    return token


@parse.with_pattern(TOKEN_PATTERN)
def parse_token(text: str) -> str:
    """Placeholder value with its quotes removed."""
    return unquote(text)


@parse.with_pattern(TOKEN_PATTERN)
def parse_scalar(text: str):
    """Placeholder value with its quotes removed, then cast to a scalar."""
    return cast_step_argument(unquote(text))


def register_step_types() -> None:
    """Register the Token and Scalar placeholder types with behave."""
    register_type(Token=parse_token, Scalar=parse_scalar)
