"""
Provides steps for checking the JavaScript environment in the browser.
"""

import json

from browser_contexts.contexts.base import BrowserContext
from browser_contexts.exceptions import ExpectationException
from browser_contexts.utils import (
    format_value,
    get_raw_or_json,
    lookup_json_key,
    values_match,
)


class JavaScriptContext(BrowserContext):
    """Assertions against JavaScript variables in the current page."""

    def assert_javascript_variable_has_a_value(self, variable: str) -> None:
        """
        Assert that a javascript variable is set and not null.

        Raises:
            ExpectationException: If the variable is null or undefined
        """
        result = self.session.evaluate_script(f"return {variable};")

        if result is None:
            raise ExpectationException(
                f'The custom variable "{variable}" is null or does not exist.',
                self.session,
            )

    def assert_javascript_variable_type(
        self, variable: str, negate: str | bool, type_name: str
    ) -> None:
        """
        Assert that the typeof a javascript variable matches (or does not match) a type.

        Args:
            variable: The variable to evaluate the type of
            negate: Invert the check; truthy for " not"
            type_name: The type to match against, e.g. "string" or "object"

        Raises:
            ExpectationException: If the type does not match what's expected
        """
        result = self.session.evaluate_script(f"return typeof({variable});")

        if (result != type_name) != bool(negate):
            not_text = " not" if negate else ""
            raise ExpectationException(
                f'The variable "{variable}" should{not_text} be type {type_name}, but is {result}',
                self.session,
                expected=type_name,
                actual=result,
            )

    def assert_json_contents_one_by_one(
        self, variable_name: str, values: list[dict[str, str]]
    ) -> None:
        """
        Selectively compare the keys of a JSON object in the browser.

        Only the keys listed in ``values`` are checked. Arrays are checked by
        index keys such as "0". Nested objects and arrays are compared by
        their compact JSON encoding.

        Args:
            variable_name: The JS variable holding the object
            values: Rows with "key" and "value" entries

        Raises:
            ExpectationException: If a key is missing or its value differs
        """
        returned_json = self.session.evaluate_script(
            f"return JSON.stringify({variable_name});"
        )
        response = json.loads(returned_json) if returned_json is not None else None

        for row in values:
            key = row["key"]
            found = lookup_json_key(response, key)
            if found is None:
                raise ExpectationException(
                    f'Expected key "{key}" was not in the JS variable "{variable_name}"\n'
                    f"Actual: {returned_json}",
                    self.session,
                )

            expected = get_raw_or_json(row["value"])
            actual = get_raw_or_json(found)

            if not values_match(actual, expected):
                raise ExpectationException(
                    f'Expected "{format_value(expected)}" in {key} position '
                    f'but got "{format_value(actual)}"',
                    self.session,
                    expected=expected,
                    actual=actual,
                )

    def assert_javascript_variable(self, var_name: str, expected) -> None:
        """
        Assert that a javascript variable has the given value.

        Raises:
            ExpectationException: If the actual value does not match
        """
        actual = self.session.evaluate_script(f"return {var_name};")

        if not values_match(actual, expected):
            raise ExpectationException(
                f"Expected {format_value(expected)} but got {format_value(actual)}",
                self.session,
                expected=expected,
                actual=actual,
            )

    def assert_javascript_variables(self, variables: dict[str, str]) -> None:
        """
        Assert that several javascript variables have the given values.

        Stored values are injected into the expected values first.

        Args:
            variables: Mapping of variable name to expected value
        """
        attributes = {
            name: self.store.inject_stored_values(value)
            for name, value in variables.items()
        }

        for name, value in attributes.items():
            self.assert_javascript_variable(name, value)
