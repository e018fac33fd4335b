"""
Step definitions for JavaScript variables in the page
"""

from behave import then, use_step_matcher  # type: ignore[import-untyped]
from behave.matchers import use_default_step_matcher  # type: ignore[import-untyped]

from browser_contexts.hooks import get_browser
from browser_contexts.utils import rows_hash, table_hash


@then("the javascript variable {variable:Token} should not be null")  # type: ignore[misc]
def step_then_variable_not_null(context, variable):
    get_browser(context).assert_javascript_variable_has_a_value(variable)


@then("the javascript variable {variable_name:Token} should have the following contents:")  # type: ignore[misc]
def step_then_variable_contents(context, variable_name):
    """Compare selected keys of a JSON object (table: | key | value |)"""
    get_browser(context).assert_json_contents_one_by_one(
        variable_name, table_hash(context.table)
    )


@then("the javascript variable {var_name:Token} should have the value of {expected:Scalar}")  # type: ignore[misc]
def step_then_variable_value(context, var_name, expected):
    get_browser(context).assert_javascript_variable(var_name, expected)


@then("the javascript variables should be:")  # type: ignore[misc]
def step_then_variables(context):
    """Compare several variables (table: | name | value |)"""
    get_browser(context).assert_javascript_variables(rows_hash(context.table))


use_step_matcher("re")


@then(r'the javascript variable "(?P<variable>.+)" should(?P<negate>| not) be type "(?P<type_name>\w+)"')  # type: ignore[misc]
def step_then_variable_type(context, variable, negate, type_name):
    get_browser(context).assert_javascript_variable_type(variable, negate, type_name)


use_default_step_matcher()
