"""
Step definitions for page navigation and images
"""

from behave import given, then  # type: ignore[import-untyped]

from browser_contexts.hooks import get_browser


@given("I will be on {path:Token} in {timeout:Scalar} seconds")  # type: ignore[misc]
def step_given_delayed_visit(context, path, timeout):
    """Schedule navigation to a path without waiting for it"""
    get_browser(context).visit_path_delayed(path, timeout)


@then("I should see {img_src:Token} image in {locator:Token}")  # type: ignore[misc]
def step_then_image_loaded(context, img_src, locator):
    get_browser(context).assert_image_loaded(img_src, locator)


@then("I should not see an image in {locator:Token}")  # type: ignore[misc]
def step_then_image_not_loaded(context, locator):
    get_browser(context).assert_image_not_loaded(locator)
