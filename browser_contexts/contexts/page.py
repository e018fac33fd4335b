"""
Page-level helpers: delayed navigation and image loading checks.
"""

from browser_contexts.contexts.base import BrowserContext
from browser_contexts.exceptions import ExpectationException
from browser_contexts.utils import json_encode

IMAGE_LOADED_SCRIPT = (
    "return arguments[0].complete && arguments[0].naturalWidth > 0;"
)


class PageContext(BrowserContext):
    """Steps for navigating and checking images on the current page."""

    def visit_path_delayed(self, path: str, timeout: float) -> None:
        """
        Navigate to a path after a delay, without blocking the step.

        Args:
            path: The path or URL to visit
            timeout: Seconds to wait before navigating
        """
        self.session.execute_script(
            "window.setTimeout(function() {\n"
            f"    window.location = {json_encode(path)};\n"
            f"}}, {int(float(timeout) * 1000)});"
        )

    def check_image_loaded(self, image, src: str | None = None) -> bool:
        """
        Check whether an image element finished loading.

        Args:
            image: The <img> WebElement
            src: If given, the image source must also contain this

        Returns:
            True if the image loaded (from ``src`` when given)
        """
        if src is not None and src not in (image.get_attribute("src") or ""):
            return False
        return bool(self.session.evaluate_script(IMAGE_LOADED_SCRIPT, image))

    def _find_image(self, locator: str):
        image = self.session.find("css", f"img#{locator}")
        if image is None:
            raise ExpectationException(
                f"Expected an img tag with id '{locator}'. Found none!", self.session
            )
        return image

    def assert_image_loaded(self, img_src: str, locator: str) -> None:
        """
        Assert that the image with the given id loaded from the given source.

        Raises:
            ExpectationException: If the <img> tag is missing or did not load
        """
        image = self._find_image(locator)

        if not self.check_image_loaded(image, img_src):
            raise ExpectationException(
                f"Expected img '{locator}' to load. Instead it did not!", self.session
            )

    def assert_image_not_loaded(self, locator: str) -> None:
        """
        Assert that the image with the given id did not load.

        Raises:
            ExpectationException: If the <img> tag is missing or did load
        """
        image = self._find_image(locator)

        if self.check_image_loaded(image):
            raise ExpectationException(
                f"Expected img '{locator}' to not load. Instead it did load!",
                self.session,
            )
