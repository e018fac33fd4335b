"""
Step contexts, combinable by inheritance.

    from browser_contexts.contexts import AlertContext, JavaScriptContext

    class SuiteContext(AlertContext, JavaScriptContext):
        pass

``FlexibleContext`` combines every context in this package.
"""

from browser_contexts.contexts.alert import AlertContext
from browser_contexts.contexts.base import BrowserContext
from browser_contexts.contexts.javascript import JavaScriptContext
from browser_contexts.contexts.page import PageContext
from browser_contexts.type_caster import TypeCaster


class FlexibleContext(AlertContext, JavaScriptContext, PageContext, TypeCaster):
    """All step contexts sharing one session and one store."""


__all__ = [
    "AlertContext",
    "BrowserContext",
    "FlexibleContext",
    "JavaScriptContext",
    "PageContext",
]
