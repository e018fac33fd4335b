"""
browser_contexts - reusable behave step libraries for browser tests.

This library provides:
- Step contexts for alerts, JavaScript variables and pages, driving a selenium session
- A key/value store whose values can be injected into later steps
- Type casting of step arguments into int, float, bool and string

Import patterns:

    # Register every step (in features/steps/)
    from browser_contexts.steps import *

    # Wire up the session (in features/environment.py)
    from browser_contexts import hooks

    # Combine contexts in your own class
    from browser_contexts.contexts import AlertContext, JavaScriptContext
"""

__version__ = "0.1.0"

from browser_contexts.exceptions import (  # noqa: E402
    ExpectationException,
    StoreLookupError,
    UnsupportedDriverActionException,
)
from browser_contexts.session import Session  # noqa: E402
from browser_contexts.store import StoreContext  # noqa: E402
from browser_contexts.type_caster import TypeCaster  # noqa: E402

__all__ = [
    "ExpectationException",
    "Session",
    "StoreContext",
    "StoreLookupError",
    "TypeCaster",
    "UnsupportedDriverActionException",
]
