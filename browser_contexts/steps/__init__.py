"""
Step vocabulary for behave

Import this package from a module in ``features/steps/`` to register every
step:

    from browser_contexts.steps import *  # noqa: F401,F403
"""

from browser_contexts.type_caster import register_step_types

# Placeholder types must exist before the step modules are imported
register_step_types()

from browser_contexts.steps import (  # noqa: E402
    alert_steps,
    javascript_steps,
    page_steps,
    store_steps,
)

__all__ = ["alert_steps", "javascript_steps", "page_steps", "store_steps"]
