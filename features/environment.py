"""
Behave environment configuration

Runs the browser_contexts hooks around the integration features. Select the
browser with userdata, e.g. ``behave -D browser=firefox -D headless=false``.
"""

import os
import sys

# Add project root to Python path so the features run from a source checkout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from browser_contexts import hooks  # noqa: E402


def before_all(context):
    """Run before all tests"""
    hooks.before_all(context)


def before_scenario(context, scenario):
    """Run before each scenario"""
    hooks.before_scenario(context, scenario)


def after_scenario(context, scenario):
    """Run after each scenario"""
    hooks.after_scenario(context, scenario)


def after_all(context):
    """Run after all tests"""
    hooks.after_all(context)
