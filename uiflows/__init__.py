"""
uiflows - reusable Playwright workflows for the admin panel and storefront.

The package provides page objects, table inspection, form workflows and
assertion helpers that end-to-end suites compose step by step over a single
Playwright page handle.
"""

from uiflows.config import Environment, get_config, load_environment
from uiflows.names import generate_readable_name
from uiflows.steps import step

__all__ = [
    "Environment",
    "generate_readable_name",
    "get_config",
    "load_environment",
    "step",
]

__version__ = "0.1.0"
