"""
Named test steps.

A step is a loggable sub-unit of a test case. Each step is also an Allure
step, so the report nests them under the test. Steps nest, and the log line
carries the nesting depth so the log reads like an outline.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

import allure

logger = logging.getLogger(__name__)

_depth: ContextVar[int] = ContextVar("step_depth", default=0)


@contextmanager
def step(title: str) -> Iterator[None]:
    """
    Run the enclosed block as a named step.

    Exceptions raised inside the block are logged and re-raised unchanged.

    Args:
        title: Human-readable step name.

    Example:
        with step("Fill Category Form"):
            form.fill(name, slug)
    """
    depth = _depth.get()
    indent = "  " * depth
    logger.info("%sStep started: %s", indent, title)
    started = time.perf_counter()
    token = _depth.set(depth + 1)
    try:
        with allure.step(title):
            yield
    except Exception as exc:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.error(
            "%sStep failed: %s (%.0f ms) - %s: %s",
            indent, title, elapsed_ms, type(exc).__name__, exc,
        )
        raise
    else:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%sStep passed: %s (%.0f ms)", indent, title, elapsed_ms)
    finally:
        _depth.reset(token)
