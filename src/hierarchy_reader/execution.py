"""Execution policy for running readers."""

import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | None

# Environment variable to override executor selection.
HR_EXECUTOR_ENV = "HR_EXECUTOR"


def is_gil_enabled() -> bool:
    """Check if GIL is enabled."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def get_executor_class() -> ExecutorClass:
    """
    Select how readers are run.

    Readers share one in-process cursor, so the only parallel option is
    threads. HR_EXECUTOR=serial runs every reader in the calling thread,
    one after another - useful for debugging with breakpoints.
    """
    executor_override = os.environ.get(HR_EXECUTOR_ENV, "").lower()

    if executor_override == "serial":
        return None
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    return "threads"
