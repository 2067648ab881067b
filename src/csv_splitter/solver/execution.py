"""Execution policy and executor selection utilities."""

import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable to override executor selection.
CSV_SPLIT_EXECUTOR_ENV = "CSV_SPLIT_EXECUTOR"


def get_executor_class() -> ExecutorClass:
    """
    Select the appropriate executor class.

    Priority:
    1. CSV_SPLIT_EXECUTOR env var override ("threads", "processes", or "serial")
    2. Threads otherwise, since range copies are I/O bound

    "serial" mode copies in the main thread - useful for debugging with breakpoints.
    """
    executor_override = os.environ.get(CSV_SPLIT_EXECUTOR_ENV, "").lower()

    if executor_override == "processes":
        return ProcessPoolExecutor
    if executor_override == "serial":
        return None
    return ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    if executor_class is ThreadPoolExecutor:
        return "threads"
    return "processes"
