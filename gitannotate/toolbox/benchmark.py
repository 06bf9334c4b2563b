# -----------------------------------------------------------------------------
# Copyright (C) 2026 Iliyas Jorio.
# This file is part of GitAnnotate, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

import functools
import logging
import time

BENCHMARK_LOGGING_LEVEL = 5

logger = logging.getLogger(__name__)
logging.addLevelName(BENCHMARK_LOGGING_LEVEL, "BENCHMARK")


class Benchmark:
    """
    Context manager that logs how long a piece of code takes to run.
    Nested benchmarks are reported with their full path, e.g. "open/git blame".
    The duration stays available in `elapsedMs` after the block exits.
    """

    stack: list[str] = []

    def __init__(self, name: str):
        self.name = name
        self.startTime = 0.0
        self.elapsedMs = 0.0

    def __enter__(self):
        Benchmark.stack.append(self.name)
        self.startTime = time.perf_counter()
        return self

    def __exit__(self, exc_type=None, exc_value=None, traceback=None):
        self.elapsedMs = 1000 * (time.perf_counter() - self.startTime)

        path = "/".join(Benchmark.stack)
        Benchmark.stack.pop()

        suffix = f" (raised {exc_type.__name__})" if exc_type else ""
        logger.log(BENCHMARK_LOGGING_LEVEL, f"{self.elapsedMs:8.1f} ms {path}{suffix}")


def benchmark(func):
    """ Function decorator that logs how long the function takes to run. """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with Benchmark(func.__qualname__):
            return func(*args, **kwargs)
    return wrapper
