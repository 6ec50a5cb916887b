import os
import sys
import time

_DEBUG_ENABLED = bool(os.getenv("SITREP_DEBUG"))


def debug(*args, **kwargs):
    if _DEBUG_ENABLED:
        prefix = "\033[1m[DEBUG]\033[0m"
        print(prefix, *args, file=sys.stderr, **kwargs)


def info(*args, **kwargs):
    prefix = "\033[1;34m[INFO]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


def warn(*args, **kwargs):
    prefix = "\033[1;33m[WARNING]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


def error(*args, **kwargs):
    prefix = "\033[1;31m[ERROR]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)
