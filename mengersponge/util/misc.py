import contextlib
import time
import sys


@contextlib.contextmanager
def status_block(title):
    print(title, end="...")
    sys.stdout.flush()
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        print(" {:0.2f} s".format(elapsed))


def clamp(v, lower, upper):
    return max(lower, min(v, upper))


def safe_div(a, b, zero_over_zero=0):
    """ Division that returns zero_over_zero for 0 / 0 and signed infinity
    for other divisions by zero. """
    if b == 0:
        if a == 0:
            return zero_over_zero
        else:
            return float("inf") if a > 0 else float("-inf")
    else:
        return a / b
