"""
Stress tests for sharing containers between threads.

Note this isn't a unit test: it's meant to be run on a free-threaded build,
where any hidden shared state would show up as crashes or wrong results.
"""

import sys
import time
from threading import Thread

from justmaybe import Just, Maybe, Nothing, fmap

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    # Running with GIL enabled can still be useful to compare performance,
    # but be sure to warn that threading hasn't been stress tested.
    print("WARNING: Running with GIL enabled. Threading not stress tested.")


NUM_THREADS = 16
NUM_ITERATIONS = 500
SHARED = [Just(n) for n in range(97)] + [Nothing(), Just([1, None])]
assert len(SHARED) % NUM_THREADS, "Sample shouldn't divide evenly"
SAMPLE = SHARED * (NUM_THREADS * NUM_ITERATIONS)

_increment = fmap(lambda v: v + 1 if isinstance(v, int) else v)


def combine(ms):
    """Run the combinators on shared instances"""
    for m in ms:
        result = _increment(m).bind(Just).match(lambda: None, lambda v: v)
        if isinstance(m.value, int):
            assert result == m.value + 1
        else:
            assert result == m.value


def roundtrip_json(ms):
    """Encode and decode shared instances"""
    for m in ms:
        assert Maybe.parse_json(m.format_json()) == m


def main(func):
    print(f"Starting test: {func.__name__}")
    threads = []

    start_time = time.time()

    for n in range(NUM_THREADS):
        thread = Thread(target=func, args=(SAMPLE[n::NUM_THREADS],))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    end_time = time.time()
    print(f"Execution time: {end_time - start_time:.2f} seconds")

    # nothing may have been mutated along the way
    assert SHARED[:2] == [Just(0), Just(1)]
    assert SHARED[-1] == Just([1, None])


if __name__ == "__main__":
    main(combine)
    main(roundtrip_json)
