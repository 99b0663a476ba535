import sys
import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """distinguishes assertion failures from unexpected exceptions."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """
    register a function as a test case. the function keeps its name, so files
    named *_test.py are also collected by pytest.
    """

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "") -> None:
    """assert_that with the compared values spelled out on failure"""
    if actual != expected:
        prefix = f"{message}: " if message else ""
        raise TestAssertionError(f"{prefix}expected {expected!r}, got {actual!r}")


@contextmanager
def assert_raises(error_type: Type[BaseException], message: str = "") -> Iterator[Dict[str, Any]]:
    """
    assert that the block raises error_type. the yielded dict receives the
    caught exception under 'error' for further checks.
    """
    caught: Dict[str, Any] = {'error': None}
    try:
        yield caught
    except error_type as e:
        caught['error'] = e
        return
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run", name_filter: Optional[str] = None) -> int:
    """executes registered tests, prints a report and returns the number of failures."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []
    tests_to_run = [t for t in _suite_state['tests']
                    if name_filter is None or name_filter in t['func'].__name__]

    for test_item in tests_to_run:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    failed_count = _print_summary(start_time)

    # clear tests so several suites can run in one process
    _suite_state['tests'] = []
    return failed_count


def main(title: str) -> None:
    """run the registered tests as a script: an optional argv[1] filters by function name"""
    name_filter = sys.argv[1] if len(sys.argv) > 1 else None
    sys.exit(1 if run(title, name_filter) else 0)


def _print_summary(start_time: float) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count
