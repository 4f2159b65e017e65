"""
a tiny test registry and runner.

test modules register cases with @suite.test("description") and finish with
suite.run(title) when executed as scripts. the registered functions are plain
test_* functions, so pytest collects the same modules unchanged.
"""
import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """ansi color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """an assertion failure, as opposed to an unexpected exception inside a case."""
    pass


def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and return the error it raised; fail if it raised nothing or something else."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report, returns True when everything passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for case in _suite_state['tests']:
        passed, error = False, None
        case_start = time.perf_counter()
        try:
            case['func']()
            passed = True
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
        elapsed = (time.perf_counter() - case_start) * 1000

        _suite_state['results'].append({'passed': passed, 'description': case['description'], 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {case['description']} {_c.grey}({elapsed:.2f}ms){_c.reset}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {case['description']}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    all_passed = _print_summary(start_time)

    # cleared so several modules can run one after another in one process
    _suite_state['tests'] = []
    return all_passed


def main(title: str) -> None:
    """run the registered cases and exit non-zero on failure."""
    sys.exit(0 if run(title) else 1)


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
