"""
Invoke tasks for testing, running and cleaning up Bag of Holding.
"""

import shutil
import sys
from pathlib import Path
from invoke import task, Context

# Configuration
PROJECT_NAME = "bag-of-holding"
PACKAGE_NAME = "bag_of_holding"
DEFAULT_PORT = 5000
PROJECT_ROOT = Path(__file__).parent.resolve()

CLEAN_PATTERNS = ["**/__pycache__", "**/*.pyc", ".pytest_cache", "htmlcov", ".coverage", "*.egg-info", "build", "dist"]


def print_header(message: str) -> None:
    """Print a formatted header message."""
    print("\n" + "=" * 60)
    print(f"  {message}")
    print("=" * 60 + "\n")


@task
def test(c: Context, verbose: bool = False, coverage: bool = False, keyword: str = None) -> None:
    """
    Run the test suite.

    Args:
        c: Invoke context
        verbose: Verbose test output
        coverage: Generate coverage report
        keyword: Only run tests matching this expression
    """
    print_header("Running Tests")

    pytest_cmd = f"{sys.executable} -m pytest"
    if verbose:
        pytest_cmd += " -v"
    if coverage:
        pytest_cmd += f" --cov={PACKAGE_NAME} --cov-report=term-missing --cov-report=html"
    if keyword:
        pytest_cmd += f" -k '{keyword}'"

    print(f"Running: {pytest_cmd}")
    with c.cd(str(PROJECT_ROOT)):
        result = c.run(pytest_cmd, pty=True, warn=True)
    if result.exited != 0:
        sys.exit(result.exited)
    print("\n✅ All tests passed!")


@task
def run(c: Context, host: str = "127.0.0.1", port: int = DEFAULT_PORT, log_level: str = "INFO") -> None:
    """
    Serve the API locally.

    Args:
        c: Invoke context
        host: Interface to bind
        port: Port to listen on
        log_level: Logging level
    """
    print_header(f"Starting {PROJECT_NAME}")
    print(f"🌐 Serving on http://{host}:{port}")
    with c.cd(str(PROJECT_ROOT)):
        c.run(f"{sys.executable} main.py --host {host} --port {port} --log-level {log_level}", pty=True)


@task
def clean(c: Context) -> None:
    """
    Remove caches and build artifacts.

    Args:
        c: Invoke context
    """
    print_header("Cleaning Build Artifacts")

    for pattern in CLEAN_PATTERNS:
        for path in PROJECT_ROOT.glob(pattern):
            if path.is_dir():
                shutil.rmtree(path, ignore_errors=True)
            else:
                path.unlink(missing_ok=True)
            print(f"  removed {path.relative_to(PROJECT_ROOT)}")

    print("\n✅ Clean complete!")
