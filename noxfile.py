# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""CanonRepr project automation via Nox.

Sessions:
  - `lint`: Ruff lint checks.
  - `lint_fixall`: Ruff lint autofix.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Notes:
  - The default venv backend is `uv` when available, `virtualenv` otherwise.
  - Supported Python versions are read from the `pyproject.toml` classifiers.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s property_test`
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

# Handle TOML parsing based on Python version or available libraries

if sys.version_info >= (3, 11):
    # tomllib is available since Python version 3.11
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import tomlkit

    def _toml_loads(text: str) -> dict[str, Any]:
        return tomlkit.parse(text).unwrap()


CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

# --- Dynamic Python Version Resolution ---


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` at noxfile import time.

    Returns:
        dict[str, Any]: Parsed TOML document (top-level table), or an empty
        dict when the file is missing or malformed.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}

    try:
        return _toml_loads(path.read_text(encoding="utf-8"))
    except Exception:
        return {}


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project_any = _parse_pyproject_toml().get("project")
    if not isinstance(project_any, dict):
        warnings.warn(
            "Could not find 'project' table in pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    project: dict[str, Any] = cast("dict[str, Any]", project_any)
    classifiers: list[str] = cast("list[str]", project.get("classifiers") or [])

    prefix = "Programming Language :: Python :: "
    versions: list[str] = []
    for c in classifiers:
        if not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        # Accept only X.Y numeric versions.
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            continue
        versions.append(f"{int(parts[0])}.{int(parts[1])}")

    def _key(s: str) -> tuple[int, int]:
        major_s, minor_s = s.split(".")
        return int(major_s), int(minor_s)

    out: list[str] = sorted(set(versions), key=_key)
    if out:
        return out

    warnings.warn(
        "No Python versions found in classifiers. "
        f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
        RuntimeWarning,
        stacklevel=2,
    )
    return [CURRENT_PYTHON_VERSION]


# Resolve versions once at startup
PYTHONS: list[str] = get_supported_pythons()

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv|virtualenv"

DEV_INSTALL: tuple[str, ...] = ("-e", ".[test,dev]")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))

    session.install(*DEV_INSTALL)

    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install(*DEV_INSTALL)

    session.run("ruff", "check", ".")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Run ruff with --fix (auto-fix lint issues)."""
    session.install(*DEV_INSTALL)

    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check code formatting."""
    session.install(*DEV_INSTALL)

    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Format code (auto-fix)."""
    session.install(*DEV_INSTALL)

    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install(*DEV_INSTALL)

    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install(*DEV_INSTALL)

    # Ensure a clean dist/ to avoid stale artifacts influencing checks.
    session.run(
        "python",
        "-c",
        "import shutil; shutil.rmtree('dist', ignore_errors=True)",
    )

    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
