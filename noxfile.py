"""Nox sessions orchestrating weather dapp unit suites."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import nox


PYTHON_VERSIONS = ["3.11"]
PROJECT_ROOT = Path(__file__).parent

nox.options.sessions = [
    "tests_unit_robonomics",
    "tests_unit_messaging",
]


def _install_test_requirements(session: nox.Session) -> None:
    """Install the project and the testing toolchain inside the session environment."""

    session.install("-e", ".[test]")


def _run_suite(session: nox.Session, suite: str, targets: Iterable[str]) -> None:
    _install_test_requirements(session)

    args = [
        "coverage",
        "run",
        f"--context={suite}",
        "--source=adapters,config,domains,server",
        "-m",
        "pytest",
        *targets,
        *session.posargs,
    ]
    session.log("Running %s suite", suite)
    session.run(*args, env={"PYTHONPATH": str(PROJECT_ROOT)})
    session.run("coverage", "report", "-m")


@nox.session(python=PYTHON_VERSIONS, reuse_venv=True, name="tests(unit_robonomics)")
def tests_unit_robonomics(session: nox.Session) -> None:
    """Execute config, initializer and client suites."""

    targets = [
        "tests/unit/test_config_constants.py",
        "tests/unit/test_dapp_config.py",
        "tests/unit/test_robonomics_service.py",
        "tests/unit/test_robonomics_client.py",
        "tests/unit/test_bootstrap.py",
        "tests/unit/test_web3_provider.py",
    ]
    _run_suite(session, "robonomics", targets)


@nox.session(python=PYTHON_VERSIONS, reuse_venv=True, name="tests(unit_messaging)")
def tests_unit_messaging(session: nox.Session) -> None:
    """Execute message codec and IPFS transport suites."""

    targets = ["tests/unit/test_messages.py", "tests/unit/test_ipfs_provider.py"]
    _run_suite(session, "messaging", targets)
