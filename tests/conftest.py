"""Shared pytest fixtures for theme-ai tests."""

import json
import subprocess

import pytest
import structlog


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True, scope="session")
def _route_structlog_to_stdlib():
    """Send structlog events through stdlib logging so caplog sees them and stdout stays clean."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_manifest(tmp_path):
    """Write a package.json into tmp_path and return its path."""

    def _write(data=None, **overrides):
        doc = {"name": "my-theme", "version": "1.0.0"} if data is None else dict(data)
        doc.update(overrides)
        path = tmp_path / "package.json"
        path.write_text(json.dumps(doc, indent=2))
        return path

    return _write


@pytest.fixture
def npm_result():
    """Factory for a CompletedProcess shaped like ``npm outdated --json`` output."""

    def _result(stdout="", returncode=0, stderr=""):
        return subprocess.CompletedProcess(
            args=["npm", "outdated", "--json"],
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )

    return _result
