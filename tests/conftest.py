import logging
import os
import tempfile
from collections.abc import Iterable
from datetime import UTC
from datetime import datetime
from pathlib import Path

import pytest
from time_machine import TimeMachineFixture

# Settings are loaded at import time: provide test defaults before any project import.
os.environ.setdefault("VANGUARDMONEY_SECRET_KEY", "test-secret-key-with-at-least-32-characters!")
os.environ.setdefault("VANGUARDMONEY_PASSWORD_HASH_COST", "1")
os.environ.setdefault("VANGUARDMONEY_PASSWORD_HASH_MEMORY_COST", "1024")
os.environ.setdefault(
    "DATABASE_URI",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / f'vanguardmoney_test_{os.getpid()}.sqlite'}",
)


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: mark test as slow (not executed by default)")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    skip_slow = pytest.mark.skip(reason="need --slow option to run")

    for item in items:
        if item.get_closest_marker("slow") and not config.getoption("--slow"):
            item.add_marker(skip_slow)


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Iterable[None]:
    """Configure logging for ALL tests before anything else"""
    from vanguardmoney.infrastructure.config.loggers import configure_loggers

    # Propagate to the root logger so that caplog sees the records.
    configure_loggers(level="DEBUG", handlers=["null"], propagate=True)

    yield

    logging.shutdown()


@pytest.fixture
def frozen_time(time_machine: TimeMachineFixture) -> datetime:
    fixed_dt = datetime(2026, 1, 1, tzinfo=UTC)
    time_machine.move_to(fixed_dt, tick=False)
    return fixed_dt
