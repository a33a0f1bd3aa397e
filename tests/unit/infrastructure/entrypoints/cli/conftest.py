import re
from collections.abc import AsyncGenerator
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from contextlib import AbstractContextManager
from contextlib import asynccontextmanager
from contextlib import contextmanager
from typing import Any
from typing import TypeAlias
from unittest import mock

import pytest
from typer.testing import CliRunner

from vanguardmoney.domain.ports.repositories.users import UserRepository

DatabasePatcherFactory: TypeAlias = Callable[[str], AbstractContextManager[mock.Mock]]
DependencyPatcherFactory: TypeAlias = Callable[..., AbstractContextManager[mock.Mock]]

TextCleaner: TypeAlias = Callable[[str], str]


@pytest.fixture(autouse=True)
def force_rich_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Force Rich/Typer to use a standard terminal width and no colors
    ONLY for CLI unit tests to ensure consistent output assertions.
    """
    monkeypatch.setenv("COLUMNS", "100")
    monkeypatch.setenv("TERM", "dumb")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("CI", "true")


@pytest.fixture
def block_cli_configure_loggers() -> Iterable[mock.Mock]:
    """Prevent the CLI 'main' callback from re-configuring logging during tests."""
    with mock.patch("vanguardmoney.infrastructure.entrypoints.cli.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def runner(block_cli_configure_loggers: mock.Mock) -> CliRunner:
    return CliRunner()


@pytest.fixture
def target_path(request: pytest.FixtureRequest) -> str:
    if request.cls and hasattr(request.cls, "TARGET_PATH"):
        return request.cls.TARGET_PATH

    if hasattr(request.module, "TARGET_PATH"):
        return request.module.TARGET_PATH

    raise ValueError("Test class or module must define 'TARGET_PATH' to use auto-patching fixtures.")


# --- Patcher Factories ---


@pytest.fixture
def mock_get_db_factory() -> DatabasePatcherFactory:
    @contextmanager
    def _patcher(target_path: str) -> Iterator[mock.Mock]:
        session_mock = mock.Mock(name="db_session")

        @asynccontextmanager
        async def get_db() -> AsyncGenerator[mock.Mock]:
            yield session_mock

        with mock.patch(target_path, side_effect=get_db):
            yield session_mock

    return _patcher


@pytest.fixture
def mock_dependency_factory() -> DependencyPatcherFactory:
    @contextmanager
    def _patcher(target_path: str, return_value: Any) -> Iterator[mock.Mock]:
        with mock.patch(target_path, return_value=return_value):
            yield return_value

    return _patcher


# --- DB session Mock ---


@pytest.fixture
def mock_get_db(target_path: str, mock_get_db_factory: DatabasePatcherFactory) -> Iterable[mock.Mock]:
    with mock_get_db_factory(f"{target_path}.get_db") as mock_db:
        yield mock_db


# --- Dependency Mocks ---


@pytest.fixture
def mock_user_repository(
    target_path: str,
    mock_dependency_factory: DependencyPatcherFactory,
) -> Iterable[mock.AsyncMock]:
    repo = mock.AsyncMock(spec=UserRepository)
    with mock_dependency_factory(f"{target_path}.get_user_repository", repo) as mock_repo:
        yield mock_repo


@pytest.fixture
def mock_cli_password_hasher(
    target_path: str,
    mock_dependency_factory: DependencyPatcherFactory,
    password_hasher: Any,
) -> Iterable[Any]:
    with mock_dependency_factory(f"{target_path}.get_password_hasher", password_hasher) as hasher:
        yield hasher


# --- Helpers ---


@pytest.fixture
def clean_typer_text() -> TextCleaner:
    """
    There is no easy way to disable all the rich text generated by Rich/Typer,
    even with NO_COLOR or TERM=dumb: errors are still drawn in a box.

    Then, the most pragmatic solution is to clean up the output without coupling
    our tests to specific terminal emulation settings.
    """

    def _cleaner(text: str) -> str:
        clean_text = re.sub(r"[│╭╰─╮╯]", "", text)
        return " ".join(clean_text.split())

    return _cleaner
