"""Pytest configuration and fixtures."""

import logging
from typing import Generator

import pytest

from todo_tui.domain.entities import TaskItem
from todo_tui.tui.state import AppState


@pytest.fixture(scope="function", autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear todo-tui environment variables and logging handlers around each test."""
    monkeypatch.delenv("TODO_TUI_DEBUG", raising=False)
    monkeypatch.delenv("TODO_TUI_LOG_FILE", raising=False)

    package_logger = logging.getLogger("todo_tui")
    old_handlers = list(package_logger.handlers)
    old_level = package_logger.level
    old_propagate = package_logger.propagate

    yield

    for handler in list(package_logger.handlers):
        if handler not in old_handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(old_level)
    package_logger.propagate = old_propagate


@pytest.fixture
def empty_state() -> AppState:
    """A fresh state with no tasks."""
    return AppState()


@pytest.fixture
def sample_items() -> list[TaskItem]:
    """Three tasks, the second one already done."""
    return [
        TaskItem(done=False, description="buy milk"),
        TaskItem(done=True, description="water plants"),
        TaskItem(done=False, description="call mom"),
    ]


@pytest.fixture
def populated_state(sample_items: list[TaskItem]) -> AppState:
    """A state holding the sample tasks with nothing selected."""
    return AppState(items=sample_items)
