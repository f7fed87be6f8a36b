"""
Pytest configuration and fixtures for the log facade test suite.
"""

from typing import List, Optional, Tuple

import pytest

from logfacade.core.facade import LoggerFacade
from logfacade.core.logging import setup_logging
from logfacade.core.scheduling import ManualScheduler


class Recorder:
    """Subscriber that remembers every (message, category) it receives."""

    def __init__(self):
        self.calls: List[Tuple[str, Optional[str]]] = []

    def __call__(self, message: str, category: Optional[str] = None):
        self.calls.append((message, category))

    @property
    def messages(self) -> List[str]:
        return [message for message, _ in self.calls]


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def facade(manual_scheduler) -> LoggerFacade:
    """Facade whose notifications only run on manual_scheduler.run_pending()."""
    return LoggerFacade(scheduler=manual_scheduler)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def sample_context():
    return {"userId": 123}


@pytest.fixture(autouse=True)
def reset_internal_logging():
    """Restore the facade's internal logger after tests that reconfigure it."""
    yield
    setup_logging(log_level="INFO")


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "threads: mark test as using worker threads"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
