"""pytest wiring for the end-to-end game suite."""

from __future__ import annotations

from typing import Iterator

import pytest

from unity_ui_testing.suite import GameTestSuite


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo) -> Iterator[None]:
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="class")
def suite(request: pytest.FixtureRequest) -> Iterator[GameTestSuite]:
    """One-time setup and teardown, shared by the tests of one class."""
    name = request.cls.__name__ if request.cls is not None else request.module.__name__
    game_suite = GameTestSuite(name=name)
    game_suite.one_time_setup()
    yield game_suite
    game_suite.one_time_teardown()


@pytest.fixture(autouse=True)
def _per_test(request: pytest.FixtureRequest, suite: GameTestSuite) -> Iterator[None]:
    test_name = request.node.name
    suite.setup(test_name)
    yield
    report = getattr(request.node, "rep_call", None)
    failed = report is not None and report.failed
    status = report.outcome if report is not None else None
    suite.teardown(test_name, failed, status)


@pytest.fixture
def main_menu(suite: GameTestSuite):
    return suite.main_menu


@pytest.fixture
def gameplay(suite: GameTestSuite):
    return suite.gameplay
