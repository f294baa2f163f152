"""Pytest configuration for goal tracker tests."""

import pytest

from app import create_app
from config import TestingConfig
from models import GoalList, PeriodType, create_goal, RecordType


@pytest.fixture
def goals_file(tmp_path):
    return tmp_path / "data" / "goals.txt"


@pytest.fixture
def app(goals_file):
    class _Config(TestingConfig):
        GOALS_FILE = str(goals_file)

    app = create_app(_Config)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def make_goal():
    def _make(record_type=RecordType.MEAL, period_type=PeriodType.DAILY,
              target=2000, day_set=None):
        return create_goal(record_type, period_type, target, day_set)
    return _make


@pytest.fixture
def goal_list(make_goal):
    goals = GoalList()
    goals.add_goal(make_goal(RecordType.STEPS, PeriodType.WEEKLY, 70000))
    goals.add_goal(make_goal(RecordType.MEAL, PeriodType.DAILY, 2000))
    goals.add_goal(make_goal(RecordType.WATER, PeriodType.DAILY, 2500))
    return goals
