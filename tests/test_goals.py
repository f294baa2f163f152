from datetime import date

import pytest

from models import (
    GOAL_TYPES,
    CaloriesBurntGoal,
    CaloriesConsumedGoal,
    Goal,
    PeriodType,
    RecordType,
    SleepGoal,
    StepsGoal,
    WaterGoal,
    create_goal,
)


SET_ON = date(2026, 10, 18)


def test_goal_defaults_to_today():
    goal = CaloriesConsumedGoal(PeriodType.DAILY, 2000)
    assert goal.day_set == date.today()
    assert goal.progress == 0
    assert goal.target == 2000.0
    assert goal.type is RecordType.MEAL
    assert goal.period_type is PeriodType.DAILY


def test_goal_base_is_abstract():
    with pytest.raises(TypeError):
        Goal(RecordType.MEAL, PeriodType.DAILY, 10)


def test_target_is_read_only():
    goal = WaterGoal(PeriodType.DAILY, 2500)
    with pytest.raises(AttributeError):
        goal.target = 10


@pytest.mark.parametrize("progress, achieved", [
    (0, False),
    (1999.9, False),
    (2000, True),
    (2500, True),
])
def test_is_achieved_inclusive_boundary(progress, achieved):
    goal = CaloriesConsumedGoal(PeriodType.DAILY, 2000)
    goal.set_progress(progress)
    assert goal.is_achieved() is achieved
    assert goal.achieved_status() == ("(achieved)" if achieved else "(not achieved)")


def test_initialize_progress_resets_to_zero():
    goal = StepsGoal(PeriodType.WEEKLY, 70000)
    goal.set_progress(12000)
    goal.initialize_progress()
    assert goal.progress == 0
    assert not goal.is_achieved()


def test_zero_target_is_achieved_immediately():
    assert SleepGoal(PeriodType.DAILY, 0).is_achieved()


def test_progress_units():
    assert CaloriesConsumedGoal(PeriodType.DAILY, 1).progress_unit == "kcal"
    assert CaloriesBurntGoal(PeriodType.DAILY, 1).progress_unit == "kcal"
    assert StepsGoal(PeriodType.DAILY, 1).progress_unit == "steps"
    assert WaterGoal(PeriodType.DAILY, 1).progress_unit == "ml"
    assert SleepGoal(PeriodType.DAILY, 1).progress_unit == "hours"


def test_goal_summary():
    goal = CaloriesConsumedGoal(PeriodType.DAILY, 2000, SET_ON)
    assert goal.goal_summary() == (
        "Daily calories consumed goal of 2000 kcal (set on 18-10-2026)"
    )


def test_goal_data_row():
    goal = WaterGoal(PeriodType.WEEKLY, 14000, SET_ON)
    goal.set_progress(3250.5)
    assert goal.goal_data() == (
        "Weekly\t\twater intake\t\t3250.5/14000 ml\t\t(not achieved)\t\t18-10-2026"
    )


def test_steps_and_sleep_display_precision():
    steps = StepsGoal(PeriodType.DAILY, 10000, SET_ON)
    steps.set_progress(10000.4)
    assert "10000/10000 steps" in steps.goal_data()
    assert "(achieved)" in steps.goal_data()

    sleep = SleepGoal(PeriodType.DAILY, 8, SET_ON)
    sleep.set_progress(7.26)
    assert "7.3/8 hours" in sleep.goal_data()


def test_goal_data_to_store():
    goal = CaloriesBurntGoal(PeriodType.WEEKLY, 3500, SET_ON)
    goal.set_progress(420.5)
    assert goal.goal_data_to_store() == "exercise | weekly | 3500.0 | 420.5 | 18-10-2026"


def test_create_goal_picks_variant():
    for record_type, goal_class in GOAL_TYPES.items():
        goal = create_goal(record_type, PeriodType.DAILY, 1)
        assert isinstance(goal, goal_class)
        assert goal.type is record_type


def test_create_goal_rejects_weight():
    with pytest.raises(ValueError):
        create_goal(RecordType.WEIGHT, PeriodType.DAILY, 70)


def test_enum_parsing():
    assert PeriodType.parse(" Weekly ") is PeriodType.WEEKLY
    assert RecordType.parse("MEAL") is RecordType.MEAL
    with pytest.raises(ValueError):
        PeriodType.parse("monthly")
    with pytest.raises(ValueError):
        RecordType.parse("")
