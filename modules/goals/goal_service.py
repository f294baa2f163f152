# modules/goals/goal_service.py
"""
Goal Service Layer
Shared by the HTTP routes and the `flask goal` commands

Every call loads the goals file, performs one operation and writes the file
back when the goals changed.
"""

from flask import current_app

from models import PeriodType, RecordType, create_goal
from models.formatting import format_amount, format_date, parse_amount
from messages import (
    MESSAGE_GOAL_ADDED,
    MESSAGE_GOAL_REMOVED,
    MESSAGE_NO_SUCH_GOAL,
    MESSAGE_PROGRESS_UPDATED,
)
from .storage import get_storage


def parse_period(text):
    """None for a missing filter, otherwise a PeriodType"""
    if text is None or not str(text).strip():
        return None
    return PeriodType.parse(text)


def build_goal(type_text, period_text, target_text):
    """
    Create a goal from raw user input

    Raises:
        ValueError: On unknown type/period or an invalid target
    """
    record_type = RecordType.parse(type_text)
    period_type = PeriodType.parse(period_text)
    target = parse_amount(target_text, field='target')
    return create_goal(record_type, period_type, target)


def goal_to_dict(goal):
    return {
        'type': goal.type.value,
        'period': goal.period_type.value,
        'target': goal.target,
        'progress': goal.progress,
        'unit': goal.progress_unit,
        'achieved': goal.is_achieved(),
        'day_set': format_date(goal.day_set),
        'summary': goal.goal_summary(),
    }


def list_goals(period_text=None):
    """
    Returns:
        tuple: (listing text, list of goal dicts matching the filter)
    """
    period_type = parse_period(period_text)
    goal_list = get_storage().load()
    goals = [
        goal_to_dict(goal)
        for goal in goal_list
        if period_type is None or goal.period_type == period_type
    ]
    return goal_list.get_goals_to_print(period_type), goals


def add_goal(type_text, period_text, target_text):
    """Returns the confirmation message for the new goal"""
    goal = build_goal(type_text, period_text, target_text)
    storage = get_storage()
    goal_list = storage.load()
    goal_list.add_goal(goal)
    storage.save(goal_list)
    current_app.logger.info(f"Goal added: {goal.goal_data_to_store()}")
    return MESSAGE_GOAL_ADDED.format(summary=goal.goal_summary())


def remove_goal(number):
    """
    Remove a goal by its 1-based number in the full listing

    Raises:
        IndexError: If no goal has that number (message is user-facing)
    """
    storage = get_storage()
    goal_list = storage.load()
    try:
        summary = goal_list.remove_goal(number - 1)
    except IndexError:
        current_app.logger.warning(f"Remove requested for missing goal {number}")
        raise IndexError(MESSAGE_NO_SUCH_GOAL.format(number=number))
    storage.save(goal_list)
    current_app.logger.info(f"Goal removed: {summary}")
    return MESSAGE_GOAL_REMOVED.format(summary=summary)


def update_daily_progress(value_text):
    """Overwrite the progress of every daily goal"""
    value = parse_amount(value_text, field='progress')
    storage = get_storage()
    goal_list = storage.load()
    goal_list.update_daily_progress(value)
    storage.save(goal_list)
    current_app.logger.info(f"Daily progress set to {value}")
    return MESSAGE_PROGRESS_UPDATED.format(value=format_amount(value))


def export_goals():
    """Goals file text for the current goals"""
    return get_storage().load().get_goal_to_store()
