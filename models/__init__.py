# models/__init__.py
"""
Models initialization file
Imports all models for easy access throughout the application
"""
from .health import RecordType
from .goals import (
    SEPARATOR,
    PeriodType,
    period_type_key,
    Goal,
    MetricGoal,
    CaloriesConsumedGoal,
    CaloriesBurntGoal,
    StepsGoal,
    WaterGoal,
    SleepGoal,
    GOAL_TYPES,
    create_goal
)
from .goal_list import GoalList


__all__ = [
    # Health records
    'RecordType',
    # Goals
    'SEPARATOR',
    'PeriodType',
    'period_type_key',
    'Goal',
    'MetricGoal',
    'CaloriesConsumedGoal',
    'CaloriesBurntGoal',
    'StepsGoal',
    'WaterGoal',
    'SleepGoal',
    'GOAL_TYPES',
    'create_goal',
    'GoalList'
]
