# models/goals.py
"""
Goal entities

A goal is a numeric target for one health metric over one period (daily or
weekly). The base class owns the shared state and the achievement check; each
variant supplies its unit and the text used for listings, removal summaries
and the goals file.

STORAGE LINE:
-------------
    <type> | <period> | <target> | <progress> | <dd-MM-yyyy>

    e.g. "meal | daily | 2000.0 | 350.0 | 18-10-2026"
"""

from abc import ABC, abstractmethod
from datetime import date
from enum import Enum

from .formatting import format_amount, format_date, format_stored_number
from .health import RecordType

SEPARATOR = ' | '


class PeriodType(str, Enum):
    DAILY = 'daily'
    WEEKLY = 'weekly'

    @property
    def label(self):
        return self.value.capitalize()

    @classmethod
    def parse(cls, text):
        """Look up a period type by its stored value (case-insensitive)"""
        value = (text or '').strip().lower()
        for period_type in cls:
            if period_type.value == value:
                return period_type
        raise ValueError(f"Unknown period type: {text}")


# Listing order: daily goals first, then weekly
PERIOD_ORDER = {
    PeriodType.DAILY: 0,
    PeriodType.WEEKLY: 1,
}


def period_type_key(goal):
    """Sort key grouping goals by period type"""
    return PERIOD_ORDER[goal.period_type]


class Goal(ABC):
    """Target/progress pair for one health metric over one period"""

    def __init__(self, type, period_type, target=0.0, day_set=None):
        self._type = type
        self._period_type = period_type
        self._target = float(target)
        self._day_set = day_set or date.today()
        self.progress = 0.0

    # --- State ------------------------------------------------------------

    def set_progress(self, progress):
        self.progress = float(progress)

    def initialize_progress(self):
        self.progress = 0.0

    @property
    def target(self):
        return self._target

    @property
    def day_set(self):
        return self._day_set

    @property
    def type(self):
        return self._type

    @property
    def period_type(self):
        return self._period_type

    def is_achieved(self):
        return self.progress >= self._target

    def achieved_status(self):
        return '(achieved)' if self.is_achieved() else '(not achieved)'

    # --- Variant formatting -----------------------------------------------

    @property
    @abstractmethod
    def progress_unit(self):
        """Unit label of this goal's metric"""

    @abstractmethod
    def goal_summary(self):
        """One-line description, reported when the goal is removed"""

    @abstractmethod
    def goal_data(self):
        """Row shown in goal listings"""

    @abstractmethod
    def goal_data_to_store(self):
        """Line written to the goals file"""

    def __repr__(self):
        return (f"<{self.__class__.__name__} {self._period_type.value} "
                f"{self.progress}/{self._target}>")


class MetricGoal(Goal):
    """
    Goal on a single numeric metric

    Subclasses set RECORD_TYPE, UNIT and DESCRIPTION, and may override
    format_value() to change how amounts are shown.
    """

    RECORD_TYPE = None
    UNIT = ''
    DESCRIPTION = ''

    def __init__(self, period_type, target=0.0, day_set=None):
        super().__init__(self.RECORD_TYPE, period_type, target, day_set)

    @property
    def progress_unit(self):
        return self.UNIT

    def format_value(self, value):
        return format_amount(value)

    def goal_summary(self):
        return (f"{self.period_type.label} {self.DESCRIPTION} goal of "
                f"{self.format_value(self.target)} {self.progress_unit} "
                f"(set on {format_date(self.day_set)})")

    def goal_data(self):
        progress = (f"{self.format_value(self.progress)}/"
                    f"{self.format_value(self.target)} {self.progress_unit}")
        return '\t\t'.join([
            self.period_type.label,
            self.DESCRIPTION,
            progress,
            self.achieved_status(),
            format_date(self.day_set),
        ])

    def goal_data_to_store(self):
        return SEPARATOR.join([
            self.type.value,
            self.period_type.value,
            format_stored_number(self.target),
            format_stored_number(self.progress),
            format_date(self.day_set),
        ])


class CaloriesConsumedGoal(MetricGoal):
    RECORD_TYPE = RecordType.MEAL
    UNIT = 'kcal'
    DESCRIPTION = 'calories consumed'


class CaloriesBurntGoal(MetricGoal):
    RECORD_TYPE = RecordType.EXERCISE
    UNIT = 'kcal'
    DESCRIPTION = 'calories burnt'


class StepsGoal(MetricGoal):
    RECORD_TYPE = RecordType.STEPS
    UNIT = 'steps'
    DESCRIPTION = 'steps taken'

    def format_value(self, value):
        return str(int(round(value)))


class WaterGoal(MetricGoal):
    RECORD_TYPE = RecordType.WATER
    UNIT = 'ml'
    DESCRIPTION = 'water intake'


class SleepGoal(MetricGoal):
    RECORD_TYPE = RecordType.SLEEP
    UNIT = 'hours'
    DESCRIPTION = 'sleep'

    def format_value(self, value):
        return format_amount(value, decimals=1)


GOAL_TYPES = {
    goal_class.RECORD_TYPE: goal_class
    for goal_class in (
        CaloriesConsumedGoal,
        CaloriesBurntGoal,
        StepsGoal,
        WaterGoal,
        SleepGoal,
    )
}


def create_goal(record_type, period_type, target, day_set=None):
    """
    Build the goal variant tracking record_type

    Raises:
        ValueError: If no goal variant tracks record_type
    """
    goal_class = GOAL_TYPES.get(record_type)
    if goal_class is None:
        raise ValueError(f"No goal can be set for {record_type.value} records")
    return goal_class(period_type, target, day_set)
