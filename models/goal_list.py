# models/goal_list.py
"""
GoalList - the active goals, kept grouped by period type

Daily goals are listed before weekly ones. Goals of the same period keep the
order they were added in.
"""

from .goals import PeriodType, period_type_key
from messages import (
    MESSAGE_CHECK_HEADER,
    MESSAGE_NO_ELIGIBLE_GOAL,
    MESSAGE_NO_GOAL,
)


class GoalList:

    def __init__(self, goals=None):
        self._goals = []
        for goal in goals or []:
            self.add_goal(goal)

    def add_goal(self, goal):
        self._goals.append(goal)
        # list.sort is stable, so insertion order survives within a period
        self._goals.sort(key=period_type_key)

    def remove_goal(self, index):
        """
        Remove the goal at a 0-based position

        Returns:
            str: Summary of the removed goal

        Raises:
            IndexError: If index is not a valid position (negative included)
        """
        if index < 0 or index >= len(self._goals):
            raise IndexError(f"Goal index out of range: {index}")
        goal = self._goals.pop(index)
        return goal.goal_summary()

    def get_goals_to_print(self, period_type=None):
        if not self._goals:
            return MESSAGE_NO_GOAL

        if period_type is not None:
            goals = [goal for goal in self._goals if goal.period_type == period_type]
            if not goals:
                return MESSAGE_NO_ELIGIBLE_GOAL
        else:
            goals = self._goals

        rows = ''.join(
            f"{number}\t\t{goal.goal_data()}\n"
            for number, goal in enumerate(goals, start=1)
        )
        return MESSAGE_CHECK_HEADER + rows

    def get_goal_to_store(self):
        return ''.join(f"{goal.goal_data_to_store()}\n" for goal in self._goals)

    def update_daily_progress(self, progress):
        """Overwrite the progress of every daily goal; weekly goals are untouched"""
        for goal in self._goals:
            if goal.period_type == PeriodType.DAILY:
                goal.set_progress(progress)

    def is_empty(self):
        return not self._goals

    def __len__(self):
        return len(self._goals)

    def __iter__(self):
        return iter(list(self._goals))

    def __getitem__(self, index):
        return self._goals[index]
