# messages.py
"""
User-facing message catalog
"""

# Goal listings
MESSAGE_NO_GOAL = "You have not set any goals yet.\n"
MESSAGE_NO_ELIGIBLE_GOAL = "There are no goals for this period.\n"
MESSAGE_CHECK_HEADER = (
    "Here are your goals:\n"
    "No.\t\tPeriod\t\tGoal\t\tProgress\t\tStatus\t\tDate Set\n"
)

# Goal commands
MESSAGE_GOAL_ADDED = "Goal added: {summary}"
MESSAGE_GOAL_REMOVED = "Goal removed: {summary}"
MESSAGE_NO_SUCH_GOAL = "There is no goal number {number}."
MESSAGE_PROGRESS_UPDATED = "Daily progress set to {value} for all daily goals."
