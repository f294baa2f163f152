# modules/goals/__init__.py
"""
Goals Module - daily and weekly health targets
"""

from flask import Blueprint

goals_bp = Blueprint(
    'goals',
    __name__,
    url_prefix='/goals',
    cli_group='goal'
)

from . import routes, commands
