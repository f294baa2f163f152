# modules/goals/commands.py
"""
Goal commands for the Flask CLI

    flask goal add meal daily 2000
    flask goal list --period weekly
    flask goal progress 1500
    flask goal remove 2
    flask goal export
    flask goal types
"""

import click

from models import GOAL_TYPES, PeriodType
from . import goals_bp
from . import goal_service

PERIOD_CHOICES = [period_type.value for period_type in PeriodType]
TYPE_CHOICES = [record_type.value for record_type in GOAL_TYPES]


@goals_bp.cli.command('add')
@click.argument('goal_type', type=click.Choice(TYPE_CHOICES, case_sensitive=False))
@click.argument('period', type=click.Choice(PERIOD_CHOICES, case_sensitive=False))
@click.argument('target')
def add_command(goal_type, period, target):
    """Set a new TARGET for GOAL_TYPE over PERIOD."""
    try:
        message = goal_service.add_goal(goal_type, period, target)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='TARGET')
    click.echo(message)


@goals_bp.cli.command('list')
@click.option('--period', type=click.Choice(PERIOD_CHOICES, case_sensitive=False),
              default=None, help='Only show goals of this period.')
def list_command(period):
    """Show goals and their progress."""
    text, _ = goal_service.list_goals(period)
    click.echo(text, nl=False)


@goals_bp.cli.command('remove')
@click.argument('number', type=int)
def remove_command(number):
    """Remove goal NUMBER.

    NUMBER comes from the unfiltered `flask goal list`; numbers shown by
    `list --period` restart at 1 and do not apply here.
    """
    try:
        message = goal_service.remove_goal(number)
    except IndexError as e:
        raise click.ClickException(str(e))
    click.echo(message)


@goals_bp.cli.command('progress')
@click.argument('value')
def progress_command(value):
    """Set today's progress VALUE on every daily goal."""
    try:
        message = goal_service.update_daily_progress(value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='VALUE')
    click.echo(message)


@goals_bp.cli.command('export')
def export_command():
    """Print the goals file contents."""
    click.echo(goal_service.export_goals(), nl=False)


@goals_bp.cli.command('types')
def types_command():
    """List the metrics a goal can track."""
    for record_type, goal_class in GOAL_TYPES.items():
        click.echo(f"{record_type.value}\t\t{goal_class.DESCRIPTION} ({goal_class.UNIT})")
