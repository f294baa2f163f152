# modules/goals/storage.py
"""
Goal Storage - Goals Text File Reader/Writer
============================================

Loads the active goals from the goals text file and writes them back after
every change. One goal per line, in the format produced by
Goal.goal_data_to_store():

    <type> | <period> | <target> | <progress> | <dd-MM-yyyy>

SAFETY FEATURES:
----------------
1. Timestamped backup of the previous file before every write
2. Backup rotation (keeps the last GOALS_MAX_BACKUPS copies)
3. New contents go to <file>.tmp first, then replace the goals file
4. A malformed line is logged and skipped, the other goals still load

USAGE EXAMPLE:
--------------
storage = GoalStorage('instance/goals.txt')
goal_list = storage.load()
goal_list.update_daily_progress(1200)
storage.save(goal_list)
"""

import logging
import os
import shutil
from datetime import datetime

from flask import current_app

from models import GoalList, PeriodType, RecordType, SEPARATOR, create_goal
from models.formatting import parse_date, parse_amount

FIELD_COUNT = 5


def parse_goal_line(line):
    """
    Rebuild a goal from one line of the goals file

    Raises:
        ValueError: If the line does not hold a valid goal
    """
    fields = [field.strip() for field in line.strip().split(SEPARATOR.strip())]
    if len(fields) != FIELD_COUNT:
        raise ValueError(
            f"Expected {FIELD_COUNT} fields, found {len(fields)}: {line.strip()!r}"
        )

    type_text, period_text, target_text, progress_text, date_text = fields
    goal = create_goal(
        RecordType.parse(type_text),
        PeriodType.parse(period_text),
        parse_amount(target_text, field='target'),
        parse_date(date_text),
    )
    goal.set_progress(parse_amount(progress_text, field='progress', allow_negative=True))
    return goal


class GoalStorage:
    """Reads and writes the goals text file"""

    MAX_BACKUPS = 5

    def __init__(self, file_path, max_backups=None, logger=None):
        self.file_path = file_path
        self.max_backups = self.MAX_BACKUPS if max_backups is None else max_backups
        self.logger = logger or logging.getLogger(__name__)

    def load(self):
        """
        Load every goal from the file

        Returns:
            GoalList: Empty when the file does not exist yet
        """
        goal_list = GoalList()
        if not os.path.exists(self.file_path):
            return goal_list

        # Decoded line by line so one corrupt line cannot hide the others
        with open(self.file_path, 'rb') as f:
            for line_number, raw_line in enumerate(f, start=1):
                if not raw_line.strip():
                    continue
                try:
                    goal_list.add_goal(parse_goal_line(raw_line.decode('utf-8')))
                except ValueError as e:
                    self.logger.warning(
                        f"Skipping line {line_number} of {self.file_path}: {e}"
                    )

        return goal_list

    def save(self, goal_list):
        """
        Write the goals, backing up the previous file first

        Returns:
            str: Path of the written file
        """
        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        if os.path.exists(self.file_path) and self.max_backups > 0:
            self.create_backup()

        tmp_path = f"{self.file_path}.tmp"
        with open(tmp_path, 'w', encoding='utf-8') as f:
            f.write(goal_list.get_goal_to_store())
        os.replace(tmp_path, self.file_path)

        self.logger.info(f"Saved {len(goal_list)} goal(s) to {self.file_path}")
        return self.file_path

    def create_backup(self):
        """
        Copy the current file to <file>.backup.<timestamp>

        Returns:
            str: Path to backup file
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S_%f')
        backup_path = f"{self.file_path}.backup.{timestamp}"
        shutil.copy2(self.file_path, backup_path)
        self._cleanup_old_backups()
        return backup_path

    def list_backups(self):
        """Backup file paths, newest first"""
        directory = os.path.dirname(self.file_path) or '.'
        prefix = f"{os.path.basename(self.file_path)}.backup."
        if not os.path.isdir(directory):
            return []

        backups = [
            os.path.join(directory, name)
            for name in os.listdir(directory)
            if name.startswith(prefix)
        ]
        # Timestamp suffix sorts chronologically
        backups.sort(reverse=True)
        return backups

    def _cleanup_old_backups(self):
        for backup_path in self.list_backups()[self.max_backups:]:
            try:
                os.remove(backup_path)
            except OSError as e:
                self.logger.warning(f"Could not delete old backup {backup_path}: {e}")


def get_storage():
    """GoalStorage for the goals file of the current app"""
    return GoalStorage(
        current_app.config['GOALS_FILE'],
        max_backups=current_app.config.get('GOALS_MAX_BACKUPS'),
        logger=current_app.logger,
    )
