# logging_setup.py
"""
Logging setup for the app logger

- Rotating log file under LOG_DIR for goal changes and skipped data
- Falls back to stderr when the log folder cannot be created
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(app):
    """Attach handlers to app.logger (skipped when testing)"""
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)

    if app.testing:
        return app.logger

    # Avoid stacking handlers when create_app runs more than once
    if any(getattr(h, '_goal_tracker', False) for h in app.logger.handlers):
        return app.logger

    log_dir = app.config.get('LOG_DIR') or 'logs'
    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            os.path.join(log_dir, 'goals.log'),
            maxBytes=app.config.get('LOG_MAX_BYTES', 5 * 1024 * 1024),
            backupCount=app.config.get('LOG_BACKUP_COUNT', 3),
            encoding='utf-8',
        )
    except OSError:
        handler = logging.StreamHandler()

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._goal_tracker = True
    app.logger.addHandler(handler)
    return app.logger
