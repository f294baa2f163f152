import os

class Config:
    # Basic Flask config
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')

    # App settings
    APP_NAME = os.environ.get('APP_NAME', 'Health Goal Tracker')

    # Goals file - None means <instance folder>/goals.txt
    GOALS_FILE = os.environ.get('GOALS_FILE')
    GOALS_MAX_BACKUPS = int(os.environ.get('GOALS_MAX_BACKUPS', 5))

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR', 'logs')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_MAX_BYTES = int(os.environ.get('LOG_MAX_BYTES', 5 * 1024 * 1024))  # 5MB
    LOG_BACKUP_COUNT = int(os.environ.get('LOG_BACKUP_COUNT', 3))


class TestingConfig(Config):
    TESTING = True
    GOALS_MAX_BACKUPS = 2
