# app.py
"""
Health Goal Tracker - Application Factory

Goals are managed over HTTP (/goals) or from the command line:

    flask --app app goal add meal daily 2000
    flask --app app goal list
"""
import os
from flask import Flask, redirect, url_for
from config import Config
from logging_setup import configure_logging


def create_app(config_object=Config):
    """Application factory pattern"""
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    # --- Goals file lives in the instance folder unless configured ---
    if not app.config.get('GOALS_FILE'):
        app.config['GOALS_FILE'] = os.path.join(app.instance_path, 'goals.txt')
    os.makedirs(os.path.dirname(app.config['GOALS_FILE']) or '.', exist_ok=True)

    configure_logging(app)

    register_blueprints(app)

    @app.route('/')
    def index():
        return redirect(url_for('goals.index'))

    app.logger.info(f"{app.config['APP_NAME']} started, goals file: {app.config['GOALS_FILE']}")
    return app


def register_blueprints(app):
    """Register all module blueprints"""
    from modules.goals import goals_bp

    app.register_blueprint(goals_bp)


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='127.0.0.1', port=5000)
