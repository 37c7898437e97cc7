"""
Flask application entry point for the Team Roster Manager.
"""
import logging
from collections.abc import Mapping

import click
from flask import Flask, render_template
from flask_wtf.csrf import CSRFError, CSRFProtect
from werkzeug.exceptions import HTTPException
from database import init_db
import config
import strings as text
from services import session_store
from services.logging_setup import configure_error_monitoring, configure_logging, register_request_logging

csrf = CSRFProtect()
logger = logging.getLogger(__name__)


def create_app(test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config.get_config())
    if isinstance(test_config, Mapping):
        app.config.from_mapping(test_config)
    elif test_config is not None:
        app.config.from_object(test_config)
    config.validate_runtime(app.config)
    configure_logging(bool(app.config.get('STRUCTURED_LOGGING', True)))
    configure_error_monitoring(app.config.get('SENTRY_DSN', ''))

    # Initialize database
    init_db(app)
    app.session_interface = session_store.SqlAlchemySessionInterface()

    # Initialize CSRF protection
    csrf.init_app(app)

    # Inject text constants into all templates
    @app.context_processor
    def inject_strings():
        return {
            'NAV': text.section('NAV'),
            'ui': text.ui,
        }

    # Register blueprints
    from routes.teams import teams_bp
    app.register_blueprint(teams_bp)

    register_request_logging(app)
    register_error_handlers(app)
    register_commands(app)

    return app


def register_error_handlers(app):
    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        logger.warning('CSRF validation failed: %s', error.description)
        return render_template('errors/error.html', error=error), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return render_template('errors/error.html', error=error), error.code


def register_commands(app):
    @app.cli.command('purge-sessions')
    def purge_sessions_command():
        """Delete expired session documents."""
        removed = session_store.purge_expired()
        click.echo(f'Removed {removed} expired session(s).')


if __name__ == '__main__':
    app = create_app()
    app.run(host=app.config['HOST'], port=app.config['PORT'], debug=False)
