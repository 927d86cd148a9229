"""
Tourlicity Application Factory.
Creates and configures the Flask application instance.
"""
import os
import json
import logging
from datetime import datetime, timezone

import click
from flask import Flask

from tourlicity.config import config as config_by_name
from tourlicity.extensions import init_extensions, db


def _init_sentry(app):
    """Initialize Sentry error tracking for production."""
    dsn = app.config.get('SENTRY_DSN') or os.environ.get('SENTRY_DSN')
    if not dsn:
        app.logger.info('SENTRY_DSN not set: error tracking disabled.')
        return

    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=dsn,
        integrations=[FlaskIntegration(), SqlalchemyIntegration()],
        traces_sample_rate=float(os.environ.get('SENTRY_TRACES_RATE', '0.1')),
        environment=os.environ.get('FLASK_ENV', 'production'),
        send_default_pii=False,
    )
    app.logger.info('Sentry error tracking initialized.')


def create_app(config_name=None):
    """
    Application factory for creating Flask app instances.

    Args:
        config_name: Configuration to use (development, testing/test, production)

    Returns:
        Configured Flask application instance
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)

    # Load configuration
    config_class = config_by_name.get(config_name, config_by_name['default'])
    app.config.from_object(config_class)

    # Initialize Sentry (production only)
    if config_name == 'production':
        _init_sentry(app)

    # Call init_app if available (production validation happens here)
    if hasattr(config_class, 'init_app'):
        config_class.init_app(app)

    # Initialize extensions
    init_extensions(app)

    # Register models with the metadata (needed by create_all and migrations)
    from tourlicity import models  # noqa: F401

    # Register CLI commands
    register_cli_commands(app)

    # Configure logging
    configure_logging(app)

    # Create database tables (development only)
    if config_name == 'development':
        with app.app_context():
            db.create_all()

    return app


def register_cli_commands(app):
    """Register custom CLI commands."""

    @app.cli.command('init-db')
    def init_db():
        """Create tables and seed the default document types."""
        from tourlicity.services.document_service import DocumentTypeService

        db.create_all()
        created = DocumentTypeService.seed_defaults()
        print(f"Database initialized ({created} document type(s) created).")

    @app.cli.command('seed-document-types')
    @click.option('--force', is_flag=True, help='Add missing defaults even if the catalog is not empty')
    def seed_document_types(force):
        """Seed the document type catalog with the configured defaults."""
        from tourlicity.models.document_type import DocumentType
        from tourlicity.services.document_service import DocumentTypeService

        existing_count = DocumentType.query.count()
        if existing_count > 0 and not force:
            print(f"Document types already seeded ({existing_count} found).")
            print("Use --force to add missing defaults (existing names are never duplicated).")
            return

        created = DocumentTypeService.seed_defaults()
        print(f"Done! {created} document type(s) created, {DocumentType.query.count()} available.")

    @app.cli.command('list-document-types')
    @click.option('--all', 'include_inactive', is_flag=True, help='Include deactivated document types')
    def list_document_types(include_inactive):
        """Print the document type catalog as JSON."""
        from tourlicity.schemas import DocumentTypeSchema
        from tourlicity.services.document_service import DocumentTypeService

        types = DocumentTypeService.list_types(active_only=not include_inactive)
        print(json.dumps(DocumentTypeSchema(many=True).dump(types), indent=2, ensure_ascii=False))


class JSONFormatter(logging.Formatter):
    """JSON log formatter for production (cloud log aggregation)."""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno,
        }
        # Add exception info
        if record.exc_info and record.exc_info[0]:
            log_entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(app):
    """Configure application logging.

    Production: JSON to stdout.
    Development: plain text.
    Testing: left alone (the test bootstrap silences logging).
    """
    if app.testing:
        return

    if not app.debug:
        # Production: JSON to stdout
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(JSONFormatter())
        stream_handler.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

        # Clear existing handlers to avoid duplicates
        app.logger.handlers.clear()
        app.logger.addHandler(stream_handler)
        app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
        app.logger.info('Tourlicity startup (JSON logging)')
    else:
        # Development: plain text
        app.logger.setLevel(logging.DEBUG)
        app.logger.info('Tourlicity startup (development)')
