# =============================================================================
# Tourlicity - Test Bootstrap, Config and Logging Tests
# =============================================================================

import importlib
import json
import logging
import os
import sys

import pytest

from tourlicity import JSONFormatter, create_app
from tourlicity.config import ProductionConfig, TestingConfig, config
from tourlicity.extensions import db


class TestEnvironment:
    """The conftest sets the process-wide test environment."""

    def test_environment_variables(self):
        assert os.environ['JWT_SECRET_KEY'] == 'test-secret-key'
        assert os.environ['TEST_DATABASE_URL'] == 'sqlite:///:memory:'
        assert os.environ['FLASK_ENV'] == 'test'

    def test_logging_disabled_up_to_error(self):
        assert logging.root.manager.disable == logging.ERROR
        assert not logging.getLogger('tourlicity').isEnabledFor(logging.ERROR)
        assert logging.getLogger('tourlicity').isEnabledFor(logging.CRITICAL)


class TestConfig:
    """Tests for config selection."""

    def test_testing_config(self, app):
        assert app.config['TESTING'] is True
        assert app.config['JWT_SECRET_KEY'] == 'test-secret-key'
        assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
        assert db.engine.dialect.name == 'sqlite'

    def test_flask_env_selects_testing(self):
        application = create_app()
        assert application.config['TESTING'] is True

    def test_jwt_secret_falls_back_to_secret_key(self, monkeypatch):
        import tourlicity.config as config_module

        monkeypatch.delenv('JWT_SECRET_KEY')
        monkeypatch.setenv('SECRET_KEY', 'shared-secret')
        try:
            reloaded = importlib.reload(config_module)
            assert reloaded.Config.JWT_SECRET_KEY == 'shared-secret'
        finally:
            monkeypatch.undo()
            importlib.reload(config_module)
        assert config_module.Config.JWT_SECRET_KEY == 'test-secret-key'

    def test_config_aliases(self):
        assert config['test'] is TestingConfig
        assert config['testing'] is TestingConfig
        assert config['production'] is ProductionConfig

    def test_default_document_types_configured(self, app):
        names = [d['document_type_name'] for d in app.config['DEFAULT_DOCUMENT_TYPES']]
        assert names[0] == 'Passport'
        assert len(names) == 5

    def test_production_requires_secret_key(self, monkeypatch):
        monkeypatch.setattr(ProductionConfig, 'SECRET_KEY', None)
        with pytest.raises(ValueError, match='SECRET_KEY'):
            create_app('production')

    def test_production_requires_database_url(self, monkeypatch):
        monkeypatch.setattr(ProductionConfig, 'SECRET_KEY', 'prod-secret')
        monkeypatch.setattr(ProductionConfig, 'SQLALCHEMY_DATABASE_URI', None)
        with pytest.raises(ValueError, match='DATABASE_URL'):
            create_app('production')


class TestJSONFormatter:
    """Tests for the production log formatter."""

    def test_format(self):
        record = logging.LogRecord(
            name='tourlicity', level=logging.WARNING, pathname=__file__, lineno=42,
            msg='DocumentType: duplicate %s', args=('Passport',), exc_info=None
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry['level'] == 'WARNING'
        assert entry['message'] == 'DocumentType: duplicate Passport'
        assert entry['line'] == 42
        assert 'exception' not in entry

    def test_format_exception(self):
        try:
            raise RuntimeError('boom')
        except RuntimeError:
            record = logging.LogRecord(
                name='tourlicity', level=logging.ERROR, pathname=__file__, lineno=1,
                msg='failed', args=(), exc_info=sys.exc_info()
            )
        entry = json.loads(JSONFormatter().format(record))
        assert 'RuntimeError: boom' in entry['exception']
