"""Tests for exceptions, error helpers and logging configuration."""
import json
import logging
import sys
import pytest
import decoders as d
import decoders.config.settings as settings
import decoders.utils.error_handlers as error_handlers
from decoders.utils import (
    LoggerFactory,
    StructuredFormatter,
    DecoderError,
    DecodeError,
    ValidationError,
    TypeMismatchError,
    ConfigurationError,
    safe_decode
)


@pytest.fixture
def reset_logging():
    yield
    LoggerFactory.reset()


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """Test both decoding failures share a base but stay distinct."""
        assert issubclass(ValidationError, DecodeError)
        assert issubclass(TypeMismatchError, DecodeError)
        assert issubclass(TypeMismatchError, TypeError)
        assert not issubclass(TypeMismatchError, ValidationError)
        assert issubclass(ConfigurationError, DecoderError)
        assert not issubclass(ConfigurationError, DecodeError)

    def test_to_dict(self):
        """Test structured error serialization."""
        error = ValidationError("extra key", error_code='EXTRA_KEY', details={'key': "'c'"})
        assert error.to_dict() == {
            'error_type': 'ValidationError',
            'error_code': 'EXTRA_KEY',
            'message': 'extra key',
            'details': {'key': "'c'"}
        }

    def test_defaults(self):
        """Test default error code and details."""
        error = ValidationError()
        assert error.error_code == 'ValidationError'
        assert error.details == {}
        assert str(error) == ''

    def test_exported_from_decoders(self):
        """Test the library exports the same exception classes."""
        assert d.ValidationError is ValidationError
        assert d.TypeMismatchError is TypeMismatchError


class TestSafeDecode:
    """Tests for safe_decode."""

    def test_success(self):
        """Test a valid value is returned decoded."""
        assert safe_decode(d.number, 3) == 3

    def test_validation_failure(self):
        """Test a validation failure returns the default."""
        assert safe_decode(d.literal('a'), 'b', default='fallback') == 'fallback'

    def test_type_mismatch(self):
        """Test a type mismatch returns the default."""
        assert safe_decode(d.string, 1) is None

    def test_defect_propagates(self):
        """Test unrelated errors are not swallowed."""
        def broken(value):
            raise RuntimeError('defect')

        with pytest.raises(RuntimeError):
            safe_decode(d.create(lambda value: True, broken), 1)

    def test_logs_failure(self, caplog):
        """Test failures are logged at debug level."""
        caplog.set_level(logging.DEBUG, logger='decoders')
        safe_decode(d.string, 1)
        assert any('failed' in record.getMessage() for record in caplog.records)


class TestLogging:
    """Tests for logging configuration."""

    def test_configure_console(self, reset_logging):
        """Test configuring console output sets level and handler."""
        LoggerFactory.configure(log_level='DEBUG', enable_console=True)
        logger = logging.getLogger('decoders')
        assert logger.level == logging.DEBUG
        assert LoggerFactory.is_configured()
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)

    def test_configure_leaves_other_loggers(self, reset_logging):
        """Test configuring touches only the library logger."""
        host_loggers = [logging.getLogger(name) for name in ('utils', 'config', 'app')]
        before = [(logger.level, list(logger.handlers)) for logger in host_loggers]
        LoggerFactory.configure(log_level='DEBUG', enable_console=True)
        assert [(logger.level, list(logger.handlers)) for logger in host_loggers] == before

    def test_library_loggers_share_namespace(self):
        """Test helper and settings modules log under the library logger."""
        assert settings.logger.name.startswith('decoders.')
        assert error_handlers.logger.name.startswith('decoders.')

    def test_reconfigure_replaces_handlers(self, reset_logging):
        """Test configuring twice does not duplicate handlers."""
        LoggerFactory.configure(enable_console=True)
        LoggerFactory.configure(enable_console=True)
        handlers = [h for h in logging.getLogger('decoders').handlers
                    if not isinstance(h, logging.NullHandler)]
        assert len(handlers) == 1

    def test_reset(self):
        """Test reset removes handlers."""
        LoggerFactory.configure(log_level='INFO', enable_console=True)
        LoggerFactory.reset()
        logger = logging.getLogger('decoders')
        assert not LoggerFactory.is_configured()
        assert logger.level == logging.NOTSET
        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_file_handler(self, tmp_path, reset_logging):
        """Test file logging writes into the log directory."""
        LoggerFactory.configure(
            log_level='DEBUG',
            enable_console=False,
            enable_file=True,
            log_dir=str(tmp_path / 'logs')
        )
        logging.getLogger('decoders.test').debug('hello')
        LoggerFactory.reset()
        assert 'hello' in (tmp_path / 'logs' / 'decoders.log').read_text()

    def test_structured_formatter(self):
        """Test structured records are JSON with extra fields."""
        record = logging.LogRecord(
            'decoders.union', logging.DEBUG, __file__, 10, 'branch %s rejected', (0,), None
        )
        record.extra_fields = {'error_details': {'error_code': 'INVALID_LITERAL'}}
        data = json.loads(StructuredFormatter().format(record))
        assert data['message'] == 'branch 0 rejected'
        assert data['level'] == 'DEBUG'
        assert data['error_details'] == {'error_code': 'INVALID_LITERAL'}

    def test_structured_formatter_exception(self):
        """Test exception info is serialized."""
        try:
            d.string.decode(1)
        except TypeMismatchError:
            exc_info = sys.exc_info()
        record = logging.LogRecord(
            'decoders', logging.ERROR, __file__, 1, 'failed', (), exc_info
        )
        data = json.loads(StructuredFormatter().format(record))
        assert data['exception']['type'] == 'TypeMismatchError'
