# Yardımcı Modüller
from .logger import LintLogger, LogConfig, get_logger, configure_logging
from .helpers import format_size, truncate_text

from .exceptions import (
    GuideLintError,
    FileOperationError, DocumentNotFoundError, DocumentReadError, FileSizeError,
    ParsingError, MarkdownParseError,
    ValidationError, InputValidationError,
    ConfigurationError, RulesLoadError, RuleDefinitionError, ConfigFileError
)

from .validators import PathValidator

__all__ = [
    # Logger
    'LintLogger', 'LogConfig', 'get_logger', 'configure_logging',
    # Helpers
    'format_size', 'truncate_text',
    # Exceptions
    'GuideLintError',
    'FileOperationError', 'DocumentNotFoundError', 'DocumentReadError', 'FileSizeError',
    'ParsingError', 'MarkdownParseError',
    'ValidationError', 'InputValidationError',
    'ConfigurationError', 'RulesLoadError', 'RuleDefinitionError', 'ConfigFileError',
    # Validators
    'PathValidator',
]
