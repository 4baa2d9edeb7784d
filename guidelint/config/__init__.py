"""Konfigurasyon modulu."""
from .constants import CONFIG, CHECK_NAMES, AppConfig
from .config_loader import (
    ConfigLoader,
    GuideLintConfig,
    ChecksConfig,
    MarkersConfig,
    LanguagesConfig,
    LintConfig,
    ScanConfig,
    LoggingConfig,
    load_config,
    config_to_dict,
)

__all__ = [
    'CONFIG', 'CHECK_NAMES', 'AppConfig',
    'ConfigLoader', 'GuideLintConfig', 'ChecksConfig', 'MarkersConfig',
    'LanguagesConfig', 'LintConfig', 'ScanConfig', 'LoggingConfig',
    'load_config', 'config_to_dict',
]
