"""
Konfigurasyon Yukleyici - guidelint.yaml dosyasini yukler ve yonetir.

Ozellikler:
- YAML konfigurasyon yuklemesi
- Varsayilan degerler (constants modulunden)
- Ortam degiskeni destegi
- Konfigurasyon birlestirme
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List, Union
from dataclasses import dataclass, field, asdict, fields

import yaml

from .constants import CONFIG, CHECK_NAMES
from ..types import Severity
from ..utils.exceptions import ConfigFileError
from ..utils.logger import get_logger

logger = get_logger("config_loader")

_SCALAR_TYPES = {
    bool: (bool,),
    int: (int,),
    float: (int, float),
    str: (str,),
    Optional[str]: (str,),
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ChecksConfig:
    """Dokuman denetimi konfigurasyonu."""
    enabled: List[str] = field(default_factory=lambda: list(CHECK_NAMES))
    require_language_tag: bool = True
    toc_require_forward: bool = True


@dataclass
class MarkersConfig:
    """Iyi/kotu ornek isaret kelimeleri."""
    bad: List[str] = field(default_factory=lambda: list(CONFIG.markers.BAD_MARKERS))
    good: List[str] = field(default_factory=lambda: list(CONFIG.markers.GOOD_MARKERS))


@dataclass
class LanguagesConfig:
    """Dil etiketi konfigurasyonu."""
    aliases: Dict[str, str] = field(default_factory=lambda: dict(CONFIG.languages.ALIASES))
    ignored: List[str] = field(default_factory=lambda: list(CONFIG.languages.IGNORED_TAGS))


@dataclass
class LintConfig:
    """Kaynak denetimi konfigurasyonu."""
    rules_file: Optional[str] = None
    max_line_length: int = CONFIG.limits.MAX_LINE_LENGTH
    max_file_size_mb: float = CONFIG.limits.MAX_FILE_SIZE_MB


@dataclass
class ScanConfig:
    """Tarama konfigurasyonu."""
    document_extensions: List[str] = field(default_factory=lambda: list(CONFIG.scan.DOCUMENT_EXTENSIONS))
    source_extensions: List[str] = field(default_factory=lambda: list(CONFIG.scan.SOURCE_EXTENSIONS))
    exclude_dirs: List[str] = field(default_factory=lambda: list(CONFIG.scan.EXCLUDE_DIRS))
    include_hidden: bool = False


@dataclass
class LoggingConfig:
    """Logging konfigurasyonu."""
    level: str = CONFIG.logging.LOG_LEVEL
    log_to_file: bool = False
    log_dir: str = CONFIG.logging.LOG_DIR
    json_format: bool = False


@dataclass
class GuideLintConfig:
    """Ana konfigurasyon."""
    checks: ChecksConfig = field(default_factory=ChecksConfig)
    markers: MarkersConfig = field(default_factory=MarkersConfig)
    languages: LanguagesConfig = field(default_factory=LanguagesConfig)
    lint: LintConfig = field(default_factory=LintConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    # rule_id -> "error" | "warning" | "info" | "off"
    severity_overrides: Dict[str, str] = field(default_factory=dict)
    source_path: Optional[str] = None

    def is_enabled(self, check_name: str) -> bool:
        return check_name in self.checks.enabled

    def severity_for(self, rule_id: str, default: Severity) -> Optional[Severity]:
        """Override uygulanmis seviye; 'off' icin None."""
        override = self.severity_overrides.get(rule_id)
        if override is None:
            return default
        if str(override).lower() == "off":
            return None
        return Severity.parse(override)


class ConfigLoader:
    """
    guidelint konfigurasyon yukleyici.

    Kullanim:
        loader = ConfigLoader("guidelint.yaml")
        config = loader.load()
    """

    SECTIONS = {
        "checks": ChecksConfig,
        "markers": MarkersConfig,
        "languages": LanguagesConfig,
        "lint": LintConfig,
        "scan": ScanConfig,
        "logging": LoggingConfig,
    }

    ENV_MAPPINGS = {
        "GUIDELINT_LOG_LEVEL": ("logging", "level"),
        "GUIDELINT_MAX_LINE_LENGTH": ("lint", "max_line_length"),
        "GUIDELINT_RULES_FILE": ("lint", "rules_file"),
        "GUIDELINT_REQUIRE_LANGUAGE_TAG": ("checks", "require_language_tag"),
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None, base_dir: Optional[Path] = None):
        """
        Args:
            config_path: Konfigurasyon dosyasi yolu (opsiyonel)
            base_dir: Varsayilan dosyalarin aranacagi dizin (varsayilan: cwd)
        """
        self.config_path = Path(config_path) if config_path else None
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self._raw_config: Dict[str, Any] = {}

    def load(self) -> GuideLintConfig:
        """
        Konfigurasyonu yukle.

        Raises:
            ConfigFileError: Dosya okunamaz veya YAML gecersizse
        """
        config_file = self._find_config_file()

        if config_file:
            logger.info(f"Konfigurasyon yukleniyor: {config_file}")
            self._raw_config = self._load_yaml(config_file)
        else:
            logger.debug("Konfigurasyon dosyasi bulunamadi, varsayilanlar kullaniliyor")
            self._raw_config = {}

        self._apply_env_overrides()

        config = self._build_config()
        config.source_path = str(config_file) if config_file else None
        return config

    def _find_config_file(self) -> Optional[Path]:
        """Konfigurasyon dosyasini bul."""
        if self.config_path:
            if not self.config_path.exists():
                raise ConfigFileError(str(self.config_path), "dosya bulunamadi")
            return self.config_path

        for name in CONFIG.CONFIG_FILE_NAMES:
            path = self.base_dir / name
            if path.exists():
                return path

        return None

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """YAML dosyasini yukle."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigFileError(str(path), f"gecersiz YAML: {e}")
        except OSError as e:
            raise ConfigFileError(str(path), str(e))

        if not isinstance(data, dict):
            raise ConfigFileError(str(path), "kok eleman bir mapping olmali")
        return data

    def _apply_env_overrides(self):
        """Ortam degiskenlerinden override'lari uygula (alan tipine gore donusturulur)."""
        for env_var, (section, key) in self.ENV_MAPPINGS.items():
            value = os.environ.get(env_var)
            if value is not None:
                if not isinstance(self._raw_config.get(section), dict):
                    self._raw_config[section] = {}

                field_type = self._field_types(self.SECTIONS[section])[key]
                converted = self._convert_env_value(env_var, value, field_type)
                self._raw_config[section][key] = converted
                logger.debug(f"Ortam degiskeni uygulandi: {env_var}={converted}")

    @staticmethod
    def _field_types(config_class: type) -> Dict[str, Any]:
        return {f.name: f.type for f in fields(config_class)}

    @staticmethod
    def _convert_env_value(env_var: str, value: str, field_type: Any) -> Any:
        """Ortam degiskeni degerini hedef alanin tipine donustur."""
        if field_type is bool:
            lowered = value.strip().lower()
            if lowered in ("true", "yes", "1", "on"):
                return True
            if lowered in ("false", "no", "0", "off"):
                return False
            raise ConfigFileError(env_var, f"true/false bekleniyor: {value}")

        if field_type in (int, float):
            try:
                return field_type(value)
            except ValueError:
                raise ConfigFileError(env_var, f"sayi bekleniyor: {value}")

        return value

    def _build_config(self) -> GuideLintConfig:
        """Konfigurasyon nesnesini olustur."""
        raw = self._raw_config
        kwargs: Dict[str, Any] = {}

        for section_name, section_class in self.SECTIONS.items():
            section_raw = raw.get(section_name) or {}
            if not isinstance(section_raw, dict):
                raise ConfigFileError(
                    str(self.config_path or "guidelint.yaml"),
                    f"'{section_name}' bolumu bir mapping olmali"
                )
            kwargs[section_name] = self._build_section(section_class, section_raw)

        overrides = raw.get("severity_overrides") or {}
        if not isinstance(overrides, dict):
            raise ConfigFileError(
                str(self.config_path or "guidelint.yaml"),
                "'severity_overrides' bir mapping olmali"
            )
        kwargs["severity_overrides"] = {
            str(k): self._parse_override(str(k), v) for k, v in overrides.items()
        }

        level = kwargs["logging"].level
        if level.upper() not in LOG_LEVELS:
            raise ConfigFileError(
                str(self.config_path or "guidelint.yaml"),
                f"gecersiz log seviyesi: {level}"
            )

        unknown = set(raw) - set(self.SECTIONS) - {"severity_overrides"}
        for key in sorted(unknown):
            logger.debug(f"Bilinmeyen konfigurasyon anahtari yok sayildi: {key}")

        return GuideLintConfig(**kwargs)

    def _parse_override(self, rule_id: str, value: Any) -> str:
        """Seviye override degerini dogrula. YAML'da tirnaksiz `off` False olarak gelir."""
        if value is False or str(value).strip().lower() == "off":
            return "off"
        try:
            return Severity.parse(value).value
        except ValueError:
            raise ConfigFileError(
                str(self.config_path or "guidelint.yaml"),
                f"'{rule_id}' icin gecersiz seviye: {value}"
            )

    def _build_section(self, config_class: type, raw_data: Dict[str, Any]):
        """Konfigurasyon section'i olustur."""
        field_types = self._field_types(config_class)

        section_kwargs = {}
        for key, value in raw_data.items():
            if key in field_types:
                self._check_type(config_class, key, value, field_types[key])
                section_kwargs[key] = value
            else:
                logger.debug(f"Bilinmeyen alan yok sayildi: {config_class.__name__}.{key}")

        # Eksik alanlar dataclass varsayilanlarindan gelir
        return config_class(**section_kwargs)

    def _check_type(self, config_class: type, key: str, value: Any, field_type: Any) -> None:
        """Skaler alanlarin tipini dogrula. float alanlar tamsayi da kabul eder."""
        allowed = _SCALAR_TYPES.get(field_type)
        if allowed is None:
            return
        if value is None and field_type == Optional[str]:
            return
        if isinstance(value, allowed) and (field_type is bool or not isinstance(value, bool)):
            return
        raise ConfigFileError(
            str(self.config_path or "guidelint.yaml"),
            f"{config_class.__name__}.{key} icin gecersiz deger: {value!r}"
        )


def load_config(config_path: Optional[Union[str, Path]] = None) -> GuideLintConfig:
    """
    Konfigurasyonu yukle (kisa yol).

    Args:
        config_path: Opsiyonel konfigurasyon dosyasi yolu
    """
    return ConfigLoader(config_path).load()


def config_to_dict(config: GuideLintConfig) -> Dict[str, Any]:
    """Konfigurasyonu dict olarak getir."""
    return asdict(config)
