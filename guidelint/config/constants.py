"""
Centralized Configuration Constants
====================================
Tum uygulama genelinde kullanilan sabit degerler.
Magic number'lar ve hardcoded degerler burada tanimlanir.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class ScanDefaults:
    """Dosya tarama ayarlari."""
    DOCUMENT_EXTENSIONS: Tuple[str, ...] = (".md", ".markdown", ".mdown")
    SOURCE_EXTENSIONS: Tuple[str, ...] = (
        ".coffee", ".js", ".ts", ".py", ".rb", ".css", ".scss", ".html", ".htm"
    )
    EXCLUDE_DIRS: Tuple[str, ...] = (
        ".git", ".venv", "venv", "__pycache__", "node_modules", "dist", "build",
        ".mypy_cache", ".pytest_cache",
    )


@dataclass(frozen=True)
class MarkerDefaults:
    """Iyi/kotu ornek isaretleri."""
    BAD_MARKERS: Tuple[str, ...] = (
        "bad", "no", "avoid", "wrong", "incorrect", "don't", "dont",
        "discouraged", "✗", "❌",
    )
    GOOD_MARKERS: Tuple[str, ...] = (
        "good", "yes", "correct", "prefer", "preferred", "better", "ok",
        "✓", "✅",
    )
    # Kod blogu icindeki yorum satiri baslangiclari
    COMMENT_PREFIXES: Tuple[str, ...] = ("<!--", "/*", "//", "--", "#", ";")


@dataclass(frozen=True)
class LanguageDefaults:
    """Kod blogu dil etiketi ayarlari."""
    ALIASES: Dict[str, str] = field(default_factory=lambda: {
        "coffee": "coffeescript",
        "js": "javascript",
        "ts": "typescript",
        "py": "python",
        "rb": "ruby",
        "sh": "shell",
        "bash": "shell",
        "zsh": "shell",
        "yml": "yaml",
    })
    IGNORED_TAGS: Tuple[str, ...] = ("text", "plaintext", "console", "diff", "none")


@dataclass(frozen=True)
class LimitConfig:
    """Limit ayarlari."""
    MAX_FILE_SIZE_MB: int = 10  # Daha buyuk dosyalar atlanir
    MAX_LINE_LENGTH: int = 79  # Varsayilan kural setindeki satir limiti
    EVIDENCE_LENGTH: int = 200  # Raporlardaki kanit metni uzunlugu


@dataclass(frozen=True)
class LoggingDefaults:
    """Logging ayarlari."""
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "WARNING"


# Dokuman denetimleri; config'de isimle acilip kapatilir
CHECK_NAMES: List[str] = [
    "toc",
    "examples",
    "contradictions",
    "language-tags",
    "structure",
    "revisions",
]


@dataclass
class AppConfig:
    """
    Ana uygulama konfigurasyonu.
    Tum alt konfigurasyonlari icerir.
    """
    scan: ScanDefaults = field(default_factory=ScanDefaults)
    markers: MarkerDefaults = field(default_factory=MarkerDefaults)
    languages: LanguageDefaults = field(default_factory=LanguageDefaults)
    limits: LimitConfig = field(default_factory=LimitConfig)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    # Paths
    DEFAULT_RULES_FILE: Path = field(
        default_factory=lambda: Path(__file__).parent.parent / "rules" / "default_rules.yaml"
    )
    CONFIG_FILE_NAMES: Tuple[str, ...] = (
        "guidelint.yaml",
        ".guidelint.yaml",
        "config/guidelint.yaml",
    )


# Global singleton instance
CONFIG = AppConfig()