"""
Type Definitions Module
=======================
Merkezi type tanimlari ve enum'lar.
"""

from typing import Union
from pathlib import Path
from enum import Enum


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

PathLike = Union[str, Path]


# ═══════════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════════

class Severity(str, Enum):
    """Sorun ciddiyet seviyeleri."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def parse(cls, value: Union[str, 'Severity']) -> 'Severity':
        """'warn' gibi kisaltmalari da kabul et."""
        if isinstance(value, Severity):
            return value
        text = str(value).strip().lower()
        if text == "warn":
            text = "warning"
        return cls(text)


class FileCategory(str, Enum):
    """Dosya kategorileri."""
    DOCUMENT = "document"
    SOURCE = "source"
    UNKNOWN = "unknown"


class ExampleKind(str, Enum):
    """Kod ornegi siniflandirmasi."""
    GOOD = "good"
    BAD = "bad"
    MIXED = "mixed"
    NEUTRAL = "neutral"

    @property
    def shows_bad(self) -> bool:
        return self in (ExampleKind.BAD, ExampleKind.MIXED)

    @property
    def shows_good(self) -> bool:
        return self in (ExampleKind.GOOD, ExampleKind.MIXED)


class RuleMode(str, Enum):
    """Satir kurali modu."""
    FORBID = "forbid"
    REQUIRE = "require"
