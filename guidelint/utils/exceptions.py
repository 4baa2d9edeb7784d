"""
Custom Exceptions Module
========================
Uygulama genelinde kullanilan ozel exception siniflari.
Her exception kategorisi icin ayri sinif tanimlanmistir.
"""

from typing import Optional, Dict, Any


class GuideLintError(Exception):
    """
    Tum uygulama hatalarinin temel sinifi.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code or "UNKNOWN_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Exception'i dict'e cevir."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ═══════════════════════════════════════════════════════════════════════════
# FILE OPERATIONS
# ═══════════════════════════════════════════════════════════════════════════

class FileOperationError(GuideLintError):
    """Dosya islemleri hatalari."""
    pass


class DocumentNotFoundError(FileOperationError):
    """Dosya bulunamadi hatasi."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Dosya bulunamadi: {path}",
            code="FILE_NOT_FOUND",
            details={"path": path}
        )


class DocumentReadError(FileOperationError):
    """Dosya okuma hatasi."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(
            message=f"Dosya okunamadi: {path}" + (f" - {reason}" if reason else ""),
            code="FILE_READ_ERROR",
            details={"path": path, "reason": reason}
        )


class FileSizeError(FileOperationError):
    """Dosya boyutu hatasi."""

    def __init__(self, path: str, size_mb: float, max_size_mb: float):
        super().__init__(
            message=f"Dosya cok buyuk: {path} ({size_mb:.1f}MB > {max_size_mb}MB)",
            code="FILE_SIZE_EXCEEDED",
            details={"path": path, "size_mb": size_mb, "max_size_mb": max_size_mb}
        )


# ═══════════════════════════════════════════════════════════════════════════
# PARSING ERRORS
# ═══════════════════════════════════════════════════════════════════════════

class ParsingError(GuideLintError):
    """Parsing hatalari."""
    pass


class MarkdownParseError(ParsingError):
    """Markdown parse hatasi."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(
            message=f"Markdown parse edilemedi: {path}" + (f" - {reason}" if reason else ""),
            code="MARKDOWN_PARSE_ERROR",
            details={"path": path, "reason": reason}
        )


# ═══════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS
# ═══════════════════════════════════════════════════════════════════════════

class ValidationError(GuideLintError):
    """Validation hatalari."""
    pass


class InputValidationError(ValidationError):
    """Input validation hatasi."""

    def __init__(self, field: str, value: Any, reason: str = ""):
        super().__init__(
            message=f"Gecersiz input: {field}" + (f" - {reason}" if reason else ""),
            code="INPUT_VALIDATION_ERROR",
            details={"field": field, "value": str(value)[:100], "reason": reason}
        )


# ═══════════════════════════════════════════════════════════════════════════
# CONFIGURATION ERRORS
# ═══════════════════════════════════════════════════════════════════════════

class ConfigurationError(GuideLintError):
    """Konfigurasyon hatalari."""
    pass


class RulesLoadError(ConfigurationError):
    """Kural seti yukleme hatasi."""

    def __init__(self, rule_file: str, reason: str = ""):
        super().__init__(
            message=f"Kural dosyasi yuklenemedi: {rule_file}" + (f" - {reason}" if reason else ""),
            code="RULES_LOAD_ERROR",
            details={"rule_file": rule_file, "reason": reason}
        )


class RuleDefinitionError(ConfigurationError):
    """Tek bir kural tanimi gecersiz."""

    def __init__(self, rule_id: str, reason: str = ""):
        super().__init__(
            message=f"Gecersiz kural tanimi: {rule_id}" + (f" - {reason}" if reason else ""),
            code="RULE_DEFINITION_ERROR",
            details={"rule_id": rule_id, "reason": reason}
        )


class ConfigFileError(ConfigurationError):
    """Config dosyasi hatasi."""

    def __init__(self, config_file: str, reason: str = ""):
        super().__init__(
            message=f"Config dosyasi okunamadi: {config_file}" + (f" - {reason}" if reason else ""),
            code="CONFIG_FILE_ERROR",
            details={"config_file": config_file, "reason": reason}
        )
