"""
Input Validation Module
=======================
CLI ve kutuphane girdileri icin merkezi dogrulama modulu.
Yol kontrolleri.
"""

from pathlib import Path
from typing import Union

from .exceptions import InputValidationError, DocumentNotFoundError


class PathValidator:
    """Dosya yolu validation."""

    @staticmethod
    def validate(path: Union[str, Path], must_exist: bool = True) -> Path:
        """
        Dosya yolunu validate et.

        Args:
            path: Dogrulanacak yol
            must_exist: Dosyanin var olmasi gerekiyor mu

        Returns:
            Dogrulanmis Path nesnesi

        Raises:
            InputValidationError: Gecersiz yol ise
            DocumentNotFoundError: Dosya bulunamazsa
        """
        if not path or not isinstance(path, (str, Path)):
            raise InputValidationError("path", path, "Bos veya gecersiz yol")

        text = str(path).strip()
        if not text:
            raise InputValidationError("path", path, "Bos veya gecersiz yol")

        try:
            resolved = Path(text).expanduser().resolve()
        except (OSError, RuntimeError) as e:
            raise InputValidationError("path", path, f"Yol cozumlenemedi: {e}")

        if must_exist and not resolved.exists():
            raise DocumentNotFoundError(text)

        return resolved
