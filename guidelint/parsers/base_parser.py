"""
Base Parser Module
==================
Tum parser'lar icin temel sinif.
Kod tekrarini onler ve tutarli API saglar.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, TypeVar, Generic

from ..config.constants import CONFIG
from ..types import PathLike
from ..utils.exceptions import (
    DocumentNotFoundError, DocumentReadError, FileSizeError, InputValidationError,
    FileOperationError, ParsingError, ValidationError
)

T = TypeVar('T')


class BaseParser(ABC, Generic[T]):
    """
    Temel parser sinifi.

    Alt siniflar SUPPORTED_EXTENSIONS ve parse_text() tanimlar;
    dosya okuma ve dogrulama burada yapilir.
    """

    # Alt siniflar tarafindan override edilecek
    SUPPORTED_EXTENSIONS: List[str] = []

    def __init__(self, max_file_size_mb: float = CONFIG.limits.MAX_FILE_SIZE_MB) -> None:
        self.max_file_size_mb = max_file_size_mb
        self.logger = logging.getLogger(self.__class__.__name__)

    def supports(self, file_path: PathLike) -> bool:
        """Dosya destekleniyor mu."""
        extension = Path(file_path).suffix.lower()
        return extension in self.SUPPORTED_EXTENSIONS

    def validate_file(self, file_path: PathLike) -> None:
        """
        Dosyayi dogrula.

        Raises:
            DocumentNotFoundError: Dosya bulunamadi
            InputValidationError: Dosya degil veya desteklenmeyen format
            FileSizeError: Dosya boyut limitini asiyor
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentNotFoundError(str(path))

        if not path.is_file():
            raise InputValidationError("path", str(path), "Gecerli bir dosya degil")

        if not self.supports(path):
            raise InputValidationError(
                "path", str(path),
                f"Desteklenmeyen dosya formati: {path.suffix}. "
                f"Desteklenen formatlar: {', '.join(self.SUPPORTED_EXTENSIONS)}"
            )

        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > self.max_file_size_mb:
            raise FileSizeError(str(path), size_mb, self.max_file_size_mb)

    def read_text(self, file_path: PathLike) -> str:
        """Dosyayi UTF-8 olarak oku (BOM atlanir)."""
        try:
            return Path(file_path).read_text(encoding='utf-8-sig', errors='replace')
        except OSError as e:
            raise DocumentReadError(str(file_path), str(e))

    def parse(self, file_path: PathLike) -> T:
        """
        Dosyayi parse et.

        Raises:
            DocumentNotFoundError: Dosya bulunamadi
            DocumentReadError: Dosya okunamadi
            FileSizeError: Dosya boyut limitini asiyor
            ParsingError: Icerik parse edilemedi
        """
        self.validate_file(file_path)
        text = self.read_text(file_path)
        return self.parse_text(text, path=str(file_path))

    @abstractmethod
    def parse_text(self, text: str, path: str = "<string>") -> T:
        """Bellekteki metni parse et."""
        pass

    def parse_safe(self, file_path: PathLike) -> Optional[T]:
        """
        Guvenli parse - hata durumunda None doner.
        """
        try:
            return self.parse(file_path)
        except (FileOperationError, ParsingError, ValidationError) as e:
            self.logger.error(f"Parse hatasi ({file_path}): {e}")
            return None

