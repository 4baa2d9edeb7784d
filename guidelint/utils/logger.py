"""
Logging Modulu
==============
guidelint bilesenlerinin ortak logger'i.

- Log ciktisi stderr'e gider; stdout rapor (tablo / JSON) icin bos kalir
- Konsolda rich, istenirse donen (rotating) log dosyasi
- Mesaja eklenen key=value baglam bilgisi
- timer() ile islem sureleri (PerformanceMetric)
"""

import logging
import sys
import time
import json
from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler
from rich.console import Console


ROOT_LOGGER = "guidelint"


@dataclass
class LogConfig:
    """Logger konfigurasyonu. Varsayilanlar bir CLI icin: sessiz konsol, dosya kapali."""
    level: str = "WARNING"
    use_rich: bool = True
    json_format: bool = False
    show_time: bool = False
    log_to_file: bool = False
    log_dir: str = "logs"
    file_name: str = "guidelint.log"
    file_max_mb: int = 2
    file_backups: int = 3


@dataclass
class PerformanceMetric:
    """timer() ile olculen tek bir islem."""
    operation: str
    duration_ms: float
    success: bool
    details: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


class LintLogger:
    """
    Modul bazli logger.

    Kullanim:
        logger = get_logger("evaluator")
        logger.warning("Dosya atlandi", path="big.py", size_mb=12.4)
        with logger.timer("lint_sources"):
            ...

    configure() tum mevcut logger'larin handler'larini yeniden kurar.
    """

    _loggers: Dict[str, 'LintLogger'] = {}
    _config: Optional[LogConfig] = None
    _performance_metrics: List[PerformanceMetric] = []

    def __init__(self, name: str, config: Optional[LogConfig] = None):
        self.name = name
        self.config = config or LintLogger._config or LogConfig()
        self._logger = logging.getLogger(f"{ROOT_LOGGER}.{name}")
        self._metrics: List[PerformanceMetric] = []
        self._apply_config()

    @classmethod
    def configure(cls, config: LogConfig):
        cls._config = config
        for logger in cls._loggers.values():
            logger.config = config
            logger._apply_config()

    @classmethod
    def get_logger(cls, name: str) -> 'LintLogger':
        if name not in cls._loggers:
            cls._loggers[name] = LintLogger(name)
        return cls._loggers[name]

    # ─────────────────────────────────────────────────────────────────────────
    # Handler kurulumu
    # ─────────────────────────────────────────────────────────────────────────

    def _apply_config(self):
        self._logger.setLevel(getattr(logging, self.config.level.upper(), logging.WARNING))
        self._logger.propagate = False

        # Eski handler'lar kapatilmadan atilirsa log dosyasi acik kalir
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        formatter = self._formatter()
        self._logger.addHandler(self._console_handler(formatter))
        if self.config.log_to_file:
            self._logger.addHandler(self._file_handler(formatter))

    def _formatter(self) -> logging.Formatter:
        if self.config.json_format:
            return JsonFormatter()
        fmt = "[%(levelname)s] [%(name)s] %(message)s"
        if self.config.show_time:
            fmt = "%(asctime)s " + fmt
        return logging.Formatter(fmt)

    def _console_handler(self, formatter: logging.Formatter) -> logging.Handler:
        if self.config.use_rich and not self.config.json_format:
            return RichHandler(
                console=Console(stderr=True),
                show_time=self.config.show_time,
                show_path=False,
                rich_tracebacks=True
            )
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        return handler

    def _file_handler(self, formatter: logging.Formatter) -> logging.Handler:
        log_dir = Path(self.config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_dir / self.config.file_name,
            maxBytes=self.config.file_max_mb * 1024 * 1024,
            backupCount=self.config.file_backups,
            encoding='utf-8'
        )
        handler.setFormatter(formatter)
        return handler

    @property
    def handlers(self) -> List[logging.Handler]:
        return list(self._logger.handlers)

    # ─────────────────────────────────────────────────────────────────────────
    # Log metodlari
    # ─────────────────────────────────────────────────────────────────────────

    def debug(self, msg: str, **context):
        self._log(logging.DEBUG, msg, **context)

    def info(self, msg: str, **context):
        self._log(logging.INFO, msg, **context)

    def warning(self, msg: str, **context):
        self._log(logging.WARNING, msg, **context)

    def error(self, msg: str, exc_info: bool = False, **context):
        self._log(logging.ERROR, msg, exc_info=exc_info, **context)

    def _log(self, level: int, msg: str, exc_info: bool = False, **context):
        """Baglam metin ciktisinda mesaja eklenir, JSON ciktisinda ayri alan olur."""
        if context and not self.config.json_format:
            msg = f"{msg} (" + " | ".join(f"{k}={v}" for k, v in context.items()) + ")"
        self._logger.log(level, msg, exc_info=exc_info, extra={'context': context})

    # ─────────────────────────────────────────────────────────────────────────
    # Sure olcumu
    # ─────────────────────────────────────────────────────────────────────────

    @contextmanager
    def timer(self, operation: str, log_level: str = "DEBUG"):
        """
        Blogun suresini olc ve PerformanceMetric olarak kaydet.

        Blok hata firlatirsa metrik basarisiz olarak kaydedilir ve hata
        yeniden firlatilir.
        """
        start = time.perf_counter()
        error: Optional[str] = None

        try:
            yield
        except Exception as e:
            error = str(e)
            raise
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            metric = PerformanceMetric(
                operation=operation,
                duration_ms=duration_ms,
                success=error is None,
                details={"error": error} if error is not None else {}
            )
            self._metrics.append(metric)
            LintLogger._performance_metrics.append(metric)

            status = "tamamlandi" if error is None else "basarisiz"
            self._log(getattr(logging, log_level.upper()), f"{operation} {status}", duration_ms=duration_ms)

    def get_metrics(self) -> List[PerformanceMetric]:
        return self._metrics

    @classmethod
    def get_all_metrics(cls) -> List[PerformanceMetric]:
        return cls._performance_metrics

    @classmethod
    def reset_metrics(cls):
        cls._performance_metrics.clear()
        for logger in cls._loggers.values():
            logger._metrics.clear()


class JsonFormatter(logging.Formatter):
    """Satir basina bir JSON nesnesi."""

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, 'context', None)
        if context:
            data["context"] = context
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False, default=str)


def get_logger(name: str) -> LintLogger:
    """Modul logger'i al."""
    return LintLogger.get_logger(name)


def configure_logging(
    level: str = "WARNING",
    log_to_file: bool = False,
    log_dir: str = "logs",
    use_rich: bool = True,
    json_format: bool = False
):
    """
    CLI baslangicinda logging'i kur.

    Args:
        level: DEBUG, INFO, WARNING veya ERROR (--verbose DEBUG yapar)
        log_to_file: log_dir altina guidelint.log yaz
        log_dir: Log dizini
        use_rich: Konsolda RichHandler kullan
        json_format: Satir basina JSON (rich devre disi kalir)
    """
    LintLogger.configure(LogConfig(
        level=level,
        log_to_file=log_to_file,
        log_dir=log_dir,
        use_rich=use_rich,
        json_format=json_format
    ))
