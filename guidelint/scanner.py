"""Dosya tarayici modulu - Verilen yollardaki dokuman ve kaynak dosyalarini bulur."""

import os
import time
from pathlib import Path
from typing import List, Dict, Optional, Iterator, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from rich import box
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .config.config_loader import ScanConfig
from .types import FileCategory, PathLike
from .utils.helpers import format_size
from .utils.validators import PathValidator

console = Console(stderr=True)


@dataclass
class FileInfo:
    """Dosya bilgisi."""
    path: str
    name: str
    extension: str
    size: int
    category: FileCategory
    modified_time: datetime


@dataclass
class ScanResult:
    """Tarama sonucu."""
    files: List[FileInfo] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)
    total_size: int = 0
    scan_time: float = 0.0

    @property
    def total_files(self) -> int:
        """Toplam dosya sayisi."""
        return len(self.files)

    def get_files_by_category(self, category: FileCategory) -> List[FileInfo]:
        """Kategoriye gore dosyalari filtrele."""
        return [f for f in self.files if f.category == category]

    def paths(self, category: Optional[FileCategory] = None) -> List[str]:
        files = self.get_files_by_category(category) if category else self.files
        return [f.path for f in files]


class FileScanner:
    """
    Dosya tarayici sinif.

    Dizinler recursive taranir; gizli ve haric tutulan dizinler atlanir.
    Dogrudan verilen dosyalar uzantilarindan bagimsiz olarak sonuca eklenir.
    """

    def __init__(self, scan_config: Optional[ScanConfig] = None, console_instance: Optional[Console] = None) -> None:
        self.config = scan_config or ScanConfig()
        self.console: Console = console_instance or console
        # Uzantidan kategoriye map
        self._ext_to_category: Dict[str, FileCategory] = {}
        for ext in self.config.source_extensions:
            self._ext_to_category[ext.lower()] = FileCategory.SOURCE
        for ext in self.config.document_extensions:
            self._ext_to_category[ext.lower()] = FileCategory.DOCUMENT

    def get_category(self, extension: str) -> FileCategory:
        """Uzantidan kategori al."""
        return self._ext_to_category.get(extension.lower(), FileCategory.UNKNOWN)

    def _walk(self, root_dir: Path) -> Iterator[Path]:
        exclude = set(self.config.exclude_dirs)
        for root, dirs, files in os.walk(root_dir):
            dirs[:] = sorted(
                d for d in dirs
                if d not in exclude and (self.config.include_hidden or not d.startswith('.'))
            )
            for filename in sorted(files):
                if filename.startswith('.') and not self.config.include_hidden:
                    continue
                yield Path(root) / filename

    def _candidates(self, paths: Iterable[PathLike], categories: Sequence[FileCategory]) -> Iterator[Path]:
        for raw in paths:
            PathValidator.validate(raw, must_exist=True)
            # Raporlarda kullanicinin verdigi yol bicimi korunur
            path = Path(raw).expanduser()
            if path.is_file():
                yield path
                continue
            for file_path in self._walk(path):
                if self.get_category(file_path.suffix) in categories:
                    yield file_path

    def scan(
        self,
        paths: Iterable[PathLike],
        categories: Sequence[FileCategory] = (FileCategory.DOCUMENT, FileCategory.SOURCE),
        show_progress: bool = False
    ) -> ScanResult:
        """
        Yollari tara.

        Raises:
            DocumentNotFoundError: Verilen yollardan biri yoksa
        """
        start_time = time.time()
        result = ScanResult(stats={c.value: 0 for c in FileCategory})
        result.stats['total'] = 0
        seen = set()

        def add(file_path: Path) -> None:
            key = str(file_path)
            if key in seen:
                return
            seen.add(key)
            try:
                stat = file_path.stat()
            except OSError:
                # Erisilemeyen dosyalari atla
                return
            category = self.get_category(file_path.suffix)
            result.files.append(FileInfo(
                path=key,
                name=file_path.name,
                extension=file_path.suffix.lower(),
                size=stat.st_size,
                category=category,
                modified_time=datetime.fromtimestamp(stat.st_mtime)
            ))
            result.stats[category.value] += 1
            result.stats['total'] += 1
            result.total_size += stat.st_size

        if show_progress:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console,
                transient=True
            ) as progress:
                task = progress.add_task("Dosyalar taraniyor...", total=None)
                for file_path in self._candidates(paths, categories):
                    add(file_path)
                    progress.update(task, description=f"Taraniyor: {file_path.name[:40]}...")
        else:
            for file_path in self._candidates(paths, categories):
                add(file_path)

        result.scan_time = time.time() - start_time
        return result

    def print_summary(self, result: ScanResult):
        """Tarama ozetini yazdir."""
        table = Table(
            title="Tarama Ozeti",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan"
        )

        table.add_column("Kategori", style="cyan")
        table.add_column("Dosya Sayisi", justify="right")
        table.add_column("Boyut", justify="right")

        category_names = {
            FileCategory.DOCUMENT: 'Dokuman',
            FileCategory.SOURCE: 'Kaynak',
            FileCategory.UNKNOWN: 'Diger',
        }

        for category, name in category_names.items():
            files = result.get_files_by_category(category)
            if files:
                table.add_row(name, str(len(files)), format_size(sum(f.size for f in files)))

        table.add_section()
        table.add_row(
            "[bold]Toplam[/bold]",
            f"[bold]{result.stats['total']}[/bold]",
            f"[bold]{format_size(result.total_size)}[/bold]"
        )

        self.console.print(table)
        self.console.print(f"[dim]Tarama suresi: {result.scan_time:.2f} saniye[/dim]")
