#!/usr/bin/env python3
"""
guidelint - Ana Program
=======================
Markdown stil rehberlerini ve kaynak dosyalari denetler.

Kullanim:
    python main.py check-docs README.md
    python main.py lint src/ --rules rules.yaml
    python main.py rules
"""

import sys
from pathlib import Path

# Proje kok dizinini path'e ekle
sys.path.insert(0, str(Path(__file__).parent))

from rich.console import Console
from rich.panel import Panel
from rich import box

from guidelint import __version__
from guidelint.cli import main as cli_main

console = Console(stderr=True)


def print_banner():
    """Baslik banner'i."""
    console.print(Panel(
        "[bold]Markdown stil rehberi denetimi[/bold]\n"
        "[dim]icindekiler · ornek eslestirme · celiskiler · dil etiketleri · satir kurallari[/dim]",
        title=f"guidelint v{__version__}",
        box=box.DOUBLE,
        border_style="cyan"
    ))


def main() -> int:
    if len(sys.argv) == 1:
        print_banner()
    return cli_main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
