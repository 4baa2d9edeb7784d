"""Rapor ciktisi - sonuclari rich tablo veya JSON olarak yazdirir."""

import json
import sys
from typing import Optional, TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .rules.rules_loader import RuleSet
from .types import Severity
from .validation.issues import CheckResult

SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}

OUTPUT_FORMATS = ["text", "json"]


class Reporter:
    """
    Denetim sonucu yazdirici.

    Kullanim:
        reporter = Reporter(output_format="json")
        reporter.report(result)
    """

    def __init__(
        self,
        output_format: str = "text",
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None
    ) -> None:
        self.output_format = output_format
        self.console = console or Console()
        self.stream = stream or sys.stdout

    def report(self, result: CheckResult, title: str = "Denetim Sonuclari") -> None:
        if self.output_format == "json":
            self.stream.write(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
            self.stream.write("\n")
            return
        self.print_table(result, title)

    def print_table(self, result: CheckResult, title: str) -> None:
        """Sorunlari tablo halinde yazdir."""
        if not result.issues:
            self.console.print(f"[bold green]✓ Sorun bulunamadi[/bold green] [dim]({result.summary})[/dim]")
            return

        table = Table(
            title=title,
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Konum", style="dim", no_wrap=True)
        table.add_column("Seviye")
        table.add_column("Kural", style="magenta")
        table.add_column("Mesaj")
        table.add_column("Rev.", justify="right")

        for issue in result.sorted_issues():
            style = SEVERITY_STYLES.get(issue.severity, "")
            message = escape(issue.message)
            if issue.suggestion:
                message = f"{message}\n[dim]→ {escape(issue.suggestion)}[/dim]"
            table.add_row(
                issue.location,
                f"[{style}]{issue.severity.value}[/{style}]",
                issue.rule_id,
                message,
                str(issue.revision) if issue.revision else ""
            )

        self.console.print(table)
        status = "[bold green]GECTI[/bold green]" if result.is_valid else "[bold red]KALDI[/bold red]"
        self.console.print(f"{status} {result.summary}")

    def print_rules(self, rule_set: RuleSet) -> None:
        """Kural setini listele."""
        if self.output_format == "json":
            data = {
                "name": rule_set.name,
                "description": rule_set.description,
                "source_path": rule_set.source_path,
                "rules": [r.to_dict() for r in rule_set],
            }
            self.stream.write(json.dumps(data, indent=2, ensure_ascii=False))
            self.stream.write("\n")
            return

        table = Table(
            title=f"Kural Seti: {rule_set.name}",
            caption=rule_set.description or None,
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kural", style="magenta")
        table.add_column("Seviye")
        table.add_column("Mod")
        table.add_column("Dosyalar")
        table.add_column("Mesaj")

        for index, rule in enumerate(rule_set, 1):
            style = SEVERITY_STYLES.get(rule.severity, "")
            rule_id = rule.id if rule.enabled else f"[strike]{rule.id}[/strike]"
            table.add_row(
                str(index),
                rule_id,
                f"[{style}]{rule.severity.value}[/{style}]",
                rule.mode.value,
                ", ".join(rule.applies_to) or "*",
                escape(rule.message)
            )

        self.console.print(table)
