"""
CLI entry point for guidelint.

Usage:
    guidelint check-docs <path>...     Markdown stil rehberlerini denetle
    guidelint lint <path>...           Kaynak dosyalari kural setine karsi denetle
    guidelint rules                    Kural setindeki kurallari listele

Exit codes:
    0  sorun yok
    1  hata bulundu (--strict ile uyari da)
    2  kullanim veya konfigurasyon hatasi
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config.config_loader import GuideLintConfig, load_config
from .orchestrator import GuideLintOrchestrator
from .reporting import Reporter, OUTPUT_FORMATS
from .utils.exceptions import GuideLintError
from .utils.logger import configure_logging, get_logger
from .validation.issues import CheckResult

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_USAGE = 2

err_console = Console(stderr=True)
logger = get_logger("cli")


def exit_code_for(result: CheckResult, strict: bool = False) -> int:
    """Sonuca gore cikis kodu."""
    if result.error_count:
        return EXIT_ISSUES
    if strict and result.warning_count:
        return EXIT_ISSUES
    return EXIT_OK


def _orchestrator(args, config: GuideLintConfig) -> GuideLintOrchestrator:
    show_progress = args.format == "text" and sys.stderr.isatty()
    return GuideLintOrchestrator(config, show_progress=show_progress)


def _print_scan_summary(args, orchestrator: GuideLintOrchestrator) -> None:
    if args.verbose and args.format == "text" and orchestrator.last_scan is not None:
        orchestrator.scanner.print_summary(orchestrator.last_scan)


def cmd_check_docs(args, config: GuideLintConfig) -> int:
    """Markdown dokumanlarini denetle."""
    orchestrator = _orchestrator(args, config)
    result = orchestrator.check_documents(args.paths, cross_document=args.cross_document)
    _print_scan_summary(args, orchestrator)
    Reporter(args.format).report(result, title="Dokuman Denetimi")
    return exit_code_for(result, args.strict)


def cmd_lint(args, config: GuideLintConfig) -> int:
    """Kaynak dosyalari denetle."""
    orchestrator = _orchestrator(args, config)
    result = orchestrator.lint_sources(args.paths, rules_path=args.rules)
    _print_scan_summary(args, orchestrator)
    Reporter(args.format).report(result, title="Kaynak Denetimi")
    return exit_code_for(result, args.strict)


def cmd_rules(args, config: GuideLintConfig) -> int:
    """Kural setini listele."""
    rule_set = GuideLintOrchestrator(config).load_rules(args.rules)
    Reporter(args.format).print_rules(rule_set)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='guidelint',
        description='Markdown stil rehberleri ve kaynak dosyalar icin denetim araci'
    )
    parser.add_argument('--version', action='version', version=f'guidelint {__version__}')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--config', help='guidelint.yaml yolu')
    common.add_argument('--format', choices=OUTPUT_FORMATS, default='text', help='Cikti formati')
    common.add_argument('-v', '--verbose', action='store_true', help='DEBUG loglarini goster')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # check-docs
    docs_p = subparsers.add_parser('check-docs', parents=[common], help='Markdown stil rehberlerini denetle')
    docs_p.add_argument('paths', nargs='+', help='Dosya veya dizinler')
    docs_p.add_argument('--strict', action='store_true', help='Uyarilarda da basarisiz ol')
    docs_p.add_argument(
        '--cross-document', action='store_true',
        help='Revizyonlari tum dokumanlar arasinda karsilastir'
    )
    docs_p.set_defaults(func=cmd_check_docs)

    # lint
    lint_p = subparsers.add_parser('lint', parents=[common], help='Kaynak dosyalari denetle')
    lint_p.add_argument('paths', nargs='+', help='Dosya veya dizinler')
    lint_p.add_argument('--rules', help='Kural seti YAML dosyasi')
    lint_p.add_argument('--strict', action='store_true', help='Uyarilarda da basarisiz ol')
    lint_p.set_defaults(func=cmd_lint)

    # rules
    rules_p = subparsers.add_parser('rules', parents=[common], help='Kural setini listele')
    rules_p.add_argument('--rules', help='Kural seti YAML dosyasi')
    rules_p.set_defaults(func=cmd_rules)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    try:
        config = load_config(args.config)
        configure_logging(
            level="DEBUG" if args.verbose else config.logging.level,
            log_to_file=config.logging.log_to_file,
            log_dir=config.logging.log_dir,
            json_format=config.logging.json_format
        )
        return args.func(args, config)
    except GuideLintError as e:
        logger.debug("Komut basarisiz", code=e.code, details=e.details)
        err_console.print(f"[bold red]Hata:[/bold red] {escape(e.message)} [dim]({e.code})[/dim]")
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
