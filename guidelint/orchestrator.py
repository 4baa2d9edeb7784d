"""
Denetim Orchestrator Modulu - Ana is akisi koordinatoru

Iki akis yonetilir:
1. Dokuman denetimi: tara -> parse -> dokuman denetimleri -> revizyon karsilastirma
2. Kaynak denetimi: kural setini yukle -> tara -> satir kurallarini degerlendir

Her iki akista da config'deki seviye override'lari uygulanir ve okunamayan
dosyalar calismayi durdurmak yerine `read-error` sorunu olarak kaydedilir.
"""

from typing import List, Optional, Iterable

from .config.config_loader import GuideLintConfig
from .evaluator import RuleEvaluator
from .parsers.markdown_parser import MarkdownParser, ExampleClassifier, Document
from .rules.rules_loader import RulesLoader, RuleSet
from .scanner import FileScanner, ScanResult
from .types import FileCategory, PathLike, Severity
from .utils.exceptions import FileOperationError, ParsingError, ValidationError
from .utils.logger import get_logger
from .validation import DOCUMENT_CHECKERS, BaseChecker, RevisionComparer
from .validation.issues import Issue, CheckResult

logger = get_logger("orchestrator")

READ_ERROR = "read-error"


class GuideLintOrchestrator:
    """
    Ana denetim koordinatoru.

    Example:
        >>> orchestrator = GuideLintOrchestrator(load_config())
        >>> result = orchestrator.check_documents(["README.md"])
        >>> print(result.summary)
    """

    def __init__(self, config: Optional[GuideLintConfig] = None, show_progress: bool = False) -> None:
        self.config = config or GuideLintConfig()
        self.show_progress = show_progress
        self.last_scan: Optional[ScanResult] = None
        self.scanner = FileScanner(self.config.scan)
        self.parser = MarkdownParser(ExampleClassifier(
            bad_markers=self.config.markers.bad,
            good_markers=self.config.markers.good
        ), max_file_size_mb=self.config.lint.max_file_size_mb)

    # ─────────────────────────────────────────────────────────────────────────
    # Dokuman denetimi
    # ─────────────────────────────────────────────────────────────────────────

    def build_checkers(self) -> List[BaseChecker]:
        """Config'de acik olan dokuman denetimleri."""
        return [cls(self.config) for cls in DOCUMENT_CHECKERS if self.config.is_enabled(cls.name)]

    def check_document(self, document: Document) -> List[Issue]:
        """Tek bir parse edilmis dokumani denetle (revizyon karsilastirmasi dahil)."""
        issues: List[Issue] = []
        for checker in self.build_checkers():
            issues.extend(checker.check(document))
        if self.config.is_enabled(RevisionComparer.name):
            issues.extend(RevisionComparer(self.config).check(document))
        return self._apply_overrides(issues)

    def check_documents(self, paths: Iterable[PathLike], cross_document: bool = False) -> CheckResult:
        """
        Markdown dokumanlarini denetle.

        Args:
            paths: Dosya veya dizin yollari
            cross_document: Revizyon karsilastirmasini tum dokumanlar uzerinden yap

        Raises:
            DocumentNotFoundError: Verilen yollardan biri yoksa
        """
        result = CheckResult()

        with logger.timer("check_documents", log_level="INFO"):
            scan = self.scanner.scan(paths, categories=(FileCategory.DOCUMENT,), show_progress=self.show_progress)
            self.last_scan = scan
            checkers = self.build_checkers()
            compare = self.config.is_enabled(RevisionComparer.name)
            documents: List[Document] = []

            for file_info in scan.files:
                result.files_checked.append(file_info.path)
                try:
                    document = self.parser.parse(file_info.path)
                except (FileOperationError, ParsingError, ValidationError) as e:
                    logger.warning("Dokuman okunamadi", path=file_info.path, error=e.message)
                    result.issues.append(self._read_error(file_info.path, e))
                    continue

                documents.append(document)
                for checker in checkers:
                    result.extend(checker.check(document))
                if compare and not cross_document:
                    result.extend(RevisionComparer(self.config).check(document))

            if compare and cross_document:
                result.extend(RevisionComparer(self.config).check_documents(documents))

        result.issues = self._apply_overrides(result.issues)
        logger.info("Dokuman denetimi tamamlandi", files=len(result.files_checked), issues=len(result.issues))
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # Kaynak denetimi
    # ─────────────────────────────────────────────────────────────────────────

    def load_rules(self, rules_path: Optional[PathLike] = None) -> RuleSet:
        """
        Kural setini yukle: acik yol, config'deki dosya, yoksa varsayilan set.

        Raises:
            RulesLoadError, RuleDefinitionError
        """
        loader = RulesLoader(variables={"max_line_length": self.config.lint.max_line_length})
        return loader.load(rules_path or self.config.lint.rules_file)

    def lint_sources(self, paths: Iterable[PathLike], rules_path: Optional[PathLike] = None) -> CheckResult:
        """
        Kaynak dosyalari kural setine karsi denetle.

        Raises:
            DocumentNotFoundError: Verilen yollardan biri yoksa
            RulesLoadError, RuleDefinitionError: Kural seti gecersizse
        """
        result = CheckResult()

        with logger.timer("lint_sources", log_level="INFO"):
            rule_set = self.load_rules(rules_path)
            evaluator = RuleEvaluator(rule_set, max_file_size_mb=self.config.lint.max_file_size_mb)
            scan = self.scanner.scan(paths, categories=(FileCategory.SOURCE,), show_progress=self.show_progress)
            self.last_scan = scan

            for file_info in scan.files:
                result.files_checked.append(file_info.path)
                try:
                    result.extend(evaluator.evaluate(file_info.path))
                except FileOperationError as e:
                    logger.warning("Kaynak dosya okunamadi", path=file_info.path, error=e.message)
                    result.issues.append(self._read_error(file_info.path, e))

        result.issues = self._apply_overrides(result.issues)
        logger.info("Kaynak denetimi tamamlandi", files=len(result.files_checked), issues=len(result.issues))
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # Yardimcilar
    # ─────────────────────────────────────────────────────────────────────────

    def _apply_overrides(self, issues: List[Issue]) -> List[Issue]:
        """Config'deki seviye override'larini uygula; 'off' olanlari cikar."""
        if not self.config.severity_overrides:
            return issues

        kept: List[Issue] = []
        for issue in issues:
            severity = self.config.severity_for(issue.rule_id, issue.severity)
            if severity is None:
                continue
            issue.severity = severity
            kept.append(issue)
        return kept

    @staticmethod
    def _read_error(path: str, error) -> Issue:
        return Issue(
            rule_id=READ_ERROR,
            severity=Severity.ERROR,
            message=error.message,
            path=path,
            suggestion=error.code
        )
