"""
Kural Degerlendirici
====================
Kaynak dosyalari satir satir bir RuleSet'e karsi tarar ve ihlalleri
Issue olarak dondurur.

- forbid: eslesen her satir bir ihlaldir (sutun = eslesme baslangici + 1)
- require: dosyada en az bir eslesen satir olmali; yoksa satir 1'de tek ihlal
"""

from pathlib import Path
from typing import List, Optional

from .config.constants import CONFIG
from .rules.rules_loader import RuleSet, LintRule
from .types import PathLike, RuleMode
from .utils.exceptions import DocumentNotFoundError, DocumentReadError
from .utils.helpers import truncate_text
from .utils.logger import get_logger
from .validation.issues import Issue

logger = get_logger("evaluator")


class RuleEvaluator:
    """
    Satir bazli kural degerlendirici.

    Kullanim:
        evaluator = RuleEvaluator(load_rule_set())
        issues = evaluator.evaluate("app.coffee")
    """

    def __init__(self, rule_set: RuleSet, max_file_size_mb: float = CONFIG.limits.MAX_FILE_SIZE_MB):
        self.rule_set = rule_set
        self.max_file_size_mb = max_file_size_mb

    def rules_for(self, file_name: str) -> List[LintRule]:
        """Dosyaya uygulanacak aktif kurallar, tanim sirasinda."""
        return [r for r in self.rule_set.enabled_rules if r.applies(file_name)]

    def evaluate(self, file_path: PathLike) -> List[Issue]:
        """
        Dosyayi degerlendir.

        Raises:
            DocumentNotFoundError: Dosya bulunamadi
            DocumentReadError: Dosya okunamadi
        """
        path = Path(file_path)
        if not path.is_file():
            raise DocumentNotFoundError(str(path))

        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > self.max_file_size_mb:
            logger.warning(
                "Dosya boyut limitini asiyor, atlandi",
                path=str(path), size_mb=round(size_mb, 2), limit_mb=self.max_file_size_mb
            )
            return []

        try:
            text = path.read_text(encoding='utf-8-sig', errors='replace')
        except OSError as e:
            raise DocumentReadError(str(path), str(e))

        return self.evaluate_text(text, str(path))

    def evaluate_text(self, text: str, path: str = "<string>", file_name: Optional[str] = None) -> List[Issue]:
        """Bellekteki metni degerlendir."""
        rules = self.rules_for(file_name or Path(path).name)
        if not rules:
            return []

        if text.startswith("\ufeff"):
            text = text[1:]
        lines = text.splitlines()
        issues: List[Issue] = []
        matched_required = set()

        for line_no, line in enumerate(lines, 1):
            for rule in rules:
                match = rule.pattern.search(line)
                if not match:
                    continue
                if rule.mode == RuleMode.REQUIRE:
                    matched_required.add(rule.id)
                    continue
                issues.append(Issue(
                    rule_id=rule.id,
                    severity=rule.severity,
                    message=rule.message,
                    path=path,
                    line=line_no,
                    column=match.start() + 1,
                    evidence=truncate_text(line.rstrip('\n'), CONFIG.limits.EVIDENCE_LENGTH)
                ))

        for rule in rules:
            if rule.mode == RuleMode.REQUIRE and rule.id not in matched_required:
                issues.append(Issue(
                    rule_id=rule.id,
                    severity=rule.severity,
                    message=rule.message,
                    path=path,
                    line=1,
                    column=1
                ))

        issues.sort(key=lambda i: (i.line, self.rule_set.order_of(i.rule_id)))
        logger.debug("Dosya degerlendirildi", path=path, rules=len(rules), issues=len(issues))
        return issues
