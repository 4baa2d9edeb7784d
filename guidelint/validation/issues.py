"""Denetim sorunlari ve sonuc modeli - dokuman ve kaynak denetimi icin ortak."""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from ..types import Severity


@dataclass
class Issue:
    """Tek bir denetim sorunu."""
    rule_id: str
    severity: Severity
    message: str
    path: str
    line: int = 0
    column: int = 0
    revision: Optional[int] = None
    evidence: str = ""
    suggestion: str = ""

    @property
    def location(self) -> str:
        """path:line:col formati."""
        if self.line:
            return f"{self.path}:{self.line}:{self.column or 1}"
        return self.path

    def sort_key(self):
        # Ayni satirdaki sorunlar eklenme sirasini korur (stable sort)
        return (self.path, self.line)

    def to_dict(self) -> Dict[str, Any]:
        """Dict'e cevir."""
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.value if isinstance(self.severity, Enum) else self.severity,
            "message": self.message,
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "revision": self.revision,
            "evidence": self.evidence,
            "suggestion": self.suggestion
        }


@dataclass
class CheckResult:
    """Denetim sonucu."""
    issues: List[Issue] = field(default_factory=list)
    files_checked: List[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        """Hata sayisi."""
        return sum(1 for i in self.issues if i.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Uyari sayisi."""
        return sum(1 for i in self.issues if i.severity == Severity.WARNING)

    @property
    def info_count(self) -> int:
        """Bilgi sayisi."""
        return sum(1 for i in self.issues if i.severity == Severity.INFO)

    @property
    def is_valid(self) -> bool:
        return self.error_count == 0

    @property
    def score(self) -> int:
        """0-100 arasi puan; hata 15, uyari 5 puan dusurur."""
        return max(0, 100 - (self.error_count * 15) - (self.warning_count * 5))

    @property
    def summary(self) -> str:
        return (
            f"{len(self.files_checked)} dosya, "
            f"{self.error_count} hata, {self.warning_count} uyari, "
            f"{self.info_count} bilgi (puan: {self.score}/100)"
        )

    def extend(self, issues: List[Issue]) -> None:
        self.issues.extend(issues)

    def sorted_issues(self) -> List[Issue]:
        return sorted(self.issues, key=lambda i: i.sort_key())

    def to_dict(self) -> Dict[str, Any]:
        """Dict'e cevir."""
        return {
            "is_valid": self.is_valid,
            "score": self.score,
            "files_checked": list(self.files_checked),
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "issues": [i.to_dict() for i in self.sorted_issues()],
            "summary": self.summary
        }
