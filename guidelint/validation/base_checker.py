"""
Base Checker Module
===================
Dokuman denetimleri icin ortak temel sinif.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional

from .issues import Issue
from ..config.config_loader import GuideLintConfig
from ..config.constants import CONFIG
from ..parsers.markdown_parser import Document
from ..types import Severity
from ..utils.helpers import truncate_text
from ..utils.logger import get_logger


class BaseChecker(ABC):
    """
    Temel denetim sinifi.

    Alt siniflar `name`, `RULES` ve check() tanimlar. RULES her kural id'si
    icin aciklama ve varsayilan seviyeyi tutar.
    """

    name: str = ""
    RULES: Dict[str, Dict[str, Any]] = {}

    def __init__(self, config: Optional[GuideLintConfig] = None) -> None:
        self.config = config or GuideLintConfig()
        self.logger = get_logger(f"checks.{self.name or self.__class__.__name__}")

    @abstractmethod
    def check(self, document: Document) -> List[Issue]:
        """Dokumani denetle."""
        pass

    def make_issue(
        self,
        rule_id: str,
        message: str,
        document: Document,
        line: int,
        column: int = 0,
        revision: Optional[int] = None,
        evidence: str = "",
        suggestion: str = ""
    ) -> Issue:
        """Kural tanimindaki varsayilan seviye ile Issue olustur."""
        severity = Severity.parse(self.RULES[rule_id]["severity"])
        return Issue(
            rule_id=rule_id,
            severity=severity,
            message=message,
            path=document.path,
            line=line,
            column=column,
            revision=revision_number(document, revision),
            evidence=truncate_text(evidence.strip(), CONFIG.limits.EVIDENCE_LENGTH),
            suggestion=suggestion
        )

    def line_text(self, document: Document, line: int) -> str:
        if 1 <= line <= len(document.lines):
            return document.lines[line - 1]
        return ""


def revision_number(document: Document, index: Optional[int]) -> Optional[int]:
    """Tek revizyonlu dokumanlarda None, aksi halde 1 tabanli numara."""
    if index is None or len(document.revisions) < 2:
        return None
    return index + 1
