"""Celiski Kontrolu - ayni revizyondaki isimlendirme kurallarinin tutarliligi."""

from typing import List

from .base_checker import BaseChecker
from .issues import Issue
from .naming_claims import NamingClaim, extract_claims, find_conflicts
from ..parsers.markdown_parser import Document, Revision


def revision_claims(revision: Revision) -> List[NamingClaim]:
    """Revizyondaki tum kural ve paragraflardan isimlendirme iddialari."""
    claims: List[NamingClaim] = []
    statement = 0
    for section in revision.sections:
        for line, text in section.statements():
            claims.extend(extract_claims(text, line=line, statement=statement))
            statement += 1
    return claims


class ContradictionChecker(BaseChecker):
    """
    Ayni revizyonda ayni tanimlayici sinifi icin farkli harf stilleri
    zorunlu tutuluyorsa ya da bir stil hem zorunlu hem yasaksa raporlar.
    """

    name = "contradictions"

    RULES = {
        "conflicting-conventions": {
            "description": "Ayni tanimlayici sinifi icin iki farkli stil zorunlu",
            "severity": "error"
        },
        "self-contradiction": {
            "description": "Ayni stil hem zorunlu hem yasak",
            "severity": "error"
        },
    }

    def check(self, document: Document) -> List[Issue]:
        issues: List[Issue] = []

        for revision in document.revisions:
            claims = revision_claims(revision)
            self.logger.debug(
                "Isimlendirme iddialari cikarildi",
                revision=revision.number, claims=len(claims)
            )

            for kind, earlier, later in find_conflicts(claims):
                if kind == "conflict":
                    issues.append(self.make_issue(
                        "conflicting-conventions",
                        f"'{later.identifier_class}' icin {later.convention_name} zorunlu, "
                        f"ancak satir {earlier.line} {earlier.convention_name} zorunlu tutuyor",
                        document, later.line,
                        revision=revision.index,
                        evidence=later.text,
                        suggestion="Kurallardan birini kaldirin veya kapsamini daraltin"
                    ))
                else:
                    issues.append(self.make_issue(
                        "self-contradiction",
                        f"'{later.identifier_class}' icin {later.convention_name} "
                        f"satir {earlier.line} ile satir {later.line} arasinda hem zorunlu hem yasak",
                        document, later.line,
                        revision=revision.index,
                        evidence=later.text
                    ))

        return issues
