"""
Revizyon Karsilastirma
======================
Ayni rehberin birden fazla kopyasini (revizyonlarini) karsilastirir:
- Bir revizyonda olup digerinde olmayan bolumler
- Revizyonlar arasi isimlendirme stili kaymasi

Revizyonlar tek bir dokumanin seviye-1 basliklarindan ya da birden fazla
dokumandan (cross_document) gelebilir.
"""

from typing import Dict, List, Set, Tuple

from .base_checker import BaseChecker
from .contradiction_checker import revision_claims
from .issues import Issue
from .naming_claims import CONVENTION_NAMES, GENERIC_CLASS, NamingClaim
from ..parsers.markdown_parser import Document, Revision, Heading

RevisionRef = Tuple[Document, Revision]


class RevisionComparer(BaseChecker):
    """Revizyonlar arasi fark kontrolu."""

    name = "revisions"

    RULES = {
        "revision-convention-drift": {
            "description": "Revizyonlar ayni tanimlayici sinifi icin farkli stiller istiyor",
            "severity": "warning"
        },
        "revision-section-missing": {
            "description": "Bolum bazi revizyonlarda var, bazilarinda yok",
            "severity": "info"
        },
    }

    def check(self, document: Document) -> List[Issue]:
        return self.compare([(document, rev) for rev in document.revisions])

    def check_documents(self, documents: List[Document]) -> List[Issue]:
        """Tum dokumanlarin revizyonlarini tek havuzda karsilastir."""
        return self.compare([(doc, rev) for doc in documents for rev in doc.revisions])

    def compare(self, revisions: List[RevisionRef]) -> List[Issue]:
        if len(revisions) < 2:
            return []

        issues: List[Issue] = []
        issues.extend(self._missing_sections(revisions))
        issues.extend(self._convention_drift(revisions))
        self.logger.debug("Revizyon karsilastirmasi tamamlandi", revisions=len(revisions), issues=len(issues))
        return issues

    @staticmethod
    def _label(ref: RevisionRef) -> str:
        document, revision = ref
        title = revision.title or document.title or document.path
        return f"{revision.number}. revizyon ({title})"

    def _missing_sections(self, revisions: List[RevisionRef]) -> List[Issue]:
        issues: List[Issue] = []
        per_revision: List[Dict[str, Heading]] = []
        union: Dict[str, Tuple[Heading, RevisionRef]] = {}

        for ref in revisions:
            sections = {h.base_slug: h for h in ref[1].headings if h.level >= 2 and h.base_slug}
            per_revision.append(sections)
            for slug, heading in sections.items():
                union.setdefault(slug, (heading, ref))

        for ref, sections in zip(revisions, per_revision):
            document, revision = ref
            for slug, (heading, origin) in union.items():
                if slug in sections:
                    continue
                issues.append(self.make_issue(
                    "revision-section-missing",
                    f"'{heading.title}' bolumu {self._label(origin)} icinde var, "
                    f"{self._label(ref)} icinde yok",
                    document, revision.start_line,
                    revision=revision.index
                ))
        return issues

    def _convention_drift(self, revisions: List[RevisionRef]) -> List[Issue]:
        issues: List[Issue] = []
        # sinif -> ilk gorulen (revizyon, stiller)
        reference: Dict[str, Tuple[RevisionRef, Set[str]]] = {}

        for ref in revisions:
            document, revision = ref
            by_class: Dict[str, List[NamingClaim]] = {}
            for claim in revision_claims(revision):
                if claim.positive and claim.identifier_class != GENERIC_CLASS:
                    by_class.setdefault(claim.identifier_class, []).append(claim)

            for cls, claims in by_class.items():
                conventions = {c.convention for c in claims}
                if cls not in reference:
                    reference[cls] = (ref, conventions)
                    continue

                origin, expected = reference[cls]
                if conventions == expected:
                    continue

                issues.append(self.make_issue(
                    "revision-convention-drift",
                    f"'{cls}' icin {self._names(conventions)} isteniyor, "
                    f"{self._label(origin)} ise {self._names(expected)} istiyor",
                    document, claims[0].line,
                    revision=revision.index,
                    evidence=claims[0].text
                ))
        return issues

    @staticmethod
    def _names(conventions: Set[str]) -> str:
        return ", ".join(sorted(CONVENTION_NAMES.get(c, c) for c in conventions))
