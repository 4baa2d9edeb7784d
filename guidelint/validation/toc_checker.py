"""Icindekiler ve Anchor Kontrolu - dokuman ici linklerin baslik anchor'larina cozulmesi."""

import difflib
from typing import List, Optional

from .base_checker import BaseChecker
from .issues import Issue
from ..parsers.markdown_parser import Document, Heading, Link


class TocChecker(BaseChecker):
    """
    Icindekiler kontrolcusu.

    Her icindekiler girdisi dokumanda kendisinden sonra gelen bir basliga,
    diger dokuman ici linkler ise var olan bir basliga cozulmelidir.
    """

    name = "toc"

    RULES = {
        "toc-missing-anchor": {
            "description": "Icindekiler girdisinin hedef basligi yok",
            "severity": "error"
        },
        "toc-backward-anchor": {
            "description": "Icindekiler girdisi kendisinden once gelen bir basliga isaret ediyor",
            "severity": "error"
        },
        "toc-cross-revision": {
            "description": "Icindekiler girdisi baska bir revizyonun basligina isaret ediyor",
            "severity": "warning"
        },
        "broken-anchor": {
            "description": "Dokuman ici link var olmayan bir basliga isaret ediyor",
            "severity": "error"
        },
    }

    def check(self, document: Document) -> List[Issue]:
        issues: List[Issue] = []

        for link in document.links:
            if not link.target:
                continue

            target = document.anchors.get(link.target)
            if link.is_toc_entry:
                issue = self._check_toc_entry(document, link, target)
            elif target is None:
                issue = self.make_issue(
                    "broken-anchor",
                    f"'#{link.raw_target}' hedefi bulunamadi",
                    document, link.line, link.column,
                    revision=link.revision,
                    evidence=self.line_text(document, link.line),
                    suggestion=self._suggest(document, link.target)
                )
            else:
                issue = None

            if issue is not None:
                issues.append(issue)

        self.logger.debug("Anchor kontrolu tamamlandi", path=document.path, issues=len(issues))
        return issues

    def _check_toc_entry(self, document: Document, link: Link, target: Optional[Heading]) -> Optional[Issue]:
        evidence = self.line_text(document, link.line)

        if target is None:
            return self.make_issue(
                "toc-missing-anchor",
                f"Icindekiler girdisi '{link.text}' icin '#{link.raw_target}' basligi yok",
                document, link.line, link.column,
                revision=link.revision,
                evidence=evidence,
                suggestion=self._suggest(document, link.target)
            )

        if target.revision != link.revision:
            local = self._same_revision_heading(document, link, target)
            suggestion = f"#{local.slug} kullanin" if local else ""
            return self.make_issue(
                "toc-cross-revision",
                f"'#{link.raw_target}' {target.revision + 1}. revizyondaki "
                f"'{target.title}' basligina (satir {target.line}) cozuluyor",
                document, link.line, link.column,
                revision=link.revision,
                evidence=evidence,
                suggestion=suggestion
            )

        if self.config.checks.toc_require_forward and target.line <= link.line:
            return self.make_issue(
                "toc-backward-anchor",
                f"'#{link.raw_target}' hedefi girdiden once (satir {target.line}) geliyor",
                document, link.line, link.column,
                revision=link.revision,
                evidence=evidence
            )

        return None

    @staticmethod
    def _same_revision_heading(document: Document, link: Link, target: Heading) -> Optional[Heading]:
        for heading in document.headings:
            if heading.revision == link.revision and heading.base_slug == target.base_slug:
                return heading
        return None

    @staticmethod
    def _suggest(document: Document, fragment: str) -> str:
        matches = difflib.get_close_matches(fragment, list(document.anchors), n=1, cutoff=0.6)
        if matches:
            return f"'#{matches[0]}' mi kastedildi?"
        return ""
