"""Ornek Eslestirme Kontrolu - her kotu ornek ayni kural altinda bir iyi ornekle eslesmeli."""

from typing import List

from .base_checker import BaseChecker
from .issues import Issue
from ..parsers.markdown_parser import Document, CodeBlock
from ..utils.helpers import truncate_text


class ExamplePairChecker(BaseChecker):
    """Kotu ornegi olup iyi ornegi olmayan kurallari ve bolumleri bulur."""

    name = "examples"

    RULES = {
        "unpaired-bad-example": {
            "description": "Kotu ornek ayni kural altinda iyi bir ornekle eslesmiyor",
            "severity": "error"
        },
    }

    def check(self, document: Document) -> List[Issue]:
        issues: List[Issue] = []

        for revision in document.revisions:
            for section in revision.sections:
                for rule in section.rules:
                    issue = self._check_blocks(document, rule.examples, f"'{truncate_text(rule.text, 60)}' kurali")
                    if issue:
                        issues.append(issue)

                owner = f"'{section.title}' bolumu" if section.title else "dokuman basi"
                issue = self._check_blocks(document, section.examples, owner)
                if issue:
                    issues.append(issue)

        return issues

    def _check_blocks(self, document: Document, blocks: List[CodeBlock], owner: str):
        bad = [b for b in blocks if b.kind.shows_bad]
        if not bad or any(b.kind.shows_good for b in blocks):
            return None

        first = bad[0]
        return self.make_issue(
            "unpaired-bad-example",
            f"{owner} icin kotu ornek var ama iyi ornek yok",
            document, first.line,
            revision=first.revision,
            evidence=first.content.splitlines()[0] if first.content else first.label,
            suggestion="Kotu ornegin hemen ardina dogru kullanimi gosteren bir ornek ekleyin"
        )
