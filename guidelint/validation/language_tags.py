"""Dil Etiketi Kontrolu - bir revizyondaki kod ornekleri tek bir dil etiketi kullanmali."""

from collections import Counter
from typing import Dict, List, Optional

from .base_checker import BaseChecker
from .issues import Issue
from ..parsers.markdown_parser import Document, Revision


class LanguageTagChecker(BaseChecker):
    """Revizyon icindeki baskin dil etiketinden sapan kod bloklarini bulur."""

    name = "language-tags"

    RULES = {
        "mixed-language-tags": {
            "description": "Kod blogu revizyonun baskin dil etiketinden farkli",
            "severity": "warning"
        },
        "missing-language-tag": {
            "description": "Kod blogunun dil etiketi yok",
            "severity": "info"
        },
    }

    def normalize(self, tag: str) -> str:
        tag = tag.strip().lower()
        aliases: Dict[str, str] = self.config.languages.aliases
        return aliases.get(tag, tag)

    def dominant_tag(self, revision: Revision) -> Optional[str]:
        """En sik kullanilan etiket; esitlikte ilk gorulen."""
        ignored = {self.normalize(t) for t in self.config.languages.ignored}
        counts: Counter = Counter()
        first_seen: Dict[str, int] = {}

        for block in revision.code_blocks:
            tag = self.normalize(block.language)
            if not tag or tag in ignored:
                continue
            counts[tag] += 1
            first_seen.setdefault(tag, len(first_seen))

        if not counts:
            return None
        return max(counts, key=lambda t: (counts[t], -first_seen[t]))

    def check(self, document: Document) -> List[Issue]:
        issues: List[Issue] = []
        ignored = {self.normalize(t) for t in self.config.languages.ignored}

        for revision in document.revisions:
            dominant = self.dominant_tag(revision)

            for block in revision.code_blocks:
                tag = self.normalize(block.language)
                fence_line = self.line_text(document, block.line)

                if not tag:
                    if self.config.checks.require_language_tag:
                        issues.append(self.make_issue(
                            "missing-language-tag",
                            "Kod blogunda dil etiketi yok",
                            document, block.line,
                            revision=revision.index,
                            evidence=fence_line,
                            suggestion=f"```{dominant}" if dominant else ""
                        ))
                    continue

                if tag in ignored or dominant is None or tag == dominant:
                    continue

                issues.append(self.make_issue(
                    "mixed-language-tags",
                    f"'{block.language}' etiketi revizyonun baskin etiketi '{dominant}' ile uyusmuyor",
                    document, block.line,
                    revision=revision.index,
                    evidence=fence_line,
                    suggestion=f"```{dominant}"
                ))

        return issues
