"""Yapi Kontrolu - tekrar eden basliklar ve kapanmamis kod bloklari."""

from typing import Dict, List, Tuple

from .base_checker import BaseChecker
from .issues import Issue
from ..parsers.markdown_parser import Document, Heading


class StructureChecker(BaseChecker):
    """Dokumanin yapisal butunlugunu kontrol eder."""

    name = "structure"

    RULES = {
        "duplicate-heading": {
            "description": "Ayni revizyonda ayni seviyede ayni baslik tekrar ediyor",
            "severity": "warning"
        },
        "unclosed-code-fence": {
            "description": "Kod blogu dosya sonuna kadar kapanmiyor",
            "severity": "error"
        },
    }

    def check(self, document: Document) -> List[Issue]:
        issues: List[Issue] = []

        seen: Dict[Tuple[int, int, str], Heading] = {}
        for heading in document.headings:
            key = (heading.revision, heading.level, heading.title.strip().lower())
            first = seen.get(key)
            if first is None:
                seen[key] = heading
                continue
            issues.append(self.make_issue(
                "duplicate-heading",
                f"'{heading.title}' basligi satir {first.line} ile ayni",
                document, heading.line,
                revision=heading.revision,
                evidence=self.line_text(document, heading.line),
                suggestion=f"Anchor '#{heading.slug}' olarak uretildi; basliklari birlestirin"
            ))

        for block in document.code_blocks:
            if not block.closed:
                issues.append(self.make_issue(
                    "unclosed-code-fence",
                    f"Satir {block.line} kod blogu kapanmiyor; dokumanin geri kalani kod olarak gorunur",
                    document, block.line,
                    revision=block.revision,
                    evidence=self.line_text(document, block.line)
                ))

        return issues
