"""
Markdown Parser Modulu
======================
Stil rehberi dokumanlarini bolum / kural / ornek yapisina ayirir.

Cikti modeli:
- Heading: baslik, seviye ve benzersiz anchor
- CodeBlock: fenced kod blogu, dil etiketi ve iyi/kotu siniflandirmasi
- Link: dokuman ici (#anchor) linkler, icindekiler girdileri isaretli
- Rule: bolum altindaki ust seviye madde ve onu izleyen ornekler
- Section: baslik altindaki kurallar, paragraflar ve sahipsiz ornekler
- Revision: seviye-1 baslikla baslayan ve rehberin bir kopyasini tasiyan bolum grubu
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Tuple, Sequence

from .base_parser import BaseParser
from .slugger import Slugger, slugify, normalize_fragment, strip_inline_markup
from ..config.constants import CONFIG
from ..types import ExampleKind
from ..utils.exceptions import MarkdownParseError


# ═══════════════════════════════════════════════════════════════════════════════
# PATTERNS
# ═══════════════════════════════════════════════════════════════════════════════

_FENCE_OPEN = re.compile(r'^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})(?P<info>.*)$')
_ATX_HEADING = re.compile(r'^ {0,3}(?P<hashes>#{1,6})(?:[ \t]+(?P<text>.*?))?[ \t]*$')
_ATX_CLOSING = re.compile(r'(?:^|[ \t]+)#+[ \t]*$')
_SETEXT_UNDERLINE = re.compile(r'^ {0,3}(?:=+|-{2,})[ \t]*$')
_BULLET = re.compile(r'^(?P<indent>[ \t]*)(?P<marker>[-*+]|\d{1,9}[.)])[ \t]+(?P<text>.*)$')
_THEMATIC_BREAK = re.compile(r'^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$')
_BLOCKQUOTE = re.compile(r'^[ \t]*>[ \t]?')
_INTERNAL_LINK = re.compile(r'(?<!!)\[(?P<text>[^\]]+)\]\(\s*<?#(?P<target>[^)\s>]*)>?(?:\s+"[^"]*")?\s*\)')
_TOC_ITEM = re.compile(
    r'^[ \t]*(?:[-*+]|\d{1,9}[.)])[ \t]+\[[^\]]+\]\(\s*<?#[^)\s>]*>?\s*\)[ \t]*$'
)
_CODE_SPAN = re.compile(r'(`+).+?\1')
_EMPHASIS_CHARS = re.compile(r'[*_~]')

# Etiket satirinda isaret kelimesinden sonra gelebilecek kelimeler ("Bad example:")
_LABEL_NOUNS = r'(?:examples?|code|style|practice|way|usage|pattern|version)'


# ═══════════════════════════════════════════════════════════════════════════════
# DATA MODEL
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass
class Heading:
    """Dokuman basligi."""
    level: int
    text: str
    title: str
    slug: str
    base_slug: str
    line: int
    revision: int = 0


@dataclass
class CodeBlock:
    """Fenced kod blogu."""
    language: str
    content: str
    line: int
    end_line: int
    closed: bool = True
    kind: ExampleKind = ExampleKind.NEUTRAL
    label: str = ""
    revision: int = 0


@dataclass
class Link:
    """Dokuman ici link."""
    text: str
    target: str
    raw_target: str
    line: int
    column: int
    is_toc_entry: bool = False
    revision: int = 0


@dataclass
class Paragraph:
    """Kurala ait olmayan duz metin paragrafi."""
    text: str
    line: int


@dataclass
class Rule:
    """Ust seviye madde - tek bir stil kurali."""
    text: str
    line: int
    examples: List[CodeBlock] = field(default_factory=list)


@dataclass
class Section:
    """Bir baslik ve altindaki icerik."""
    heading: Optional[Heading]
    revision: int = 0
    rules: List[Rule] = field(default_factory=list)
    paragraphs: List[Paragraph] = field(default_factory=list)
    examples: List[CodeBlock] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.heading.title if self.heading else ""

    @property
    def line(self) -> int:
        return self.heading.line if self.heading else 1

    def statements(self) -> List[Tuple[int, str]]:
        """Kural ve paragraf metinleri (satir, metin) olarak, satir sirasinda."""
        items = [(r.line, r.text) for r in self.rules]
        items.extend((p.line, p.text) for p in self.paragraphs)
        return sorted(items)

    def all_examples(self) -> List[CodeBlock]:
        blocks = list(self.examples)
        for rule in self.rules:
            blocks.extend(rule.examples)
        return sorted(blocks, key=lambda b: b.line)


@dataclass
class Revision:
    """Rehberin dokuman icindeki bir kopyasi."""
    index: int
    title: str
    start_line: int
    end_line: int = 0
    sections: List[Section] = field(default_factory=list)

    @property
    def number(self) -> int:
        """Kullaniciya gosterilen 1 tabanli numara."""
        return self.index + 1

    @property
    def headings(self) -> List[Heading]:
        return [s.heading for s in self.sections if s.heading is not None]

    @property
    def code_blocks(self) -> List[CodeBlock]:
        blocks: List[CodeBlock] = []
        for section in self.sections:
            blocks.extend(section.all_examples())
        return sorted(blocks, key=lambda b: b.line)


@dataclass
class Document:
    """Parse edilmis markdown dokumani."""
    path: str
    lines: List[str]
    headings: List[Heading] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    code_blocks: List[CodeBlock] = field(default_factory=list)
    revisions: List[Revision] = field(default_factory=list)
    anchors: Dict[str, Heading] = field(default_factory=dict)

    @property
    def title(self) -> str:
        for heading in self.headings:
            if heading.level == 1:
                return heading.title
        return ""

    def revision_at(self, line: int) -> int:
        """Satirin ait oldugu revizyon indeksi."""
        current = 0
        for rev in self.revisions:
            if rev.start_line <= line:
                current = rev.index
        return current

    def to_dict(self) -> Dict[str, object]:
        """Ozet dict."""
        return {
            "path": self.path,
            "line_count": len(self.lines),
            "heading_count": len(self.headings),
            "link_count": len(self.links),
            "code_block_count": len(self.code_blocks),
            "revision_count": len(self.revisions),
        }


# ═══════════════════════════════════════════════════════════════════════════════
# EXAMPLE CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════════════

class ExampleClassifier:
    """Kod orneklerini isaret kelimelerine gore iyi/kotu olarak siniflandirir."""

    def __init__(
        self,
        bad_markers: Sequence[str] = CONFIG.markers.BAD_MARKERS,
        good_markers: Sequence[str] = CONFIG.markers.GOOD_MARKERS,
        comment_prefixes: Sequence[str] = CONFIG.markers.COMMENT_PREFIXES
    ) -> None:
        self.comment_prefixes = tuple(comment_prefixes)
        self._bad = self._alternation(bad_markers)
        self._good = self._alternation(good_markers)

        self._comment_bad = self._comment_pattern(bad_markers)
        self._comment_good = self._comment_pattern(good_markers)
        label_tail = rf'(?:\s+{_LABEL_NOUNS})?\s*(?::.*|[.!]?\s*)$'
        self._label_bad = re.compile(rf'^(?:{self._bad}){label_tail}', re.IGNORECASE)
        self._label_good = re.compile(rf'^(?:{self._good}){label_tail}', re.IGNORECASE)

    @classmethod
    def _comment_pattern(cls, words: Sequence[str]) -> 're.Pattern':
        """
        Yorum satiri isareti. Kelime isaretinden sonra bir ayirici gelmeli
        ("# Bad", "# No:", "# Avoid - ...", "# Good example"); "# No need for parens"
        isaret sayilmaz. Sembol isaretleri (✓, ❌) bosluk ve metinle devam edebilir.
        """
        word_markers = [w for w in words if re.match(r'\w', w.strip())]
        symbol_markers = [w for w in words if w.strip() and not re.match(r'\w', w.strip())]
        terminator = r'\s*(?:$|[:;(]|[.!)\]]\s*$|[-,]\s)'
        return re.compile(
            rf'^(?:(?:{cls._alternation(word_markers)})(?:\s+{_LABEL_NOUNS})?(?={terminator})'
            rf'|(?:{cls._alternation(symbol_markers)})(?=$|\s))',
            re.IGNORECASE
        )

    @staticmethod
    def _alternation(words: Sequence[str]) -> str:
        # Uzun kelimeler once denenir ("don't" / "dont", "preferred" / "prefer")
        ordered = sorted({w.strip() for w in words if w and w.strip()}, key=len, reverse=True)
        if not ordered:
            return r'(?!x)x'
        return "|".join(re.escape(w) for w in ordered)

    def label_kind(self, text: Optional[str]) -> Optional[str]:
        """Etiket satiri ise 'bad' / 'good', degilse None."""
        if not text:
            return None
        cleaned = _EMPHASIS_CHARS.sub('', _BLOCKQUOTE.sub('', text)).strip()
        if self._label_bad.match(cleaned):
            return "bad"
        if self._label_good.match(cleaned):
            return "good"
        return None

    def is_label(self, text: str) -> bool:
        return self.label_kind(text) is not None

    def _comment_text(self, line: str) -> Optional[str]:
        stripped = line.strip()
        for prefix in self.comment_prefixes:
            if stripped.startswith(prefix):
                body = stripped[len(prefix):]
                for suffix in ("*/", "-->"):
                    if body.endswith(suffix):
                        body = body[:-len(suffix)]
                return body.strip()
        return None

    def classify(self, content: str, label: Optional[str] = None) -> ExampleKind:
        """Kod blogunu siniflandir."""
        has_bad = False
        has_good = False

        for line in content.splitlines():
            comment = self._comment_text(line)
            if comment is None:
                continue
            if self._comment_bad.match(comment):
                has_bad = True
            elif self._comment_good.match(comment):
                has_good = True

        kind = self.label_kind(label)
        if kind == "bad":
            has_bad = True
        elif kind == "good":
            has_good = True

        if has_bad and has_good:
            return ExampleKind.MIXED
        if has_bad:
            return ExampleKind.BAD
        if has_good:
            return ExampleKind.GOOD
        return ExampleKind.NEUTRAL


# ═══════════════════════════════════════════════════════════════════════════════
# PARSER
# ═══════════════════════════════════════════════════════════════════════════════

class _ParseState:
    """Tek bir parse gecisinin degisken durumu."""

    def __init__(self, document: Document) -> None:
        self.document = document
        self.slugger = Slugger()
        self.revision = Revision(index=0, title="", start_line=1)
        self.section = Section(heading=None, revision=0)
        self.revision.sections.append(self.section)
        document.revisions.append(self.revision)
        self.rule: Optional[Rule] = None
        self.paragraph: List[str] = []
        self.paragraph_line = 0
        self.last_prose: Optional[str] = None
        self.prev_blank = True
        self.seen_h1 = False

    def flush_paragraph(self) -> None:
        if self.paragraph:
            self.section.paragraphs.append(
                Paragraph(text=" ".join(self.paragraph), line=self.paragraph_line)
            )
        self.paragraph = []
        self.paragraph_line = 0


class MarkdownParser(BaseParser[Document]):
    """
    Markdown stil rehberi parser'i.

    Kullanim:
        parser = MarkdownParser()
        document = parser.parse("README.md")
        for revision in document.revisions:
            ...
    """

    SUPPORTED_EXTENSIONS = list(CONFIG.scan.DOCUMENT_EXTENSIONS)

    def __init__(
        self,
        classifier: Optional[ExampleClassifier] = None,
        max_file_size_mb: float = CONFIG.limits.MAX_FILE_SIZE_MB
    ) -> None:
        super().__init__(max_file_size_mb)
        self.classifier = classifier or ExampleClassifier()

    def parse_text(self, text: str, path: str = "<string>") -> Document:
        """
        Markdown metnini Document modeline cevir.

        Raises:
            MarkdownParseError: Metin ikili (binary) icerik tasiyorsa
        """
        if "\x00" in text:
            raise MarkdownParseError(path, "ikili icerik (NUL bayti) bulundu")
        if text.startswith("\ufeff"):
            text = text[1:]

        lines = text.splitlines()
        document = Document(path=path, lines=lines)
        state = _ParseState(document)

        i = 0
        total = len(lines)
        while i < total:
            line_no = i + 1
            raw = lines[i]
            expanded = raw.expandtabs(4)

            fence = _FENCE_OPEN.match(expanded)
            if fence and not (fence.group('fence')[0] == '`' and '`' in fence.group('info')):
                i = self._consume_fence(state, lines, i, fence)
                continue

            if not expanded.strip():
                state.flush_paragraph()
                state.prev_blank = True
                i += 1
                continue

            heading = _ATX_HEADING.match(expanded)
            if heading:
                heading_text = _ATX_CLOSING.sub('', heading.group('text') or '')
                self._start_section(state, len(heading.group('hashes')), heading_text, line_no)
                i += 1
                continue

            if _THEMATIC_BREAK.match(expanded):
                state.flush_paragraph()
                state.rule = None
                state.prev_blank = True
                i += 1
                continue

            self._collect_links(state, expanded, line_no)

            bullet = _BULLET.match(expanded)
            if bullet:
                indent = len(bullet.group('indent'))
                item_text = bullet.group('text').strip()
                if indent < 2:
                    state.flush_paragraph()
                    state.rule = Rule(text=item_text, line=line_no)
                    state.section.rules.append(state.rule)
                    state.last_prose = None
                    state.prev_blank = False
                    i += 1
                    continue
                if state.rule is not None:
                    # Ic ice madde: kural metnine eklenir
                    state.rule.text = f"{state.rule.text} {item_text}".strip()
                    state.prev_blank = False
                    i += 1
                    continue

            prose = _BLOCKQUOTE.sub('', expanded).strip()
            indent = len(expanded) - len(expanded.lstrip(' '))

            # Setext baslik: duz metin + === / --- alt cizgisi
            if (
                state.rule is None
                and not bullet
                and indent <= 3
                and not _BLOCKQUOTE.match(expanded)
                and i + 1 < total
                and _SETEXT_UNDERLINE.match(lines[i + 1].expandtabs(4))
            ):
                level = 1 if lines[i + 1].strip().startswith('=') else 2
                heading_text = " ".join(state.paragraph + [prose])
                state.paragraph = []
                self._start_section(state, level, heading_text, state.paragraph_line or line_no)
                i += 2
                continue

            state.last_prose = prose
            if self.classifier.is_label(prose):
                # Etiket satirlari aktif kurali sonlandirmaz
                state.flush_paragraph()
                state.prev_blank = False
                i += 1
                continue

            if state.rule is not None and (indent >= 2 or not state.prev_blank):
                state.rule.text = f"{state.rule.text} {prose}".strip()
            else:
                state.rule = None
                if not state.paragraph:
                    state.paragraph_line = line_no
                state.paragraph.append(prose)

            state.prev_blank = False
            i += 1

        state.flush_paragraph()
        state.revision.end_line = max(len(lines), state.revision.start_line)
        return document

    def _start_section(self, state: _ParseState, level: int, text: str, line_no: int) -> None:
        state.flush_paragraph()
        state.rule = None
        state.last_prose = None
        state.prev_blank = True

        document = state.document
        title = strip_inline_markup(text)

        if level == 1:
            if state.seen_h1:
                state.revision.end_line = line_no - 1
                state.revision = Revision(
                    index=len(document.revisions),
                    title=title,
                    start_line=line_no
                )
                document.revisions.append(state.revision)
            elif not state.revision.title:
                state.revision.title = title
            state.seen_h1 = True

        heading = Heading(
            level=level,
            text=text.strip(),
            title=title,
            slug=state.slugger.slug(text),
            base_slug=slugify(text),
            line=line_no,
            revision=state.revision.index
        )
        document.headings.append(heading)
        document.anchors.setdefault(heading.slug, heading)

        state.section = Section(heading=heading, revision=state.revision.index)
        state.revision.sections.append(state.section)

    def _collect_links(self, state: _ParseState, line: str, line_no: int) -> None:
        masked = _CODE_SPAN.sub(lambda m: ' ' * len(m.group(0)), line)
        is_toc = bool(_TOC_ITEM.match(masked))
        for match in _INTERNAL_LINK.finditer(masked):
            raw_target = match.group('target')
            state.document.links.append(Link(
                text=match.group('text'),
                target=normalize_fragment(raw_target),
                raw_target=raw_target,
                line=line_no,
                column=match.start() + 1,
                is_toc_entry=is_toc,
                revision=state.revision.index
            ))

    def _consume_fence(self, state: _ParseState, lines: List[str], start: int, fence) -> int:
        """Kod blogunu oku, bir sonraki satir indeksini dondur."""
        state.flush_paragraph()

        marker = fence.group('fence')
        info = fence.group('info').strip()
        language = info.split()[0].strip('{}.').lower() if info else ""
        closing = re.compile(rf'^[ \t]*{re.escape(marker[0])}{{{len(marker)},}}[ \t]*$')

        body: List[str] = []
        i = start + 1
        closed = False
        while i < len(lines):
            if closing.match(lines[i].expandtabs(4)):
                closed = True
                break
            body.append(lines[i])
            i += 1

        label = state.last_prose
        content = "\n".join(body)
        block = CodeBlock(
            language=language,
            content=content,
            line=start + 1,
            end_line=(i + 1) if closed else len(lines),
            closed=closed,
            kind=self.classifier.classify(content, label),
            label=label if self.classifier.is_label(label or "") else "",
            revision=state.revision.index
        )
        state.document.code_blocks.append(block)

        if state.rule is not None:
            state.rule.examples.append(block)
        else:
            state.section.examples.append(block)

        state.prev_blank = False
        return i + 1 if closed else len(lines)
