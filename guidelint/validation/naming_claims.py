"""
Isimlendirme Iddialari
======================
Kural metinlerinden "hangi tanimlayici sinifi hangi harf stiliyle yazilir"
iddialarini cikarir.

Ornek:
    "Use camelCase for variables, not snake_case."
    -> (variable, camel, +), (variable, snake, -)

Sadece harf stili (casing) kurallari analiz edilir; diger metin yok sayilir.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple, Optional, Set

from ..parsers.slugger import strip_inline_markup


# ═══════════════════════════════════════════════════════════════════════════════
# VOCABULARY
# ═══════════════════════════════════════════════════════════════════════════════

CONVENTION_NAMES = {
    "snake": "snake_case",
    "camel": "camelCase",
    "pascal": "PascalCase",
    "upper": "UPPER_CASE",
    "kebab": "kebab-case",
}

# Oncelik sirasi onemli: eslesen parca maskelenir, sonraki desenler goremez
CONVENTION_PATTERNS: List[Tuple[str, 're.Pattern']] = [
    ("upper", re.compile(r'\b(?:screaming|upper|constant)[_ -]snake[_ -]case\b', re.I)),
    ("upper", re.compile(r'\bconstant[_ -]case\b', re.I)),
    ("upper", re.compile(r'\ball[_ -]caps\b', re.I)),
    ("upper", re.compile(r'\b(?:all )?upper ?case (?:with|and) underscores\b', re.I)),
    ("upper", re.compile(r'\bUPPER_?CASE\b')),
    ("snake", re.compile(r'\bsnake[_ -]case\b', re.I)),
    ("snake", re.compile(r'\b(?:all )?lower ?case (?:with|and) underscores\b', re.I)),
    ("kebab", re.compile(r'\b(?:lower ?case[- ])?(?:kebab|dash|lisp|spinal)[_ -]case\b', re.I)),
    ("kebab", re.compile(r'\b(?:lower ?case[- ])?hyphenated\b', re.I)),
    ("kebab", re.compile(r'\b(?:lower ?case (?:with|and) )?hyphens\b', re.I)),
    ("pascal", re.compile(r'\b(?:pascal[_ -]?case|upper[_ -]?camel[_ -]?case|capwords)\b', re.I)),
    ("pascal", re.compile(r'\bCamel[_ -]?Case\b')),
    ("camel", re.compile(r'\b(?:lower[_ -]?)?camel[_ -]?case\b', re.I)),
]

IDENTIFIER_CLASS_PATTERNS: List[Tuple[str, 're.Pattern']] = [
    ("dom-class", re.compile(r'\b(?:dom|css|html)[ -]class(?:es| ?names?)?\b', re.I)),
    ("dom-id", re.compile(r'\b(?:dom|css|html|element)[ -]ids?\b', re.I)),
    ("constant", re.compile(r'\bconstants?(?: names?)?\b', re.I)),
    ("class", re.compile(r'\b(?:class(?:es)?|constructors?)(?: names?)?\b', re.I)),
    ("function", re.compile(r'\bfunctions?(?: names?)?\b', re.I)),
    ("method", re.compile(r'\bmethods?(?: names?)?\b', re.I)),
    ("variable", re.compile(r'\b(?:local )?variables?(?: names?)?\b|\blocals\b', re.I)),
    ("property", re.compile(
        r'\b(?:object )?(?:propert(?:y|ies)|attributes?|fields?|keys?)(?: names?)?\b', re.I
    )),
    ("file", re.compile(r'\bfile ?names?\b|\bfiles?\b', re.I)),
    ("module", re.compile(r'\b(?:modules?|packages?)(?: names?)?\b', re.I)),
    ("identifier", re.compile(r'\bidentifiers?\b|\bnames\b', re.I)),
]

GENERIC_CLASS = "identifier"

_ALTERNATIVE_CUE = re.compile(r'\b(?:instead of|rather than|as opposed to|over)\b', re.I)
_NEGATION_CUE = re.compile(
    r"\b(?:do not|don't|dont|must not|mustn't|should not|shouldn't|cannot|can't|never|avoid|not)\b",
    re.I
)

_PARENTHETICAL = re.compile(r'\([^()]*\)')
_SENTENCE_SPLIT = re.compile(r'(?<=[.!?])\s+')
# Kesin bolum sinirlari; virguller bolum sinirindan sayilmaz
_SEGMENT_SPLIT = re.compile(r'[;:]|\b(?:but|whereas|while)\b', re.I)


# ═══════════════════════════════════════════════════════════════════════════════
# MODEL
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class NamingClaim:
    """Tek bir isimlendirme iddiasi."""
    identifier_class: str
    convention: str
    positive: bool
    line: int
    statement: int
    text: str = ""

    @property
    def convention_name(self) -> str:
        return CONVENTION_NAMES.get(self.convention, self.convention)


@dataclass
class _Mention:
    start: int
    kind: str  # conv | class | alt | neg
    value: str = ""


@dataclass
class _Group:
    """Birbirine bagli stil bahisleri (ornegin "snake_case instead of camelCase")."""
    conventions: List[Tuple[str, bool]]
    first: int
    last: int


# ═══════════════════════════════════════════════════════════════════════════════
# EXTRACTION
# ═══════════════════════════════════════════════════════════════════════════════

def _mask(text: str, start: int, end: int) -> str:
    return text[:start] + " " * (end - start) + text[end:]


def _find_mentions(segment: str) -> List[_Mention]:
    mentions: List[_Mention] = []
    masked = segment

    for kind, patterns in (("conv", CONVENTION_PATTERNS), ("class", IDENTIFIER_CLASS_PATTERNS)):
        for value, pattern in patterns:
            for match in pattern.finditer(masked):
                mentions.append(_Mention(match.start(), kind, value))
            masked = pattern.sub(lambda m: " " * len(m.group(0)), masked)

    for match in _ALTERNATIVE_CUE.finditer(masked):
        mentions.append(_Mention(match.start(), "alt"))
        masked = _mask(masked, match.start(), match.end())
    for match in _NEGATION_CUE.finditer(masked):
        mentions.append(_Mention(match.start(), "neg"))

    mentions.sort(key=lambda m: m.start)
    return mentions


def _build_groups(mentions: List[_Mention]) -> List[_Group]:
    groups: List[_Group] = []
    pending_alt = False
    pending_neg = False

    for index, mention in enumerate(mentions):
        if mention.kind == "alt":
            pending_alt = True
        elif mention.kind == "neg":
            pending_neg = True
        elif mention.kind == "conv":
            positive = not (pending_alt or pending_neg)
            linked = bool(groups) and (pending_alt or (pending_neg and groups[-1].last == index - 2))
            if linked:
                groups[-1].conventions.append((mention.value, positive))
                groups[-1].last = index
            else:
                groups.append(_Group([(mention.value, positive)], index, index))
            pending_alt = False
            pending_neg = False
        else:
            pending_alt = False

    return groups


def _assign_classes(mentions: List[_Mention], groups: List[_Group]) -> List[Tuple[_Group, List[str]]]:
    class_positions = [(i, m.value) for i, m in enumerate(mentions) if m.kind == "class"]

    if len(groups) == 1:
        return [(groups[0], [value for _, value in class_positions])]

    first_relevant = next((m for m in mentions if m.kind in ("conv", "class")), None)
    convention_first = first_relevant is not None and first_relevant.kind == "conv"

    assigned = []
    for n, group in enumerate(groups):
        if convention_first:
            upper = groups[n + 1].first if n + 1 < len(groups) else len(mentions)
            owned = [v for i, v in class_positions if group.last < i < upper]
        else:
            lower = groups[n - 1].last if n > 0 else -1
            owned = [v for i, v in class_positions if lower < i < group.first]
        if not owned and assigned:
            # "camelCase for variables, never snake_case" -> ayni siniflar
            owned = assigned[-1][1]
        assigned.append((group, owned))
    return assigned


def clean_statement(text: str) -> str:
    """Markdown isaretlerini ve parantez iclerini temizle."""
    text = strip_inline_markup(text)
    previous = None
    while previous != text:
        previous = text
        text = _PARENTHETICAL.sub(' ', text)
    return re.sub(r'\s+', ' ', text).strip()


def extract_claims(text: str, line: int = 0, statement: int = 0) -> List[NamingClaim]:
    """
    Bir kural / paragraf metninden isimlendirme iddialarini cikar.

    Args:
        text: Kural metni
        line: Kaynak satir (raporlama icin)
        statement: Ayni revizyondaki ifade numarasi
    """
    claims: List[NamingClaim] = []
    seen: Set[Tuple[str, str, bool]] = set()
    cleaned = clean_statement(text)

    for sentence in _SENTENCE_SPLIT.split(cleaned):
        prev_conventions: List[Tuple[str, bool]] = []
        prev_classes: List[str] = []

        for segment in _SEGMENT_SPLIT.split(sentence):
            mentions = _find_mentions(segment)
            groups = _build_groups(mentions)
            segment_classes = [m.value for m in mentions if m.kind == "class"]

            pairs: List[Tuple[str, str, bool]] = []
            if not groups:
                # Sinif var, stil yok: onceki bolumun stilleri gecerli
                for cls in segment_classes:
                    pairs.extend((cls, conv, pos) for conv, pos in prev_conventions)
            else:
                for group, classes in _assign_classes(mentions, groups):
                    targets = classes or prev_classes
                    for cls in targets:
                        pairs.extend((cls, conv, pos) for conv, pos in group.conventions)

            for cls, conv, positive in pairs:
                key = (cls, conv, positive)
                if key not in seen:
                    seen.add(key)
                    claims.append(NamingClaim(cls, conv, positive, line, statement, cleaned))

            if groups:
                prev_conventions = [c for g in groups for c in g.conventions]
            if segment_classes:
                prev_classes = segment_classes

    return claims


def find_conflicts(claims: List[NamingClaim]) -> List[Tuple[str, NamingClaim, NamingClaim]]:
    """
    Celisen iddia ciftlerini bul.

    Returns:
        (tur, ilk_iddia, sonraki_iddia) listesi; tur "conflict" veya "self".
        Ayni ifadeden gelen iddialar karsilastirilmaz, her cift bir kez raporlanir.
    """
    results: List[Tuple[str, NamingClaim, NamingClaim]] = []
    reported: Set[Tuple[str, str, str, str]] = set()
    ordered = sorted(claims, key=lambda c: (c.line, c.statement))

    for i, later in enumerate(ordered):
        if later.identifier_class == GENERIC_CLASS:
            continue
        for earlier in ordered[:i]:
            if earlier.identifier_class != later.identifier_class:
                continue
            if earlier.statement == later.statement:
                continue

            kind: Optional[str] = None
            if earlier.positive and later.positive and earlier.convention != later.convention:
                kind = "conflict"
            elif earlier.convention == later.convention and earlier.positive != later.positive:
                kind = "self"
            if kind is None:
                continue

            pair = tuple(sorted((earlier.convention, later.convention)))
            key = (kind, later.identifier_class, pair[0], pair[1])
            if key in reported:
                continue
            reported.add(key)
            results.append((kind, earlier, later))

    return results
