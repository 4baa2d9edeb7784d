"""
Baslik Anchor Uretici
=====================
GitHub uyumlu baslik slug'lari: kucuk harf, noktalama temizligi,
bosluk yerine tire ve tekrar eden basliklar icin -1, -2 ekleri.
"""

import re
from typing import Dict
from urllib.parse import unquote

_CODE_SPAN = re.compile(r'(`+)(.+?)\1')
_IMAGE_OR_LINK = re.compile(r'!?\[([^\]]*)\]\([^)]*\)')
_HTML_TAG = re.compile(r'<[^>]+>')
# Kelime icindeki alt cizgiler (snake_case) korunur
_UNDERSCORE_EMPHASIS = re.compile(r'(?<![0-9A-Za-z])_+|_+(?![0-9A-Za-z])')
_NON_SLUG_CHARS = re.compile(r'[^\w\- ]', re.UNICODE)


def strip_inline_markup(text: str) -> str:
    """Baslik metninden inline markdown isaretlerini kaldir."""
    text = _IMAGE_OR_LINK.sub(r'\1', text)
    text = _HTML_TAG.sub('', text)

    parts = []
    last = 0
    for match in _CODE_SPAN.finditer(text):
        parts.append(_strip_emphasis(text[last:match.start()]))
        # Kod icerigi oldugu gibi kalir
        parts.append(match.group(2).strip())
        last = match.end()
    parts.append(_strip_emphasis(text[last:]))

    return "".join(parts).strip()


def _strip_emphasis(text: str) -> str:
    text = text.replace('*', '').replace('~~', '')
    return _UNDERSCORE_EMPHASIS.sub('', text)


def slugify(text: str) -> str:
    """Tek bir basligi anchor'a cevir (tekrar kontrolu yok)."""
    title = strip_inline_markup(text).lower()
    title = _NON_SLUG_CHARS.sub('', title)
    return title.replace(' ', '-')


def normalize_fragment(fragment: str) -> str:
    """Link fragment'ini karsilastirma icin normalize et."""
    return unquote(fragment.lstrip('#')).strip().lower()


class Slugger:
    """
    Bir dokuman icin benzersiz slug uretici.

    Ayni baslik ikinci kez geldiginde "-1", ucuncude "-2" eklenir;
    uretilen ek baska bir basligin slug'i ile cakisirsa sayac artmaya devam eder.
    """

    def __init__(self) -> None:
        self.occurrences: Dict[str, int] = {}

    def slug(self, text: str) -> str:
        base = slugify(text)
        result = base
        while result in self.occurrences:
            self.occurrences[base] += 1
            result = f"{base}-{self.occurrences[base]}"
        self.occurrences[result] = 0
        return result

    def reset(self) -> None:
        self.occurrences.clear()
