# Parser Modulleri
"""
Dokuman parser modulleri.
Markdown stil rehberleri ve baslik anchor'lari.
"""

from .base_parser import BaseParser
from .slugger import Slugger, slugify, normalize_fragment, strip_inline_markup
from .markdown_parser import (
    MarkdownParser, ExampleClassifier,
    Document, Revision, Section, Rule, Paragraph, Heading, CodeBlock, Link
)

__all__ = [
    # Base
    'BaseParser',
    # Slug
    'Slugger', 'slugify', 'normalize_fragment', 'strip_inline_markup',
    # Markdown
    'MarkdownParser', 'ExampleClassifier',
    'Document', 'Revision', 'Section', 'Rule', 'Paragraph', 'Heading', 'CodeBlock', 'Link',
]
