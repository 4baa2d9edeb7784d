"""Dokuman denetim modulleri."""
from .issues import Issue, CheckResult
from .base_checker import BaseChecker
from .naming_claims import NamingClaim, extract_claims, find_conflicts
from .toc_checker import TocChecker
from .example_pairs import ExamplePairChecker
from .contradiction_checker import ContradictionChecker, revision_claims
from .language_tags import LanguageTagChecker
from .structure_checker import StructureChecker
from .revision_compare import RevisionComparer

# Dokuman basina calisan denetimler, config'deki isimleriyle
DOCUMENT_CHECKERS = [
    TocChecker,
    ExamplePairChecker,
    ContradictionChecker,
    LanguageTagChecker,
    StructureChecker,
]

__all__ = [
    'Issue', 'CheckResult', 'BaseChecker',
    'NamingClaim', 'extract_claims', 'find_conflicts', 'revision_claims',
    'TocChecker', 'ExamplePairChecker', 'ContradictionChecker',
    'LanguageTagChecker', 'StructureChecker', 'RevisionComparer',
    'DOCUMENT_CHECKERS',
]
