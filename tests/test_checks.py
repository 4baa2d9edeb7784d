"""
Unit Tests for Document Checks
==============================
Tests for toc, example pairing, naming contradictions, language tags,
structure and revision comparison.
"""

import pytest

from guidelint.config.config_loader import GuideLintConfig, ChecksConfig
from guidelint.types import Severity
from guidelint.validation import (
    TocChecker, ExamplePairChecker, ContradictionChecker,
    LanguageTagChecker, StructureChecker, RevisionComparer,
    extract_claims, find_conflicts,
)


def rule_ids(issues):
    return [i.rule_id for i in issues]


# ═══════════════════════════════════════════════════════════════════════════════
# SAMPLE GUIDE
# ═══════════════════════════════════════════════════════════════════════════════

class TestSampleGuide:
    """Sorunsuz rehber hicbir denetimde sorun uretmez."""

    @pytest.mark.parametrize("checker_class", [
        TocChecker, ExamplePairChecker, ContradictionChecker,
        LanguageTagChecker, StructureChecker, RevisionComparer,
    ])
    def test_clean(self, parser, sample_guide, checker_class):
        doc = parser.parse_text(sample_guide, path="README.md")
        assert checker_class().check(doc) == []


# ═══════════════════════════════════════════════════════════════════════════════
# TOC TESTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestTocChecker:
    """Icindekiler ve anchor kontrolu."""

    @pytest.fixture
    def checker(self):
        return TocChecker()

    def test_forward_entry_ok(self, checker, parser):
        doc = parser.parse_text("# G\n\n* [Naming](#naming)\n\n## Naming\n")
        assert checker.check(doc) == []

    def test_missing_anchor(self, checker, parser):
        doc = parser.parse_text("# G\n\n* [Naming](#naming)\n\n## Names\n", path="g.md")
        issues = checker.check(doc)
        assert rule_ids(issues) == ["toc-missing-anchor"]
        assert issues[0].severity == Severity.ERROR
        assert issues[0].line == 3
        assert issues[0].path == "g.md"

    def test_missing_anchor_suggestion(self, checker, parser):
        doc = parser.parse_text("* [Syntax](#sintax)\n\n## Syntax\n")
        issues = checker.check(doc)
        assert rule_ids(issues) == ["toc-missing-anchor"]
        assert "#syntax" in issues[0].suggestion

    def test_bom_prefixed_file(self, checker, parser, write_file):
        path = write_file("README.md", "\ufeff# Guide\n\n* [Naming](#naming)\n\n## Naming\n")
        assert checker.check(parser.parse(path)) == []

    def test_backward_anchor(self, checker, parser):
        doc = parser.parse_text("# G\n\n## Naming\n\ntext\n\n* [Naming](#naming)\n")
        assert rule_ids(checker.check(doc)) == ["toc-backward-anchor"]

    def test_backward_allowed_when_disabled(self, parser):
        config = GuideLintConfig(checks=ChecksConfig(toc_require_forward=False))
        doc = parser.parse_text("## Naming\n\n* [Naming](#naming)\n")
        assert TocChecker(config).check(doc) == []

    def test_cross_revision(self, checker, parser):
        text = "# Guide v1\n\n## Naming\n\n# Guide v2\n\n* [Naming](#naming)\n\n## Naming\n"
        issues = checker.check(parser.parse_text(text))
        assert rule_ids(issues) == ["toc-cross-revision"]
        assert issues[0].severity == Severity.WARNING
        assert issues[0].revision == 2
        assert "#naming-1" in issues[0].suggestion

    def test_broken_inline_anchor(self, checker, parser):
        doc = parser.parse_text("# G\n\nSee [the rules](#rulez) for details.\n\n## Rules\n")
        issues = checker.check(doc)
        assert rule_ids(issues) == ["broken-anchor"]
        assert issues[0].column == 5

    def test_empty_fragment_skipped(self, checker, parser):
        doc = parser.parse_text("[top](#)\n")
        assert checker.check(doc) == []

    def test_single_revision_has_no_revision_number(self, checker, parser, broken_guide):
        issues = checker.check(parser.parse_text(broken_guide))
        assert [i.revision for i in issues] == [None]


# ═══════════════════════════════════════════════════════════════════════════════
# EXAMPLE PAIR TESTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestExamplePairChecker:
    """Kotu/iyi ornek eslestirme."""

    @pytest.fixture
    def checker(self):
        return ExamplePairChecker()

    def test_unpaired_bad_example(self, checker, parser, broken_guide):
        issues = checker.check(parser.parse_text(broken_guide))
        assert rule_ids(issues) == ["unpaired-bad-example"]
        assert issues[0].line == 10
        assert issues[0].evidence == "# Bad"

    def test_labels_pair_examples(self, checker, parser):
        text = (
            "## Strings\n\n- Use double quotes.\n\nBad:\n\n```coffeescript\nfoo = 'bar'\n```\n\n"
            "Good:\n\n```coffeescript\nfoo = \"bar\"\n```\n"
        )
        assert checker.check(parser.parse_text(text)) == []

    def test_mixed_block_is_paired(self, checker, parser):
        text = "- Rule.\n\n  ```js\n  // bad\n  a()\n  // good\n  b()\n  ```\n"
        assert checker.check(parser.parse_text(text)) == []

    def test_good_in_other_rule_does_not_pair(self, checker, parser):
        text = "- First.\n\n  ```js\n  // bad\n  ```\n\n- Second.\n\n  ```js\n  // good\n  ```\n"
        issues = checker.check(parser.parse_text(text))
        assert rule_ids(issues) == ["unpaired-bad-example"]
        assert issues[0].line == 3

    def test_section_level_examples(self, checker, parser):
        text = "## Strings\n\n- Use double quotes.\n\nSome prose here.\n\n```coffeescript\n# Bad\nx = 'a'\n```\n"
        issues = checker.check(parser.parse_text(text))
        assert rule_ids(issues) == ["unpaired-bad-example"]
        assert "Strings" in issues[0].message


# ═══════════════════════════════════════════════════════════════════════════════
# NAMING CLAIM TESTS
# ═══════════════════════════════════════════════════════════════════════════════

def claim_set(text):
    return {(c.identifier_class, c.convention, c.positive) for c in extract_claims(text)}


class TestNamingClaims:
    """Kural metninden isimlendirme iddiasi cikarma."""

    def test_simple_claim(self):
        assert claim_set("Use camelCase for variables.") == {("variable", "camel", True)}

    def test_negated_alternative(self):
        assert claim_set("Use camelCase for variables, not snake_case.") == {
            ("variable", "camel", True),
            ("variable", "snake", False),
        }

    def test_instead_of(self):
        assert claim_set("Use snake_case instead of camelCase for functions.") == {
            ("function", "snake", True),
            ("function", "camel", False),
        }

    def test_negation(self):
        assert claim_set("Do not use camelCase for constants.") == {("constant", "camel", False)}

    def test_pascal_vs_camel_case_sensitivity(self):
        assert claim_set("Use CamelCase to name all classes.") == {("class", "pascal", True)}

    def test_upper_synonyms(self):
        assert claim_set("Constants are named in SCREAMING_SNAKE_CASE.") == {("constant", "upper", True)}
        assert claim_set("For constants, use all uppercase with underscores.") == {("constant", "upper", True)}

    def test_multiple_classes(self):
        assert claim_set("Use camelCase to name all variables, methods, and object properties.") == {
            ("variable", "camel", True),
            ("method", "camel", True),
            ("property", "camel", True),
        }

    def test_class_first_ownership(self):
        assert claim_set("Classes use PascalCase, functions use camelCase.") == {
            ("class", "pascal", True),
            ("function", "camel", True),
        }

    def test_convention_first_ownership(self):
        assert claim_set("Use PascalCase for classes and camelCase for functions.") == {
            ("class", "pascal", True),
            ("function", "camel", True),
        }

    def test_parentheticals_removed(self):
        assert claim_set("Use camelCase (not snake_case) for variables.") == {("variable", "camel", True)}

    def test_segment_inherits_conventions(self):
        assert claim_set("Variables use camelCase; the same applies to functions.") == {
            ("variable", "camel", True),
            ("function", "camel", True),
        }

    def test_dom_classes(self):
        assert claim_set("DOM classes should be lowercase-hyphenated.") == {("dom-class", "kebab", True)}

    def test_no_class_no_claim(self):
        assert extract_claims("Always use camelCase.") == []

    def test_same_statement_not_conflicting(self):
        claims = extract_claims("Use camelCase for variables and snake_case for variables.", statement=0)
        assert find_conflicts(claims) == []


# ═══════════════════════════════════════════════════════════════════════════════
# CONTRADICTION TESTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestContradictionChecker:
    """Ayni revizyondaki celiskili isimlendirme kurallari."""

    @pytest.fixture
    def checker(self):
        return ContradictionChecker()

    def test_conflicting_conventions(self, checker, parser):
        text = "# G\n\n## Naming\n\n- Use camelCase for variables.\n- Use snake_case for variables.\n"
        issues = checker.check(parser.parse_text(text))
        assert rule_ids(issues) == ["conflicting-conventions"]
        assert issues[0].line == 6
        assert "snake_case" in issues[0].message and "camelCase" in issues[0].message

    def test_self_contradiction(self, checker, parser):
        text = "- Use camelCase for functions.\n- Never use camelCase for functions.\n"
        issues = checker.check(parser.parse_text(text))
        assert rule_ids(issues) == ["self-contradiction"]
        assert issues[0].line == 2

    def test_paragraph_against_rule(self, checker, parser):
        text = "## Naming\n\nConstants use UPPER_CASE.\n\n- Use PascalCase for constants.\n"
        assert rule_ids(checker.check(parser.parse_text(text))) == ["conflicting-conventions"]

    def test_reported_once_per_pair(self, checker, parser):
        text = (
            "- Use camelCase for variables.\n"
            "- Use snake_case for variables.\n"
            "- Variables are snake_case.\n"
        )
        assert rule_ids(checker.check(parser.parse_text(text))) == ["conflicting-conventions"]

    def test_different_classes_ok(self, checker, parser):
        text = "- Use PascalCase for classes.\n- Use camelCase for methods.\n"
        assert checker.check(parser.parse_text(text)) == []

    def test_generic_identifier_ignored(self, checker, parser):
        text = "- Identifiers use camelCase.\n- Identifiers use snake_case.\n"
        assert checker.check(parser.parse_text(text)) == []

    def test_revisions_checked_separately(self, checker, parser, two_revision_guide):
        assert checker.check(parser.parse_text(two_revision_guide)) == []


# ═══════════════════════════════════════════════════════════════════════════════
# LANGUAGE TAG TESTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestLanguageTagChecker:
    """Revizyon ici dil etiketi tutarliligi."""

    @pytest.fixture
    def checker(self):
        return LanguageTagChecker()

    def test_mixed_tags(self, checker, parser):
        text = "```coffeescript\na\n```\n\n```js\nb\n```\n\n```coffeescript\nc\n```\n"
        issues = checker.check(parser.parse_text(text))
        assert rule_ids(issues) == ["mixed-language-tags"]
        assert issues[0].line == 5
        assert issues[0].severity == Severity.WARNING
        assert "coffeescript" in issues[0].message

    def test_aliases_normalised(self, checker, parser):
        text = "```coffee\na\n```\n\n```coffeescript\nb\n```\n"
        assert checker.check(parser.parse_text(text)) == []

    def test_ignored_tags(self, checker, parser):
        text = "```ruby\na\n```\n\n```text\noutput\n```\n"
        assert checker.check(parser.parse_text(text)) == []

    def test_tie_goes_to_first(self, checker, parser):
        text = "```js\na\n```\n\n```ruby\nb\n```\n"
        doc = parser.parse_text(text)
        assert checker.dominant_tag(doc.revisions[0]) == "javascript"
        assert [i.line for i in checker.check(doc)] == [5]

    def test_missing_tag(self, checker, parser):
        issues = checker.check(parser.parse_text("```js\na\n```\n\n```\nb\n```\n"))
        assert rule_ids(issues) == ["missing-language-tag"]
        assert issues[0].severity == Severity.INFO
        assert issues[0].suggestion == "```javascript"

    def test_missing_tag_not_required(self, parser):
        config = GuideLintConfig(checks=ChecksConfig(require_language_tag=False))
        assert LanguageTagChecker(config).check(parser.parse_text("```\nb\n```\n")) == []

    def test_per_revision_dominance(self, checker, parser):
        text = "# One\n\n```ruby\na\n```\n\n# Two\n\n```python\nb\n```\n"
        assert checker.check(parser.parse_text(text)) == []


# ═══════════════════════════════════════════════════════════════════════════════
# STRUCTURE TESTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestStructureChecker:
    """Yapisal kontroller."""

    @pytest.fixture
    def checker(self):
        return StructureChecker()

    def test_duplicate_heading(self, checker, parser):
        issues = checker.check(parser.parse_text("## Naming\n\n## Syntax\n\n## Naming\n"))
        assert rule_ids(issues) == ["duplicate-heading"]
        assert issues[0].line == 5
        assert "naming-1" in issues[0].suggestion

    def test_same_title_different_level_ok(self, checker, parser):
        assert checker.check(parser.parse_text("## Naming\n\n### Naming\n")) == []

    def test_duplicates_across_revisions_ok(self, checker, parser, two_revision_guide):
        assert checker.check(parser.parse_text(two_revision_guide)) == []

    def test_unclosed_fence(self, checker, parser):
        issues = checker.check(parser.parse_text("## A\n\n```js\nfoo()\n"))
        assert rule_ids(issues) == ["unclosed-code-fence"]
        assert issues[0].severity == Severity.ERROR
        assert issues[0].line == 3


# ═══════════════════════════════════════════════════════════════════════════════
# REVISION COMPARE TESTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestRevisionComparer:
    """Revizyonlar arasi fark kontrolu."""

    @pytest.fixture
    def checker(self):
        return RevisionComparer()

    def test_drift_and_missing_section(self, checker, parser, two_revision_guide):
        issues = checker.check(parser.parse_text(two_revision_guide, path="README.md"))
        assert sorted(rule_ids(issues)) == ["revision-convention-drift", "revision-section-missing"]

        missing = next(i for i in issues if i.rule_id == "revision-section-missing")
        assert missing.severity == Severity.INFO
        assert missing.revision == 2
        assert missing.line == 11
        assert "Annotations" in missing.message

        drift = next(i for i in issues if i.rule_id == "revision-convention-drift")
        assert drift.severity == Severity.WARNING
        assert drift.line == 15
        assert "camelCase" in drift.message and "snake_case" in drift.message

    def test_single_revision_skipped(self, checker, parser, sample_guide):
        assert checker.check(parser.parse_text(sample_guide)) == []

    def test_cross_document(self, checker, parser):
        first = parser.parse_text("# A\n\n## Naming\n\n- Use snake_case for functions.\n", path="a.md")
        second = parser.parse_text("# B\n\n## Naming\n\n- Use camelCase for functions.\n", path="b.md")
        issues = checker.check_documents([first, second])
        assert rule_ids(issues) == ["revision-convention-drift"]
        assert issues[0].path == "b.md"
