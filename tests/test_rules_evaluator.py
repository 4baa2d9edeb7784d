"""
Unit Tests for Rule Sets and the Rule Evaluator
===============================================
Tests for YAML rule loading, validation, variable substitution and
line-by-line evaluation.
"""

import pytest

from guidelint.evaluator import RuleEvaluator
from guidelint.rules import RulesLoader, load_rule_set
from guidelint.types import Severity, RuleMode
from guidelint.utils.exceptions import RulesLoadError, RuleDefinitionError, DocumentNotFoundError


def rule_ids(issues):
    return [i.rule_id for i in issues]


# ═══════════════════════════════════════════════════════════════════════════════
# LOADER TESTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestRulesLoader:
    """Kural seti yukleme ve dogrulama."""

    @pytest.fixture
    def loader(self):
        return RulesLoader()

    def test_default_rule_set(self):
        """Paketle gelen varsayilan set."""
        rule_set = load_rule_set()
        assert rule_set.name == "default"
        assert [r.id for r in rule_set][:3] == ["no-tabs", "indentation-two-spaces", "trailing-whitespace"]
        assert rule_set.get("no-tabs").severity == Severity.ERROR
        assert rule_set.get("no-trailing-semicolon").applies_to == ("*.coffee",)

    def test_variable_substitution(self):
        rule_set = load_rule_set(variables={"max_line_length": 100})
        assert rule_set.get("max-line-length").message == "Satir 100 karakteri asiyor"

    def test_load_from_file(self, loader, write_file):
        path = write_file("rules.yaml", (
            "name: custom\n"
            "rules:\n"
            "  - id: no-console\n"
            "    pattern: 'console\\.log'\n"
            "    message: console.log birakmayin\n"
            "    severity: warn\n"
            "    flags: [ignorecase]\n"
        ))
        rule_set = loader.load(path)
        rule = rule_set.get("no-console")
        assert rule.severity == Severity.WARNING
        assert rule.mode == RuleMode.FORBID
        assert rule.pattern.search("CONSOLE.LOG('x')")
        assert rule_set.source_path == str(path)

    def test_defaults(self, loader):
        rule_set = loader.load_dict({"rules": [{"id": "r", "pattern": "x", "message": "m"}]})
        rule = rule_set.get("r")
        assert rule.severity == Severity.WARNING
        assert rule.enabled is True
        assert rule.applies("anything.txt")

    def test_applies_to_string(self, loader):
        rule_set = loader.load_dict({"rules": [
            {"id": "r", "pattern": "x", "message": "m", "applies_to": "*.rb"}
        ]})
        assert rule_set.get("r").applies("a.rb")
        assert not rule_set.get("r").applies("a.py")

    @pytest.mark.parametrize("rule,reason", [
        ({"pattern": "x", "message": "m"}, "id"),
        ({"id": "r", "message": "m"}, "pattern"),
        ({"id": "r", "pattern": "x"}, "message"),
        ({"id": "r", "pattern": "(", "message": "m"}, "regex"),
        ({"id": "r", "pattern": "x", "message": "m", "severity": "fatal"}, "seviye"),
        ({"id": "r", "pattern": "x", "message": "m", "mode": "maybe"}, "mod"),
        ({"id": "r", "pattern": "x", "message": "m", "flags": ["dotall"]}, "bayrag"),
        ({"id": "r", "pattern": "{{missing}}", "message": "m"}, "degisken"),
    ])
    def test_invalid_rule(self, loader, rule, reason):
        with pytest.raises(RuleDefinitionError) as exc_info:
            loader.load_dict({"rules": [rule]})
        assert reason in exc_info.value.message
        assert exc_info.value.code == "RULE_DEFINITION_ERROR"

    def test_duplicate_id(self, loader):
        rule = {"id": "r", "pattern": "x", "message": "m"}
        with pytest.raises(RuleDefinitionError) as exc_info:
            loader.load_dict({"rules": [rule, dict(rule)]})
        assert "tekrar" in exc_info.value.message

    def test_rules_must_be_list(self, loader):
        with pytest.raises(RulesLoadError):
            loader.load_dict({"rules": {"id": "r"}})

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(RulesLoadError):
            loader.load(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, loader, write_file):
        path = write_file("bad.yaml", "rules: [unclosed\n")
        with pytest.raises(RulesLoadError):
            loader.load(path)


# ═══════════════════════════════════════════════════════════════════════════════
# EVALUATOR TESTS
# ═══════════════════════════════════════════════════════════════════════════════

class TestRuleEvaluator:
    """Satir bazli degerlendirme."""

    @pytest.fixture
    def evaluator(self):
        return RuleEvaluator(load_rule_set())

    def test_clean_file(self, evaluator):
        assert evaluator.evaluate_text("foo = ->\n  bar()\n", "app.coffee") == []

    def test_no_tabs(self, evaluator):
        issues = evaluator.evaluate_text("foo\n\tbar\n", "app.coffee")
        assert rule_ids(issues) == ["no-tabs"]
        assert (issues[0].line, issues[0].column) == (2, 1)
        assert issues[0].evidence == "\tbar"

    def test_trailing_whitespace_column(self, evaluator):
        issues = evaluator.evaluate_text("x = 1   \n", "app.py")
        assert rule_ids(issues) == ["trailing-whitespace"]
        assert issues[0].column == 6

    def test_max_line_length(self, evaluator):
        issues = evaluator.evaluate_text("a" * 85 + "\n" + "b" * 79 + "\n", "app.py")
        assert rule_ids(issues) == ["max-line-length"]
        assert (issues[0].line, issues[0].column) == (1, 80)

    def test_max_line_length_variable(self):
        evaluator = RuleEvaluator(load_rule_set(variables={"max_line_length": 100}))
        assert evaluator.evaluate_text("a" * 85, "app.py") == []

    def test_applies_to(self, evaluator):
        assert evaluator.evaluate_text("x = 1;\n", "app.js") == []
        assert rule_ids(evaluator.evaluate_text("x = 1;\n", "app.coffee")) == ["no-trailing-semicolon"]

    def test_odd_indentation(self, evaluator):
        issues = evaluator.evaluate_text("foo = ->\n   bar()\n", "app.coffee")
        assert rule_ids(issues) == ["indentation-two-spaces"]

    def test_order_by_line_then_rule(self, evaluator):
        issues = evaluator.evaluate_text("ok\n\tfoo  \n", "app.py")
        assert [(i.line, i.rule_id) for i in issues] == [(2, "no-tabs"), (2, "trailing-whitespace")]

    @pytest.mark.parametrize("line,flagged", [
        ("# todo: fix", True),
        ("# FIXME fix", True),
        ("# Hack: tmp", True),
        ("# TODO: fix", False),
        ("# OPTIMIZE: later", False),
    ])
    def test_annotation_format(self, evaluator, line, flagged):
        issues = evaluator.evaluate_text(line + "\n", "app.py")
        assert (rule_ids(issues) == ["annotation-format"]) is flagged

    def test_dom_class_naming(self, evaluator):
        assert rule_ids(evaluator.evaluate_text('<div class="fooBar"></div>\n', "index.html")) == ["dom-class-naming"]
        assert evaluator.evaluate_text('<div class="foo-bar"></div>\n', "index.html") == []

    def test_require_mode(self):
        rule_set = RulesLoader().load_dict({"rules": [
            {"id": "header", "pattern": "^# Copyright", "message": "Telif basligi eksik", "mode": "require"}
        ]})
        evaluator = RuleEvaluator(rule_set)
        issues = evaluator.evaluate_text("x = 1\n", "a.py")
        assert rule_ids(issues) == ["header"]
        assert (issues[0].line, issues[0].column) == (1, 1)
        assert evaluator.evaluate_text("# Copyright 2024\nx = 1\n", "a.py") == []

    def test_disabled_rule_skipped(self):
        rule_set = RulesLoader().load_dict({"rules": [
            {"id": "r", "pattern": "x", "message": "m", "enabled": False}
        ]})
        assert RuleEvaluator(rule_set).evaluate_text("x\n", "a.py") == []

    def test_evaluate_file(self, evaluator, write_file):
        path = write_file("app.coffee", "x = 1;\n")
        issues = evaluator.evaluate(path)
        assert rule_ids(issues) == ["no-trailing-semicolon"]
        assert issues[0].path == str(path)

    def test_bom_does_not_shift_columns(self, evaluator, write_file):
        path = write_file("app.py", "\ufeffx = 1   \n")
        issues = evaluator.evaluate(path)
        assert [(i.rule_id, i.column) for i in issues] == [("trailing-whitespace", 6)]
        assert evaluator.evaluate_text("\ufeffx = 1   \n", "app.py")[0].column == 6

    def test_missing_file(self, evaluator, tmp_path):
        with pytest.raises(DocumentNotFoundError):
            evaluator.evaluate(tmp_path / "nope.coffee")

    def test_oversized_file_skipped(self, write_file):
        path = write_file("big.py", "\tx\n")
        evaluator = RuleEvaluator(load_rule_set(), max_file_size_mb=0)
        assert evaluator.evaluate(path) == []
