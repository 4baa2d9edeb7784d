"""
CLI Tests
=========
Tests for guidelint subcommands, output formats and exit codes.
"""

import json

import pytest

from guidelint.cli import main, build_parser, exit_code_for, EXIT_OK, EXIT_ISSUES, EXIT_USAGE
from guidelint.types import Severity
from guidelint.validation.issues import CheckResult, Issue


MIXED_TAGS = "# G\n\n```js\na\n```\n\n```js\nb\n```\n\n```ruby\nc\n```\n"


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Her test bos bir calisma dizininde calisir (guidelint.yaml sizmasin)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ═══════════════════════════════════════════════════════════════════════════════
# EXIT CODES
# ═══════════════════════════════════════════════════════════════════════════════

class TestExitCodes:
    """Sonuca gore cikis kodu."""

    def _result(self, *severities):
        return CheckResult(issues=[Issue("r", s, "m", "f.md") for s in severities])

    def test_clean(self):
        assert exit_code_for(self._result()) == EXIT_OK

    def test_errors(self):
        assert exit_code_for(self._result(Severity.ERROR)) == EXIT_ISSUES

    def test_warnings_only_strict(self):
        result = self._result(Severity.WARNING, Severity.INFO)
        assert exit_code_for(result) == EXIT_OK
        assert exit_code_for(result, strict=True) == EXIT_ISSUES

    def test_info_never_fails(self):
        assert exit_code_for(self._result(Severity.INFO), strict=True) == EXIT_OK


# ═══════════════════════════════════════════════════════════════════════════════
# CHECK-DOCS
# ═══════════════════════════════════════════════════════════════════════════════

class TestCheckDocsCommand:
    """guidelint check-docs."""

    def test_clean_guide(self, write_file, sample_guide, capsys):
        path = write_file("README.md", sample_guide)
        assert main(["check-docs", str(path)]) == EXIT_OK
        assert "Sorun bulunamadi" in capsys.readouterr().out

    def test_broken_guide(self, write_file, broken_guide, capsys):
        write_file("README.md", broken_guide)
        # Goreli yol: tablo konum sutunu kisa kalsin
        assert main(["check-docs", "README.md"]) == EXIT_ISSUES
        out = capsys.readouterr().out
        assert "toc-missing-anchor" in out
        assert "KALDI" in out

    def test_json_output(self, write_file, broken_guide, capsys):
        path = write_file("README.md", broken_guide)
        assert main(["check-docs", str(path), "--format", "json"]) == EXIT_ISSUES
        data = json.loads(capsys.readouterr().out)
        assert data["error_count"] == 2
        assert data["is_valid"] is False
        assert [i["line"] for i in data["issues"]] == [3, 10]

    def test_strict_fails_on_warnings(self, write_file):
        path = write_file("README.md", MIXED_TAGS)
        assert main(["check-docs", str(path)]) == EXIT_OK
        assert main(["check-docs", str(path), "--strict"]) == EXIT_ISSUES

    def test_config_file(self, write_file, broken_guide):
        path = write_file("README.md", broken_guide)
        config = write_file("custom.yaml", (
            "severity_overrides:\n"
            "  toc-missing-anchor: off\n"
            "  unpaired-bad-example: info\n"
        ))
        assert main(["check-docs", str(path), "--config", str(config)]) == EXIT_OK

    def test_config_discovered_in_cwd(self, write_file, broken_guide):
        write_file("README.md", broken_guide)
        write_file("guidelint.yaml", "checks:\n  enabled: [structure]\n")
        assert main(["check-docs", "README.md"]) == EXIT_OK

    def test_missing_path(self, tmp_path, capsys):
        assert main(["check-docs", str(tmp_path / "nope.md")]) == EXIT_USAGE
        assert "FILE_NOT_FOUND" in capsys.readouterr().err

    def test_missing_config(self, write_file, sample_guide, tmp_path):
        path = write_file("README.md", sample_guide)
        assert main(["check-docs", str(path), "--config", str(tmp_path / "nope.yaml")]) == EXIT_USAGE


# ═══════════════════════════════════════════════════════════════════════════════
# LINT / RULES
# ═══════════════════════════════════════════════════════════════════════════════

class TestLintCommand:
    """guidelint lint ve guidelint rules."""

    def test_clean_source(self, write_file):
        path = write_file("app.coffee", "foo = ->\n  bar()\n")
        assert main(["lint", str(path)]) == EXIT_OK

    def test_violations(self, write_file, capsys):
        path = write_file("app.coffee", "foo = ->\n\tbar()\n")
        assert main(["lint", str(path), "--format", "json"]) == EXIT_ISSUES
        data = json.loads(capsys.readouterr().out)
        assert [(i["rule_id"], i["line"], i["column"]) for i in data["issues"]] == [("no-tabs", 2, 1)]

    def test_warning_only_strict(self, write_file):
        path = write_file("app.coffee", "x = 1;\n")
        assert main(["lint", str(path)]) == EXIT_OK
        assert main(["lint", str(path), "--strict"]) == EXIT_ISSUES

    def test_bad_rules_file(self, write_file, capsys):
        path = write_file("app.coffee", "x = 1\n")
        rules = write_file("rules.yaml", "rules: not-a-list\n")
        assert main(["lint", str(path), "--rules", str(rules)]) == EXIT_USAGE
        assert "RULES_LOAD_ERROR" in capsys.readouterr().err

    @pytest.mark.parametrize("env_var,value", [
        ("GUIDELINT_RULES_FILE", "123"),
        ("GUIDELINT_LOG_LEVEL", "10"),
        ("GUIDELINT_MAX_LINE_LENGTH", "abc"),
    ])
    def test_bad_env_value_exits_with_usage(self, write_file, monkeypatch, capsys, env_var, value):
        """Gecersiz ortam degiskeni traceback yerine cikis kodu 2 verir."""
        path = write_file("app.coffee", "x = 1\n")
        monkeypatch.setenv(env_var, value)
        assert main(["lint", str(path)]) == EXIT_USAGE
        assert "ERROR" in capsys.readouterr().err

    def test_rules_json(self, capsys):
        assert main(["rules", "--format", "json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "default"
        assert data["rules"][0]["id"] == "no-tabs"

    def test_rules_table(self, capsys):
        assert main(["rules"]) == EXIT_OK
        assert "no-tabs" in capsys.readouterr().out


# ═══════════════════════════════════════════════════════════════════════════════
# PARSER
# ═══════════════════════════════════════════════════════════════════════════════

class TestArgumentParser:
    """argparse tanimlari."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "guidelint" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_OK
        assert "check-docs" in capsys.readouterr().out

    def test_paths_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["check-docs"])

    def test_invalid_format(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["lint", "a.py", "--format", "xml"])

    def test_verbose_prints_scan_summary(self, write_file, capsys):
        write_file("app.coffee", "x = 1\n")
        assert main(["lint", "app.coffee", "-v"]) == EXIT_OK
        assert "Tarama Ozeti" in capsys.readouterr().err
