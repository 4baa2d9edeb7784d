"""
Rules modulu - Kaynak denetimi icin bildirimsel satir kurallari.

KULLANIM:
    from guidelint.rules import load_rule_set

    rule_set = load_rule_set()            # paketle gelen varsayilan set
    rule_set = load_rule_set("rules.yaml")
    for rule in rule_set.enabled_rules:
        print(rule.id, rule.severity)
"""

from .rules_loader import (
    RulesLoader,
    RuleSet,
    LintRule,
    load_rule_set,
)

__all__ = [
    'RulesLoader',
    'RuleSet',
    'LintRule',
    'load_rule_set',
]
