"""
Kural Yukleyici Modulu

Kaynak denetiminde kullanilan bildirimsel satir kurallarini YAML
dosyalarindan okur, dogrular ve derlenmis bir RuleSet olarak dondurur.

Kural dosyasi formati:

    name: coffeescript-style
    variables:
      max_line_length: 79
    rules:
      - id: no-tabs
        pattern: "^ *\\t"
        message: "Girinti icin tab kullanmayin"
        severity: error
        applies_to: ["*.coffee"]
"""

import re
from fnmatch import fnmatch
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Iterator, Pattern, Tuple, Union

import yaml

from ..config.constants import CONFIG
from ..types import Severity, RuleMode
from ..utils.exceptions import RulesLoadError, RuleDefinitionError
from ..utils.logger import get_logger

logger = get_logger("rules")

_VARIABLE = re.compile(r'\{\{\s*(\w+)\s*\}\}')

FLAG_NAMES = {
    "ignorecase": re.IGNORECASE,
    "ascii": re.ASCII,
}


@dataclass(frozen=True)
class LintRule:
    """Tek bir satir kurali."""
    id: str
    pattern: Pattern
    message: str
    severity: Severity = Severity.WARNING
    mode: RuleMode = RuleMode.FORBID
    applies_to: Tuple[str, ...] = ()
    enabled: bool = True
    description: str = ""

    def applies(self, file_name: str) -> bool:
        """Kural bu dosya adina uygulanir mi."""
        if not self.applies_to:
            return True
        return any(fnmatch(file_name, glob) for glob in self.applies_to)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "pattern": self.pattern.pattern,
            "message": self.message,
            "severity": self.severity.value,
            "mode": self.mode.value,
            "applies_to": list(self.applies_to),
            "enabled": self.enabled,
            "description": self.description,
        }


@dataclass
class RuleSet:
    """Sirali kural listesi."""
    name: str
    rules: List[LintRule] = field(default_factory=list)
    description: str = ""
    source_path: Optional[str] = None

    def __iter__(self) -> Iterator[LintRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def enabled_rules(self) -> List[LintRule]:
        return [r for r in self.rules if r.enabled]

    def get(self, rule_id: str) -> Optional[LintRule]:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return None

    def order_of(self, rule_id: str) -> int:
        for index, rule in enumerate(self.rules):
            if rule.id == rule_id:
                return index
        return len(self.rules)


class RulesLoader:
    """
    YAML kural dosyalarini yukleyen ve dogrulayan sinif.

    Kullanim:
        loader = RulesLoader(variables={"max_line_length": 100})
        rule_set = loader.load("rules.yaml")
    """

    def __init__(self, variables: Optional[Dict[str, Any]] = None):
        """
        Args:
            variables: Desenlerdeki {{isim}} yer tutuculari icin degerler.
                       Dosyadaki `variables` bolumunu ezer.
        """
        self.variables: Dict[str, Any] = dict(variables or {})

    def load(self, rule_file: Optional[Union[str, Path]] = None) -> RuleSet:
        """
        Kural dosyasini yukle. Belirtilmezse paketle gelen varsayilan set kullanilir.

        Raises:
            RulesLoadError: Dosya okunamaz veya YAML gecersizse
            RuleDefinitionError: Bir kural tanimi gecersizse
        """
        path = Path(rule_file) if rule_file else CONFIG.DEFAULT_RULES_FILE
        if not path.exists():
            raise RulesLoadError(str(path), "dosya bulunamadi")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise RulesLoadError(str(path), f"gecersiz YAML: {e}")
        except OSError as e:
            raise RulesLoadError(str(path), str(e))

        rule_set = self.load_dict(data, source=str(path))
        logger.info("Kural seti yuklendi", name=rule_set.name, rules=len(rule_set), path=str(path))
        return rule_set

    def load_dict(self, data: Any, source: str = "<dict>") -> RuleSet:
        """Bellekteki kural tanimlarindan RuleSet olustur."""
        if not isinstance(data, dict):
            raise RulesLoadError(source, "kok eleman bir mapping olmali")

        raw_rules = data.get("rules")
        if not isinstance(raw_rules, list):
            raise RulesLoadError(source, "'rules' bir liste olmali")

        variables = dict(data.get("variables") or {})
        variables.update(self.variables)

        rules: List[LintRule] = []
        seen: Dict[str, int] = {}
        for index, raw in enumerate(raw_rules, 1):
            rule = self._parse_rule(raw, index, variables)
            if rule.id in seen:
                raise RuleDefinitionError(rule.id, f"tekrar eden kural id'si ({seen[rule.id]}. ve {index}. kural)")
            seen[rule.id] = index
            rules.append(rule)

        return RuleSet(
            name=str(data.get("name") or Path(source).stem),
            rules=rules,
            description=str(data.get("description") or ""),
            source_path=source
        )

    def _parse_rule(self, raw: Any, index: int, variables: Dict[str, Any]) -> LintRule:
        """Tek bir kural tanimini dogrula ve derle."""
        if not isinstance(raw, dict):
            raise RuleDefinitionError(f"#{index}", "kural bir mapping olmali")

        rule_id = str(raw.get("id") or "").strip()
        if not rule_id:
            raise RuleDefinitionError(f"#{index}", "'id' alani zorunlu")

        pattern_text = raw.get("pattern")
        if not isinstance(pattern_text, str) or not pattern_text:
            raise RuleDefinitionError(rule_id, "'pattern' alani zorunlu")

        message = raw.get("message")
        if not isinstance(message, str) or not message.strip():
            raise RuleDefinitionError(rule_id, "'message' alani zorunlu")

        try:
            severity = Severity.parse(raw.get("severity", "warning"))
        except ValueError:
            raise RuleDefinitionError(rule_id, f"gecersiz seviye: {raw.get('severity')}")

        try:
            mode = RuleMode(str(raw.get("mode", "forbid")).lower())
        except ValueError:
            raise RuleDefinitionError(rule_id, f"gecersiz mod: {raw.get('mode')}")

        flags = 0
        for name in raw.get("flags") or []:
            flag = FLAG_NAMES.get(str(name).lower())
            if flag is None:
                raise RuleDefinitionError(rule_id, f"bilinmeyen regex bayragi: {name}")
            flags |= flag

        pattern_text = self._substitute(rule_id, pattern_text, variables)
        try:
            pattern = re.compile(pattern_text, flags)
        except re.error as e:
            raise RuleDefinitionError(rule_id, f"gecersiz regex '{pattern_text}': {e}")

        applies_to = raw.get("applies_to") or []
        if isinstance(applies_to, str):
            applies_to = [applies_to]
        if not isinstance(applies_to, list):
            raise RuleDefinitionError(rule_id, "'applies_to' bir liste olmali")

        return LintRule(
            id=rule_id,
            pattern=pattern,
            message=self._substitute(rule_id, message.strip(), variables),
            severity=severity,
            mode=mode,
            applies_to=tuple(str(g) for g in applies_to),
            enabled=bool(raw.get("enabled", True)),
            description=str(raw.get("description") or "")
        )

    @staticmethod
    def _substitute(rule_id: str, text: str, variables: Dict[str, Any]) -> str:
        def replace(match):
            name = match.group(1)
            if name not in variables:
                raise RuleDefinitionError(rule_id, f"tanimsiz degisken: {name}")
            return str(variables[name])

        return _VARIABLE.sub(replace, text)


def load_rule_set(
    rule_file: Optional[Union[str, Path]] = None,
    variables: Optional[Dict[str, Any]] = None
) -> RuleSet:
    """Kural setini yukle (kisa yol)."""
    return RulesLoader(variables).load(rule_file)
