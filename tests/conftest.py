"""Pytest fixtures ve konfigurasyonlari."""

import pytest
import sys
from pathlib import Path
from typing import Dict, Any

# Proje root'u path'e ekle
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from guidelint.config.config_loader import GuideLintConfig
from guidelint.parsers.markdown_parser import MarkdownParser


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def sample_guide() -> str:
    """Sorunsuz tek revizyonlu stil rehberi."""
    return """# Style Guide

## Table of Contents

* [Source Code Layout](#source-code-layout)
* [Naming Conventions](#naming-conventions)

## Source Code Layout

- Use spaces only, with 2 spaces per indentation level.

  ```coffeescript
  # Yes
  foo = ->
    bar()
  ```

  ```coffeescript
  # No
  foo = ->
      bar()
  ```

## Naming Conventions

- Use camelCase (with a leading lowercase character) to name all variables, methods, and object properties.
- Use CamelCase (with a leading uppercase character) to name all classes.
- For constants, use all uppercase with underscores.

Bad:

```coffeescript
my_constant = 1
```

Good:

```coffeescript
MY_CONSTANT = 1
```
"""


@pytest.fixture
def two_revision_guide() -> str:
    """Ayni rehberin iki kopyasi; ikinci kopya farkli isimlendirme istiyor."""
    return """# Guide v1

## Naming

- Use snake_case for variables.

## Annotations

- Annotations go above code.

# Guide v2

## Naming

- Use camelCase for variables.
"""


@pytest.fixture
def broken_guide() -> str:
    """Bozuk icindekiler ve eslesmeyen kotu ornek iceren rehber."""
    return """# Broken Guide

* [Syntax](#syntax)
* [Strings](#strings)

## Strings

- Prefer double quotes.

  ```coffeescript
  # Bad
  foo = 'bar'
  ```
"""


# ============================================================
# Object Fixtures
# ============================================================

@pytest.fixture
def parser() -> MarkdownParser:
    """Varsayilan isaret kelimeleriyle parser."""
    return MarkdownParser()


@pytest.fixture
def config() -> GuideLintConfig:
    """Varsayilan konfigurasyon."""
    return GuideLintConfig()


# ============================================================
# Temporary File Fixtures
# ============================================================

@pytest.fixture
def write_file(tmp_path):
    """tmp_path altina dosya yazan yardimci."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config_dict() -> Dict[str, Any]:
    """Ornek guidelint.yaml icerigi."""
    return {
        "checks": {
            "enabled": ["toc", "examples", "structure"],
            "require_language_tag": False,
        },
        "lint": {
            "max_line_length": 100,
        },
        "severity_overrides": {
            "duplicate-heading": "off",
            "unpaired-bad-example": "warning",
        },
    }


@pytest.fixture
def temp_config_file(tmp_path, config_dict):
    """Gecici konfigurasyon dosyasi."""
    import yaml

    config_file = tmp_path / "guidelint.yaml"
    with open(config_file, "w") as f:
        yaml.dump(config_dict, f)

    return config_file


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """GUIDELINT_* ortam degiskenlerinin testlere sizmasini engelle."""
    for name in (
        "GUIDELINT_LOG_LEVEL",
        "GUIDELINT_MAX_LINE_LENGTH",
        "GUIDELINT_RULES_FILE",
        "GUIDELINT_REQUIRE_LANGUAGE_TAG",
    ):
        monkeypatch.delenv(name, raising=False)
