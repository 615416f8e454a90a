"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from snipcheck.config import CustomRule, Settings, load_config
from snipcheck.config.loader import _parse_config
from snipcheck.models import Category, Language, Severity
from snipcheck.rules import CatalogError, FindingEngine, default_catalog


class TestSettings:
  def test_default_settings(self) -> None:
    settings = Settings()

    assert settings.language == Language.JAVASCRIPT
    assert all(settings.categories[c] for c in Category)
    assert settings.secret_env_var == "MINIMAX_API_KEY"
    assert settings.model == "MiniMax-M2.1"
    assert settings.history_limit == 20
    assert settings.custom_rules == []

  def test_default_catalog_without_custom_rules(self) -> None:
    assert Settings().build_catalog() is default_catalog()

  def test_history_limit_must_be_positive(self) -> None:
    with pytest.raises(ValidationError):
      Settings(history_limit=0)


class TestCustomRules:
  def test_custom_rule_joins_its_category(self) -> None:
    settings = Settings(custom_rules=[
      CustomRule(
        id="CUS-001",
        category=Category.SECURITY,
        severity=Severity.CRITICAL,
        title="eval call",
        pattern=r"\beval\(",
      ),
    ])

    catalog = settings.build_catalog()

    assert catalog.rules_for(Category.SECURITY)[-1].id == "CUS-001"
    findings = FindingEngine(catalog).analyze('eval(input); api_key = "abcdefghijklmnopqrstuvwx"')
    assert [f.id for f in findings][:2] == ["SEC-001", "CUS-001"]

  def test_duplicate_custom_id(self) -> None:
    settings = Settings(custom_rules=[
      CustomRule(
        id="SEC-001",
        category=Category.SECURITY,
        severity=Severity.LOW,
        title="clash",
        pattern="x",
      ),
    ])

    with pytest.raises(CatalogError, match="Duplicate rule id"):
      settings.build_catalog()

  def test_invalid_custom_pattern(self) -> None:
    settings = Settings(custom_rules=[
      CustomRule(
        id="CUS-002",
        category=Category.PERFORMANCE,
        severity=Severity.LOW,
        title="broken",
        pattern="[unclosed",
      ),
    ])

    with pytest.raises(CatalogError, match="invalid pattern"):
      settings.build_catalog()


class TestConfigLoader:
  def test_load_default_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert load_config() == Settings()

  def test_load_from_file(self, tmp_path: Path) -> None:
    config = tmp_path / "snipcheck.yaml"
    config.write_text("""
language: ts
categories:
  security: true
  codeQuality: false
secret_env_var: OPENAPI_TOKEN
history_limit: 5
custom_rules:
  - id: CUS-010
    category: domainSpecific
    severity: high
    title: Legacy SDK
    pattern: legacy_sdk
""")

    settings = load_config(config)

    assert settings.language == Language.TYPESCRIPT
    assert settings.categories[Category.CODE_QUALITY] is False
    assert settings.categories[Category.SECURITY] is True
    assert settings.secret_env_var == "OPENAPI_TOKEN"
    assert settings.history_limit == 5
    assert settings.custom_rules[0].category == Category.DOMAIN_SPECIFIC

  def test_finds_config_in_working_directory(
    self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
  ) -> None:
    (tmp_path / ".snipcheck.yaml").write_text("language: python\n")
    monkeypatch.chdir(tmp_path)

    assert load_config().language == Language.PYTHON

  def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
    config = tmp_path / "snipcheck.yml"
    config.write_text("")

    assert load_config(config) == Settings()

  def test_missing_explicit_file(self, tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
      load_config(tmp_path / "nope.yaml")

  def test_parse_skip_shorthand(self) -> None:
    settings = _parse_config({"skip": ["security", "performance"]})

    assert settings.categories == {
      Category.SECURITY: False,
      Category.PERFORMANCE: False,
    }

  def test_parse_unknown_category(self) -> None:
    with pytest.raises(ValueError):
      _parse_config({"skip": ["style"]})
