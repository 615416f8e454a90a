"""Application settings."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from snipcheck.models import Category, Language, Rule, Severity, all_categories
from snipcheck.rules.catalog import RuleCatalog, compile_rule, default_catalog
from snipcheck.rules.domain import CURRENT_MODEL


class CustomRule(BaseModel):
  """A user-defined rule declared in the config file."""

  id: str
  category: Category
  severity: Severity
  title: str
  pattern: str
  description: str = ""
  suggestion: str = ""
  ignore_case: bool = True

  def to_rule(self) -> Rule:
    return compile_rule(
      self.id,
      self.category,
      self.severity,
      self.title,
      self.pattern,
      description=self.description,
      suggestion=self.suggestion,
      ignore_case=self.ignore_case,
    )


class Settings(BaseModel):
  """Application configuration."""

  model_config = ConfigDict(use_enum_values=False)

  language: Language = Language.JAVASCRIPT
  categories: dict[Category, bool] = Field(default_factory=all_categories)
  secret_env_var: str = "MINIMAX_API_KEY"
  model: str = CURRENT_MODEL
  history_enabled: bool = True
  history_path: Path | None = None
  history_limit: int = Field(default=20, ge=1)
  custom_rules: list[CustomRule] = Field(default_factory=list)

  def build_catalog(self) -> RuleCatalog:
    """Built-in catalog plus any custom rules.

    Raises:
      CatalogError: If a custom rule clashes with an existing id or has an
        invalid pattern.
    """
    catalog = default_catalog()
    if not self.custom_rules:
      return catalog
    return catalog.extended(rule.to_rule() for rule in self.custom_rules)
