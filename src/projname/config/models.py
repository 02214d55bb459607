"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, projname.toml only contains
overrides. The rejection threshold and the reserved words are fixed and
have no configuration knobs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from projname.domain.moderation import Category, Rating, Severity


class TermConfig(BaseModel):
    """One ``[[moderation.extra_terms]]`` entry."""

    model_config = {"frozen": True}

    term: str
    category: Category = Category.PROFANE
    severity: Severity = Severity.MODERATE

    @field_validator("severity", mode="before")
    @classmethod
    def _severity_by_name(cls, value: Any) -> Any:
        """Accept ``"moderate"`` as well as ``2``."""
        if isinstance(value, str) and not value.isdigit():
            try:
                return Severity[value.upper()]
            except KeyError as exc:
                names = ", ".join(s.name.lower() for s in Severity)
                raise ValueError(f"unknown severity {value!r} (expected one of: {names})") from exc
        return value


class ModerationConfig(BaseModel):
    """[moderation] section."""

    model_config = {"frozen": True}

    wordlist: bool = True
    extra_words: list[str] = Field(default_factory=list)
    extra_terms: list[TermConfig] = Field(default_factory=list)

    def term_ratings(self) -> dict[str, Rating]:
        """Extra terms in the shape ``LexiconClassifier`` expects."""
        return {t.term: (t.category, t.severity) for t in self.extra_terms}
