"""Tests for NameService."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import TypeAdapter, ValidationError

from projname.config.settings import ProjnameSettings
from projname.domain.moderation import (
    CompositeClassifier,
    LexiconClassifier,
    Severity,
    default_classifier,
)
from projname.domain.names import MAX_LENGTH, RULES, InvalidProjectName, ProjectName, is_valid
from projname.services.validation import NameService


class TestCheck:
    def test_all_valid(self) -> None:
        result = NameService().check(["my-app", "x"])
        assert result.ok is True
        assert result.op == "check"
        assert result.data["results"] == [
            {"name": "my-app", "valid": True},
            {"name": "x", "valid": True},
        ]
        assert result.data["valid_count"] == 2
        assert result.data["invalid_count"] == 0
        assert result.error is None
        assert "duration_ms" in result.meta

    def test_some_invalid(self) -> None:
        result = NameService().check(["my-app", "Bad_Name", "shuttle"])
        assert result.ok is False
        assert result.data["valid_count"] == 1
        assert result.data["invalid_count"] == 2
        assert result.error is not None
        assert result.error.code == "INVALID_NAME"
        assert result.error.message == InvalidProjectName.MESSAGE
        assert result.error.detail == {"invalid": ["Bad_Name", "shuttle"]}

    def test_error_does_not_name_the_rule(self) -> None:
        reserved = NameService().check(["shuttle"])
        profane = NameService().check(["test-condom-condom"])
        assert reserved.error.code == profane.error.code
        assert reserved.error.message == profane.error.message

    def test_empty_input(self) -> None:
        result = NameService().check([])
        assert result.ok is True
        assert result.data["results"] == []


class TestRules:
    def test_rules_payload(self) -> None:
        result = NameService().rules()
        assert result.ok is True
        assert result.op == "rules"
        assert result.data["rules"] == list(RULES)
        assert result.data["reserved"] == sorted(
            ["shuttleapp", "shuttle", "console", "unstable", "staging"]
        )
        assert result.data["max_length"] == MAX_LENGTH


class TestFromSettings:
    @pytest.fixture(autouse=True)
    def _no_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.delenv("PROJNAME_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)

    def test_default_uses_shared_classifier(self) -> None:
        assert NameService().classifier is default_classifier()

    def test_wordlist_enabled_by_default(self, tmp_path: Path) -> None:
        svc = NameService.from_settings(ProjnameSettings.from_cli(start=tmp_path))
        assert isinstance(svc.classifier, CompositeClassifier)

    def test_wordlist_disabled(self, tmp_path: Path) -> None:
        (tmp_path / "projname.toml").write_text("[moderation]\nwordlist = false\n")
        svc = NameService.from_settings(ProjnameSettings.from_cli(start=tmp_path))
        assert isinstance(svc.classifier, LexiconClassifier)

    def test_extra_terms_reject(self, tmp_path: Path) -> None:
        (tmp_path / "projname.toml").write_text(
            "[moderation]\n"
            "wordlist = false\n"
            "[[moderation.extra_terms]]\n"
            'term = "frobnicate"\n'
            'category = "mean"\n'
            'severity = "severe"\n'
        )
        svc = NameService.from_settings(ProjnameSettings.from_cli(start=tmp_path))
        assert svc.classifier.classify("frobnicate").worst() == Severity.SEVERE
        assert svc.check(["frobnicate"]).ok is False
        assert svc.check(["kebab-case"]).ok is True

    def test_extra_words_reach_wordlist(self, tmp_path: Path) -> None:
        (tmp_path / "projname.toml").write_text('[moderation]\nextra_words = ["zorblax"]\n')
        svc = NameService.from_settings(ProjnameSettings.from_cli(start=tmp_path))
        assert svc.check(["zorblax"]).ok is False


PROFANE_COMPOUNDS = [
    "fuckoff",
    "shithead",
    "dickhead",
    "bigcock",
    "pornhub",
    "fu-ck-off",
    "sh1thead",
    "motherfucking",
    "fucks",
    "shits",
    "assholes",
]


class TestLibraryMatchesService:
    """ProjectName, is_valid and the configured service share one policy."""

    @pytest.fixture()
    def service(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> NameService:
        monkeypatch.delenv("PROJNAME_CONFIG", raising=False)
        return NameService.from_settings(ProjnameSettings.from_cli(start=tmp_path))

    def test_service_uses_library_default(self, service: NameService) -> None:
        assert service.classifier is default_classifier()

    @pytest.mark.parametrize("name", PROFANE_COMPOUNDS)
    def test_rejected_everywhere(self, service: NameService, name: str) -> None:
        assert is_valid(name) is False
        with pytest.raises(InvalidProjectName):
            ProjectName(name)
        with pytest.raises(ValidationError):
            TypeAdapter(ProjectName).validate_python(name)
        assert service.check([name]).ok is False

    @pytest.mark.parametrize("name", ["my-app", "myassets", "dachterrasse", "class", "assets"])
    def test_accepted_everywhere(self, service: NameService, name: str) -> None:
        assert is_valid(name) is True
        assert str(ProjectName(name)) == name
        assert service.check([name]).ok is True
