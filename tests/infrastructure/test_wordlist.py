"""Tests for the better-profanity backed classifier."""

from __future__ import annotations

import pytest

from projname.domain.moderation import (
    Category,
    CompositeClassifier,
    LexiconClassifier,
    Severity,
)
from projname.domain.names import is_valid
from projname.infrastructure.wordlist import HIT_RATING, WordlistClassifier, build_classifier


@pytest.fixture(scope="module")
def classifier() -> WordlistClassifier:
    return WordlistClassifier(extra_words=["frobnicate"])


class TestWordlistClassifier:
    def test_hit_is_moderate_profane(self) -> None:
        assert HIT_RATING == (Category.PROFANE, Severity.MODERATE)

    @pytest.mark.parametrize("text", ["fuck", "this-is-shit"])
    def test_flags_listed_words(self, classifier: WordlistClassifier, text: str) -> None:
        c = classifier.classify(text)
        assert c.severity(Category.PROFANE) == Severity.MODERATE

    @pytest.mark.parametrize("text", ["kebab-case", "my-app", "lowercase", "x"])
    def test_clean_text(self, classifier: WordlistClassifier, text: str) -> None:
        assert classifier.classify(text).worst() == Severity.NONE

    def test_empty_text(self, classifier: WordlistClassifier) -> None:
        assert classifier.classify("").worst() == Severity.NONE

    def test_extra_words(self, classifier: WordlistClassifier) -> None:
        assert classifier.classify("frobnicate").worst() == Severity.MODERATE

    def test_extra_words_are_per_instance(self) -> None:
        assert WordlistClassifier().classify("frobnicate").worst() == Severity.NONE

    def test_rejects_through_validator(self, classifier: WordlistClassifier) -> None:
        assert not is_valid("frobnicate", classifier)
        assert is_valid("kebab-case", classifier)


class TestBuildClassifier:
    def test_default_is_lexicon_plus_wordlist(self) -> None:
        c = build_classifier()
        assert isinstance(c, CompositeClassifier)
        assert c.classify("fuck").severity(Category.PROFANE) == Severity.SEVERE

    def test_without_wordlist(self) -> None:
        assert isinstance(build_classifier(wordlist=False), LexiconClassifier)

    def test_extra_terms_and_words(self) -> None:
        c = build_classifier({"zorp": (Category.MEAN, Severity.SEVERE)}, extra_words=["blip"])
        assert c.classify("zorp").severity(Category.MEAN) == Severity.SEVERE
        assert c.classify("blip").severity(Category.PROFANE) == Severity.MODERATE

    def test_extra_words_ignored_without_wordlist(self) -> None:
        c = build_classifier(wordlist=False, extra_words=["blip"])
        assert c.classify("blip").worst() == Severity.NONE
