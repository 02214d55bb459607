"""Word-list classifier backed by ``better-profanity``.

better-profanity ships a large English word list and expands every entry
into its common character substitutions. It has no notion of severity, so
every hit is reported as ``profane`` at ``MODERATE``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping

from better_profanity import Profanity

from projname.domain.moderation import (
    Category,
    Classification,
    CompositeClassifier,
    ContentClassifier,
    LexiconClassifier,
    Rating,
    Severity,
)

logger = logging.getLogger(__name__)

HIT_RATING = (Category.PROFANE, Severity.MODERATE)


class WordlistClassifier(ContentClassifier):
    """Flags text containing any word from the better-profanity list.

    The word list (plus *extra_words*) is loaded on first use; building
    the substitution variants is slow, so it happens at most once per
    instance.
    """

    def __init__(self, extra_words: Iterable[str] = ()) -> None:
        self._extra_words = [w.lower() for w in extra_words if w]
        self._filter: Profanity | None = None
        self._lock = threading.Lock()

    def _load(self) -> Profanity:
        if self._filter is None:
            with self._lock:
                if self._filter is None:
                    censor = Profanity()
                    if self._extra_words:
                        censor.add_censor_words(self._extra_words)
                    logger.debug("Loaded profanity word list (%d extra words)", len(self._extra_words))
                    self._filter = censor
        return self._filter

    def classify(self, text: str) -> Classification:
        if not text:
            return Classification()
        if self._load().contains_profanity(text):
            category, severity = HIT_RATING
            return Classification({category: severity})
        return Classification()


def build_classifier(
    extra_terms: Mapping[str, Rating] | None = None,
    *,
    wordlist: bool = True,
    extra_words: Iterable[str] = (),
) -> ContentClassifier:
    """The standard moderation policy: lexicon plus the better-profanity list.

    Called with no arguments this is what :func:`default_classifier` builds,
    so ``ProjectName`` and the CLI apply the same policy.
    """
    lexicon = LexiconClassifier(extra_terms)
    if not wordlist:
        return lexicon
    return CompositeClassifier([lexicon, WordlistClassifier(extra_words)])
