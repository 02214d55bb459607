"""Content classification: severity-by-category scoring of free text.

A classifier only reports what it sees. Deciding which severity is bad
enough to reject a name is the caller's job (see ``domain.names``).

Two implementations live here:
- :class:`LexiconClassifier`: a code-baked, severity-tagged term list
  searched as substrings, with leet-speak decoding and split-word evasion
  detection.
- :class:`CompositeClassifier`: merges any number of classifiers, taking
  the worst severity per category.
"""

from __future__ import annotations

import re
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum


class Severity(IntEnum):
    """Strength of a moderation signal. Ordered, so thresholds compare."""

    NONE = 0
    MILD = 1
    MODERATE = 2
    SEVERE = 3


class Category(StrEnum):
    """Kinds of inappropriate content a classifier can report."""

    PROFANE = "profane"
    OFFENSIVE = "offensive"
    SEXUAL = "sexual"
    MEAN = "mean"
    EVASIVE = "evasive"


Rating = tuple[Category, Severity]


@dataclass(frozen=True)
class Classification:
    """Worst severity observed per category.

    Categories with nothing to report are absent; :meth:`severity`
    returns ``Severity.NONE`` for them.
    """

    scores: dict[Category, Severity] = field(default_factory=dict)

    def severity(self, category: Category) -> Severity:
        return self.scores.get(category, Severity.NONE)

    def worst(self) -> Severity:
        """Highest severity across all categories."""
        return max(self.scores.values(), default=Severity.NONE)

    def is_at_least(self, threshold: Severity) -> bool:
        """True if any category reaches *threshold*."""
        return self.worst() >= threshold

    def flagged(self, threshold: Severity) -> list[Category]:
        """Categories at or above *threshold*, in declaration order."""
        return [c for c in Category if self.severity(c) >= threshold]

    def merge(self, other: Classification) -> Classification:
        """Combine two classifications, keeping the worst per category."""
        merged = dict(self.scores)
        for category, severity in other.scores.items():
            if severity > merged.get(category, Severity.NONE):
                merged[category] = severity
        return Classification(merged)


class ContentClassifier(ABC):
    """Scores text for inappropriate content.

    Implementations must be pure: the same text always yields the same
    classification and classifying has no observable side effects.
    """

    @abstractmethod
    def classify(self, text: str) -> Classification:
        """Return the severity-by-category classification of *text*."""
        ...


# Separators split tokens; "@" and "$" stay because they decode to letters.
_SEPARATOR_RE = re.compile(r"[^a-z0-9@$]+")

_LEET_TRANS = str.maketrans(
    {
        "4": "a",
        "@": "a",
        "3": "e",
        "1": "i",
        "0": "o",
        "5": "s",
        "$": "s",
        "7": "t",
    }
)

_P, _O, _S, _M = Category.PROFANE, Category.OFFENSIVE, Category.SEXUAL, Category.MEAN

DEFAULT_LEXICON: dict[str, Rating] = {
    # -- Profanity --
    "damn": (_P, Severity.MILD),
    "dammit": (_P, Severity.MILD),
    "crap": (_P, Severity.MILD),
    "hell": (_P, Severity.MILD),
    "bloody": (_P, Severity.MILD),
    "bugger": (_P, Severity.MILD),
    "ass": (_P, Severity.MODERATE),
    "arse": (_P, Severity.MODERATE),
    "piss": (_P, Severity.MODERATE),
    "pissed": (_P, Severity.MODERATE),
    "bollocks": (_P, Severity.MODERATE),
    "douche": (_P, Severity.MODERATE),
    "wanker": (_P, Severity.MODERATE),
    "dick": (_P, Severity.MODERATE),
    "bastard": (_P, Severity.MODERATE),
    "shit": (_P, Severity.SEVERE),
    "bullshit": (_P, Severity.SEVERE),
    "asshole": (_P, Severity.SEVERE),
    "bitch": (_P, Severity.SEVERE),
    "fuck": (_P, Severity.SEVERE),
    "fucker": (_P, Severity.SEVERE),
    "fucking": (_P, Severity.SEVERE),
    "motherfucker": (_P, Severity.SEVERE),
    "twat": (_P, Severity.SEVERE),
    "cunt": (_P, Severity.SEVERE),
    # -- Sexual --
    "sexy": (_S, Severity.MILD),
    "condom": (_S, Severity.MODERATE),
    "condoms": (_S, Severity.MODERATE),
    "sex": (_S, Severity.MODERATE),
    "boobs": (_S, Severity.MODERATE),
    "horny": (_S, Severity.MODERATE),
    "nude": (_S, Severity.MODERATE),
    "nudes": (_S, Severity.MODERATE),
    "penis": (_S, Severity.MODERATE),
    "vagina": (_S, Severity.MODERATE),
    "orgasm": (_S, Severity.MODERATE),
    "cock": (_S, Severity.SEVERE),
    "porn": (_S, Severity.SEVERE),
    "hentai": (_S, Severity.SEVERE),
    "dildo": (_S, Severity.SEVERE),
    "blowjob": (_S, Severity.SEVERE),
    "handjob": (_S, Severity.SEVERE),
    "rape": (_S, Severity.SEVERE),
    # -- Offensive (slurs) --
    "retard": (_O, Severity.SEVERE),
    "retarded": (_O, Severity.SEVERE),
    "tranny": (_O, Severity.SEVERE),
    "faggot": (_O, Severity.SEVERE),
    "fag": (_O, Severity.SEVERE),
    "dyke": (_O, Severity.SEVERE),
    "nigger": (_O, Severity.SEVERE),
    "nigga": (_O, Severity.SEVERE),
    "chink": (_O, Severity.SEVERE),
    "gook": (_O, Severity.SEVERE),
    "spic": (_O, Severity.SEVERE),
    "kike": (_O, Severity.SEVERE),
    "wetback": (_O, Severity.SEVERE),
    "raghead": (_O, Severity.SEVERE),
    # -- Mean --
    "idiot": (_M, Severity.MILD),
    "moron": (_M, Severity.MILD),
    "loser": (_M, Severity.MILD),
    "stupid": (_M, Severity.MILD),
    "kys": (_M, Severity.SEVERE),
    "killyourself": (_M, Severity.SEVERE),
}


def tokenize(text: str) -> list[str]:
    """Lowercase *text* and split it on anything that is not a letter or digit.

    Examples:
        >>> tokenize("test-condom-condom")
        ['test', 'condom', 'condom']
        >>> tokenize("Hello, World!")
        ['hello', 'world']
    """
    return [token for token in _SEPARATOR_RE.split(text.lower()) if token]


# Innocent words that contain a lexicon term. A term occurrence lying
# entirely inside one of these does not count.
SAFE_WORDS: frozenset[str] = frozenset(
    {
        # ass
        "asset",
        "assassin",
        "assay",
        "assem",
        "assert",
        "assess",
        "assign",
        "assist",
        "assoc",
        "assum",
        "assur",
        "bass",
        "brass",
        "cass",
        "class",
        "gass",
        "glass",
        "grass",
        "harass",
        "hass",
        "jurass",
        "lass",
        "mass",
        "nass",
        "pass",
        "potass",
        "sass",
        "tass",
        "terrasse",
        "vass",
        # arse
        "arsenal",
        "arsenic",
        "coarse",
        "hoarse",
        "parse",
        # cock
        "cockatoo",
        "cockpit",
        "cockroach",
        "cocktail",
        "hancock",
        "hitchcock",
        "peacock",
        "shuttlecock",
        # dick
        "dickens",
        "dickinson",
        "dickson",
        # sex
        "essex",
        "sextant",
        "sextet",
        "sussex",
        # rape
        "drape",
        "grape",
        "parapet",
        "rapeseed",
        "scrape",
        "therape",
        "trapez",
        # spic
        "auspic",
        "conspic",
        "despic",
        "spice",
        "spicy",
        "suspic",
        # misc
        "condominium",
        "retardant",
        "scunthorpe",
        "shitake",
        "snigger",
        "thorny",
    }
)


def _occurrences(text: str, word: str) -> Iterator[int]:
    start = text.find(word)
    while start != -1:
        yield start
        start = text.find(word, start + 1)


class LexiconClassifier(ContentClassifier):
    """Substring search against a severity-tagged lexicon.

    Every token is scanned as written and leet-decoded, so inflections and
    compounds (``assholes``, ``bigcock``) are caught. When the text has more
    than one token, the tokens glued back together are scanned too, which
    catches ``f-u-c-k`` style splitting. Occurrences inside a safe word
    (``class``, ``assets``, ``cockpit``) are ignored. Terms found only
    through decoding or gluing are also reported under ``Category.EVASIVE``.
    """

    def __init__(
        self,
        extra_terms: Mapping[str, Rating] | None = None,
        safe_words: Iterable[str] = SAFE_WORDS,
    ) -> None:
        self._lexicon: dict[str, Rating] = dict(DEFAULT_LEXICON)
        if extra_terms:
            self._lexicon.update({term.lower(): rating for term, rating in extra_terms.items()})
        self._safe_words = frozenset(word.lower() for word in safe_words)

    @property
    def terms(self) -> frozenset[str]:
        return frozenset(self._lexicon)

    def classify(self, text: str) -> Classification:
        tokens = tokenize(text)
        direct: set[str] = set()
        for token in tokens:
            direct |= self.find_terms(token)

        hidden: set[str] = set()
        forms = [token.translate(_LEET_TRANS) for token in tokens]
        if len(tokens) > 1:
            joined = "".join(tokens)
            forms += [joined, joined.translate(_LEET_TRANS)]
        for form in forms:
            hidden |= self.find_terms(form)
        hidden -= direct

        scores: dict[Category, Severity] = {}
        for term in direct | hidden:
            category, severity = self._lexicon[term]
            _raise_to(scores, category, severity)
            if term in hidden:
                _raise_to(scores, Category.EVASIVE, severity)
        return Classification(scores)

    def find_terms(self, word: str) -> set[str]:
        """Lexicon terms occurring in *word* outside every safe word.

        Examples:
            >>> sorted(LexiconClassifier().find_terms("assholes"))
            ['ass', 'asshole']
            >>> LexiconClassifier().find_terms("myassets")
            set()
        """
        safe_spans = [
            (start, start + len(safe))
            for safe in self._safe_words
            for start in _occurrences(word, safe)
        ]
        found: set[str] = set()
        for term in self._lexicon:
            for start in _occurrences(word, term):
                end = start + len(term)
                if not any(lo <= start and end <= hi for lo, hi in safe_spans):
                    found.add(term)
                    break
        return found


class CompositeClassifier(ContentClassifier):
    """Runs several classifiers and merges their results."""

    def __init__(self, classifiers: Iterable[ContentClassifier]) -> None:
        self._classifiers = tuple(classifiers)

    def classify(self, text: str) -> Classification:
        result = Classification()
        for classifier in self._classifiers:
            result = result.merge(classifier.classify(text))
        return result


def _raise_to(scores: dict[Category, Severity], category: Category, severity: Severity) -> None:
    if severity > scores.get(category, Severity.NONE):
        scores[category] = severity


_default: ContentClassifier | None = None
_default_factory: Callable[[], ContentClassifier] = LexiconClassifier
_default_lock = threading.Lock()


def set_default_factory(factory: Callable[[], ContentClassifier]) -> None:
    """Choose what :func:`default_classifier` builds.

    The domain layer cannot import infrastructure classifiers, so the
    package wires its full policy in here at import time. Any classifier
    already built is dropped and rebuilt from *factory* on next use.
    """
    global _default, _default_factory
    with _default_lock:
        _default_factory = factory
        _default = None


def default_classifier() -> ContentClassifier:
    """Process-wide classifier, built once on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = _default_factory()
    return _default
