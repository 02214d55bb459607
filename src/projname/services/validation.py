"""NameService: validate candidate project names and describe the rules."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING

from projname.domain.moderation import ContentClassifier, default_classifier
from projname.domain.names import MAX_LENGTH, RULES, InvalidProjectName, is_valid
from projname.domain.reserved import RESERVED_WORDS
from projname.infrastructure.wordlist import build_classifier
from projname.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from projname.config.settings import ProjnameSettings

logger = logging.getLogger(__name__)


class NameService:
    """Checks candidate names with a fixed classifier.

    Without an explicit classifier the process-wide default is used, the
    same one ``ProjectName`` validates with.
    """

    def __init__(self, classifier: ContentClassifier | None = None) -> None:
        self._classifier = classifier or default_classifier()

    @classmethod
    def from_settings(cls, settings: ProjnameSettings) -> NameService:
        """Build a service whose classifier follows the ``[moderation]`` config."""
        moderation = settings.moderation
        extra_terms = moderation.term_ratings()
        if moderation.wordlist and not extra_terms and not moderation.extra_words:
            return cls(default_classifier())
        return cls(
            build_classifier(
                extra_terms,
                wordlist=moderation.wordlist,
                extra_words=moderation.extra_words,
            )
        )

    @property
    def classifier(self) -> ContentClassifier:
        return self._classifier

    def check(self, names: Sequence[str]) -> ServiceResult:
        """Validate every name in *names*.

        The result is ``ok`` only if all names pass. Per-name outcomes are
        in ``data["results"]`` either way; which rule a name broke is never
        reported.
        """
        start = time.perf_counter()
        results = [{"name": name, "valid": is_valid(name, self._classifier)} for name in names]
        invalid = [r["name"] for r in results if not r["valid"]]
        data = {
            "results": results,
            "valid_count": len(results) - len(invalid),
            "invalid_count": len(invalid),
        }
        meta = {"duration_ms": round((time.perf_counter() - start) * 1000, 2)}
        logger.debug("Checked %d names, %d invalid", len(results), len(invalid))

        if invalid:
            return ServiceResult(
                ok=False,
                op="check",
                data=data,
                error=ServiceError(
                    code="INVALID_NAME",
                    message=InvalidProjectName.MESSAGE,
                    detail={"invalid": invalid},
                ),
                meta=meta,
            )
        return ServiceResult(ok=True, op="check", data=data, meta=meta)

    def rules(self) -> ServiceResult:
        """Describe the project-name rules and the reserved words."""
        return ServiceResult(
            ok=True,
            op="rules",
            data={
                "rules": list(RULES),
                "reserved": sorted(RESERVED_WORDS),
                "max_length": MAX_LENGTH,
            },
        )
