"""Project names: validated hostname labels.

Project names must be valid host segments (labels) per RFC 1123, with a
stricter subset enforced here:

- lowercase ASCII letters, digits and ``-`` only (filesystems are case
  sensitive even though hostnames are not)
- no leading or trailing ``-``
- 1 to 63 characters
- not a reserved word
- nothing the content classifier rates ``MODERATE`` or worse

INVARIANT: every ``ProjectName`` instance holds a string that passed
:func:`is_valid`. There is no unchecked construction path.
"""

from __future__ import annotations

import logging
from functools import total_ordering
from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError, core_schema

from projname.domain.moderation import ContentClassifier, Severity, default_classifier
from projname.domain.reserved import is_reserved

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

logger = logging.getLogger(__name__)

MAX_LENGTH = 63
REJECT_THRESHOLD = Severity.MODERATE

_VALID_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789-")

RULES: tuple[str, ...] = (
    "only contain lowercase alphanumeric characters or dashes `-`.",
    "not start or end with a dash.",
    "not be empty.",
    "be shorter than 64 characters.",
    "not contain any profanities.",
    "not be a reserved word.",
)


class InvalidProjectName(ValueError):
    """A candidate failed one or more project-name rules.

    Carries no detail about which rule failed; the message always lists
    every rule.
    """

    MESSAGE = "Invalid project name. Project names must:\n" + "\n".join(
        f"    {i}. {rule}" for i, rule in enumerate(RULES, start=1)
    )

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvalidProjectName)

    def __hash__(self) -> int:
        return hash(InvalidProjectName)

    def __reduce__(self) -> tuple[Any, ...]:
        return (InvalidProjectName, ())


def is_profanity_free(name: str, classifier: ContentClassifier | None = None) -> bool:
    """True unless *classifier* rates *name* at ``REJECT_THRESHOLD`` or worse."""
    analysis = (classifier or default_classifier()).classify(name)
    return not analysis.is_at_least(REJECT_THRESHOLD)


def is_valid(name: str, classifier: ContentClassifier | None = None) -> bool:
    """Check *name* against every project-name rule.

    Uses the process-wide default classifier unless one is given.

    Examples:
        >>> is_valid("kebab-case")
        True
        >>> is_valid("snake_case")
        False
    """
    # Cheap checks first; the classifier only sees well-formed names.
    valid = (
        bool(name)
        and len(name) <= MAX_LENGTH
        and not name.startswith("-")
        and not name.endswith("-")
        and not is_reserved(name)
        and all(ch in _VALID_CHARS for ch in name)
        and is_profanity_free(name, classifier)
    )
    if not valid:
        logger.debug("Rejected project name %r", name)
    return valid


@total_ordering
class ProjectName:
    """An immutable, always-valid project name.

    Construct with ``ProjectName("my-app")``, :meth:`new` or :meth:`parse`;
    all three validate and raise :class:`InvalidProjectName` on failure.
    Equality, hashing and ordering follow the underlying string, and
    ``str()`` returns it unchanged.

    Also usable as a pydantic field type: input strings are validated the
    same way and the value serializes back to the bare string.
    """

    __slots__ = ("_value",)

    _value: str

    def __init__(self, name: str, *, classifier: ContentClassifier | None = None) -> None:
        if not isinstance(name, str) or not is_valid(name, classifier):
            raise InvalidProjectName()
        object.__setattr__(self, "_value", name)

    @classmethod
    def new(cls, name: str, *, classifier: ContentClassifier | None = None) -> ProjectName:
        """Validate *name* and wrap it."""
        return cls(name, classifier=classifier)

    @classmethod
    def parse(cls, text: str) -> ProjectName:
        """Parse a project name from text. Same rules as :meth:`new`."""
        return cls(text)

    @staticmethod
    def is_valid(name: str, *, classifier: ContentClassifier | None = None) -> bool:
        return is_valid(name, classifier)

    @property
    def value(self) -> str:
        return self._value

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError("ProjectName is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError("ProjectName is immutable")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ProjectName({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProjectName):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: ProjectName) -> bool:
        if isinstance(other, ProjectName):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self) -> tuple[Any, ...]:
        return (ProjectName, (self._value,))

    # --- pydantic integration ---

    @classmethod
    def _validate(cls, value: Any) -> ProjectName:
        if isinstance(value, ProjectName):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError("project_name_type", "Project name must be a string")
        try:
            return cls(value)
        except InvalidProjectName as exc:
            raise PydanticCustomError("project_name", str(exc)) from exc

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "minLength": 1,
            "maxLength": MAX_LENGTH,
            "pattern": r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$",
        }
