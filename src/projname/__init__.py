"""projname: validate user-supplied project names.

Project names are lowercase hostname labels that are also free of
reserved words and profanity::

    >>> from projname import ProjectName
    >>> str(ProjectName("my-app"))
    'my-app'
"""

from __future__ import annotations

from projname.domain.moderation import set_default_factory
from projname.domain.names import InvalidProjectName, ProjectName, is_valid
from projname.infrastructure.wordlist import build_classifier

set_default_factory(build_classifier)

__version__ = "0.1.0"

__all__ = ["InvalidProjectName", "ProjectName", "__version__", "is_valid"]
