"""Base exceptions shared by every catalog module.

Repositories translate ORM/backend errors into subclasses of
``CoreException`` so callers never have to catch Django exceptions.
"""

from __future__ import annotations


class CoreException(Exception):
    """Root of the domain exception hierarchy.

    ``code`` lets a caller tell apart several failures of the same kind
    (e.g. which partial update failed). ``0`` means "unspecified".
    """

    def __init__(self, message: str = "", code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class LanguageConstraintException(CoreException):
    """A language identifier is not a positive integer."""
