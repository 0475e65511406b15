from __future__ import annotations


class StpaError(Exception):
    """Base class for document generation failures."""


class TemplateNotFoundError(StpaError, FileNotFoundError):
    pass


class CaseRecordError(StpaError, ValueError):
    """A required field is missing or the record cannot be parsed."""
