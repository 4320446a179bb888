# src/modelzoo_spec/errors.py
from typing import List, Optional


class SpecificationError(Exception):
    """Base class for every failure raised by modelzoo_spec."""


class UnrecognizedVersion(SpecificationError):
    """No registered reader claims the document's ``format_version``."""

    def __init__(self, version: object):
        self.version = version
        super().__init__(f"No reader registered for format version {version!r}")


class UnsupportedWriteTarget(SpecificationError):
    """No registered writer accepts the requested format version."""

    def __init__(self, version: Optional[str]):
        self.version = version
        super().__init__(f"No writer registered for format version {version!r}")


class MalformedDocument(SpecificationError):
    """A structurally required field is missing or has the wrong shape."""

    def __init__(self, field: str, reason: str = "missing or not a list"):
        self.field = field
        self.reason = reason
        super().__init__(f"Malformed document field '{field}': {reason}")


class InvalidSpecification(SpecificationError):
    """The entity graph violates one or more of its invariants."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))
