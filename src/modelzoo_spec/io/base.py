# src/modelzoo_spec/io/base.py
"""Reader and writer interfaces shared by every format revision."""
from abc import ABC, abstractmethod
from typing import ClassVar, FrozenSet

from ..core.versioning import match_any
from ..domain.document import Document
from ..domain.model import ModelSpecification

FORMAT_VERSION_KEY = "format_version"


class SpecificationReader(ABC):
    """
    Turns a document of one schema revision into a ModelSpecification.

    Subclasses list the exact version tags they understand in ``VERSIONS``.
    """

    VERSIONS: ClassVar[FrozenSet[str]] = frozenset()

    def can_read(self, document: Document) -> bool:
        return match_any(self.VERSIONS)(document.get(FORMAT_VERSION_KEY))

    @abstractmethod
    def read(self, document: Document) -> ModelSpecification:
        """
        Build a fresh specification from ``document``.

        Args:
            document: Parsed document; it is never modified.

        Returns:
            The specification graph.
        """
        pass


class SpecificationWriter(ABC):
    """Turns a ModelSpecification into a document of one schema revision."""

    VERSIONS: ClassVar[FrozenSet[str]] = frozenset()

    def can_write(self, specification: ModelSpecification) -> bool:
        return match_any(self.VERSIONS)(specification.format_version)

    @abstractmethod
    def write(self, specification: ModelSpecification) -> Document:
        """
        Build a fresh document from ``specification``.

        Args:
            specification: Graph to serialize; it is never modified.

        Returns:
            The document as nested dicts, lists and scalars.
        """
        pass
