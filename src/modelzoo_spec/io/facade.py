# src/modelzoo_spec/io/facade.py
"""
Entry points: detect a document's version, read it, and write it back.

``SpecificationIO`` holds nothing but its handler table. The module-level
functions use the table selected by ``Settings.READER_PROFILE``.
"""
from typing import Any, List, Optional

from loguru import logger

from ..core.config import Settings, get_settings
from ..core.versioning import newest, sort_tags
from ..domain.document import Document
from ..domain.model import ModelSpecification
from ..errors import UnsupportedWriteTarget
from .base import SpecificationWriter
from .detector import detect_version
from .registry import PROFILES, REGISTRY, Registry


class SpecificationIO:
    def __init__(self, registry: Registry = REGISTRY):
        self.registry = tuple(registry)

    def supported_versions(self) -> List[str]:
        """Every registered version tag, oldest first."""
        return sort_tags(tag for handler in self.registry for tag in handler.tags)

    def detect_and_read(self, document: Any, upgrade: bool = False) -> ModelSpecification:
        handler = detect_version(document, self.registry)
        specification = handler.reader.read(document)
        if upgrade:
            specification = self.upgrade(specification)
        return specification

    def writer_for(self, specification: ModelSpecification, target_version: Optional[str] = None) -> SpecificationWriter:
        """
        Pick the writer for ``target_version`` (default: the graph's own tag).

        The writer must also accept the graph's own tag; nothing is ever
        written under a different version than the one the graph declares.
        """
        version = target_version if target_version is not None else specification.format_version
        for handler in self.registry:
            if version in handler.tags:
                if handler.writer.can_write(specification):
                    return handler.writer
                raise UnsupportedWriteTarget(specification.format_version)
        raise UnsupportedWriteTarget(version)

    def write(self, specification: ModelSpecification, target_version: Optional[str] = None) -> Document:
        writer = self.writer_for(specification, target_version)
        logger.debug("Writing '{}' as {}", specification.name, specification.format_version)
        return writer.write(specification)

    def upgrade(self, specification: ModelSpecification) -> ModelSpecification:
        """Return a copy stamped with the newest version this table can write."""
        latest = newest(self.supported_versions())
        upgraded = specification.model_copy(deep=True)
        if upgraded.format_version != latest:
            logger.info("Upgrading '{}' from {} to {}", upgraded.name, upgraded.format_version, latest)
            upgraded.format_version = latest
        return upgraded


def get_io(settings: Optional[Settings] = None) -> SpecificationIO:
    settings = settings or get_settings()
    try:
        registry = PROFILES[settings.READER_PROFILE]
    except KeyError:
        raise ValueError(
            f"Unknown reader profile {settings.READER_PROFILE!r}; expected one of {sorted(PROFILES)}"
        ) from None
    return SpecificationIO(registry)


def detect_and_read(document: Any, settings: Optional[Settings] = None) -> ModelSpecification:
    settings = settings or get_settings()
    return get_io(settings).detect_and_read(document, upgrade=settings.UPGRADE_ON_READ)


def write(specification: ModelSpecification, target_version: Optional[str] = None,
          settings: Optional[Settings] = None) -> Document:
    return get_io(settings).write(specification, target_version)


def upgrade(specification: ModelSpecification, settings: Optional[Settings] = None) -> ModelSpecification:
    return get_io(settings).upgrade(specification)
