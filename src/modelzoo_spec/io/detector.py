# src/modelzoo_spec/io/detector.py
from typing import Any

from loguru import logger

from ..errors import UnrecognizedVersion
from .base import FORMAT_VERSION_KEY
from .registry import REGISTRY, Registry, VersionHandler


def detect_version(document: Any, registry: Registry = REGISTRY) -> VersionHandler:
    """
    Find the handler registered for the document's ``format_version``.

    Matching is exact string equality. A document that is not a mapping, or
    whose tag is missing, non-string or unknown, raises UnrecognizedVersion
    instead of falling back to any reader.
    """
    if not isinstance(document, dict):
        logger.info("Document is a {}, not a mapping", type(document).__name__)
        raise UnrecognizedVersion(None)
    version = document.get(FORMAT_VERSION_KEY)
    if isinstance(version, str):
        for handler in registry:
            if handler.reader.can_read(document):
                logger.debug("Format version {} handled by {}", version, type(handler.reader).__name__)
                return handler
    logger.info("No reader for format version {!r}", version)
    raise UnrecognizedVersion(version)
