# src/modelzoo_spec/io/registry.py
"""
Version handler tables.

Each profile is an immutable tuple of handlers built at import time; lookups
match version tags exactly, so handler order never matters.
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

from .base import SpecificationReader, SpecificationWriter
from .csbdeep import CsbdeepReader, CsbdeepWriter
from .csbdeep_legacy import LegacyCsbdeepReader


@dataclass(frozen=True)
class VersionHandler:
    tags: FrozenSet[str]
    reader: SpecificationReader
    writer: SpecificationWriter


Registry = Tuple[VersionHandler, ...]

_CSBDEEP_WRITER = CsbdeepWriter()

REGISTRY: Registry = (
    VersionHandler(CsbdeepReader.VERSIONS, CsbdeepReader(), _CSBDEEP_WRITER),
)

LEGACY_REGISTRY: Registry = (
    VersionHandler(LegacyCsbdeepReader.VERSIONS, LegacyCsbdeepReader(), _CSBDEEP_WRITER),
)

PROFILES: Dict[str, Registry] = {
    "current": REGISTRY,
    "legacy": LEGACY_REGISTRY,
}
