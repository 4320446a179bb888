from .base import SpecificationReader, SpecificationWriter
from .csbdeep import CsbdeepReader, CsbdeepWriter
from .csbdeep_legacy import LegacyCsbdeepReader
from .detector import detect_version
from .facade import SpecificationIO, detect_and_read, get_io, upgrade, write
from .files import dump_document, load_document, read_specification, write_specification
from .registry import LEGACY_REGISTRY, REGISTRY, VersionHandler

__all__ = [
    "CsbdeepReader",
    "CsbdeepWriter",
    "LEGACY_REGISTRY",
    "LegacyCsbdeepReader",
    "REGISTRY",
    "SpecificationIO",
    "SpecificationReader",
    "SpecificationWriter",
    "VersionHandler",
    "detect_and_read",
    "detect_version",
    "dump_document",
    "get_io",
    "load_document",
    "read_specification",
    "upgrade",
    "write",
    "write_specification",
]
