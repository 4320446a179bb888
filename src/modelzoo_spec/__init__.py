"""Versioned reader/writer for model zoo specification documents."""
from .domain import (
    CURRENT_FORMAT_VERSION,
    Author,
    Citation,
    InputNode,
    Mode,
    ModelSpecification,
    OutputNode,
    ScaleLinear,
    TensorflowSavedModelBundle,
    ZeroMeanUnitVariance,
)
from .errors import (
    InvalidSpecification,
    MalformedDocument,
    SpecificationError,
    UnrecognizedVersion,
    UnsupportedWriteTarget,
)
from .io import SpecificationIO, detect_and_read, read_specification, upgrade, write, write_specification

__version__ = "0.2.1"

__all__ = [
    "Author",
    "CURRENT_FORMAT_VERSION",
    "Citation",
    "InputNode",
    "InvalidSpecification",
    "MalformedDocument",
    "Mode",
    "ModelSpecification",
    "OutputNode",
    "ScaleLinear",
    "SpecificationError",
    "SpecificationIO",
    "TensorflowSavedModelBundle",
    "UnrecognizedVersion",
    "UnsupportedWriteTarget",
    "ZeroMeanUnitVariance",
    "detect_and_read",
    "read_specification",
    "upgrade",
    "write",
    "write_specification",
]
