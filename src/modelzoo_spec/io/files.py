# src/modelzoo_spec/io/files.py
"""
Loading and saving specification documents on disk.

A specification lives in a YAML file, either on its own, inside a model
directory, or inside a zipped model bundle. The model file name comes from
``Settings.MODEL_FILE_NAME``.
"""
import zipfile
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from loguru import logger

from ..core.config import Settings, get_settings
from ..domain.document import Document
from ..domain.model import ModelSpecification
from ..errors import MalformedDocument
from .facade import SpecificationIO, get_io

PathLike = Union[str, Path]


def _as_document(value: Any, where: str) -> Document:
    if not isinstance(value, dict):
        raise MalformedDocument("<document>", f"{where} does not hold a mapping")
    return value


def load_document(path: PathLike) -> Document:
    """Parse one YAML file into a document."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return _as_document(yaml.safe_load(f), str(path))


def dump_document(document: Document, path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(document, f, sort_keys=False, default_flow_style=False)


def _load_from_zip(path: Path, file_name: str) -> Document:
    with zipfile.ZipFile(path) as bundle:
        members = [m for m in bundle.namelist() if Path(m).name == file_name]
        if not members:
            raise FileNotFoundError(f"{file_name} not found in {path}")
        # shallowest match wins when the bundle nests model folders
        member = min(members, key=lambda m: m.count("/"))
        logger.debug("Reading {} from bundle {}", member, path)
        return _as_document(yaml.safe_load(bundle.read(member)), f"{path}:{member}")


def read_specification(path: PathLike, io: Optional[SpecificationIO] = None,
                       settings: Optional[Settings] = None) -> ModelSpecification:
    """
    Read a specification from a YAML file, a model directory or a zip bundle.

    Args:
        path: File, directory or ``.zip`` bundle.
        io: Reader table to use; defaults to the configured profile.
        settings: Settings override.

    Returns:
        The parsed specification.
    """
    settings = settings or get_settings()
    io = io or get_io(settings)
    path = Path(path)

    if path.is_dir():
        document = load_document(path / settings.MODEL_FILE_NAME)
    elif zipfile.is_zipfile(path):
        document = _load_from_zip(path, settings.MODEL_FILE_NAME)
    else:
        document = load_document(path)

    return io.detect_and_read(document, upgrade=settings.UPGRADE_ON_READ)


def write_specification(specification: ModelSpecification, directory: PathLike,
                        target_version: Optional[str] = None,
                        io: Optional[SpecificationIO] = None,
                        settings: Optional[Settings] = None) -> Path:
    """Write ``specification`` into ``directory`` and return the file path."""
    settings = settings or get_settings()
    io = io or get_io(settings)
    document = io.write(specification, target_version)
    path = Path(directory) / settings.MODEL_FILE_NAME
    dump_document(document, path)
    logger.info("Wrote {} ({})", path, specification.format_version)
    return path
