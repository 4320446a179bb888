# src/modelzoo_spec/domain/document.py
"""
Generic document values: the parsed form of one specification file.

A document is a tree of mappings, lists and scalars exactly as a YAML or JSON
parser hands it over. Nothing in here interprets the tree.
"""
import copy
from typing import Any, Dict, List, Optional, Union

Scalar = Union[str, int, float, bool, None]
DocumentValue = Union[Scalar, List[Any], Dict[str, Any]]
Document = Dict[str, Any]


def as_map(value: Any) -> Optional[Dict[str, Any]]:
    """Return ``value`` if it is a mapping, else None."""
    return value if isinstance(value, dict) else None


def as_list(value: Any) -> Optional[List[Any]]:
    """Return ``value`` if it is a list, else None."""
    return value if isinstance(value, list) else None


def as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def copy_value(value: DocumentValue) -> DocumentValue:
    """Deep copy so callers never share nested containers."""
    return copy.deepcopy(value)
