# src/modelzoo_spec/core/versioning.py
from typing import Callable, Iterable, List

from packaging.version import InvalidVersion, Version


def release_of(tag: str) -> Version:
    """Numeric release of a flavored tag: ``0.2.1-csbdeep`` -> ``0.2.1``."""
    return Version(tag.split("-", 1)[0])

def match_exact(tag: str) -> Callable[[str], bool]:
    # flavored tags are compared verbatim, never by release number
    return lambda s: isinstance(s, str) and s == tag

def match_any(tags: Iterable[str]) -> Callable[[str], bool]:
    known = frozenset(tags)
    return lambda s: isinstance(s, str) and s in known

def sort_tags(tags: Iterable[str]) -> List[str]:
    """Order tags oldest first; tags without a parsable release sort first."""
    def key(tag: str):
        try:
            return (1, release_of(tag), tag)
        except InvalidVersion:
            return (0, Version("0"), tag)
    return sorted(set(tags), key=key)

def newest(tags: Iterable[str]) -> str:
    ordered = sort_tags(tags)
    if not ordered:
        raise ValueError("no version tags given")
    return ordered[-1]
