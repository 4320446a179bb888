# src/modelzoo_spec/io/csbdeep_legacy.py
"""
Earlier reader for the ``0.2.x-csbdeep`` documents.

Differs from :class:`CsbdeepReader` in how it treats provenance: the literal
source ``n2v`` means "no source" and is dropped, and no execution model is
ever derived, so the prediction block always yields both pre- and
postprocessing. Synthesized steps carry no mode. It also keeps the
``language`` and ``framework`` fields that the later reader ignores.
"""
from typing import Optional

from ..domain.document import Document, as_str
from ..domain.model import ModelSpecification
from .csbdeep import CSBDEEP_VERSIONS, CsbdeepReader

N2V = "n2v"

LANGUAGE = "language"
FRAMEWORK = "framework"


class LegacyCsbdeepReader(CsbdeepReader):
    VERSIONS = CSBDEEP_VERSIONS

    transformation_mode = None

    def _read_meta(self, specification: ModelSpecification, document: Document) -> None:
        super()._read_meta(specification, document)
        specification.language = as_str(document.get(LANGUAGE))
        specification.framework = as_str(document.get(FRAMEWORK))

    def _read_source(self, specification: ModelSpecification, source: Optional[str]) -> None:
        specification.source = None if source == N2V else source
