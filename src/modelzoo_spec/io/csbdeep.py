# src/modelzoo_spec/io/csbdeep.py
"""
csbdeep.py
==========

Reader and writer for the ``0.2.x-csbdeep`` model specification documents.

Both ``0.2.0-csbdeep`` and ``0.2.1-csbdeep`` share one field layout, so one
reader/writer pair serves both tags.

Format quirks
-------------
- ``authors`` may be a list of names or a list of author records.
- ``source: denoiseg`` marks the denoiseg execution model; such models get
  no output postprocessing from the prediction block.
- ``prediction.preprocess[0].kwargs`` holds a single global mean/stdDev pair.
  It becomes a zero-mean-unit-variance step on the first input and the
  inverse scale-linear step on the first output.
- ``training`` is kept opaque under ``config["fiji"]["training"]``.
- Documents never describe weights, so every read specification gets one
  empty TensorFlow saved-model-bundle entry.
"""
from typing import Any, Dict, List, Optional, Type, TypeVar

from loguru import logger
from pydantic import ValidationError

from ..domain.document import Document, as_list, as_map, as_str, copy_value
from ..domain.model import (
    FIJI_NAMESPACE,
    TRAINING_KEY,
    Author,
    Citation,
    ModelSpecification,
)
from ..domain.nodes import InputNode, NodeSpecification, OutputNode
from ..domain.transformations import Mode, ZeroMeanUnitVariance
from ..domain.weights import TensorflowSavedModelBundle
from ..errors import MalformedDocument
from .base import FORMAT_VERSION_KEY, SpecificationReader, SpecificationWriter

CSBDEEP_VERSIONS = frozenset({"0.2.0-csbdeep", "0.2.1-csbdeep"})

DENOISEG = "denoiseg"

# ---------- document keys ----------

NAME = "name"
DESCRIPTION = "description"
CITE = "cite"
AUTHORS = "authors"
DOCUMENTATION = "documentation"
TAGS = "tags"
LICENSE = "license"
SOURCE = "source"
TEST_INPUT = "test_input"
TEST_OUTPUT = "test_output"
INPUTS = "inputs"
OUTPUTS = "outputs"
PREDICTION = "prediction"
TRAINING = "training"
TRAINING_SOURCE = "source"
TRAINING_KWARGS = "kwargs"

NODE_NAME = "name"
NODE_AXES = "axes"
NODE_DATA_TYPE = "data_type"
NODE_DATA_RANGE = "data_range"
NODE_HALO = "halo"
NODE_SHAPE = "shape"
SHAPE_MIN = "min"
SHAPE_STEP = "step"
SHAPE_REFERENCE_INPUT = "reference_input"
SHAPE_SCALE = "scale"
SHAPE_OFFSET = "offset"

CITE_TEXT = "text"
CITE_DOI = "doi"

PREPROCESS = "preprocess"
KWARGS = "kwargs"
MEAN = "mean"
STD = "stdDev"

N = TypeVar("N", bound=NodeSpecification)


# ---------- Reader ----------


class CsbdeepReader(SpecificationReader):
    VERSIONS = CSBDEEP_VERSIONS

    # mode stamped on the transformations synthesized from "prediction"
    transformation_mode: Optional[Mode] = Mode.FIXED

    def read(self, document: Document) -> ModelSpecification:
        specification = ModelSpecification()
        self._read_meta(specification, document)
        self._read_inputs_outputs(specification, document)
        self._read_training(specification, document)
        self._read_prediction(specification, document)
        specification.add_weights(TensorflowSavedModelBundle(source=None, sha256=None))
        logger.debug(
            "Read '{}' ({}): {} input(s), {} output(s)",
            specification.name,
            specification.format_version,
            len(specification.inputs),
            len(specification.outputs),
        )
        return specification

    # ---------- meta ----------

    def _read_meta(self, specification: ModelSpecification, document: Document) -> None:
        specification.format_version = as_str(document.get(FORMAT_VERSION_KEY))
        specification.name = as_str(document.get(NAME))
        specification.description = as_str(document.get(DESCRIPTION))
        specification.documentation = as_str(document.get(DOCUMENTATION))
        specification.license = as_str(document.get(LICENSE))
        specification.tags = _read_tags(document.get(TAGS))
        specification.authors = _read_authors(document.get(AUTHORS))
        specification.citations = _read_citations(document.get(CITE))
        self._read_source(specification, as_str(document.get(SOURCE)))

        test_input = as_str(document.get(TEST_INPUT))
        test_output = as_str(document.get(TEST_OUTPUT))
        specification.sample_inputs = [test_input] if test_input is not None else []
        specification.sample_outputs = [test_output] if test_output is not None else []

    def _read_source(self, specification: ModelSpecification, source: Optional[str]) -> None:
        specification.source = source
        if source == DENOISEG:
            specification.execution_model = source

    # ---------- nodes ----------

    def _read_inputs_outputs(self, specification: ModelSpecification, document: Document) -> None:
        for index, record in enumerate(_required_list(document, INPUTS)):
            node = _read_input_node(record, f"{INPUTS}[{index}]")
            if node is not None:
                specification.add_input_node(node)
        for index, record in enumerate(_required_list(document, OUTPUTS)):
            node = _read_output_node(record, f"{OUTPUTS}[{index}]")
            if node is not None:
                specification.add_output_node(node)

    # ---------- training ----------

    def _read_training(self, specification: ModelSpecification, document: Document) -> None:
        training = as_map(document.get(TRAINING))
        if training is None:
            return
        block = {
            TRAINING_SOURCE: as_str(training.get(TRAINING_SOURCE)),
            TRAINING_KWARGS: copy_value(as_map(training.get(TRAINING_KWARGS))),
        }
        specification.config.setdefault(FIJI_NAMESPACE, {})[TRAINING_KEY] = block

    # ---------- prediction ----------

    def _read_prediction(self, specification: ModelSpecification, document: Document) -> None:
        prediction = as_map(document.get(PREDICTION))
        if prediction is None:
            return
        steps = as_list(prediction.get(PREPROCESS))
        if not steps:
            return
        kwargs = as_map((as_map(steps[0]) or {}).get(KWARGS))
        if kwargs is None:
            return
        means = as_list(kwargs.get(MEAN))
        stds = as_list(kwargs.get(STD))
        if not means or not stds:
            return
        if not specification.inputs or not specification.outputs:
            logger.debug("Prediction block ignored: model has no input or no output node")
            return

        try:
            pre = ZeroMeanUnitVariance(mean=means[0], std=stds[0], mode=self.transformation_mode)
        except ValidationError as e:
            logger.warning("Ignoring unreadable prediction normalization: {}", e)
            return

        specification.inputs[0].preprocessing = [pre]
        if specification.execution_model == DENOISEG:
            logger.debug("denoiseg model: no postprocessing attached to '{}'", specification.outputs[0].name)
            return
        specification.outputs[0].postprocessing = [pre.inverse()]


# ---------- reader helpers ----------


def _required_list(document: Document, key: str) -> List[Any]:
    value = document.get(key)
    if not isinstance(value, list):
        raise MalformedDocument(key)
    return value


def _read_tags(value: Any) -> Optional[List[str]]:
    tags = as_list(value)
    if tags is None:
        return None
    return [tag for tag in tags if isinstance(tag, str)]


def _read_authors(value: Any) -> List[Author]:
    if isinstance(value, str):
        value = [value]
    authors: List[Author] = []
    for entry in as_list(value) or []:
        if isinstance(entry, str):
            authors.append(Author(name=entry))
        elif isinstance(entry, dict):
            try:
                authors.append(Author.model_validate(entry))
            except ValidationError as e:
                logger.warning("Skipping unreadable author record {}: {}", entry, e)
        else:
            logger.warning("Skipping author entry of type {}", type(entry).__name__)
    return authors


def _read_citations(value: Any) -> List[Citation]:
    records = as_list(value)
    if records is None:
        return []
    citations: List[Citation] = []
    for record in records:
        record = as_map(record)
        if record is None:
            continue
        citations.append(
            Citation(text=as_str(record.get(CITE_TEXT)), doi=as_str(record.get(CITE_DOI)))
        )
    return citations


def _common_node_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": as_str(record.get(NODE_NAME)),
        "axes": as_str(record.get(NODE_AXES)),
        "data_type": as_str(record.get(NODE_DATA_TYPE)),
        "data_range": copy_value(as_list(record.get(NODE_DATA_RANGE))),
        "halo": copy_value(as_list(record.get(NODE_HALO))),
    }


def _build_node(cls: Type[N], fields: Dict[str, Any], where: str) -> N:
    """Build a node, dropping any field whose value does not validate."""
    try:
        return cls(**fields)
    except ValidationError as e:
        bad = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.warning("Dropping unreadable field(s) {} of {}", sorted(bad), where)
        return cls(**{k: v for k, v in fields.items() if k not in bad})


def _read_input_node(record: Any, where: str) -> Optional[InputNode]:
    record = as_map(record)
    if record is None:
        logger.warning("Skipping {}: not a mapping", where)
        return None
    fields = _common_node_fields(record)
    shape = as_map(record.get(NODE_SHAPE)) or {}
    fields["shape_min"] = copy_value(as_list(shape.get(SHAPE_MIN)))
    fields["shape_step"] = copy_value(as_list(shape.get(SHAPE_STEP)))
    return _build_node(InputNode, fields, where)


def _read_output_node(record: Any, where: str) -> Optional[OutputNode]:
    record = as_map(record)
    if record is None:
        logger.warning("Skipping {}: not a mapping", where)
        return None
    fields = _common_node_fields(record)
    shape = as_map(record.get(NODE_SHAPE)) or {}
    fields["reference_input"] = as_str(shape.get(SHAPE_REFERENCE_INPUT))
    fields["shape_scale"] = copy_value(as_list(shape.get(SHAPE_SCALE)))
    fields["shape_offset"] = copy_value(as_list(shape.get(SHAPE_OFFSET)))
    return _build_node(OutputNode, fields, where)


# ---------- Writer ----------


class CsbdeepWriter(SpecificationWriter):
    VERSIONS = CSBDEEP_VERSIONS

    def write(self, specification: ModelSpecification) -> Document:
        data: Document = {}
        self._write_meta(specification, data)
        data[INPUTS] = [_write_input_node(node) for node in specification.inputs]
        data[OUTPUTS] = [_write_output_node(node) for node in specification.outputs]
        self._write_training(specification, data)
        self._write_prediction(specification, data)
        return data

    def _write_meta(self, specification: ModelSpecification, data: Document) -> None:
        data[FORMAT_VERSION_KEY] = specification.format_version
        data[NAME] = specification.name
        data[DESCRIPTION] = specification.description
        data[AUTHORS] = [author.model_dump(exclude_none=True) for author in specification.authors]
        data[CITE] = [
            {CITE_TEXT: citation.text, CITE_DOI: citation.doi}
            for citation in specification.citations
        ]
        data[DOCUMENTATION] = specification.documentation
        data[TAGS] = copy_value(specification.tags)
        data[LICENSE] = specification.license
        data[SOURCE] = specification.source
        # only one test asset pair fits this layout
        if specification.sample_inputs:
            data[TEST_INPUT] = specification.sample_inputs[0]
        if specification.sample_outputs:
            data[TEST_OUTPUT] = specification.sample_outputs[0]

    def _write_training(self, specification: ModelSpecification, data: Document) -> None:
        training = specification.training
        if training is None:
            return
        data[TRAINING] = copy_value(training)

    def _write_prediction(self, specification: ModelSpecification, data: Document) -> None:
        if len(specification.inputs) != 1:
            return
        steps = specification.inputs[0].preprocessing
        if len(steps) != 1 or steps[0].name != ZeroMeanUnitVariance.NAME:
            return
        step = steps[0]
        data[PREDICTION] = {
            PREPROCESS: [{KWARGS: {MEAN: [step.mean], STD: [step.std]}}],
        }


# ---------- writer helpers ----------


def _write_node(node: NodeSpecification) -> Dict[str, Any]:
    record: Dict[str, Any] = {NODE_NAME: node.name}
    if node.axes is not None:
        record[NODE_AXES] = node.axes
    if node.data_type is not None:
        record[NODE_DATA_TYPE] = node.data_type
    if node.data_range is not None:
        record[NODE_DATA_RANGE] = copy_value(node.data_range)
    if node.halo is not None:
        record[NODE_HALO] = list(node.halo)
    return record


def _write_input_node(node: InputNode) -> Dict[str, Any]:
    record = _write_node(node)
    shape: Dict[str, Any] = {}
    if node.shape_min is not None:
        shape[SHAPE_MIN] = list(node.shape_min)
    if node.shape_step is not None:
        shape[SHAPE_STEP] = list(node.shape_step)
    record[NODE_SHAPE] = shape
    return record


def _write_output_node(node: OutputNode) -> Dict[str, Any]:
    record = _write_node(node)
    shape: Dict[str, Any] = {}
    if node.reference_input is not None:
        shape[SHAPE_REFERENCE_INPUT] = node.reference_input
    if node.shape_scale is not None:
        shape[SHAPE_SCALE] = list(node.shape_scale)
    if node.shape_offset is not None:
        shape[SHAPE_OFFSET] = list(node.shape_offset)
    record[NODE_SHAPE] = shape
    return record
