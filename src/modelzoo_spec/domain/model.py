# src/modelzoo_spec/domain/model.py
"""
The canonical model specification graph.

A ``ModelSpecification`` owns all of its children; readers build a fresh one
per document and writers only read from it.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors import InvalidSpecification
from .nodes import InputNode, OutputNode
from .weights import AnyWeights, WeightsEntry

CURRENT_FORMAT_VERSION = "0.2.1-csbdeep"

# config namespace holding the legacy "training" block
FIJI_NAMESPACE = "fiji"
TRAINING_KEY = "training"


class Author(BaseModel):
    name: str
    affiliation: Optional[str] = None
    orcid: Optional[str] = None
    github_user: Optional[str] = None


class Citation(BaseModel):
    text: Optional[str] = None
    doi: Optional[str] = None


class ModelSpecification(BaseModel):
    format_version: Optional[str] = CURRENT_FORMAT_VERSION
    name: Optional[str] = None
    description: Optional[str] = None
    documentation: Optional[str] = None
    license: Optional[str] = None
    tags: Optional[List[str]] = None
    authors: List[Author] = Field(default_factory=list)
    citations: List[Citation] = Field(default_factory=list)
    source: Optional[str] = None
    execution_model: Optional[str] = None
    language: Optional[str] = None
    framework: Optional[str] = None
    git_repo: Optional[str] = None
    inputs: List[InputNode] = Field(default_factory=list)
    outputs: List[OutputNode] = Field(default_factory=list)
    weights: Dict[str, AnyWeights] = Field(default_factory=dict)
    sample_inputs: List[str] = Field(default_factory=list)
    sample_outputs: List[str] = Field(default_factory=list)
    attachments: Dict[str, Any] = Field(default_factory=dict)
    config: Dict[str, Any] = Field(default_factory=dict)
    timestamp: Optional[str] = None

    # ---------- building ----------

    def add_input_node(self, node: InputNode) -> None:
        self.inputs.append(node)

    def add_output_node(self, node: OutputNode) -> None:
        self.outputs.append(node)

    def add_citation(self, citation: Citation) -> None:
        self.citations.append(citation)

    def add_weights(self, entry: WeightsEntry) -> None:
        """Store ``entry`` under its format identifier, replacing any previous one."""
        self.weights[entry.format_id] = entry

    def stamp_timestamp(self, when: Optional[datetime] = None) -> str:
        self.timestamp = (when or datetime.now()).isoformat(sep=" ")
        return self.timestamp

    def input_node(self, name: str) -> Optional[InputNode]:
        for node in self.inputs:
            if node.name == name:
                return node
        return None

    # ---------- legacy training accessors ----------

    @property
    def training(self) -> Optional[Dict[str, Any]]:
        fiji = self.config.get(FIJI_NAMESPACE)
        if not isinstance(fiji, dict):
            return None
        training = fiji.get(TRAINING_KEY)
        return training if isinstance(training, dict) else None

    @property
    def training_source(self) -> Optional[str]:
        """Deprecated: read ``config["fiji"]["training"]["source"]`` instead."""
        training = self.training
        return training.get("source") if training else None

    @property
    def training_kwargs(self) -> Optional[Dict[str, Any]]:
        """Deprecated: read ``config["fiji"]["training"]["kwargs"]`` instead."""
        training = self.training
        return training.get("kwargs") if training else None

    # ---------- invariants ----------

    def check_invariants(self) -> None:
        """
        Raise InvalidSpecification listing every broken invariant.

        Checked: node names are set and unique per list, every output's
        reference input exists, per-axis lists match the axes length, and no halo
        entry is negative.
        """
        problems: List[str] = []
        for kind, nodes in (("input", self.inputs), ("output", self.outputs)):
            seen = set()
            for index, node in enumerate(nodes):
                if not node.name:
                    problems.append(f"{kind} #{index} has no name")
                elif node.name in seen:
                    problems.append(f"duplicate {kind} name '{node.name}'")
                seen.add(node.name)
                if node.axes is not None:
                    for field, values in node.per_axis_fields().items():
                        if len(values) != len(node.axes):
                            problems.append(
                                f"{kind} '{node.name}': {field} has {len(values)} "
                                f"entries for axes '{node.axes}'"
                            )
                if node.halo is not None and any(entry < 0 for entry in node.halo):
                    problems.append(f"{kind} '{node.name}': halo has negative entries {node.halo}")

        input_names = {node.name for node in self.inputs}
        for node in self.outputs:
            if node.reference_input is not None and node.reference_input not in input_names:
                problems.append(
                    f"output '{node.name}' references unknown input '{node.reference_input}'"
                )

        if problems:
            raise InvalidSpecification(problems)
