# src/modelzoo_spec/domain/nodes.py
"""
Input and output tensor descriptors.

An input accepts every shape ``min + k * step`` (per axis, k >= 0; a step of
0 pins the extent). An output derived from a reference input has shape
``input * scale + offset`` per axis.
"""
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, Field

from .transformations import AnyTransformation


class NodeSpecification(BaseModel):
    name: Optional[str] = None
    axes: Optional[str] = None  # one label per dimension, e.g. "XYZC"
    data_type: Optional[str] = None
    data_range: Optional[List[Any]] = None  # [min, max], bounds may be "-inf"/"inf"
    halo: Optional[List[int]] = None

    def per_axis_fields(self) -> dict:
        """Per-axis lists that are set, keyed by field name."""
        return {"halo": self.halo} if self.halo is not None else {}


class InputNode(NodeSpecification):
    shape_min: Optional[List[int]] = None
    shape_step: Optional[List[int]] = None
    preprocessing: List[AnyTransformation] = Field(default_factory=list)

    def per_axis_fields(self) -> dict:
        fields = super().per_axis_fields()
        if self.shape_min is not None:
            fields["shape_min"] = self.shape_min
        if self.shape_step is not None:
            fields["shape_step"] = self.shape_step
        return fields

    def _steps(self) -> Optional[List[int]]:
        """Per-axis steps (zeros when unset), or None if they do not match ``shape_min``."""
        if self.shape_step is None:
            return [0] * len(self.shape_min)
        if len(self.shape_step) != len(self.shape_min):
            return None
        return self.shape_step

    def shape_for(self, k: int) -> List[int]:
        """The k-th valid shape: ``min + k * step`` on every axis."""
        if k < 0:
            raise ValueError("k must be non-negative")
        if self.shape_min is None:
            raise ValueError(f"input '{self.name}' declares no minimum shape")
        step = self._steps()
        if step is None:
            raise ValueError(
                f"input '{self.name}': min has {len(self.shape_min)} axes, "
                f"step {len(self.shape_step)}"
            )
        return [m + k * s for m, s in zip(self.shape_min, step)]

    def accepts(self, shape: Sequence[int]) -> bool:
        """Whether ``shape`` lies on the ``min + k * step`` grid of every axis."""
        if self.shape_min is None or len(shape) != len(self.shape_min):
            return False
        step = self._steps()
        if step is None:
            return False
        for extent, m, s in zip(shape, self.shape_min, step):
            if s == 0:
                if extent != m:
                    return False
            elif extent < m or (extent - m) % s:
                return False
        return True


class OutputNode(NodeSpecification):
    reference_input: Optional[str] = None
    shape_scale: Optional[List[float]] = None
    shape_offset: Optional[List[int]] = None
    postprocessing: List[AnyTransformation] = Field(default_factory=list)

    def per_axis_fields(self) -> dict:
        fields = super().per_axis_fields()
        if self.shape_scale is not None:
            fields["shape_scale"] = self.shape_scale
        if self.shape_offset is not None:
            fields["shape_offset"] = self.shape_offset
        return fields

    def shape_for(self, input_shape: Sequence[int]) -> List[float]:
        """Output shape for a concrete shape of the reference input."""
        scale = self.shape_scale or [1] * len(input_shape)
        offset = self.shape_offset or [0] * len(input_shape)
        if not (len(scale) == len(offset) == len(input_shape)):
            raise ValueError(
                f"output '{self.name}': shape has {len(input_shape)} axes, "
                f"scale {len(scale)}, offset {len(offset)}"
            )
        return [i * s + o for i, s, o in zip(input_shape, scale, offset)]
