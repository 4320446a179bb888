# src/modelzoo_spec/domain/transformations.py
"""
Pre/post-processing transformation descriptors.

Each descriptor records the parameters of one processing step; nothing here
applies them to image data. Variants are told apart by their ``name``
identifier, which is also what gets written back out.
"""
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, model_validator


class Mode(str, Enum):
    FIXED = "fixed"
    PER_SAMPLE = "per_sample"


class Transformation(BaseModel):
    name: str
    mode: Optional[Mode] = None

    def kwargs(self) -> Dict[str, Any]:
        """Parameters of the step, without its identifier."""
        return self.model_dump(exclude={"name"}, exclude_none=True, mode="json")


class ZeroMeanUnitVariance(Transformation):
    NAME: ClassVar[str] = "zero_mean_unit_variance"

    name: Literal["zero_mean_unit_variance"] = "zero_mean_unit_variance"
    mean: Optional[float] = None
    std: Optional[float] = None

    def inverse(self) -> "ScaleLinear":
        """The scale-linear step that undoes this normalization."""
        return ScaleLinear(gain=self.std, offset=self.mean, mode=self.mode)


class ScaleLinear(Transformation):
    NAME: ClassVar[str] = "scale_linear"

    name: Literal["scale_linear"] = "scale_linear"
    gain: Optional[float] = None
    offset: Optional[float] = None


class GenericTransformation(Transformation):
    """Any step whose identifier is not interpreted here; kept as-is."""

    TAG: ClassVar[str] = "generic"

    params: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def name_not_interpreted(self) -> "GenericTransformation":
        if self.name in TRANSFORMATION_KINDS:
            raise ValueError(f"'{self.name}' has its own transformation type")
        return self

    def kwargs(self) -> Dict[str, Any]:
        data = dict(self.params)
        if self.mode is not None:
            data["mode"] = self.mode.value
        return data


TRANSFORMATION_KINDS = {
    ZeroMeanUnitVariance.NAME: ZeroMeanUnitVariance,
    ScaleLinear.NAME: ScaleLinear,
}


def _kind_of(value: Any) -> str:
    if isinstance(value, GenericTransformation):
        return GenericTransformation.TAG
    name = value.get("name") if isinstance(value, dict) else getattr(value, "name", None)
    return name if name in TRANSFORMATION_KINDS else GenericTransformation.TAG


AnyTransformation = Annotated[
    Union[
        Annotated[ZeroMeanUnitVariance, Tag(ZeroMeanUnitVariance.NAME)],
        Annotated[ScaleLinear, Tag(ScaleLinear.NAME)],
        Annotated[GenericTransformation, Tag(GenericTransformation.TAG)],
    ],
    Discriminator(_kind_of),
]
