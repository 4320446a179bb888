# src/modelzoo_spec/domain/weights.py
"""
Weight file references, one variant per serialization format.

Entries only point at weight files; nothing here loads them.
"""
from typing import Annotated, Any, ClassVar, Dict, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, model_validator


class WeightsEntry(BaseModel):
    format_id: str
    source: Optional[str] = None  # path or URL, None until supplied
    sha256: Optional[str] = None


class TensorflowSavedModelBundle(WeightsEntry):
    FORMAT_ID: ClassVar[str] = "tensorflow_saved_model_bundle"

    format_id: Literal["tensorflow_saved_model_bundle"] = "tensorflow_saved_model_bundle"
    tag: str = "serve"


class KerasHdf5(WeightsEntry):
    FORMAT_ID: ClassVar[str] = "keras_hdf5"

    format_id: Literal["keras_hdf5"] = "keras_hdf5"
    tensorflow_version: Optional[str] = None


class GenericWeights(WeightsEntry):
    """Weights in a format not interpreted here; the identifier is kept."""

    TAG: ClassVar[str] = "generic"

    params: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def format_not_interpreted(self) -> "GenericWeights":
        if self.format_id in WEIGHTS_FORMATS:
            raise ValueError(f"'{self.format_id}' has its own weights type")
        return self


WEIGHTS_FORMATS = {
    TensorflowSavedModelBundle.FORMAT_ID: TensorflowSavedModelBundle,
    KerasHdf5.FORMAT_ID: KerasHdf5,
}


def _format_of(value: Any) -> str:
    if isinstance(value, GenericWeights):
        return GenericWeights.TAG
    format_id = value.get("format_id") if isinstance(value, dict) else getattr(value, "format_id", None)
    return format_id if format_id in WEIGHTS_FORMATS else GenericWeights.TAG


AnyWeights = Annotated[
    Union[
        Annotated[TensorflowSavedModelBundle, Tag(TensorflowSavedModelBundle.FORMAT_ID)],
        Annotated[KerasHdf5, Tag(KerasHdf5.FORMAT_ID)],
        Annotated[GenericWeights, Tag(GenericWeights.TAG)],
    ],
    Discriminator(_format_of),
]
