from .document import Document, DocumentValue
from .model import CURRENT_FORMAT_VERSION, Author, Citation, ModelSpecification
from .nodes import InputNode, NodeSpecification, OutputNode
from .transformations import (
    GenericTransformation,
    Mode,
    ScaleLinear,
    Transformation,
    ZeroMeanUnitVariance,
)
from .weights import GenericWeights, KerasHdf5, TensorflowSavedModelBundle, WeightsEntry

__all__ = [
    "Author",
    "CURRENT_FORMAT_VERSION",
    "Citation",
    "Document",
    "DocumentValue",
    "GenericTransformation",
    "GenericWeights",
    "InputNode",
    "KerasHdf5",
    "Mode",
    "ModelSpecification",
    "NodeSpecification",
    "OutputNode",
    "ScaleLinear",
    "TensorflowSavedModelBundle",
    "Transformation",
    "WeightsEntry",
    "ZeroMeanUnitVariance",
]
