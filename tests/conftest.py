"""
Shared fixtures: example csbdeep documents and specifications.
"""

import copy

import pytest

from modelzoo_spec.core.config import reset_settings

MEAN = 100.0
STD = 10.0


def example_document(version: str = "0.2.1-csbdeep", source: str = "trainingSource") -> dict:
    """A complete csbdeep document with one input, one output and a prediction block."""
    return {
        "format_version": version,
        "name": "model name",
        "description": "description",
        "authors": ["author1", "author2"],
        "cite": [{"text": "Publication name, authors, journal", "doi": "DOI"}],
        "documentation": "DOCUMENTATION_LINK",
        "tags": ["tag1", "tag2"],
        "license": "bsd",
        "language": "java",
        "framework": "tensorflow",
        "source": source,
        "test_input": "input.png",
        "test_output": "output.png",
        "inputs": [
            {
                "name": "input",
                "axes": "XYZC",
                "data_type": "float",
                "data_range": ["-inf", "inf"],
                "halo": [16, 16, 16, 1],
                "shape": {"min": [4, 4, 4, 1], "step": [16, 16, 16, 0]},
            }
        ],
        "outputs": [
            {
                "name": "output",
                "axes": "XYZC",
                "data_type": "float",
                "data_range": ["-inf", "inf"],
                "halo": [0, 0, 0, 0],
                "shape": {
                    "reference_input": "input",
                    "scale": [2.0, 2.0, 2.0, 1.0],
                    "offset": [0, 0, 0, 3],
                },
            }
        ],
        "training": {
            "source": "n2v.train()",
            "kwargs": {"epochs": 10, "batch_size": 4},
        },
        "prediction": {
            "preprocess": [{"kwargs": {"mean": [MEAN], "stdDev": [STD]}}],
        },
    }


def minimal_document(version: str = "0.2.1-csbdeep") -> dict:
    """Only the keys a csbdeep document cannot do without."""
    return {"format_version": version, "inputs": [], "outputs": []}


@pytest.fixture
def document():
    return example_document()


@pytest.fixture
def frozen_document():
    """Example document plus an untouched copy to compare against."""
    doc = example_document()
    return doc, copy.deepcopy(doc)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test sees settings built from its own environment."""
    reset_settings()
    yield
    reset_settings()
