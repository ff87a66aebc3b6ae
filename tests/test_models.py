"""
Unit tests for the two-layer classifier.
"""

from __future__ import annotations

import warnings

import numpy as np
import pytest
import torch

from moonlab.data import BatchLoader, generate_moons
from moonlab.models import Classifier, MLPClassifier, build_mlp_from_config, predict_dataset
from moonlab.utils.configs import ModelConfig
from moonlab.utils.errors import DimensionMismatchError, InvalidArgumentError


def test_default_architecture() -> None:
    model = build_mlp_from_config(ModelConfig(), seed=0)
    linear_layers = [m for m in model.modules() if isinstance(m, torch.nn.Linear)]
    assert [(layer.in_features, layer.out_features) for layer in linear_layers] == [(2, 500), (500, 2)]
    assert any(isinstance(m, torch.nn.ReLU) for m in model.modules())
    assert isinstance(model, Classifier)


def test_predict_shape_and_no_grad() -> None:
    model = build_mlp_from_config(ModelConfig(hidden_size=16), seed=0)
    scores = model.predict(np.zeros((5, 2)))
    assert scores.shape == (5, 2)
    assert scores.dtype == torch.float32
    assert not scores.requires_grad
    assert model.training


def test_initialization_is_seedable() -> None:
    a = build_mlp_from_config(ModelConfig(hidden_size=32), seed=3)
    b = build_mlp_from_config(ModelConfig(hidden_size=32), seed=3)
    for pa, pb in zip(a.parameters(), b.parameters()):
        assert torch.equal(pa, pb)


@pytest.mark.parametrize("shape", [(4, 3), (4,), (2, 2, 2)])
def test_predict_rejects_wrong_input_width(shape: tuple) -> None:
    model = build_mlp_from_config(ModelConfig(hidden_size=8), seed=0)
    with pytest.raises(DimensionMismatchError):
        model.predict(torch.zeros(shape))


def test_invalid_layer_sizes() -> None:
    with pytest.raises(InvalidArgumentError):
        MLPClassifier(ModelConfig(hidden_size=0))


def test_predict_dataset_follows_loader_order() -> None:
    dataset = generate_moons(23, noise=0.1, seed=1)
    model = build_mlp_from_config(ModelConfig(hidden_size=8), seed=0)
    scores = predict_dataset(model, BatchLoader(dataset, batch_size=5))
    assert scores.shape == (23, 2)
    assert torch.allclose(scores, model.predict(dataset.points), atol=1e-6)


def test_predict_accepts_read_only_dataset_points() -> None:
    dataset = generate_moons(10, noise=0.1, seed=2)
    model = build_mlp_from_config(ModelConfig(hidden_size=8), seed=0)
    assert not dataset.points.flags.writeable
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        scores = model.predict(dataset.points)
    assert scores.dtype == torch.float32
    assert scores.shape == (10, 2)
