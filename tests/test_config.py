"""Tests for model configuration management."""

import dataclasses
import json

import pytest

from tabfluid.core.config import ModelConfig, load_config_json, save_config_json
from tabfluid.core.errors import TableFluidError


class TestModelConfig:
    def test_defaults(self):
        config = ModelConfig()
        assert config.compute_entropy is False
        assert config.tolerance == pytest.approx(1e-9)
        assert config.max_iterations == 20
        assert config.perturbation == pytest.approx(1.01)
        assert config.strict is False

    def test_frozen(self):
        config = ModelConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.compute_entropy = True

    def test_solver_options(self):
        options = ModelConfig(tolerance=1e-6, max_iterations=5).solver_options()
        assert options["tol"] == pytest.approx(1e-6)
        assert options["max_iter"] == 5

    def test_unknown_keys(self):
        with pytest.raises(TableFluidError, match="bogus"):
            ModelConfig.from_dict({"bogus": 1})


class TestJsonPersistence:
    def test_save_and_load(self, tmp_path):
        config = ModelConfig(compute_entropy=True, max_iterations=30, strict=True)
        path = tmp_path / "model.json"
        save_config_json(config, path)

        loaded = load_config_json(path)
        assert loaded == config

    def test_file_is_plain_json(self, tmp_path):
        path = tmp_path / "model.json"
        save_config_json(ModelConfig(), path)
        with open(path) as f:
            data = json.load(f)
        assert data["max_iterations"] == 20

    def test_partial_file(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"compute_entropy": True}))
        loaded = load_config_json(path)
        assert loaded.compute_entropy
        assert loaded.max_iterations == 20
