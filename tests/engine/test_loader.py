from __future__ import annotations

import json

import pytest

from heuropt.engine.config import algorithm_section, load_run_spec
from heuropt.foundation.exceptions import ConfigurationError


def test_load_json(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"algorithm": "de", "de": {"F": 0.5}}), encoding="utf-8")
    spec = load_run_spec(path)
    assert spec["algorithm"] == "de"
    assert algorithm_section(spec, "de") == {"F": 0.5}


def test_load_yaml(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "run.yaml"
    path.write_text("algorithm: pso\nswarm_size: 12\niterations: 4\n", encoding="utf-8")
    spec = load_run_spec(path)
    assert algorithm_section(spec, "pso") == {"swarm_size": 12, "iterations": 4}


def test_flat_section_skips_reserved_and_nested_keys():
    spec = {"algorithm": "ga", "seed": 3, "population_size": 10, "de": {"F": 0.4}}
    assert algorithm_section(spec, "ga", reserved=("algorithm", "seed")) == {"population_size": 10}


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "run.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="mapping"):
        load_run_spec(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_run_spec(tmp_path / "absent.yaml")


def test_empty_nested_section_is_missing():
    from heuropt.foundation.exceptions import MissingConfigError

    with pytest.raises(MissingConfigError, match="'de'"):
        algorithm_section({"algorithm": "de", "de": None}, "de")


def test_malformed_json_is_a_configuration_error(tmp_path):
    path = tmp_path / "run.json"
    path.write_text('{"algorithm": "ga",', encoding="utf-8")
    with pytest.raises(ConfigurationError, match="not valid JSON"):
        load_run_spec(path)


def test_malformed_yaml_is_a_configuration_error(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "run.yaml"
    path.write_text("algorithm: [ga\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="not valid YAML"):
        load_run_spec(path)
