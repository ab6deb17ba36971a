from __future__ import annotations

import json

import numpy as np

from heuropt.foundation.result import OptimizationResult


def test_to_dict_is_json_serializable():
    result = OptimizationResult(
        solution=np.array([1.0, 2.0]),
        fitness=np.float64(5.0),
        iterations=3,
        convergence_history=[np.float64(9.0), 7.0, 5.0],
        evaluations=30,
        algorithm="de",
        message="completed 3 generations",
        extras={"state": object()},
    )
    payload = json.loads(json.dumps(result.to_dict()))
    assert payload["solution"] == [1.0, 2.0]
    assert payload["convergence_history"] == [9.0, 7.0, 5.0]
    assert payload["success"] is True
    assert payload["infeasible"] == 0
    assert "extras" not in payload
    assert result.dimensions == 2
