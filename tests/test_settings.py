from pathlib import Path

import pytest
from pydantic import ValidationError

from nbengine.contracts.eval_configs import EvalModel
from nbengine.contracts.model_configs import GaussianNBConfig
from nbengine.settings import DEFAULT_VAR_FLOOR, default_var_floor, log_level, resolve_data_path


def test_var_floor_defaults(monkeypatch):
    monkeypatch.delenv("NBENGINE_VAR_FLOOR", raising=False)
    assert default_var_floor() == DEFAULT_VAR_FLOOR == 1e-9
    assert GaussianNBConfig().var_floor == 1e-9


def test_var_floor_from_environment(monkeypatch):
    monkeypatch.setenv("NBENGINE_VAR_FLOOR", "1e-6")
    assert GaussianNBConfig().var_floor == 1e-6


@pytest.mark.parametrize("raw", ["abc", "0", "-1"])
def test_invalid_var_floor_environment(monkeypatch, raw):
    monkeypatch.setenv("NBENGINE_VAR_FLOOR", raw)
    with pytest.raises(ValueError, match="NBENGINE_VAR_FLOOR"):
        default_var_floor()


def test_config_rejects_non_positive_floor():
    with pytest.raises(ValidationError):
        GaussianNBConfig(var_floor=0.0)


def test_eval_model_rejects_unknown_metric():
    with pytest.raises(ValidationError):
        EvalModel(metric="roc_auc")


def test_resolve_data_path(monkeypatch, tmp_path):
    monkeypatch.setenv("NBENGINE_DATA_ROOT", str(tmp_path))
    assert resolve_data_path("Iris/iris.csv") == tmp_path / "Iris" / "iris.csv"
    absolute = Path(tmp_path / "a.csv").resolve()
    assert resolve_data_path(str(absolute)) == absolute


def test_log_level(monkeypatch):
    monkeypatch.setenv("NBENGINE_LOG_LEVEL", "debug")
    assert log_level() == "DEBUG"
