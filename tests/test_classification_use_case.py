import numpy as np
import pytest
from pydantic import ValidationError

from nbengine.api import run_classification, run_classification_on_arrays
from nbengine.contracts.eval_configs import EvalModel
from nbengine.contracts.model_configs import GaussianNBConfig
from nbengine.contracts.run_config import DataModel, RunConfig
from nbengine.contracts.split_configs import SplitHoldoutModel, SplitResubstitutionModel
from nbengine.core.errors import EmptyDatasetError


def test_iris_like_end_to_end(iris_like_csv):
    cfg = RunConfig(data=DataModel(path=str(iris_like_csv), label_mode="string"))
    result = run_classification(cfg)

    assert result.split_mode == "resubstitution"
    assert result.metric_name == "accuracy"
    assert 0.0 <= result.accuracy <= 1.0
    assert result.metric_value == result.accuracy
    assert result.n_train == result.n_test == 12
    assert result.n_features == 4
    assert [c.name for c in result.classes] == ["setosa", "versicolor", "virginica"]
    assert [c.label for c in result.classes] == [0, 1, 2]
    assert sum(c.prior for c in result.classes) == pytest.approx(1.0)
    assert result.confusion["labels"] == [0, 1, 2]
    assert np.asarray(result.confusion["matrix"]).sum() == 12


def test_separable_arrays_score_perfectly(separable_xy):
    X, y = separable_xy
    result = run_classification_on_arrays(X, y)
    assert result.accuracy == 1.0
    assert result.notes == []
    assert result.classes[0].name is None


def test_holdout_split(three_class_xy):
    X, y = three_class_xy
    result = run_classification_on_arrays(
        X,
        y,
        split=SplitHoldoutModel(train_frac=0.6),
        eval_cfg=EvalModel(metric="f1_macro", seed=11),
    )
    assert result.split_mode == "holdout"
    assert result.n_train + result.n_test == 90
    assert result.n_test == 36
    assert result.metric_name == "f1_macro"
    assert result.accuracy > 0.9


def test_holdout_is_reproducible_with_seed(three_class_xy):
    X, y = three_class_xy
    kw = dict(split=SplitHoldoutModel(train_frac=0.5), eval_cfg=EvalModel(seed=3))
    a = run_classification_on_arrays(X, y, **kw)
    b = run_classification_on_arrays(X, y, **kw)
    assert a.model_dump() == b.model_dump()


def test_degenerate_variance_is_reported_in_notes():
    X = [[0.0], [0.0], [0.0], [10.0], [10.0], [10.0]]
    y = [0, 0, 0, 1, 1, 1]
    result = run_classification_on_arrays(X, y, split=SplitResubstitutionModel())
    assert result.accuracy == 1.0
    assert any("DegenerateVarianceWarning" in n for n in result.notes)
    assert result.classes[0].variance == [pytest.approx(1e-9)]


def test_model_config_floor_is_used():
    X = [[1.0], [1.0], [5.0], [5.0]]
    result = run_classification_on_arrays(X, [0, 0, 1, 1], model_cfg=GaussianNBConfig(var_floor=0.5))
    assert [c.variance for c in result.classes] == [[0.5], [0.5]]


def test_empty_input_raises():
    with pytest.raises(EmptyDatasetError):
        run_classification_on_arrays(np.empty((0, 2)), np.empty(0, dtype=int))


def test_split_is_discriminated_by_mode():
    cfg = RunConfig.model_validate(
        {"data": {"path": "x.csv"}, "split": {"mode": "holdout", "train_frac": 0.8}}
    )
    assert isinstance(cfg.split, SplitHoldoutModel)
    assert isinstance(RunConfig(data=DataModel(path="x.csv")).split, SplitResubstitutionModel)
    with pytest.raises(ValidationError):
        RunConfig.model_validate({"data": {"path": "x.csv"}, "split": {"mode": "kfold"}})
