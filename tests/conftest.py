import numpy as np
import pytest


@pytest.fixture
def separable_xy():
    """Two classes with non-overlapping feature ranges: [0, 1] vs [100, 101]."""
    rng = np.random.default_rng(0)
    X0 = rng.uniform(0.0, 1.0, size=(40, 3))
    X1 = rng.uniform(100.0, 101.0, size=(40, 3))
    X = np.vstack([X0, X1])
    y = np.array([0] * 40 + [1] * 40)
    return X, y


@pytest.fixture
def three_class_xy():
    rng = np.random.default_rng(7)
    centers = {-3: (0.0, 0.0), 7: (5.0, 5.0), 42: (-5.0, 5.0)}
    X, y = [], []
    for label, (cx, cy) in centers.items():
        X.append(rng.normal(loc=(cx, cy), scale=0.5, size=(30, 2)))
        y.extend([label] * 30)
    return np.vstack(X), np.array(y)


@pytest.fixture
def iris_like_csv(tmp_path):
    """Small header + string-label table in the layout of iris.csv."""
    rows = [
        "sepal_length,sepal_width,petal_length,petal_width,species",
        "5.1,3.5,1.4,0.2,setosa",
        "4.9,3.0,1.4,0.2,setosa",
        "4.7,3.2,1.3,0.2,setosa",
        "5.0,3.6,1.4,0.3,setosa",
        "7.0,3.2,4.7,1.4,versicolor",
        "6.4,3.2,4.5,1.5,versicolor",
        "6.9,3.1,4.9,1.5,versicolor",
        "6.5,2.8,4.6,1.5,versicolor",
        "6.3,3.3,6.0,2.5,virginica",
        "7.1,3.0,5.9,2.1,virginica",
        "6.5,3.0,5.8,2.2,virginica",
        "7.2,3.6,6.1,2.5,virginica",
    ]
    path = tmp_path / "iris.csv"
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path
