import numpy as np
import pytest

from nbengine.components.data_loaders.data_loaders import TabularLoader
from nbengine.contracts.run_config import DataModel
from nbengine.io.labels import LabelEncoder, encode_labels
from nbengine.io.readers import TabularReader, load_labeled_table


class TestLabelEncoder:

    def test_codes_follow_first_seen_order(self):
        enc = LabelEncoder()
        codes = enc.fit_transform(["b", "a", "b", "c", "a"])
        np.testing.assert_array_equal(codes, [0, 1, 0, 2, 1])
        assert enc.classes_ == ["b", "a", "c"]
        assert enc.inverse_transform([2, 0]) == ["c", "b"]

    def test_encoders_do_not_share_state(self):
        first = LabelEncoder()
        first.fit_transform(["x", "y"])
        second = LabelEncoder()
        np.testing.assert_array_equal(second.fit_transform(["y", "x"]), [0, 1])

    def test_transform_unknown_label(self):
        enc = LabelEncoder()
        enc.fit_transform(["a"])
        with pytest.raises(ValueError, match="Unknown label"):
            enc.transform(["z"])


class TestEncodeLabels:

    def test_auto_keeps_integers(self):
        codes, enc = encode_labels(["1", "0", "1.0", "-4"])
        assert enc is None
        np.testing.assert_array_equal(codes, [1, 0, 1, -4])

    def test_auto_falls_back_to_strings(self):
        codes, enc = encode_labels(["setosa", "1", "setosa"])
        assert enc is not None
        np.testing.assert_array_equal(codes, [0, 1, 0])

    def test_int_mode_rejects_tokens(self):
        with pytest.raises(ValueError, match="non-integer label 'setosa'"):
            encode_labels(["1", "setosa"], mode="int")

    def test_string_mode_encodes_numbers_too(self):
        codes, enc = encode_labels(["7", "3", "7"], mode="string")
        np.testing.assert_array_equal(codes, [0, 1, 0])
        assert enc.classes_ == ["7", "3"]


class TestTabularReader:

    def test_header_inferred_and_labels_kept_raw(self, iris_like_csv):
        table = load_labeled_table(iris_like_csv)
        assert table.features.shape == (12, 4)
        assert table.feature_names == ["sepal_length", "sepal_width", "petal_length", "petal_width"]
        assert table.label_name == "species"
        assert table.labels[0] == "setosa"
        assert table.labels[-1] == "virginica"

    def test_headerless_integer_table(self, tmp_path):
        path = tmp_path / "banknote.csv"
        path.write_text("3.6,8.6,-2.8,-0.4,0\n4.5,8.1,-2.4,-1.4,0\n-1.3,-4.8,6.4,0.3,1\n", encoding="utf-8")
        table = load_labeled_table(path)
        assert table.feature_names is None
        assert table.features.shape == (3, 4)
        assert list(table.labels) == ["0", "0", "1"]

    def test_explicit_header_flag(self, tmp_path):
        path = tmp_path / "t.csv"
        path.write_text("1,2,0\n3,4,1\n", encoding="utf-8")
        table = load_labeled_table(path, has_header=True)
        assert table.features.shape == (1, 2)
        assert table.feature_names == ["1", "2"]

    def test_tab_delimited_first_column_label(self, tmp_path):
        path = tmp_path / "t.tsv"
        path.write_text("a\t1.0\t2.0\nb\t3.0\t4.0\n", encoding="utf-8")
        table = TabularReader(label_column=0).read(path)
        np.testing.assert_allclose(table.features, [[1.0, 2.0], [3.0, 4.0]])
        assert list(table.labels) == ["a", "b"]

    def test_non_numeric_feature_cell(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("f1,f2,label\n1.0,oops,a\n2.0,3.0,b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="non-numeric"):
            load_labeled_table(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_labeled_table(tmp_path / "nope.csv")


class TestTabularLoader:

    def test_loads_string_labels(self, iris_like_csv):
        loader = TabularLoader(DataModel(path=str(iris_like_csv)))
        X, y = loader.load()
        assert X.shape == (12, 4)
        np.testing.assert_array_equal(np.unique(y), [0, 1, 2])
        assert loader.encoder.classes_ == ["setosa", "versicolor", "virginica"]
        assert loader.feature_names[0] == "sepal_length"

    def test_relative_path_resolved_against_data_root(self, iris_like_csv, monkeypatch):
        monkeypatch.setenv("NBENGINE_DATA_ROOT", str(iris_like_csv.parent))
        X, y = TabularLoader(DataModel(path="iris.csv")).load()
        assert X.shape[0] == y.shape[0] == 12
