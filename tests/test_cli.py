import pytest

from sigmoidnet.cli import main
from sigmoidnet.dense import Dense
from sigmoidnet.layer import Layer
from sigmoidnet.matrix import Matrix


@pytest.fixture
def model_path(tmp_path):
    layer = Layer(3, 1)
    layer.weight = Matrix(1, 3, [0.0, 0.0, 0.0])
    layer.bias = [0.0]
    path = tmp_path / "model.txt"
    Dense([layer]).save_weights(path)
    return path


@pytest.fixture
def data_path(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b,c,y\n1,2,3,7\n4,5,6,9\n")
    return path


def test_main_prints_targets_and_predictions(model_path, data_path, capsys):
    code = main(["--model", str(model_path), "--data", str(data_path), "--rows", "2"])
    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Network loaded with 2 layers.",
        "target value : 7",
        "prediction : 50",
        "target value : 9",
        "prediction : 50",
    ]


def test_main_missing_model(tmp_path, data_path, capsys):
    code = main(["--model", str(tmp_path / "absent.txt"), "--data", str(data_path)])
    assert code == 1
    assert capsys.readouterr().err.startswith("error:")


def test_main_too_few_rows(model_path, data_path, capsys):
    code = main(["--model", str(model_path), "--data", str(data_path), "--rows", "3"])
    assert code == 1
    captured = capsys.readouterr()
    assert "no data row 3" in captured.err
    assert captured.out.count("prediction : ") == 2


def test_main_input_size_mismatch(model_path, tmp_path, capsys):
    data = tmp_path / "wide.csv"
    data.write_text("a,b,c,d,y\n1,2,3,4,5\n")
    code = main(["--model", str(model_path), "--data", str(data), "--rows", "1"])
    assert code == 1
    assert "does not match" in capsys.readouterr().err