import json

import pytest

from polysched.__main__ import example, input_file, performance


def test_example(capsys):
    example()
    out = capsys.readouterr().out
    assert "Alice and" in out
    assert "Approximation Limit:\t\t1080" in out


def test_example_json(capsys):
    example(json=True)
    report = json.loads(capsys.readouterr().out)
    assert report["participants"] == 8
    assert report["lower_bound"] == 120
    assert 120 <= report["weight"] <= 1080


def test_input_file(tmp_path, capsys):
    path = tmp_path / "network.csv"
    path.write_text("a,b\n0,4\n4,0\n")
    input_file(str(path), json=True)
    assert json.loads(capsys.readouterr().out)["weight"] == 4


@pytest.mark.parametrize("content", [None, "a,b\n0,4,1\n"])
def test_input_file_errors(tmp_path, content):
    path = tmp_path / "network.csv"
    if content is not None:
        path.write_text(content)
    with pytest.raises(SystemExit) as e:
        input_file(str(path))
    assert e.value.code == 1


def test_performance(capsys, monkeypatch):
    monkeypatch.setattr("polysched.__main__.PERFORMANCE_SIZES", range(10, 21, 10))
    performance(runs=2, datapoints=True, seed=1)
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(",")[0] for line in lines] == ["(10", "(20"]
