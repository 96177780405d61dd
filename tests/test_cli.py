import json

import pytest

from prettycost import sexpr
from prettycost.benchmark import Config
from prettycost.cli import build_document, main
from prettycost.printer import render


def test_build_concat(tmp_path):
    assert render(build_document("concat", Config(size=3), tmp_path)) == "line" * 3


def test_build_flatten(tmp_path):
    layout = render(build_document("flatten", Config(size=2), tmp_path))
    assert layout.split() == ["line"] * 3


def test_build_fill_sep_reads_first_words(tmp_path):
    (tmp_path / "words").write_text("alpha\nbeta\ngamma\n", encoding="utf-8")
    layout = render(build_document("fill-sep", Config(size=2), tmp_path))
    assert layout == " ".join(["alpha", "beta"])


def test_build_json_small(tmp_path):
    value = [1, "a", {"k": None}]
    (tmp_path / "1k.json").write_text(json.dumps(value), encoding="utf-8")
    doc = build_document("json", Config(size=1), tmp_path)
    assert render(doc) == render(sexpr.pp_json(value))


def test_build_json_large_name(tmp_path):
    (tmp_path / "10k.json").write_text("[true]", encoding="utf-8")
    doc = build_document("json", Config(size=4), tmp_path)
    assert render(doc) == "[" + render(sexpr.pp_json(True)) + "]"


def test_build_sexpr_full(tmp_path):
    tree, _ = sexpr.test_expr(3, 0)
    doc = build_document("sexpr-full", Config(size=3), tmp_path)
    assert render(doc) == render(sexpr.pp_sexpr(tree))


def test_build_sexpr_random(tmp_path):
    value = ["a", ["b", "c"]]
    (tmp_path / "random-tree-2.sexp").write_text(json.dumps(value), encoding="utf-8")
    doc = build_document("sexpr-random", Config(size=2), tmp_path)
    assert render(doc) == render(sexpr.pp_sexpr(sexpr.from_json(value)))


def test_build_unknown_program(tmp_path):
    with pytest.raises(ValueError):
        build_document("nope", Config(), tmp_path)


def test_build_missing_data_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_document("sexpr-random", Config(size=9), tmp_path)


def test_main_runs_program(tmp_path, monkeypatch, capsys):
    (tmp_path / "words").write_text("alpha\nbeta\n", encoding="utf-8")
    monkeypatch.setenv("BENCHDATA", str(tmp_path))
    status = main(["--program", "fill-sep", "--size", "2", "--out", "-"])
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("alpha beta")
    assert "(program fill-sep)" in out


def test_main_without_program(capsys):
    assert main([]) == 2
    assert "--program" in capsys.readouterr().err


def test_main_unknown_program(capsys):
    assert main(["--program", "nope"]) == 2
    assert "nope" in capsys.readouterr().err


def test_main_missing_data(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BENCHDATA", str(tmp_path))
    assert main(["--program", "json"]) == 1
    assert "cannot read" in capsys.readouterr().err