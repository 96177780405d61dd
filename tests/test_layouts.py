import pytest

from prettycost.document import concat, text
from prettycost.layouts import (
    ab_doc,
    combine,
    concat_doc,
    enclose_sep,
    fill_sep,
    flatten_doc,
    hcat,
    hsep,
    sep,
    simple_doc,
    vcat,
    vsep,
)
from prettycost.printer import render

WORDS = ["alpha", "beta", "gamma"]


def _docs(words):
    return [text(w) for w in words]


def test_combine_empty_is_empty_text():
    assert render(combine(concat, [])) == ""


def test_combine_folds_in_order():
    assert render(combine(concat, _docs(WORDS))) == "".join(WORDS)


def test_hsep_joins_with_spaces():
    assert render(hsep(_docs(WORDS))) == " ".join(WORDS)


def test_vsep_puts_each_on_a_line():
    assert render(vsep(_docs(WORDS))) == "\n".join(WORDS)


def test_sep_prefers_one_line_when_it_fits():
    assert render(sep(_docs(WORDS))) == " ".join(WORDS)


def test_sep_breaks_when_too_narrow():
    assert render(sep(_docs(WORDS)), page_width=6) == "\n".join(WORDS)


def test_hcat_and_vcat():
    assert render(hcat(_docs(["a", "b"]), ",")) == "a" + "," + "b"
    assert render(vcat(_docs(["a", "b"]), ",")) == "a\n" + "," + "b"


def test_enclose_sep_empty_and_single():
    assert render(enclose_sep("[", "]", ",", [])) == "[" + "]"
    assert render(enclose_sep("[", "]", ",", [text("x")])) == "[" + "x" + "]"


def test_enclose_sep_horizontal_when_it_fits():
    assert render(enclose_sep("[", "]", ",", _docs(["a", "b"]))) == "[a,b]"


def test_enclose_sep_vertical_when_narrow():
    assert render(enclose_sep("[", "]", ",", _docs(["a", "b"])), page_width=4) == "[a\n,b]"


@pytest.mark.parametrize("n", [0, 1, 5])
def test_concat_doc(n):
    assert render(concat_doc(n)) == "line" * n


def test_concat_doc_rejects_negative():
    with pytest.raises(ValueError):
        concat_doc(-1)


def test_flatten_doc_zero_is_one_word():
    assert render(flatten_doc(0)) == "line"


@pytest.mark.parametrize("n", [1, 3, 6])
def test_flatten_doc_keeps_one_break(n):
    layout = render(flatten_doc(n))
    assert layout.split() == ["line"] * (n + 1)
    assert layout.count("\n") == 1


def test_fill_sep_empty():
    assert render(fill_sep([])) == ""


def test_fill_sep_on_one_line_when_it_fits():
    assert render(fill_sep(WORDS)) == " ".join(WORDS)


def test_fill_sep_fills_narrow_page():
    words = ["aaaa", "bbbb", "cccc", "dddd"]
    layout = render(fill_sep(words), page_width=9)
    assert layout.split() == words
    assert layout.count("\n") >= 1
    assert max(len(line) for line in layout.split("\n")) <= 9


@pytest.mark.parametrize("page_width", [80, 4])
def test_ab_doc_structure(page_width):
    tokens = render(ab_doc(5), page_width=page_width).split()
    assert tokens[-1] == "end"
    assert len(tokens) == 6
    assert set(tokens[:-1]) <= {"a", "b"}


def test_simple_doc():
    assert render(simple_doc()) == "hello\n" + " " * len("hello") + "World"