import pytest

from prettycost.document import (
    CACHE_DISTANCE,
    Doc,
    DocType,
    align,
    choice,
    concat,
    doc_to_string,
    flatten,
    group,
    nest,
    newline,
    text,
)


def test_text_node():
    d = text("hello")
    assert d.kind is DocType.TEXT
    assert d.text == "hello"
    assert d.nl_count == 0
    assert d.cached is False


def test_newline_counts_one_line():
    assert newline().nl_count == 1
    assert newline().kind is DocType.NEWLINE


def test_concat_sums_newlines():
    d = concat(concat(newline(), text("a")), newline())
    assert d.nl_count == 2
    assert d.kind is DocType.CONCAT


def test_choice_takes_max_newlines():
    d = choice(concat(newline(), newline()), newline())
    assert d.nl_count == 2
    assert d.kind is DocType.CHOICE


def test_flatten_removes_newlines():
    d = flatten(concat(newline(), newline()))
    assert d.nl_count == 0
    assert d.kind is DocType.FLATTEN


def test_align_and_nest_keep_newlines():
    inner = concat(newline(), text("x"))
    assert align(inner).nl_count == inner.nl_count
    n = nest(inner, 4)
    assert n.nl_count == inner.nl_count
    assert n.indent == 4
    assert n.inner is inner


def test_nest_rejects_negative_indent():
    with pytest.raises(ValueError):
        nest(text("x"), -1)


def test_inner_missing_on_concat():
    with pytest.raises(AttributeError):
        concat(text("a"), text("b")).inner


def test_group_is_choice_of_self_and_flattened():
    inner = concat(text("a"), newline())
    g = group(inner)
    assert g.kind is DocType.CHOICE
    assert g.left is inner
    assert g.right.kind is DocType.FLATTEN
    assert g.right.inner is inner


def test_docs_are_immutable():
    d = text("a")
    with pytest.raises(AttributeError):
        d.text = "b"
    assert d.text == "a"
    assert d.kind is DocType.TEXT


def test_cache_weight_grows_until_threshold():
    d: Doc = text("a")
    weights = [d.cache_weight]
    for _ in range(CACHE_DISTANCE):
        d = concat(d, text("b"))
        weights.append(d.cache_weight)
        assert d.cached is False
    assert weights == sorted(weights)
    assert d.cache_weight == CACHE_DISTANCE + 1
    top = concat(d, text("c"))
    assert top.cached is True
    assert top.cache_weight == 0


def test_doc_to_string_text():
    assert doc_to_string(text("hi")) == 'Text: "hi'


def test_doc_to_string_concat():
    d = concat(text("a"), newline())
    assert doc_to_string(d) == 'Concat l:  Text: "aConcat r:  Newline:'


def test_doc_to_string_with_indent():
    d = choice(text("a"), text("b"))
    out = doc_to_string(d, 2)
    assert out.startswith("  choice l:")
    assert '    Text: "a' in out
    assert "  choice r:" in out


def test_doc_to_string_single_child_labels():
    assert doc_to_string(flatten(text("x"))) == 'flatten:  Text: "x'
    assert doc_to_string(nest(text("x"), 3)) == 'nest:  Text: "x'
    assert doc_to_string(align(text("x"))) == '  Text: "x'


def test_doc_to_string_deep_document():
    d = text("end")
    for _ in range(5000):
        d = concat(text("a"), d)
    out = doc_to_string(d)
    assert out.count("Concat l:") == 5000
    assert out.endswith('Text: "end')