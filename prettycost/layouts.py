"""Document combinators and the sample documents used by the benchmarks."""

from __future__ import annotations

from functools import reduce
from typing import Callable, Iterable

from .document import Doc, align, choice, concat, flatten, group, newline, text


def combine(f: Callable[[Doc, Doc], Doc], docs: Iterable[Doc]) -> Doc:
    """Fold ``docs`` from the left with ``f``; an empty input gives empty text."""
    items = list(docs)
    if not items:
        return text("")
    return reduce(f, items)


def hsep(docs: Iterable[Doc]) -> Doc:
    """Lay ``docs`` out on one line, separated by single spaces."""
    return combine(lambda left, right: concat(left, align(concat(text(" "), align(right)))), docs)


def vsep(docs: Iterable[Doc]) -> Doc:
    """Lay ``docs`` out one below the other."""
    return combine(lambda left, right: concat(concat(left, newline()), right), docs)


def sep(docs: Iterable[Doc]) -> Doc:
    """Choose between :func:`hsep` and :func:`vsep` of ``docs``."""
    items = list(docs)
    return choice(hsep(items), vsep(items))


def hcat(docs: Iterable[Doc], separator: str) -> Doc:
    """Join ``docs`` on one line with ``separator``, flattening the left parts."""
    return combine(
        lambda left, right: concat(
            flatten(left), align(concat(text(separator), align(right)))
        ),
        docs,
    )


def vcat(docs: Iterable[Doc], separator: str) -> Doc:
    """Put ``docs`` on separate lines, each after the first led by ``separator``."""
    return combine(
        lambda left, right: concat(concat(concat(left, newline()), text(separator)), right),
        docs,
    )


def enclose_sep(left: str, right: str, separator: str, docs: Iterable[Doc]) -> Doc:
    """Enclose ``docs`` in ``left`` and ``right``, separated either horizontally or vertically."""
    items = list(docs)
    if not items:
        return concat(text(left), text(right))
    if len(items) == 1:
        return concat(text(left), concat(items[0], text(right)))
    body = choice(vcat(items, separator), hcat(items, separator))
    return align(concat(text(left), concat(body, text(right))))


def concat_doc(n: int) -> Doc:
    """``n`` copies of the word ``line`` concatenated."""
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    doc = text("")
    for _ in range(n):
        doc = concat(text("line"), doc)
    return doc


def flatten_doc(n: int) -> Doc:
    """Nested groups of ``line`` words separated by newlines."""
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    doc = text("line")
    for _ in range(n):
        doc = concat(group(doc), concat(newline(), text("line")))
    return doc


def fill_sep(words: Iterable[str]) -> Doc:
    """Fill words into lines, each break chosen between a space and a newline."""
    items = list(words)
    if not items:
        return text("")
    acc = text(items[0])
    for word in items[1:]:
        spaced = concat(acc, concat(text(" "), align(text(word))))
        broken = concat(acc, concat(newline(), text(word)))
        acc = choice(spaced, broken)
    return acc


def ab_doc(count: int = 20000) -> Doc:
    """``count`` choices between ``"a "`` and ``"b"`` plus a newline, ending in ``end``."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    doc = text("end")
    for _ in range(count):
        space = concat(text("a"), text(" "))
        broken = concat(text("b"), newline())
        doc = concat(choice(space, broken), doc)
    return doc


def simple_doc() -> Doc:
    """``hello`` followed by an aligned line break and ``World``."""
    return concat(text("hello"), align(concat(newline(), text("World"))))