"""Document algebra: text, newlines, concatenation, choice, flatten, align and nest."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

CACHE_DISTANCE = 7
"""A node whose children lie more than this many uncached levels deep is memoised."""


class DocType(Enum):
    """The kinds of document node."""

    TEXT = "text"
    NEWLINE = "newline"
    CONCAT = "concat"
    NEST = "nest"
    ALIGN = "align"
    CHOICE = "choice"
    FLATTEN = "flatten"


@dataclass(frozen=True, eq=False)
class Doc:
    """An immutable document node.

    ``nl_count`` is the (maximal) number of newlines the node may produce.
    ``cache_weight`` counts the uncached levels below the node; ``cached``
    tells the printer whether to memoise the node's measure sets.
    Single-child nodes keep their child in ``left`` (see ``inner``).
    """

    kind: DocType
    nl_count: int
    cache_weight: int
    cached: bool
    text: str = ""
    left: Optional["Doc"] = None
    right: Optional["Doc"] = None
    indent: int = 0

    @property
    def inner(self) -> "Doc":
        """The child of an align, flatten or nest node."""
        if self.kind not in (DocType.ALIGN, DocType.FLATTEN, DocType.NEST):
            raise AttributeError(f"{self.kind.name} node has no single inner document")
        assert self.left is not None
        return self.left


def _make(kind: DocType, nl_count: int, child_weight: int, **fields) -> Doc:
    if child_weight > CACHE_DISTANCE:
        return Doc(kind, nl_count, 0, True, **fields)
    return Doc(kind, nl_count, child_weight + 1, False, **fields)


def text(s: str) -> Doc:
    """A piece of text that contains no newline."""
    return _make(DocType.TEXT, 0, 0, text=s)


def newline() -> Doc:
    """A line break, rendered as a space when flattened."""
    return _make(DocType.NEWLINE, 1, 0)


def concat(left: Doc, right: Doc) -> Doc:
    """``left`` followed by ``right``."""
    return _make(
        DocType.CONCAT,
        left.nl_count + right.nl_count,
        max(left.cache_weight, right.cache_weight),
        left=left,
        right=right,
    )


def choice(left: Doc, right: Doc) -> Doc:
    """Either ``left`` or ``right``, whichever lays out more cheaply."""
    return _make(
        DocType.CHOICE,
        max(left.nl_count, right.nl_count),
        max(left.cache_weight, right.cache_weight),
        left=left,
        right=right,
    )


def flatten(inner: Doc) -> Doc:
    """``inner`` with every newline replaced by a space."""
    return _make(DocType.FLATTEN, 0, inner.cache_weight, left=inner)


def align(inner: Doc) -> Doc:
    """``inner`` with its indentation set to the current column."""
    return _make(DocType.ALIGN, inner.nl_count, inner.cache_weight, left=inner)


def nest(inner: Doc, indent: int) -> Doc:
    """``inner`` with its indentation increased by ``indent``."""
    if indent < 0:
        raise ValueError(f"nest indent must not be negative, got {indent}")
    return _make(DocType.NEST, inner.nl_count, inner.cache_weight, left=inner, indent=indent)


def group(inner: Doc) -> Doc:
    """A choice between ``inner`` as is and ``inner`` flattened."""
    return choice(inner, flatten(inner))


_LABELS = {
    DocType.CONCAT: ("Concat l:", "Concat r:"),
    DocType.CHOICE: ("choice l:", "choice r:"),
}

_SINGLE_LABELS = {
    DocType.ALIGN: "",
    DocType.FLATTEN: "flatten:",
    DocType.NEST: "nest:",
}


def doc_to_string(doc: Doc, indent: int = 0) -> str:
    """Return a compact debugging dump of the document tree."""
    parts: list[str] = []
    stack: list[Union[str, tuple[Doc, int]]] = [(doc, indent)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        node, depth = item
        pad = " " * depth
        if node.kind is DocType.TEXT:
            parts.append(f'{pad}Text: "{node.text}')
        elif node.kind is DocType.NEWLINE:
            parts.append(f"{pad}Newline:")
        elif node.kind in _LABELS:
            left_label, right_label = _LABELS[node.kind]
            assert node.left is not None and node.right is not None
            parts.append(pad + left_label)
            stack.append((node.right, depth + 2))
            stack.append(pad + right_label)
            stack.append((node.left, depth + 2))
        else:
            parts.append(pad + _SINGLE_LABELS[node.kind])
            stack.append((node.inner, depth + 2))
    return "".join(parts)