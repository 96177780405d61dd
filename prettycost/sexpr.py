"""S-expressions and JSON values turned into documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .document import Doc, align, concat, text
from .layouts import enclose_sep, sep


@dataclass
class SExpr:
    """An atom (``atom`` set) or a list of sub-expressions (``items``)."""

    atom: Optional[str] = None
    items: list["SExpr"] = field(default_factory=list)

    @property
    def is_atom(self) -> bool:
        return self.atom is not None


def test_expr(n: int, counter: int = 0) -> tuple[SExpr, int]:
    """A full binary tree of depth ``n`` whose leaves are numbered from ``counter``.

    Returns the tree and the next unused number.
    """
    if n < 0:
        raise ValueError(f"depth must not be negative, got {n}")
    if n == 0:
        return SExpr(atom=str(counter)), counter + 1
    first, counter = test_expr(n - 1, counter)
    second, counter = test_expr(n - 1, counter)
    return SExpr(items=[first, second]), counter


def from_json(value: Any) -> SExpr:
    """Build an s-expression from nested JSON arrays of strings."""
    if isinstance(value, str):
        return SExpr(atom=value)
    if isinstance(value, list):
        return SExpr(items=[from_json(item) for item in value])
    raise ValueError(f"bad input: {value!r} is neither a string nor an array")


def pp_sexpr(expr: SExpr) -> Doc:
    """Document for an s-expression: atoms as text, lists in parentheses."""
    if expr.is_atom:
        assert expr.atom is not None
        return text(expr.atom)
    children = [pp_sexpr(item) for item in expr.items]
    return concat(text("("), align(concat(sep(children), align(text(")")))))


def pp_json(value: Any) -> Doc:
    """Document for a decoded JSON value; object keys are laid out in sorted order."""
    if value is None:
        return text("null")
    if isinstance(value, bool):
        return text("true" if value else "false")
    if isinstance(value, (int, float)):
        return text(f"{float(value):f}.0")
    if isinstance(value, str):
        return text(f'"{value}"')
    if isinstance(value, list):
        return enclose_sep("[", "]", ",", [pp_json(item) for item in value])
    if isinstance(value, dict):
        members = [
            concat(text(f'"{key}": '), pp_json(value[key])) for key in sorted(value)
        ]
        return enclose_sep("{", "}", ",", members)
    raise TypeError(f"unsupported JSON type: {type(value).__name__}")