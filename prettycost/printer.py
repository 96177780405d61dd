"""Layout search: resolve a document into its cheapest choice-free rendering."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TypeVar, Union

from .document import Doc, DocType

DEFAULT_PAGE_WIDTH = 80
DEFAULT_COMPUTATION_WIDTH = 100

_STACK_SIZE = 512 * 1024 * 1024
_RECURSION_LIMIT = 250_000

_T = TypeVar("_T")


@dataclass(frozen=True)
class Cost:
    """Cost of a layout: overflow past the page width, then line count."""

    width: int = 0
    lines: int = 0

    def __add__(self, other: "Cost") -> "Cost":
        return Cost(self.width + other.width, self.lines + other.lines)


def cost_leq(left: Cost, right: Cost) -> bool:
    """Order costs by width first, then by line count."""
    if left.width == right.width:
        return left.lines <= right.lines
    return left.width < right.width


def cost_text(col: int, length: int, page_width: int = DEFAULT_PAGE_WIDTH) -> Cost:
    """Cost of placing ``length`` characters of text starting at column ``col``."""
    stop = col + length
    if stop <= page_width:
        return Cost(0, 0)
    start = max(page_width, col)
    before = start - page_width
    overflow = stop - start
    return Cost(overflow * (2 * before + overflow), 0)


_NEWLINE_COST = Cost(0, 1)


class _MeasureKind(Enum):
    TEXT = "text"
    NEWLINE = "newline"
    CONCAT = "concat"


@dataclass(frozen=True, eq=False)
class _Measure:
    """A choice-free layout fragment with its cost and final column."""

    kind: _MeasureKind
    cost: Cost
    last: int
    text: str = ""
    indent: int = 0
    left: Optional["_Measure"] = None
    right: Optional["_Measure"] = None


def _measure_concat(left: _Measure, right: _Measure) -> _Measure:
    return _Measure(
        _MeasureKind.CONCAT, left.cost + right.cost, right.last, left=left, right=right
    )


def _measure_leq(left: _Measure, right: _Measure) -> bool:
    return cost_leq(left.cost, right.cost) and left.last <= right.last


@dataclass(frozen=True, eq=False)
class _TaintedValue:
    measure: _Measure


@dataclass(frozen=True, eq=False)
class _TaintedRight:
    left_measure: _Measure
    right_trunk: "_Trunk"


@dataclass(frozen=True, eq=False)
class _TaintedLeft:
    left_trunk: "_Trunk"
    right_doc: Doc
    indent: int
    flatten: bool


_Trunk = Union[_TaintedValue, _TaintedRight, _TaintedLeft]
_MeasureSet = Union[list, _Trunk]


def _merge_lists(left: list, right: list) -> list:
    """Merge two Pareto fronts, dropping dominated measures."""
    result: list = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        lm, rm = left[li], right[ri]
        if _measure_leq(lm, rm):
            ri += 1
        elif _measure_leq(rm, lm):
            li += 1
        elif lm.last > rm.last:
            result.append(lm)
            li += 1
        else:
            result.append(rm)
            ri += 1
    result.extend(left[li:])
    result.extend(right[ri:])
    return result


def _merge_sets(left: _MeasureSet, right: _MeasureSet) -> _MeasureSet:
    left_is_set = isinstance(left, list)
    right_is_set = isinstance(right, list)
    if not right_is_set:
        return list(left) if left_is_set else left
    if not left_is_set:
        return list(right)
    return _merge_lists(left, right)


def _render(measure: _Measure) -> str:
    parts: list[str] = []
    stack = [measure]
    while stack:
        node = stack.pop()
        if node.kind is _MeasureKind.CONCAT:
            assert node.left is not None and node.right is not None
            stack.append(node.right)
            stack.append(node.left)
        elif node.kind is _MeasureKind.TEXT:
            parts.append(node.text)
        else:
            parts.append("\n" + " " * node.indent)
    return "".join(parts)


def _run_deep(fn: Callable[[], _T]) -> _T:
    """Run ``fn`` in a worker thread with room for deep recursion."""
    outcome: dict = {}

    def target() -> None:
        try:
            outcome["value"] = fn()
        except BaseException as exc:  # re-raised in the calling thread
            outcome["error"] = exc

    old_limit = sys.getrecursionlimit()
    old_stack = threading.stack_size()
    try:
        threading.stack_size(_STACK_SIZE)
    except (ValueError, RuntimeError):
        pass
    sys.setrecursionlimit(max(old_limit, _RECURSION_LIMIT))
    try:
        worker = threading.Thread(target=target)
        worker.start()
    finally:
        threading.stack_size(old_stack)
    try:
        worker.join()
    finally:
        sys.setrecursionlimit(old_limit)
    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]


@dataclass(frozen=True)
class Output:
    """The chosen layout, its cost, and whether the computation width was exceeded."""

    layout: str
    cost: Cost
    is_tainted: bool


class Printer:
    """Finds the cheapest layout of a document for a given page width.

    Measure sets of memoised document nodes are kept between calls to
    :meth:`print` on the same printer.
    """

    def __init__(
        self,
        page_width: int = DEFAULT_PAGE_WIDTH,
        computation_width: int = DEFAULT_COMPUTATION_WIDTH,
    ) -> None:
        if page_width < 0:
            raise ValueError(f"page width must not be negative, got {page_width}")
        if computation_width < 0:
            raise ValueError(
                f"computation width must not be negative, got {computation_width}"
            )
        self.page_width = page_width
        self.computation_width = computation_width
        self._cache: dict[tuple[Doc, int, int, bool], _MeasureSet] = {}

    def print(self, doc: Doc) -> Output:
        """Lay out ``doc`` and return the cheapest rendering found."""
        return _run_deep(lambda: self._print(doc))

    def _print(self, doc: Doc) -> Output:
        measures = self._resolve_cached(doc, 0, 0, False)
        tainted = not isinstance(measures, list)
        measure = self._expand(measures) if tainted else measures[0]
        return Output(_render(measure), measure.cost, tainted)

    def _text_set(self, s: str, col: int) -> _MeasureSet:
        measure = _Measure(
            _MeasureKind.TEXT, cost_text(col, len(s), self.page_width), col + len(s), text=s
        )
        if col + len(s) <= self.computation_width:
            return [measure]
        return _TaintedValue(measure)

    def _resolve_cached(self, doc: Doc, col: int, indent: int, flatten: bool) -> _MeasureSet:
        if not doc.cached:
            return self._resolve(doc, col, indent, flatten)
        key = (doc, col, indent, flatten)
        found = self._cache.get(key)
        if found is not None:
            return found
        result = self._resolve(doc, col, indent, flatten)
        self._cache[key] = result
        return result

    def _resolve(self, doc: Doc, col: int, indent: int, flatten: bool) -> _MeasureSet:
        kind = doc.kind
        if kind is DocType.TEXT:
            return self._text_set(doc.text, col)
        if kind is DocType.NEWLINE:
            if flatten:
                return self._text_set(" ", col)
            return [_Measure(_MeasureKind.NEWLINE, _NEWLINE_COST, indent, indent=indent)]
        if kind is DocType.ALIGN:
            return self._resolve_cached(doc.inner, col, col, flatten)
        if kind is DocType.CONCAT:
            assert doc.left is not None and doc.right is not None
            left_set = self._resolve_cached(doc.left, col, indent, flatten)
            return self._process_concat(left_set, doc.right, indent, flatten)
        if kind is DocType.CHOICE:
            assert doc.left is not None and doc.right is not None
            if doc.right.nl_count < doc.left.nl_count:
                left_set = self._resolve_cached(doc.left, col, indent, flatten)
                right_set = self._resolve_cached(doc.right, col, indent, flatten)
                return _merge_sets(left_set, right_set)
            right_set = self._resolve_cached(doc.right, col, indent, flatten)
            left_set = self._resolve_cached(doc.left, col, indent, flatten)
            return _merge_sets(right_set, left_set)
        if kind is DocType.FLATTEN:
            return self._resolve_cached(doc.inner, col, indent, True)
        if kind is DocType.NEST:
            return self._resolve_cached(doc.inner, col, indent + doc.indent, flatten)
        raise ValueError(f"unhandled document kind {kind!r}")

    def _process_concat(
        self, left_set: _MeasureSet, right_doc: Doc, indent: int, flatten: bool
    ) -> _MeasureSet:
        if not isinstance(left_set, list):
            return _TaintedLeft(left_set, right_doc, indent, flatten)
        result: Optional[_MeasureSet] = None
        for left_measure in left_set:
            right_set = self._resolve_cached(right_doc, left_measure.last, indent, flatten)
            if not isinstance(right_set, list):
                piece: _MeasureSet = _TaintedRight(left_measure, right_set)
            else:
                best = _measure_concat(left_measure, right_set[0])
                others: list = []
                for right_measure in right_set[1:]:
                    if cost_leq(left_measure.cost + right_measure.cost, best.cost):
                        best = _measure_concat(left_measure, right_measure)
                    else:
                        others.append(_measure_concat(left_measure, right_measure))
                others.append(best)
                others.reverse()
                piece = others
            result = piece if result is None else _merge_sets(result, piece)
        return [] if result is None else result

    def _expand(self, trunk: _Trunk) -> _Measure:
        if isinstance(trunk, _TaintedValue):
            return trunk.measure
        if isinstance(trunk, _TaintedRight):
            return _measure_concat(trunk.left_measure, self._expand(trunk.right_trunk))
        left_measure = self._expand(trunk.left_trunk)
        measures = self._resolve(trunk.right_doc, left_measure.last, trunk.indent, trunk.flatten)
        if isinstance(measures, list):
            return _measure_concat(left_measure, measures[0])
        return _measure_concat(left_measure, self._expand(measures))


def render(
    doc: Doc,
    page_width: int = DEFAULT_PAGE_WIDTH,
    computation_width: int = DEFAULT_COMPUTATION_WIDTH,
) -> str:
    """Return the cheapest layout of ``doc`` as text."""
    return Printer(page_width, computation_width).print(doc).layout