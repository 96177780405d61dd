"""Benchmark harness: argument parsing, timing and the summary line."""

from __future__ import annotations

import hashlib
import sys
import time
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Union

from .document import Doc
from .printer import Output, Printer

TARGET = "prettycost"

_NUMERIC_FLAGS = {
    "--size": "size",
    "--page-width": "page_width",
    "--computation-width": "computation_width",
}
_TEXT_FLAGS = {"--program": "program", "--out": "out"}


@dataclass(frozen=True)
class Config:
    """Benchmark settings."""

    size: int = 4
    page_width: int = 80
    computation_width: int = 100
    program: str = ""
    out: str = ""
    view_cost: bool = False


def _count(flag: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{flag} expects a non-negative integer, got {value!r}") from None
    if number < 0:
        raise ValueError(f"{flag} expects a non-negative integer, got {value!r}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> Config:
    """Parse benchmark options; unknown arguments are ignored."""
    args = iter(sys.argv[1:] if argv is None else argv)
    config = Config()
    for arg in args:
        if arg in _NUMERIC_FLAGS:
            config = replace(config, **{_NUMERIC_FLAGS[arg]: _count(arg, next(args, ""))})
        elif arg in _TEXT_FLAGS:
            config = replace(config, **{_TEXT_FLAGS[arg]: next(args, "")})
        elif arg == "--view-cost":
            config = replace(config, view_cost=True)
    return config


def md5_hash(data: Union[str, bytes]) -> str:
    """Hex MD5 digest of ``data`` (text is encoded as UTF-8)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.md5(data).hexdigest()


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one benchmark run."""

    program: str
    config: Config
    output: Output
    duration: float

    @property
    def lines(self) -> int:
        return self.output.layout.count("\n") + 1

    @property
    def md5(self) -> str:
        return md5_hash(self.output.layout)

    def summary(self) -> str:
        """The s-expression line reported for the run."""
        tainted = "true" if self.output.is_tainted else "false"
        return (
            f"((target {TARGET})"
            f" (program {self.program})"
            f" (duration {self.duration:g})"
            f" (lines {self.lines})"
            f" (size {self.config.size})"
            f" (md5 {self.md5})"
            f" (page-width {self.config.page_width})"
            f" (computation-width {self.config.computation_width})"
            f" (tainted? {tainted}))"
        )


def run_benchmark(program: str, config: Config, doc: Doc) -> BenchmarkResult:
    """Lay out ``doc``, report the layout as configured, and print the summary."""
    printer = Printer(config.page_width, config.computation_width)
    start = time.perf_counter()
    output = printer.print(doc)
    duration = time.perf_counter() - start

    if config.out == "-":
        sys.stdout.write(output.layout)
    elif config.out:
        with open(config.out, "w", encoding="utf-8") as handle:
            handle.write(output.layout)

    if config.view_cost:
        sys.stdout.write(f"(width: {output.cost.width} line: {output.cost.lines})\n")

    result = BenchmarkResult(program, config, output, duration)
    sys.stdout.write(result.summary())
    sys.stdout.flush()
    return result