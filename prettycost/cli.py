"""Command-line entry point that builds a benchmark document and lays it out."""

from __future__ import annotations

import json
import os
import sys
from itertools import islice
from pathlib import Path
from typing import Optional, Sequence, Union

from .benchmark import Config, parse_args, run_benchmark
from .document import Doc
from .layouts import concat_doc, fill_sep, flatten_doc
from .sexpr import from_json, pp_json, pp_sexpr, test_expr

DEFAULT_DATA_DIR = "../data"
PROGRAMS = ("concat", "flatten", "fill-sep", "json", "sexpr-full", "sexpr-random")

_USAGE = (
    "usage: prettycost --program {"
    + ",".join(PROGRAMS)
    + "} [--size N] [--page-width N] [--computation-width N] [--out FILE|-] [--view-cost]"
)


def _load_json(path: Path):
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def build_document(
    program: str, config: Config, data_dir: Union[str, Path] = DEFAULT_DATA_DIR
) -> Doc:
    """Build the document for ``program``, reading data files from ``data_dir``."""
    data = Path(data_dir)
    if program == "concat":
        return concat_doc(config.size)
    if program == "flatten":
        return flatten_doc(config.size)
    if program == "fill-sep":
        with (data / "words").open(encoding="utf-8") as handle:
            words = [line.rstrip("\n") for line in islice(handle, config.size)]
        return fill_sep(words)
    if program == "json":
        name = "1k.json" if config.size == 1 else "10k.json"
        return pp_json(_load_json(data / name))
    if program == "sexpr-full":
        tree, _ = test_expr(config.size, 0)
        return pp_sexpr(tree)
    if program == "sexpr-random":
        return pp_sexpr(from_json(_load_json(data / f"random-tree-{config.size}.sexp")))
    raise ValueError(f"unknown program {program!r}; expected one of {', '.join(PROGRAMS)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one benchmark program and return the exit status."""
    try:
        config = parse_args(argv)
    except ValueError as exc:
        print(f"{exc}\n{_USAGE}", file=sys.stderr)
        return 2
    if not config.program:
        print(_USAGE, file=sys.stderr)
        return 2
    data_dir = os.environ.get("BENCHDATA", DEFAULT_DATA_DIR)
    try:
        doc = build_document(config.program, config, data_dir)
    except OSError as exc:
        print(f"cannot read benchmark data: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2
    run_benchmark(config.program, config, doc)
    return 0


if __name__ == "__main__":
    sys.exit(main())