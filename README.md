# prettycost

A pretty printer that picks a layout by cost. You build a document from a
small set of combinators. The printer then chooses, among the layouts the
document allows, the one whose cost is lowest. Cost is first the overflow
past the page width (growing quadratically with the number of characters
beyond it), then the number of line breaks.

## Building documents

```python
from prettycost.document import text, newline, concat, choice, align, nest, flatten, group
from prettycost.printer import Printer, render

doc = concat(text("hello"), align(concat(newline(), text("World"))))

print(render(doc, page_width=80, computation_width=100))

out = Printer(page_width=80, computation_width=100).print(doc)
print(out.layout)
print(out.cost.width, out.cost.lines, out.is_tainted)
```

The combinators in `prettycost.document` are:

- `text(s)` places a string on the current line.
- `newline()` breaks the line and indents to the current indentation.
  Inside `flatten` it prints a single space.
- `concat(a, b)` puts one document after another.
- `choice(a, b)` lets the printer pick whichever side costs less.
- `nest(d, n)` adds `n` to the indentation of the newlines in `d`; a
  negative `n` raises `ValueError`.
- `align(d)` sets the indentation of the newlines in `d` to the current
  column.
- `flatten(d)` renders `d` on a single line.
- `group(d)` is a choice between `d` and its flattened form.

Every combinator returns an immutable `Doc`, whose `kind` is a `DocType`.
`doc_to_string(doc, indent=0)` returns a compact dump of a document tree for
inspection.

## Printing

`prettycost.printer.render(doc, page_width=80, computation_width=100)`
returns the chosen layout as a string.

`Printer(page_width, computation_width)` does the same work but its `print`
method returns an `Output` with the `layout`, its `cost` (a `Cost` with
`width` and `lines`) and `is_tainted`. A printer keeps the results it has
memoised between calls, so reuse one for several documents laid out at the
same widths. Negative widths raise `ValueError`.

The computation width bounds the search: once text would run past it, the
printer stops comparing alternatives and follows the first available one.
The result is still rendered in full, and `is_tainted` is then `True`.

`cost_text(col, length, page_width=80)` and `cost_leq(left, right)` expose
the cost of a piece of text and the order on costs.

## Layout helpers

`prettycost.layouts` provides:

- `combine(f, docs)`, a left fold that gives empty text for no documents.
- `hsep(docs)` and `vsep(docs)`, which join documents with spaces or with
  newlines, and `sep(docs)`, which chooses between the two.
- `hcat(docs, separator)`, `vcat(docs, separator)` and
  `enclose_sep(left, right, separator, docs)` for bracketed, separated
  lists.
- Sample documents: `concat_doc(n)`, `flatten_doc(n)`, `fill_sep(words)`,
  `ab_doc(count=20000)` and `simple_doc()`.

`prettycost.sexpr` builds documents from data:

- `SExpr` holds either an `atom` or a list of `items`.
- `test_expr(n, counter=0)` builds a full binary tree of depth `n` with
  numbered leaves and returns it with the next unused number.
- `from_json(value)` turns nested JSON arrays of strings into an `SExpr`;
  anything else raises `ValueError`.
- `pp_sexpr(expr)` formats an `SExpr` in parentheses.
- `pp_json(value)` formats a decoded JSON value. Numbers are written as
  floats with six decimals followed by `.0`, and object keys appear in
  sorted order.

## Benchmarks

The `prettycost` command builds one of the benchmark documents, lays it out
and writes a one-line summary to standard output:

```
prettycost --program concat --size 100
prettycost --program flatten --size 8 --page-width 80 --computation-width 100
prettycost --program sexpr-full --size 10 --out - --view-cost
prettycost --program fill-sep --size 1000
```

The options are:

- `--program` selects the benchmark: `concat`, `flatten`, `fill-sep`,
  `json`, `sexpr-full` or `sexpr-random`. Without it the command prints
  usage and exits with status 2.
- `--size` (default 4), `--page-width` (default 80) and
  `--computation-width` (default 100) set the parameters. They take
  non-negative integers.
- `--out FILE` writes the layout to a file; `--out -` writes it to standard
  output.
- `--view-cost` prints the cost of the chosen layout.

Unknown arguments are ignored.

The summary line has the form

```
((target prettycost) (program ...) (duration ...) (lines ...) (size ...) (md5 ...) (page-width ...) (computation-width ...) (tainted? ...))
```

where `md5` is the MD5 digest of the layout.

The `fill-sep`, `json` and `sexpr-random` programs read their input from the
directory named by the `BENCHDATA` environment variable, or `../data`
without it:

- `fill-sep` reads the first `size` lines of `words`.
- `json` reads `1k.json` when the size is 1 and `10k.json` otherwise.
- `sexpr-random` reads `random-tree-<size>.sexp`, a JSON array of nested
  string arrays.

If the file cannot be read, the command exits with status 1.

From Python, `prettycost.cli.build_document(program, config, data_dir)`
builds the same documents, and
`prettycost.benchmark.run_benchmark(program, config, doc)` runs one. It takes
a `Config`, prints as the command does and returns a `BenchmarkResult`,
whose `summary()` is the report line. `parse_args(argv)` builds a `Config`
from arguments and `md5_hash(data)` gives the digest used in the report.

## What is not included

The package does not ship the benchmark input files (`words`, the JSON files
and the random trees); supply them yourself in the data directory. There is
no command for formatting arbitrary input files: documents are built in
Python with the combinators above.

## Installing

```
pip install .
pip install ".[test]" && pytest
```