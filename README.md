# heaprec

`heaprec` provides the building blocks for a compact, line-based text format
for heap allocation traces: a buffered writer and a matching reader, backtrace
capture and indexing, compact pointer bookkeeping, and the value types used
when the data is evaluated.

Each line begins with a one-character type and a space, followed by fields
separated by spaces. Numbers are lowercase hexadecimal without a prefix:

```
t 0 0 1 1 f f 10 10
+ 40 1 7ffd1234
- 7ffd1234
```

## Installation

```
pip install heaprec
```

To run the test suite, install the `test` extra as well:

```
pip install "heaprec[test]"
```

## Writing and reading lines

```python
import io
import os

from heaprec.linewriter import LineWriter
from heaprec.linereader import LineReader

fd = os.open("trace.txt", os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
with LineWriter(fd) as writer:          # flushed and closed on exit
    writer.write_hex_line("t", 0x123, 0x456)
    writer.write("%d %x\n", 42, 42)

reader = LineReader()
with open("trace.txt") as stream:
    while reader.get_line(stream):
        print(reader.mode(), reader.line())
```

- `heaprec.linewriter.LineWriter(fd)` owns the file descriptor and keeps data
  in a 4096-byte buffer, writing it out when it fills up or on `flush()`.
  `write(fmt, *args)` buffers `fmt % args`; `write_hex_line(type_char, *args)`
  writes a typed line of hex numbers; `write_string(line)` writes the byte
  length in hex, a space and the text. `close()` closes the descriptor without
  flushing. Errors are raised as `ValueError` or `OSError`.
- `heaprec.linewriter.write_hex_number(value)` formats one unsigned 64-bit value.
- `heaprec.linereader.LineReader` reads one line at a time with
  `get_line(stream)`; `mode()` gives the type character (`'#'` for an empty
  line) and `line()` the text. `read_hex()`, `read_string()` and `read_flag()`
  return the next field, or `None` when the line has no more. `read_hex()`
  raises `ValueError` on a character that is not a lowercase hex digit. With
  `expect_sized_strings=True`, strings are read in the form `write_string`
  produces.

## Backtraces

- `heaprec.trace.Trace` holds up to 64 instruction pointers, innermost first.
  `fill(skip)` captures the current Python call stack, giving each call site a
  stable non-zero number; `Trace.from_ips(ips, skip)` builds one from given
  values. Trailing zero entries are dropped.
- `heaprec.tracetree.TraceTree.index(trace, callback)` stores traces in a
  top-down tree of `TraceEdge` nodes and returns a unique index for each
  distinct trace. `callback(ip, parent_index)` is called for every new frame;
  if it returns a false value, `index` returns 0. `clear()` resets the tree.

## Pointer bookkeeping

- `heaprec.pointermap.PointerMap` maps addresses to `AllocationInfoIndex`
  values with `add_pointer(ptr, index)` and `take_pointer(ptr)`, which removes
  the entry and returns its index, or `None` if it is unknown.
- `heaprec.pointermap.AllocationInfoSet.add(size, trace_index)` deduplicates
  (size, trace) pairs and returns `(index, newly_added)`.

## Value types

- `heaprec.indices`: `Index` and its typed subclasses (`StringIndex`,
  `ModuleIndex`, `FunctionIndex`, `FileIndex`, `IpIndex`, `TraceIndex`,
  `AllocationIndex`, `AllocationInfoIndex`). They are unsigned 32-bit values
  and zero means "no entry".
- `heaprec.allocationdata.AllocationData`: allocation, temporary, leaked and
  peak counters that support `+`, `-`, `+=`, `-=` and `clear_cost()`.
- `heaprec.filterparameters.FilterParameters`: a time window and suppression
  settings, with `is_filtered_by_time(total_time)`.
- `heaprec.locationdata.Symbol` and `FileLine`: keys for aggregating costs.
- `heaprec.resultdata.ResultData`: total costs plus a string table.
  `string(string_id)` looks up strings by their one-based index and returns
  `"<unresolved function>"` for a zero `FunctionIndex`.
  `heaprec.resultdata.SummaryData` holds the overview figures.

## What this package does not do

`heaprec` does not intercept allocations and does not record a running
program. It has no process-wide recorder that opens an output file, writes the
header lines or tracks memory usage over time. It has no command-line tool and
no parser that evaluates a complete trace file into summaries or call trees.
It provides only the pieces listed above.