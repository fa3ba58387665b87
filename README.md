# circuitopt

A small library for working with circuit descriptions:

- convert Verilog source into a Graphviz DOT diagram,
- list the nodes and edges found in DOT code as a plain-text netlist,
- optimise DOT-style assignment lists with constant propagation and
  common subexpression elimination,
- describe gate-scheduling requests and results as data types.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## DOT functions

All of these live in `circuitopt.dot`.

```python
from circuitopt.dot import verilog_to_dot, parse_dot_code, optimize_dot_code

print(verilog_to_dot("module top;\nassign y = a;\nendmodule"))
print(parse_dot_code("graph { a -- b }"))
print(optimize_dot_code("x = 1; y = x; z = a + b; w = a + b"))
```

- `verilog_to_dot(verilog_code)` gives every `module` a box node and every
  name on either side of an `assign lhs = rhs;` an ellipse node. It then adds
  an edge `lhs -> rhs` for each assignment. Node ids are numbered from 1.
- `parse_dot_code(dot_code)` returns a text listing. It starts with a
  `电路网表图:` header, then lists under `节点:` every distinct word in the
  input in order of first appearance, then lists under `边:` every undirected
  `a -- b` edge.
- `constant_propagation(dot_code)` splits the input on `;` and works on the
  `name = value` statements. When a name is bound to a numeric value made
  only of digits, `.` and `-`, later values have that name replaced by the
  value.
- `common_subexpression_elimination(dot_code)` binds each distinct right-hand
  side to a new `TEMPn` name and rewrites each assignment to use it.
  Statements whose name already starts with `TEMP` are passed through
  unchanged.
- `optimize_dot_code(dot_code)` runs `constant_propagation` followed by
  `common_subexpression_elimination`.

The last three skip empty statements, escape double quotes in what they
return, and join statements with `"; "`.

## Scheduling types

`circuitopt.types` provides the dataclasses `Gate`, `SchedulingRequest` and
`SchedulingResult`. `Gate.from_dict` and `SchedulingRequest.from_dict` read
JSON-style dictionaries, using the keys `id`, `type`, `duration`,
`dependencies`, `graph`, `resources`, `maxLatency` and `maxResource`. A
missing key takes its default. A value of the wrong kind raises `ValueError`.
Each type has a `to_dict` method. `SchedulingResult.to_dict` turns time-step
keys into strings and sorts them.

The package defines these types only. It has no scheduler that fills them in.

## What this package does not do

There is no HTTP server, no command-line program and no log-file writing.
The functions above are meant to be called from your own code.