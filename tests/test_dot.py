import re

import pytest

from circuitopt.dot import (
    common_subexpression_elimination,
    constant_propagation,
    optimize_dot_code,
    parse_dot_code,
    verilog_to_dot,
)

HEADER = (
    "digraph VerilogDiagram {\n"
    "  rankdir=LR;\n"
    "  node [shape=box];\n"
    "  edge [fontsize=10];\n"
)

LABEL_RE = re.compile(r'^  (\d+) \[label="([^"]*)"(, shape=ellipse)?\];$')
EDGE_RE = re.compile(r"^  (\d+) -> (\d+);$")


def _labels(dot):
    modules, wires = {}, {}
    for line in dot.splitlines():
        m = LABEL_RE.match(line)
        if m:
            (wires if m.group(3) else modules)[m.group(2)] = m.group(1)
    return modules, wires


def _edges(dot):
    return [m.groups() for m in map(EDGE_RE.match, dot.splitlines()) if m]


def test_verilog_to_dot_empty_input_is_bare_graph():
    assert verilog_to_dot("") == HEADER + "}"


def test_verilog_to_dot_module_becomes_box_node():
    out = verilog_to_dot("module top;\nendmodule")
    modules, wires = _labels(out)
    assert list(modules) == ["top"]
    assert wires == {}
    assert out.startswith(HEADER)
    assert out.endswith("}")


def test_verilog_to_dot_module_without_name_is_skipped():
    modules, _ = _labels(verilog_to_dot("module\n"))
    assert modules == {}


def test_verilog_to_dot_assign_creates_wires_and_edge():
    out = verilog_to_dot("module top(a, y);\n  assign y = a;\nendmodule\n")
    modules, wires = _labels(out)
    assert set(wires) == {"y", "a"}
    assert "top(a," in modules
    assert _edges(out) == [(wires["y"], wires["a"])]


def test_verilog_to_dot_ids_are_unique():
    src = "module m;\nassign p = q;\nassign r = q;\nassign p = s;\n"
    out = verilog_to_dot(src)
    modules, wires = _labels(out)
    ids = list(modules.values()) + list(wires.values())
    assert len(ids) == len(set(ids))
    assert set(wires) == {"p", "q", "r", "s"}
    assert len(_edges(out)) == 3


def test_verilog_to_dot_edge_prefers_module_id():
    out = verilog_to_dot("module core;\nassign out = core;\n")
    modules, wires = _labels(out)
    assert _edges(out) == [(wires["out"], modules["core"])]


def test_verilog_to_dot_assign_without_equals_is_ignored():
    out = verilog_to_dot("assign foo;\n")
    assert out == HEADER + "}"


def test_parse_dot_code_worked_example():
    assert parse_dot_code("a -- b") == "电路网表图:\n节点:\na\nb\n边:\na -- b\n"


def test_parse_dot_code_nodes_are_unique_and_ordered():
    out = parse_dot_code("graph g { x -- y; y -- x; }")
    node_part = out.split("节点:\n")[1].split("边:\n")[0]
    nodes = node_part.splitlines()
    assert nodes == ["graph", "g", "x", "y"]
    edge_part = out.split("边:\n")[1]
    assert edge_part.splitlines() == ["x -- y", "y -- x"]


def test_parse_dot_code_directed_edges_are_not_edges():
    out = parse_dot_code("digraph { a -> b }")
    assert out.endswith("边:\n")


def test_constant_propagation_substitutes_constants():
    assert constant_propagation("a = 1; b = a") == "a = 1; b = 1"


def test_constant_propagation_keeps_non_constants():
    assert constant_propagation("a = x; b = a") == "a = x; b = a"


def test_constant_propagation_drops_empty_statements():
    assert constant_propagation(";;  ;") == ""


def test_constant_propagation_escapes_quotes():
    out = constant_propagation('label = "x"; node "n"')
    assert out.count('\\"') == 4
    assert re.search(r'(?<!\\)"', out) is None


@pytest.mark.parametrize("text", ["a -> b", "node [shape=box]"])
def test_constant_propagation_normalises_spacing(text):
    out = constant_propagation(text)
    if "=" in text:
        name, value = text.split("=", 1)
        assert out == f"{name.strip()} = {value.strip()}"
    else:
        assert out == text


def test_cse_shares_repeated_expression():
    assert (
        common_subexpression_elimination("x = a & b; y = a & b")
        == "TEMP1 = a & b; x = TEMP1; y = TEMP1"
    )


def test_cse_passes_temp_assignments_through():
    assert common_subexpression_elimination("TEMP9 = q") == "TEMP9 = q"


def test_cse_keeps_non_assignments():
    assert common_subexpression_elimination(" a -> b ;") == "a -> b"


def test_cse_distinct_expressions_get_distinct_temps():
    out = common_subexpression_elimination("x = a; y = b; z = a")
    parts = out.split("; ")
    temps = [p.split(" = ")[0] for p in parts if p.startswith("TEMP")]
    assert len(temps) == 2
    assert len(set(temps)) == 2
    assert parts[-1] == f"z = {temps[0]}"


def test_optimize_is_propagation_then_cse():
    code = 'a = 1; b = a; c = x "y"; d = x "y"'
    assert optimize_dot_code(code) == common_subexpression_elimination(
        constant_propagation(code)
    )