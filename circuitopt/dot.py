"""Verilog-to-DOT conversion, DOT netlist extraction and simple DOT optimisations."""

from __future__ import annotations

import itertools
import re

__all__ = [
    "verilog_to_dot",
    "parse_dot_code",
    "constant_propagation",
    "common_subexpression_elimination",
    "optimize_dot_code",
]

_DOT_HEADER = (
    "digraph VerilogDiagram {\n"
    "  rankdir=LR;\n"
    "  node [shape=box];\n"
    "  edge [fontsize=10];\n"
)

_WS = r"[\t\n\f\r ]"
_WORD_RE = re.compile(r"\b(\w+)\b", re.ASCII)
_EDGE_RE = re.compile(rf"\b(\w+){_WS}*--{_WS}*(\w+)\b", re.ASCII)

_TEMP_PREFIX = "TEMP"


def _split_assign(statement: str) -> tuple[str, str] | None:
    """Split an ``assign lhs = rhs;`` statement into its two sides."""
    left, sep, right = statement.partition("=")
    if not sep:
        return None
    return left.removeprefix("assign").strip(), right.removesuffix(";").strip()


def verilog_to_dot(verilog_code: str) -> str:
    """Render the modules and assign statements of Verilog code as a DOT digraph."""
    ids = itertools.count(1)
    modules: dict[str, int] = {}
    assigns: list[str] = []

    for raw_line in verilog_code.split("\n"):
        line = raw_line.strip()
        if line.startswith("module"):
            parts = line.split()
            if len(parts) < 2:
                continue
            modules[parts[1].removesuffix(";")] = next(ids)
        elif line.startswith("assign"):
            assigns.append(line)

    connections = [pair for pair in map(_split_assign, assigns) if pair is not None]

    wires: dict[str, int] = {}
    for lhs, rhs in connections:
        for name in (lhs, rhs):
            if name not in wires:
                wires[name] = next(ids)

    out = [_DOT_HEADER]
    out.extend(f'  {node_id} [label="{name}"];\n' for name, node_id in modules.items())
    out.extend(
        f'  {node_id} [label="{name}", shape=ellipse];\n'
        for name, node_id in wires.items()
    )
    for lhs, rhs in connections:
        src = modules.get(lhs, wires.get(lhs))
        dst = modules.get(rhs, wires.get(rhs))
        if src is not None and dst is not None:
            out.append(f"  {src} -> {dst};\n")
    out.append("}")
    return "".join(out)


def parse_dot_code(dot_code: str) -> str:
    """List the distinct words and the undirected ``a -- b`` edges of DOT code."""
    nodes = dict.fromkeys(_WORD_RE.findall(dot_code))
    edges = _EDGE_RE.findall(dot_code)

    parts = ["电路网表图:\n", "节点:\n"]
    parts.extend(f"{node}\n" for node in nodes)
    parts.append("边:\n")
    parts.extend(f"{src} -- {dst}\n" for src, dst in edges)
    return "".join(parts)


def _is_constant(value: str) -> bool:
    return all(ch.isdecimal() or ch in ".-" for ch in value)


def _escape_quotes(text: str) -> str:
    return text.replace('"', '\\"')


def _statements(dot_code: str):
    """Yield the non-empty, trimmed ``;``-separated statements."""
    for raw in dot_code.split(";"):
        statement = raw.strip()
        if statement:
            yield statement


def constant_propagation(dot_code: str) -> str:
    """Substitute names bound to numeric constants into later assignments."""
    constants: dict[str, str] = {}
    result: list[str] = []

    for statement in _statements(dot_code):
        name, sep, value = statement.partition("=")
        if not sep:
            result.append(_escape_quotes(statement))
            continue
        name = name.strip()
        value = value.strip()
        for known, constant in constants.items():
            value = value.replace(known, constant)
        if _is_constant(value):
            constants[name] = value
        result.append(f"{_escape_quotes(name)} = {_escape_quotes(value)}")

    return "; ".join(result)


def common_subexpression_elimination(dot_code: str) -> str:
    """Bind each distinct right-hand side to a TEMPn name and reuse it."""
    subexpressions: dict[str, str] = {}
    temp_numbers = itertools.count(1)
    result: list[str] = []

    for statement in _statements(dot_code):
        name, sep, expression = statement.partition("=")
        if not sep:
            result.append(_escape_quotes(statement))
            continue
        name = name.strip()
        expression = expression.strip()

        if name.startswith(_TEMP_PREFIX):
            result.append(_escape_quotes(statement))
            continue

        temp = subexpressions.get(expression)
        if temp is None:
            temp = f"{_TEMP_PREFIX}{next(temp_numbers)}"
            subexpressions[expression] = temp
            result.append(f"{_escape_quotes(temp)} = {_escape_quotes(expression)}")
        result.append(f"{_escape_quotes(name)} = {_escape_quotes(temp)}")

    return "; ".join(result)


def optimize_dot_code(dot_code: str) -> str:
    """Run constant propagation followed by common subexpression elimination."""
    return common_subexpression_elimination(constant_propagation(dot_code))