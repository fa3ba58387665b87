"""Verilog-to-DOT conversion, DOT netlist listing, simple DOT optimisation and scheduling data types."""

__version__ = "0.1.0"
__all__ = ["__version__"]