"""Operator, I/O and type natives plus the native function registry."""
