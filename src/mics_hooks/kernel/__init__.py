"""Kernel – pure types, errors and crypto primitives with no transport concerns."""
