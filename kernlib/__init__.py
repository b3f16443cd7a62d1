"""Kernel-style data structures, integer helpers and in-memory models of simple PC devices."""

__version__ = "0.1.0"