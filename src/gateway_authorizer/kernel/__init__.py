"""Kernel – errors, security primitives and clocks shared by every layer."""
