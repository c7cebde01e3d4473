"""Outer surfaces: command-line interface."""
