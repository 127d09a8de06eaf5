# src/netinflation/runtime/__init__.py
"""Operator-side configuration: presets, env vars, JSON config files."""
