"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems:
- Site dataset storage (CSV files)
- Rendering engines (pyvis / vis-network)
"""
