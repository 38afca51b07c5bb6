"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to the outside world:
- Observers (logging, in-memory recording, console explanations)
- Rendering (plain-text console output)
"""
