"""
MCP tool implementations.

Tools are organized by domain:
- theory - Key signatures, scales, chords, Roman numerals
- export - MIDI rendering
"""

from chuk_mcp_theory.tools.export import register_export_tools
from chuk_mcp_theory.tools.theory import register_theory_tools

__all__ = [
    "register_export_tools",
    "register_theory_tools",
]
