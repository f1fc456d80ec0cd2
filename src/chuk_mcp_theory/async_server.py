#!/usr/bin/env python3
"""
Async Music Theory MCP Server using chuk-mcp-server

This server exposes the theory engine as MCP tools:
- Key signatures with every enharmonic spelling
- Spelled scales for major and the three minor forms
- Chord construction and diatonic harmonization
- Roman numeral analysis
- MIDI rendering of scales and progressions
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.tools import register_export_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

# Paths - CHUK_THEORY_OUTPUT_DIR overrides the default ./output
BASE_PATH = Path.cwd()
OUTPUT_DIR = Path(os.environ.get("CHUK_THEORY_OUTPUT_DIR", BASE_PATH / "output"))

# Register all tools
theory_tools = register_theory_tools(mcp)
export_tools = register_export_tools(mcp, OUTPUT_DIR)

# Export tool functions for direct access
theory_key_signatures = theory_tools["theory_key_signatures"]
theory_build_scale = theory_tools["theory_build_scale"]
theory_build_chord = theory_tools["theory_build_chord"]
theory_diatonic_chords = theory_tools["theory_diatonic_chords"]
theory_roman_numerals = theory_tools["theory_roman_numerals"]
theory_key_label = theory_tools["theory_key_label"]

theory_export_midi = export_tools["theory_export_midi"]

logger.info("CHUK Music Theory MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")
