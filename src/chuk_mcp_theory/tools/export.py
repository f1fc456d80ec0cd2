"""
Export tools - MCP tools for rendering keys to MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import DEFAULT_TEMPO_BPM
from chuk_mcp_theory.export.midi import key_signature_to_midi, midi_key_name
from chuk_mcp_theory.tools.theory import resolve_key

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_midi(
        tonic: str,
        tonality: str = "major",
        content: str = "scale",
        sevenths: bool = False,
        octaves: int = 1,
        tempo: int = DEFAULT_TEMPO_BPM,
        spelling: str | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Render a key's scale or diatonic chords to a MIDI file.

        The file carries a key_signature meta message for the key.

        Args:
            tonic: Tonic note name
            tonality: Scale type
            content: 'scale' (ascending scale) or 'chords' (diatonic progression)
            sevenths: Use seventh chords when content is 'chords'
            octaves: Octaves to span when content is 'scale'
            tempo: Tempo in BPM
            spelling: Optional 'sharp' or 'flat' to choose an enharmonic form
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the output path

        Example:
            theory_export_midi(tonic="Eb", tonality="major", content="chords")
        """
        try:
            key_signature = resolve_key(tonic, tonality, spelling)
            midi = key_signature_to_midi(
                key_signature,
                content=content,  # type: ignore[arg-type]
                sevenths=sevenths,
                octaves=octaves,
                tempo_bpm=tempo,
            )

            default_name = f"{midi_key_name(key_signature)}_{key_signature.tonality.value}_{content}"
            output_path = output_dir / f"{output_name or default_name}.mid"
            output_dir.mkdir(parents=True, exist_ok=True)
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "key": key_signature.name,
                    "path": str(output_path),
                    "message": f"Rendered {content} of {key_signature.name}",
                }
            )
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_midi"] = theory_export_midi

    return tools
