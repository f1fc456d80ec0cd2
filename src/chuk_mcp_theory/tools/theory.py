"""
Theory tools - MCP tools for keys, scales, chords and Roman numerals.

Every tool returns a JSON string. Failures are logged and reported as
{"status": "error", "message": ...} rather than raised to the client.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.core.chord import ChordQuality, build_chord
from chuk_mcp_theory.core.scale import Tonality, build_scale
from chuk_mcp_theory.core.spelling import (
    Accidental,
    AccidentalType,
    Spelling,
    find_letter_and_accidental,
    parse_label,
)
from chuk_mcp_theory.errors import TheoryError
from chuk_mcp_theory.harmony import diatonic_chords, roman_numerals_for
from chuk_mcp_theory.keys import get_key_signatures, major_key_label, minor_key_label
from chuk_mcp_theory.models.key_signature import KeySignature

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_key(tonic: str, tonality: str, spelling: str | None = None) -> KeySignature:
    """
    Pick one written form of a key from tool arguments.

    A spelled tonic ('Gb', 'F#') selects the matching enharmonic form;
    an explicit spelling ('sharp', 'flat', 'natural') overrides it.
    Otherwise the preferred form is returned.
    """
    spelled = parse_label(tonic)
    parsed_tonality = Tonality.parse(tonality)
    candidates = get_key_signatures(spelled.note, parsed_tonality)

    if spelling:
        wanted = AccidentalType(spelling.strip().lower())
        for key_signature in candidates:
            if key_signature.accidental_type is wanted:
                return key_signature
        raise TheoryError(
            ErrorMessages.INVALID_SPELLING.format(spelling=wanted.value, key=candidates[0].name)
        )

    for key_signature in candidates:
        if key_signature.tonic_label == str(spelled):
            return key_signature
    return candidates[0]


def key_signature_payload(key_signature: KeySignature) -> dict[str, Any]:
    """JSON-ready description of a key signature."""
    # Signature accidentals are the natural letters the key alters
    sign = Accidental.SHARP if key_signature.accidental_type is AccidentalType.SHARP else Accidental.FLAT
    return {
        "name": key_signature.name,
        "tonic": int(key_signature.tonic),
        "tonic_label": key_signature.tonic_label,
        "tonality": key_signature.tonality.value,
        "accidental_type": key_signature.accidental_type.value,
        "accidentals": [int(note) for note in key_signature.accidentals],
        "accidental_labels": [
            str(Spelling(find_letter_and_accidental(note, AccidentalType.NATURAL).letter, sign))
            for note in key_signature.accidentals
        ],
        "scale": {
            "notes": [int(note) for note in key_signature.notes],
            "labels": list(key_signature.labels),
        },
    }


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register theory tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_key_signatures(tonic: str, tonality: str = "major") -> str:
        """
        Get every written form of a key.

        Enharmonic keys (e.g. F#/Gb major) return two results, sorted by
        number of accidentals with the flat spelling first on a tie.

        Args:
            tonic: Tonic note name (e.g. 'C', 'F#', 'Bb', 'G♭')
            tonality: 'major', 'minor', 'harmonic_minor' or 'melodic_minor'

        Returns:
            JSON string with the key signatures

        Example:
            theory_key_signatures(tonic="F#", tonality="major")
        """
        try:
            parsed = Tonality.parse(tonality)
            key_signatures = get_key_signatures(parse_label(tonic).note, parsed)
            return json.dumps(
                {
                    "status": "success",
                    "key_signatures": [key_signature_payload(ks) for ks in key_signatures],
                }
            )
        except Exception as e:
            logger.exception("Failed to get key signatures")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_key_signatures"] = theory_key_signatures

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_scale(
        tonic: str,
        tonality: str = "major",
        spelling: str | None = None,
    ) -> str:
        """
        Build a spelled scale.

        Args:
            tonic: Tonic note name
            tonality: Scale type
            spelling: Optional 'sharp' or 'flat' to choose an enharmonic form

        Returns:
            JSON string with scale notes (0-11) and labels

        Example:
            theory_build_scale(tonic="A", tonality="harmonic_minor")
        """
        try:
            key_signature = resolve_key(tonic, tonality, spelling)
            return json.dumps(
                {
                    "status": "success",
                    "key": key_signature.name,
                    "notes": [int(n) for n in build_scale(key_signature.tonic, key_signature.tonality)],
                    "labels": list(key_signature.labels),
                }
            )
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_scale"] = theory_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_chord(root: str, quality: str = "M") -> str:
        """
        Build a root-position chord.

        Args:
            root: Root note name
            quality: Chord quality ('M', 'm', 'd', '+', 'maj7', '7', 'm7',
                'dm7', 'd7', or a symbol like 'dim', 'm7b5')

        Returns:
            JSON string with chord pitch classes

        Example:
            theory_build_chord(root="G", quality="7")
        """
        try:
            parsed = ChordQuality.parse(quality)
            notes = build_chord(parse_label(root).note, parsed)
            return json.dumps(
                {
                    "status": "success",
                    "quality": parsed.value,
                    "notes": [int(n) for n in notes],
                }
            )
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_chord"] = theory_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_diatonic_chords(
        tonic: str,
        tonality: str = "major",
        sevenths: bool = False,
        spelling: str | None = None,
    ) -> str:
        """
        Harmonize a key: the chord on each scale degree with its Roman numeral.

        Chord tones use the key's own spelling.

        Args:
            tonic: Tonic note name
            tonality: Scale type
            sevenths: Build seventh chords instead of triads
            spelling: Optional 'sharp' or 'flat' to choose an enharmonic form

        Returns:
            JSON string with seven chords

        Example:
            theory_diatonic_chords(tonic="A", tonality="harmonic_minor")
        """
        try:
            key_signature = resolve_key(tonic, tonality, spelling)
            chords = diatonic_chords(key_signature, sevenths)
            return json.dumps(
                {
                    "status": "success",
                    "key": key_signature.name,
                    "chords": [chord.model_dump(mode="json") for chord in chords],
                }
            )
        except Exception as e:
            logger.exception("Failed to build diatonic chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_diatonic_chords"] = theory_diatonic_chords

    @mcp.tool  # type: ignore[arg-type]
    async def theory_roman_numerals(tonality: str = "major", sevenths: bool = False) -> str:
        """
        Get the diatonic Roman numerals of a tonality.

        Args:
            tonality: Scale type
            sevenths: Seventh-chord numerals instead of triads

        Returns:
            JSON string with seven numerals

        Example:
            theory_roman_numerals(tonality="melodic_minor")
        """
        try:
            parsed = Tonality.parse(tonality)
            return json.dumps(
                {
                    "status": "success",
                    "tonality": parsed.value,
                    "numerals": roman_numerals_for(parsed, sevenths),
                }
            )
        except Exception as e:
            logger.exception("Failed to get Roman numerals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_roman_numerals"] = theory_roman_numerals

    @mcp.tool  # type: ignore[arg-type]
    async def theory_key_label(note: int, minor: bool = False) -> str:
        """
        Get the conventional name of the key on a pitch class.

        Args:
            note: Pitch class 0-11 (C=0)
            minor: Name the minor key instead of the major key

        Returns:
            JSON string with the label

        Example:
            theory_key_label(note=6)  # G♭
        """
        try:
            label = minor_key_label(note) if minor else major_key_label(note)
            return json.dumps({"status": "success", "note": note % 12, "label": label})
        except Exception as e:
            logger.exception("Failed to get key label")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_key_label"] = theory_key_label

    return tools
