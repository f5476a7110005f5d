"""Musical scales built from a tonic and a pattern of intervals."""

from __future__ import annotations

from typing import NamedTuple


class _Tone(NamedTuple):
    natural: str
    sharp: str
    flat: str


_TONES = (
    _Tone("A", "", ""),
    _Tone("", "A#", "Bb"),
    _Tone("B", "", ""),
    _Tone("C", "", ""),
    _Tone("", "C#", "Db"),
    _Tone("D", "", ""),
    _Tone("", "D#", "Eb"),
    _Tone("E", "", ""),
    _Tone("F", "", ""),
    _Tone("", "F#", "Gb"),
    _Tone("G", "", ""),
    _Tone("", "G#", "Ab"),
)

_FLAT_TONICS = frozenset(
    {"F", "Bb", "Eb", "Ab", "Db", "Gb", "d", "g", "c", "f", "bb", "eb"}
)

_STEPS = {"m": 1, "M": 2, "A": 3}

_CHROMATIC = "m" * 12


def uses_flat(tonic: str) -> bool:
    """Tell whether scales on ``tonic`` are written with flats rather than sharps."""
    return tonic in _FLAT_TONICS


def tone_position(tonic: str) -> int:
    """Return the position of ``tonic`` in the chromatic scale starting at A.

    Raises ValueError for an unknown tonic.
    """
    name = tonic[:1].upper() + tonic[1:]
    for position, tone in enumerate(_TONES):
        if name in tone:
            return position
    raise ValueError(f"unknown tonic: {tonic!r}")


def tone_name(position: int, flat: bool) -> str:
    """Return the name of the tone at ``position``, using flats if ``flat``."""
    tone = _TONES[position]
    if tone.natural:
        return tone.natural
    return tone.flat if flat else tone.sharp


def scale(tonic: str, interval: str = "") -> list[str]:
    """Build the scale on ``tonic`` following ``interval``.

    Each character of ``interval`` is a step: ``m`` a half step, ``M`` a whole
    step, ``A`` an augmented second. An empty interval gives the chromatic
    scale; an unknown tonic gives an empty list.
    """
    flat = uses_flat(tonic)
    try:
        position = tone_position(tonic)
    except ValueError:
        return []
    notes = []
    for step in interval or _CHROMATIC:
        notes.append(tone_name(position, flat))
        position = (position + _STEPS.get(step, 0)) % len(_TONES)
    return notes