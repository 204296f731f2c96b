"""Line shapes described by a small text format.

The format is whitespace separated: the word ``loop`` (anything else means an
open strip), three colour components, then pairs of point coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union


@dataclass(frozen=True)
class Shape:
    """A polyline with a colour; closed when ``loop`` is true."""

    loop: bool
    colour: Tuple[float, float, float]
    points: Tuple[Tuple[float, float], ...]


def _floats(tokens):
    try:
        return [float(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"invalid number in shape: {exc}") from None


def parse_shape(text: str) -> Shape:
    """Parse a shape from its text form."""
    tokens = text.split()
    if not tokens:
        raise ValueError("shape text is empty")
    loop = tokens[0] == "loop"
    if len(tokens) < 4:
        raise ValueError("shape needs three colour components")
    r, g, b = _floats(tokens[1:4])
    coords = _floats(tokens[4:])
    if len(coords) % 2:
        raise ValueError("shape has an unpaired coordinate")
    points = tuple(zip(coords[0::2], coords[1::2]))
    return Shape(loop, (r, g, b), points)


def load_shape(path: Union[str, Path]) -> Shape:
    """Read and parse a shape file."""
    return parse_shape(Path(path).read_text())