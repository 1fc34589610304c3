"""Cell variants and their compact token codec.

Occupied cells encode as ``{owner}{symbol}{id:02d}`` followed by at most one
annotation character, e.g. ``"0♚04"`` or ``"1♟12x"``.  Empty cells encode as
``"-"`` plus an optional annotation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias

from gambit.core.enums import Annotation, PieceKind
from gambit.core.types import PieceId, PlayerId

EMPTY_TOKEN = "-"
_OCCUPIED_WIDTH = 4

_ANNOTATION_CHARS: dict[str, Annotation] = {a.value: a for a in Annotation}


class BoardInvariantError(ValueError):
    """The board projection disagrees with the piece records."""


@dataclass(frozen=True, slots=True)
class EmptyCell:
    annotation: Annotation | None = None

    @property
    def is_empty(self) -> bool:
        return True

    def __str__(self) -> str:
        return encode_cell(self)


@dataclass(frozen=True, slots=True)
class OccupiedCell:
    """A square holding one alive piece."""

    owner: PlayerId
    kind: PieceKind
    piece_id: PieceId
    annotation: Annotation | None = None

    @property
    def is_empty(self) -> bool:
        return False

    def __str__(self) -> str:
        return encode_cell(self)


Cell: TypeAlias = EmptyCell | OccupiedCell

EMPTY = EmptyCell()


# ── Codec ────────────────────────────────────────────────────────────────────


def encode_cell(cell: Cell) -> str:
    """Serialise *cell* to its fixed-width token."""
    suffix = cell.annotation.value if cell.annotation is not None else ""
    if isinstance(cell, EmptyCell):
        return EMPTY_TOKEN + suffix
    if not 0 <= cell.owner <= 9:
        raise ValueError(f"Owner does not fit one digit: {cell.owner}")
    if not 0 <= cell.piece_id <= 99:
        raise ValueError(f"Piece id does not fit two digits: {cell.piece_id}")
    return f"{cell.owner}{cell.kind.symbol}{cell.piece_id:02d}{suffix}"


def decode_cell(token: str) -> Cell:
    """Parse a token produced by :func:`encode_cell`."""
    if token.startswith(EMPTY_TOKEN):
        return EmptyCell(_decode_annotation(token, token[1:]))

    body, tail = token[:_OCCUPIED_WIDTH], token[_OCCUPIED_WIDTH:]
    if len(body) != _OCCUPIED_WIDTH or not body[0].isdigit() or not body[2:].isdigit():
        raise ValueError(f"Invalid cell token: {token!r}")
    return OccupiedCell(
        owner=int(body[0]),
        kind=PieceKind.from_symbol(body[1]),
        piece_id=int(body[2:]),
        annotation=_decode_annotation(token, tail),
    )


def _decode_annotation(token: str, tail: str) -> Annotation | None:
    if not tail:
        return None
    if len(tail) != 1 or tail not in _ANNOTATION_CHARS:
        raise ValueError(f"Invalid cell annotation in {token!r}")
    return _ANNOTATION_CHARS[tail]


# ── Annotation helpers ───────────────────────────────────────────────────────


def annotate(cell: Cell, annotation: Annotation) -> Cell:
    """Copy of *cell* carrying *annotation* (replaces any previous one)."""
    return replace(cell, annotation=annotation)


def strip_annotation(cell: Cell) -> Cell:
    if cell.annotation is None:
        return cell
    return replace(cell, annotation=None)


def require_occupied(cell: Cell, where: object) -> OccupiedCell:
    """Return *cell* as occupied or fail loudly.

    Raises:
        BoardInvariantError: *cell* is empty although a piece must be there.
    """
    if isinstance(cell, OccupiedCell):
        return cell
    raise BoardInvariantError(f"Expected a piece at {where}, found an empty cell")
