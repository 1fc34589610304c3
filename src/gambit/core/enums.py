"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def symbol(self) -> str:
        """Single unicode glyph used in cell tokens, e.g. ♚."""
        return _KIND_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> PieceKind:
        try:
            return _SYMBOL_KINDS[symbol]
        except KeyError:
            raise ValueError(f"Invalid piece symbol: {symbol!r}") from None


_KIND_SYMBOLS: dict[PieceKind, str] = {
    PieceKind.PAWN: "♟",
    PieceKind.KNIGHT: "♞",
    PieceKind.BISHOP: "♝",
    PieceKind.ROOK: "♜",
    PieceKind.QUEEN: "♛",
    PieceKind.KING: "♚",
}
_SYMBOL_KINDS: dict[str, PieceKind] = {v: k for k, v in _KIND_SYMBOLS.items()}


class PlayerKind(IntEnum):
    """Who drives a player's moves."""

    HUMAN = 0
    AUTOMATED = 1

    def __str__(self) -> str:
        return self.name.lower()


class Annotation(Enum):
    """Transient render markers; the value is the token suffix."""

    SELECTED = "~"
    MOVE_TARGET = "."
    CAPTURE_TARGET = "x"
    PENDING_TARGET = "?"

    @property
    def is_destination(self) -> bool:
        """A click on such a cell picks it as the pending target."""
        return self in (Annotation.MOVE_TARGET, Annotation.CAPTURE_TARGET)
