"""Chess on a labelled text board, with per-piece move checks, castling and promotion."""

__version__ = "0.1.0"

__all__ = ["board", "pawn", "rook_paths", "bishop_paths", "knight", "pieces", "rules"]