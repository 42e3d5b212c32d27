from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from .pieces import ActivePiece, PieceKind


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be loaded into a game."""


@dataclass
class Snapshot:
    """Everything needed to resume a session exactly.

    Snapshots are values: the game copies them on the way in and out, so
    mutating one never affects a live game.
    """

    board: np.ndarray
    current_piece: Optional[ActivePiece]
    queue: List[PieceKind]
    score: int
    lines_cleared: int
    is_game_over: bool

    def copy(self) -> "Snapshot":
        return Snapshot(
            board=self.board.copy(),
            current_piece=self.current_piece.copy() if self.current_piece is not None else None,
            queue=list(self.queue),
            score=self.score,
            lines_cleared=self.lines_cleared,
            is_game_over=self.is_game_over,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-compatible form. Kinds are written as letters and
        empty cells as ``None``."""
        piece: Optional[Dict[str, Any]] = None
        if self.current_piece is not None:
            piece = {
                "type": self.current_piece.kind.name,
                "matrix": np.asarray(self.current_piece.shape).astype(int).tolist(),
                "x": int(self.current_piece.x),
                "y": int(self.current_piece.y),
            }
        return {
            "board": [[PieceKind(v).name if v else None for v in row] for row in self.board.tolist()],
            "current_piece": piece,
            "queue": [PieceKind(k).name for k in self.queue],
            "score": int(self.score),
            "lines_cleared": int(self.lines_cleared),
            "is_game_over": bool(self.is_game_over),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snapshot":
        try:
            rows = [[_kind_value(cell) for cell in row] for row in data["board"]]
            if rows and len({len(row) for row in rows}) != 1:
                raise SnapshotError("board rows have different lengths")
            piece_data = data["current_piece"]
            piece = None
            if piece_data is not None:
                piece = ActivePiece(
                    kind=PieceKind.from_letter(piece_data["type"]),
                    shape=np.array(piece_data["matrix"], dtype=np.int8),
                    x=int(piece_data["x"]),
                    y=int(piece_data["y"]),
                )
            return cls(
                board=np.array(rows, dtype=np.int8),
                current_piece=piece,
                queue=[PieceKind.from_letter(k) for k in data["queue"]],
                score=int(data["score"]),
                lines_cleared=int(data["lines_cleared"]),
                is_game_over=bool(data["is_game_over"]),
            )
        except SnapshotError:
            raise
        except KeyError as exc:
            raise SnapshotError(f"missing or unknown snapshot field: {exc}") from exc
        except (ValueError, TypeError) as exc:
            raise SnapshotError(f"malformed snapshot: {exc}") from exc


def _kind_value(cell: Optional[str]) -> int:
    if cell is None:
        return 0
    return int(PieceKind.from_letter(cell))


@dataclass
class RenderState(Snapshot):
    """Snapshot plus fields derived for display. Never persisted."""

    width: int
    height: int
    level: int
    next_piece: PieceKind
    ghost_y: Optional[int]
    drop_interval: int
