"""Game module for Falling Blocks.

Exports the rule engine and supporting classes:
- GameGrid: Board representation, collision and line clearing
- PieceKind / ActivePiece: Tetromino kinds and the falling piece
- PieceBag: Shuffled 7-bag queue of upcoming kinds
- ScoringRules: Scoring table, levels and gravity curve
- Snapshot / RenderState: Copy-out views of the game state
- FallingBlocksGame: Main engine and state machine
- GravityClock: Time accumulator that drives gravity ticks
"""

from .grid import GameGrid
from .pieces import ActivePiece, PieceKind, get_shape, rotate_cw
from .bag import PieceBag
from .rules import ScoringRules
from .state import RenderState, Snapshot, SnapshotError
from .core import Action, FallingBlocksGame, GameConfig
from .clock import GravityClock

__all__ = [
    "GameGrid",
    "ActivePiece",
    "PieceKind",
    "get_shape",
    "rotate_cw",
    "PieceBag",
    "ScoringRules",
    "RenderState",
    "Snapshot",
    "SnapshotError",
    "Action",
    "FallingBlocksGame",
    "GameConfig",
    "GravityClock",
]
