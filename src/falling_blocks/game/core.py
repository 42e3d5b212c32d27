from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .bag import PieceBag
from .grid import GameGrid
from .pieces import ROTATION_KICKS, ActivePiece, PieceKind, Shape, rotate_cw
from .rules import ScoringRules
from .state import RenderState, Snapshot, SnapshotError

logger = logging.getLogger(__name__)


class Action(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = -1


class FallingBlocksGame:
    """Rule engine: board, active piece, piece queue, score and lines.

    The game is synchronous and performs no timing of its own. Gravity is
    driven by calling ``step_down()`` while ``is_running()`` is true; see
    ``GravityClock`` for a scheduler that does this.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.grid = GameGrid(self.config.width, self.config.height)
        self.bag = PieceBag(rng or random.Random(self.config.random_seed))
        self.current_piece: Optional[ActivePiece] = None
        self.score = 0
        self.lines_cleared = 0
        self.game_over = False
        self.running = False

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def level(self) -> int:
        return self.rules.level_for(self.lines_cleared)

    def seed(self, value: Optional[int]) -> None:
        self.bag.rng.seed(value)

    # Lifecycle

    def start(self, snapshot: Optional[Snapshot] = None) -> None:
        """Begin a fresh game, or resume from ``snapshot``.

        A snapshot whose board size differs from this game's, or whose
        pieces or counters cannot be converted, raises ``SnapshotError``;
        nothing is changed in that case.
        """
        if snapshot is not None:
            self._restore(snapshot)
        else:
            self.grid.reset()
            self.bag.clear()
            self.current_piece = None
            self.score = 0
            self.lines_cleared = 0
            self.game_over = False
            self.bag.ensure()
            self._spawn_piece()
            logger.debug("started new game, first piece %s", self._current_kind())
        self.running = not self.game_over

    def _restore(self, snapshot: Snapshot) -> None:
        # Convert everything before touching live state
        try:
            board = np.array(snapshot.board, dtype=np.int8)
            piece = snapshot.current_piece.copy() if snapshot.current_piece is not None else None
            if piece is not None:
                piece.kind = PieceKind(piece.kind)
            queue = [PieceKind(k) for k in snapshot.queue]
            score = int(snapshot.score)
            lines_cleared = int(snapshot.lines_cleared)
        except (ValueError, TypeError) as exc:
            raise SnapshotError(f"invalid snapshot: {exc}") from exc
        if board.shape != (self.height, self.width):
            raise SnapshotError(
                f"snapshot board is {board.shape}, expected {(self.height, self.width)}"
            )
        self.grid.load(board)
        self.current_piece = piece
        self.bag.load(queue)
        self.score = score
        self.lines_cleared = lines_cleared
        self.game_over = bool(snapshot.is_game_over)
        self.bag.ensure()
        if self.current_piece is None and not self.game_over:
            self._spawn_piece()
        logger.debug("restored game: score=%d lines=%d game_over=%s", self.score, self.lines_cleared, self.game_over)

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        if not self.game_over:
            self.running = True

    def is_running(self) -> bool:
        return self.running and not self.game_over

    def is_game_over(self) -> bool:
        return self.game_over

    # Input and gravity

    def handle_action(self, action: Action | int) -> None:
        action = Action(action)
        if not self.is_running():
            return
        if action == Action.MOVE_LEFT:
            self._shift(-1)
        elif action == Action.MOVE_RIGHT:
            self._shift(1)
        elif action == Action.ROTATE:
            self._rotate()
        elif action == Action.SOFT_DROP:
            self.step_down(manual=True)
        elif action == Action.HARD_DROP:
            self._hard_drop()
        elif action == Action.NONE:
            pass

    def step_down(self, manual: bool = False) -> None:
        """Gravity tick. Moves the piece down one row, or locks it when it
        cannot descend. Only a manual soft drop earns points.

        This does not check ``is_running()``; callers gate gravity on it.
        """
        piece = self.current_piece
        if piece is None:
            return
        if self.can_place(piece.shape, piece.x, piece.y + 1):
            piece.y += 1
            if manual:
                self.score += self.rules.soft_drop_per_row
        else:
            self._settle()

    def get_drop_interval(self) -> int:
        return self.rules.drop_interval_ms(self.level)

    def can_place(self, shape: Shape, x: int, y: int) -> bool:
        return self.grid.can_place(shape, x, y)

    def _shift(self, dx: int) -> None:
        piece = self.current_piece
        if piece is None:
            return
        if self.can_place(piece.shape, piece.x + dx, piece.y):
            piece.x += dx

    def _rotate(self) -> None:
        piece = self.current_piece
        if piece is None:
            return
        rotated = rotate_cw(piece.shape)
        for offset in ROTATION_KICKS:
            target_x = piece.x + offset
            if self.can_place(rotated, target_x, piece.y):
                piece.shape = rotated
                piece.x = target_x
                return

    def _hard_drop(self) -> None:
        piece = self.current_piece
        if piece is None:
            return
        distance = 0
        while self.can_place(piece.shape, piece.x, piece.y + 1):
            piece.y += 1
            distance += 1
        if distance > 0:
            self.score += distance * self.rules.hard_drop_per_row
        self._settle()

    # Locking, clearing and spawning

    def _settle(self) -> None:
        self._lock_piece()
        self._clear_lines()
        self._spawn_piece()

    def _lock_piece(self) -> None:
        piece = self.current_piece
        if piece is None:
            return
        self.grid.lock(piece.shape, piece.x, piece.y, int(piece.kind))
        self.current_piece = None

    def _clear_lines(self) -> int:
        lines = self.grid.clear_full_lines()
        if lines > 0:
            self.lines_cleared += lines
            self.score += self.rules.score_for_lines(lines, self.level)
            if lines > 1:
                logger.debug("cleared %d lines at once, level %d", lines, self.level)
        return lines

    def _spawn_piece(self) -> None:
        kind = self.bag.pop()
        candidate = ActivePiece.spawn(kind, self.width, self.config.spawn_y)
        if self.can_place(candidate.shape, candidate.x, candidate.y):
            self.current_piece = candidate
        else:
            self.current_piece = None
            self.game_over = True
            self.running = False
            logger.debug("game over: %s blocked at spawn, score=%d", kind.name, self.score)

    def _current_kind(self) -> Optional[str]:
        return self.current_piece.kind.name if self.current_piece is not None else None

    # Projections

    def get_snapshot(self) -> Snapshot:
        return Snapshot(
            board=self.grid.clone_state(),
            current_piece=self.current_piece.copy() if self.current_piece is not None else None,
            queue=self.bag.as_list(),
            score=self.score,
            lines_cleared=self.lines_cleared,
            is_game_over=self.game_over,
        )

    def get_render_state(self) -> RenderState:
        self.bag.ensure()
        piece = self.current_piece
        ghost_y = None
        if piece is not None:
            ghost_y = self.grid.landing_y(piece.shape, piece.x, piece.y)
        return RenderState(
            board=self.grid.clone_state(),
            current_piece=piece.copy() if piece is not None else None,
            queue=self.bag.as_list(),
            score=self.score,
            lines_cleared=self.lines_cleared,
            is_game_over=self.game_over,
            width=self.width,
            height=self.height,
            level=self.level,
            next_piece=self.bag.peek(),
            ghost_y=ghost_y,
            drop_interval=self.get_drop_interval(),
        )
