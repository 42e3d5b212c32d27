from __future__ import annotations

from .core import FallingBlocksGame


class GravityClock:
    """Accumulates elapsed time and applies gravity ticks to a game.

    Time only accumulates while the game is running, so a paused or
    finished session never advances. At most one tick fires per call.
    """

    def __init__(self, game: FallingBlocksGame) -> None:
        self.game = game
        self.elapsed_ms = 0.0
        self.interval_ms = game.get_drop_interval()

    def reset(self) -> None:
        self.elapsed_ms = 0.0
        self.interval_ms = self.game.get_drop_interval()

    def advance(self, delta_ms: float) -> bool:
        """Add ``delta_ms`` and return True if a gravity tick was applied."""
        if not self.game.is_running():
            return False
        self.elapsed_ms += delta_ms
        if self.elapsed_ms < self.interval_ms:
            return False
        self.elapsed_ms = 0.0
        self.game.step_down(manual=False)
        self.interval_ms = self.game.get_drop_interval()
        return True
