from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, FallingBlocksGame, GameConfig, PieceKind, ScoringRules


class FallingBlocksEnv(gym.Env):
    """Agent-facing wrapper around ``FallingBlocksGame``.

    One environment step applies one ``Action`` and, every
    ``gravity_every`` steps, one gravity tick. The reward is the change in
    engine score.
    """

    metadata = {"render_modes": [], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None,
                 gravity_every: int = 1, max_steps: int = 10000) -> None:
        super().__init__()
        if gravity_every < 1:
            raise ValueError("gravity_every must be >= 1")
        self.game = FallingBlocksGame(config, rules)
        self.gravity_every = int(gravity_every)
        self.max_steps = int(max_steps)
        self.render_mode = None

        kinds = len(PieceKind)
        h, w = self.game.height, self.game.width
        # Locked cells hold the kind value; the falling piece is negative
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=-kinds, high=kinds, shape=(h, w), dtype=np.int8),
                "next_piece": spaces.Discrete(kinds + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Action))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        board = self.game.grid.clone_state()
        piece = self.game.current_piece
        if piece is not None:
            for x, y in piece.cells():
                if self.game.grid.is_inside(x, y):
                    board[y, x] = -int(piece.kind)
        return {"board": board, "next_piece": int(self.game.bag.peek())}

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared": self.game.lines_cleared,
            "level": self.game.level,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.seed(seed)
        self.game.start()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        score_before = self.game.score
        self.game.handle_action(Action(int(action)))
        self._steps += 1
        if self.game.is_running() and self._steps % self.gravity_every == 0:
            self.game.step_down(manual=False)

        reward = float(self.game.score - score_before)
        terminated = self.game.is_game_over()
        truncated = self._steps >= self.max_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> None:
        # Drawing belongs to the presentation layer
        return None

    def close(self) -> None:
        pass
