from __future__ import annotations

import random
from typing import Iterable, List, Optional

from .pieces import PieceKind


class PieceBag:
    """Queue of upcoming kinds, refilled one shuffled full set at a time.

    Every refill appends a permutation of all seven kinds, so any seven
    draws taken from one refill contain each kind exactly once.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self._queue: List[PieceKind] = []

    def __len__(self) -> int:
        return len(self._queue)

    def clear(self) -> None:
        self._queue.clear()

    def load(self, kinds: Iterable[PieceKind]) -> None:
        self._queue = [PieceKind(k) for k in kinds]

    def refill(self) -> None:
        batch = list(PieceKind)
        self.rng.shuffle(batch)
        self._queue.extend(batch)

    def ensure(self, minimum: int = len(PieceKind)) -> None:
        while len(self._queue) < minimum:
            self.refill()

    def peek(self) -> PieceKind:
        self.ensure()
        return self._queue[0]

    def pop(self) -> PieceKind:
        self.ensure()
        kind = self._queue.pop(0)
        self.ensure()
        return kind

    def as_list(self) -> List[PieceKind]:
        return list(self._queue)
