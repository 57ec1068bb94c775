from __future__ import annotations

import random
from typing import Mapping, Sequence


class ReplyVarietySelector:
    """
    Picks a reply at random while never repeating the previous pick for the
    same key, unless there is only one candidate.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def pick(self, candidates: Sequence[str], last: str | None) -> str:
        if not candidates:
            raise ValueError("At least one reply candidate is required.")
        if len(candidates) == 1:
            return candidates[0]

        choice = self._rng.choice(list(candidates))
        if choice == last:
            remaining = [c for c in candidates if c != last]
            if remaining:
                choice = self._rng.choice(remaining)
        return choice

    def select(
        self,
        key: str,
        candidates: Sequence[str],
        memory: Mapping[str, str],
    ) -> tuple[str, dict[str, str]]:
        """Pick for `key` and return the choice plus the updated memory."""
        choice = self.pick(candidates, memory.get(key))
        updated = dict(memory)
        updated[key] = choice
        return choice, updated
