#!/usr/bin/env python3
"""
Short random identifiers, unique within one generator.

Each IdGenerator keeps its own history, so two parts of a program can
generate ids independently without sharing (or silently not sharing) a
global set.
"""

import random
import string
from typing import Optional, Set

from .console import warn

CHARACTERS = string.ascii_lowercase + string.ascii_uppercase + string.digits


class IdGenerator:
    """Generates ids that never repeat for the lifetime of the generator."""

    def __init__(self, length: int = 6, rng: Optional[random.Random] = None):
        if length < 1:
            raise ValueError(f"Id length must be positive, got {length}")
        self.length = length
        self.rng = rng or random.Random()
        self.history: Set[str] = set()

    def _candidate(self, length: int) -> str:
        return ''.join(self.rng.choice(CHARACTERS) for _ in range(length))

    def new_id(self, length: Optional[int] = None) -> str:
        """Return an id not returned before by this generator."""
        length = length or self.length
        capacity = len(CHARACTERS) ** length
        if len(self.history) >= capacity and sum(len(h) == length for h in self.history) >= capacity:
            raise ValueError(f"All ids of length {length} have been used. Increase the length.")

        attempts = 0
        while True:
            candidate = self._candidate(length)
            attempts += 1
            if attempts > 3:
                warn(f"Id generation attempt {attempts}! Increase the length.")
            if candidate not in self.history:
                break

        self.history.add(candidate)
        return candidate

    def __contains__(self, value: str) -> bool:
        return value in self.history

    def __len__(self) -> int:
        return len(self.history)

    def reset(self) -> None:
        """Forget every id generated so far."""
        self.history.clear()
