"""
Abstract base classes for game definitions.

This module defines the interface that all two-player zero-sum matrix games
must implement.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
import numpy as np


class Player(IntEnum):
    """Player identifiers."""
    PLAYER_1 = 0
    PLAYER_2 = 1

    @property
    def opponent(self) -> 'Player':
        return Player(self ^ 1)


class Game(ABC):
    """Abstract base class for square two-player zero-sum matrix games."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the game."""
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of actions available to each player."""
        pass

    @property
    @abstractmethod
    def payoffs(self) -> np.ndarray:
        """
        Player 1's payoff matrix of shape (size, size).

        payoffs[a, b] is the payoff to player 1 (index 0) when player 1 plays
        action a and player 2 plays action b. Player 2 receives the negation.
        """
        pass

    def payoff(self, player: int, a: int, b: int) -> float:
        """
        Payoff to `player` for playing `a` against the opponent's `b`.

        Actions are always indexed from the point of view of `player`, so for
        player 2 the roles of row and column are swapped.
        """
        if player == Player.PLAYER_1:
            return float(self.payoffs[a, b])
        return -float(self.payoffs[b, a])
