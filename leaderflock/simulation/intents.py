"""
User intents and the leader controller that consumes them.

The host front end maps physical keys to intents; nothing below knows
about input devices.
"""

from collections import deque
from dataclasses import dataclass
from typing import Optional, Union

from ..core.agents import Leader
from ..core.config import SimulationConfig


@dataclass(frozen=True)
class LeaderAccelerate:
    delta: float


@dataclass(frozen=True)
class LeaderTurn:
    delta_degrees: float


@dataclass(frozen=True)
class AddBoid:
    pass


@dataclass(frozen=True)
class RemoveBoid:
    pass


@dataclass(frozen=True)
class TogglePause:
    pass


Intent = Union[LeaderAccelerate, LeaderTurn, AddBoid, RemoveBoid, TogglePause]
LeaderIntent = Union[LeaderAccelerate, LeaderTurn]


class LeaderController:
    """
    Buffers leader intents and applies them once, in arrival order.
    """

    def __init__(self):
        self._pending = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def push(self, intent: LeaderIntent) -> None:
        if not isinstance(intent, (LeaderAccelerate, LeaderTurn)):
            raise TypeError(f"not a leader intent: {intent!r}")
        self._pending.append(intent)

    def apply(self, leader: Leader, dt: float) -> int:
        """
        Drain the buffer into the leader.

        Args:
            leader: Leader to steer
            dt: Duration of the frame the intents are applied in

        Returns:
            Number of intents applied
        """
        applied = 0
        while self._pending:
            intent = self._pending.popleft()
            if isinstance(intent, LeaderAccelerate):
                leader.accelerate(intent.delta, dt)
            else:
                leader.turn(intent.delta_degrees, dt)
            applied += 1
        return applied

    def clear(self) -> None:
        self._pending.clear()


def intent_for_key(name: str, config: SimulationConfig) -> Optional[Intent]:
    """
    Translate a key name to an intent using the demo's key bindings.

    Args:
        name: Key name ("up", "down", "left", "right", "+", "=", "-", "_", "p", "P")
        config: Configuration holding the leader accelerations

    Returns:
        The matching intent, or None for unbound keys
    """
    if name == "up":
        return LeaderAccelerate(config.leaderAccel)
    if name == "down":
        return LeaderAccelerate(-config.leaderAccel)
    if name == "left":
        return LeaderTurn(-config.leaderAngularSpeed)
    if name == "right":
        return LeaderTurn(config.leaderAngularSpeed)
    if name in ("+", "="):
        return AddBoid()
    if name in ("-", "_"):
        return RemoveBoid()
    if name in ("p", "P"):
        return TogglePause()
    return None
