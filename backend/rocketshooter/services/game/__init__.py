"""Game loop services: state transitions, physics, scoring and timers.

Everything here operates on a :class:`rocketshooter.models.GameSession` and
is imported by the socket handlers, keeping transport concerns separated
from the game mechanics.
"""
