"""Shelters and people on an integer grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Shelter:
    """A circular shelter with a reach radius centred at (x, y)."""

    radius: int = 0
    x: int = 0
    y: int = 0

    def contains(self, x: int, y: int) -> bool:
        """Return True if the point (x, y) lies within the shelter's reach."""
        dx = x - self.x
        dy = y - self.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def overlaps(self, other: Shelter) -> bool:
        """Return True if the two shelters' areas touch or intersect."""
        dx = self.x - other.x
        dy = self.y - other.y
        reach = self.radius + other.radius
        return dx * dx + dy * dy <= reach * reach


@dataclass(frozen=True)
class Person:
    """A person standing at (x, y)."""

    x: int
    y: int

    def is_inside(self, shelter: Shelter) -> bool:
        """Return True if this person is within the shelter's reach."""
        return shelter.contains(self.x, self.y)