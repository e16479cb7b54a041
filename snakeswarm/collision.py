"""Collision helpers for the simulation."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .snake import Snake


def detect_head_collisions(snakes: Iterable[Snake]) -> List[Tuple[Snake, Snake]]:
    """Return all ``(attacker, victim)`` pairs whose head sits on a body cell.

    A head is compared against every segment of every snake, its own body
    included; only the trivial match of a head with itself is skipped.
    """

    snakes = list(snakes)
    collisions: List[Tuple[Snake, Snake]] = []
    for attacker in snakes:
        head = attacker.head
        for victim in snakes:
            segments = victim.body[1:] if attacker is victim else victim.body
            if head in segments:
                collisions.append((attacker, victim))
                break
    return collisions


def has_collision(snakes: Iterable[Snake]) -> bool:
    """Return ``True`` if any head overlaps an occupied cell."""

    return bool(detect_head_collisions(snakes))
