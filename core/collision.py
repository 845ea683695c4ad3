"""core/collision.py — Bird-vs-pipe AABB primitives.

These live in ``core/`` (not ``logic/``) because both the simulation
step and the debug renderer (hitbox overlay) need the exact same box.

Boxes are ``(left, top, right, bottom)`` in design pixels.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from components.game import Physics, Pipe

Box = tuple[float, float, float, float]


def bird_box(y: float, physics: Physics) -> Box:
    """The bird's hit box, shrunk by ``hit_padding`` on every side.

    The sprite is a ``bird_size`` square at ``(bird_x, y)``; the padding
    forgives grazing contacts with the pipe rims.
    """
    pad = physics.hit_padding
    left = physics.bird_x + pad
    top = y + pad
    right = physics.bird_x + physics.bird_size - pad
    bottom = y + physics.bird_size - pad
    return left, top, right, bottom


def overlaps_pipe_x(box: Box, pipe: Pipe, pipe_width: float) -> bool:
    """Strict horizontal overlap with the pipe's column."""
    left, _, right, _ = box
    return right > pipe.x and left < pipe.x + pipe_width


def outside_gap(box: Box, pipe: Pipe, gap_height: float) -> bool:
    """True if the box pokes into the top or the bottom segment."""
    _, top, _, bottom = box
    return top < pipe.gap_y or bottom > pipe.gap_y + gap_height


def hits_pipe(box: Box, pipe: Pipe, physics: Physics) -> bool:
    """Return True if *box* overlaps either segment of *pipe*."""
    return (overlaps_pipe_x(box, pipe, physics.pipe_width)
            and outside_gap(box, pipe, physics.gap_height))
