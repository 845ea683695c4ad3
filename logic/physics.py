"""logic/physics.py — The simulation step.

One call to :func:`step` advances a ``GameSession`` by exactly one
fixed tick (``Physics.tick_ms``).  It is a pure function: it never
mutates its arguments, performs no I/O, and draws randomness only from
the ``random.Random`` it is handed.  Replaying the same inputs with the
same seed reproduces a run exactly.

Per tick, in order:

    1. jump        velocity := jump_force          (if input.jump)
    2. gravity     velocity += gravity
    3. integrate   y := clamp(y + velocity, 0, max_bird_y)
                   touching max_bird_y ends the run
    4. advance     pipes move left, off-screen pipes are dropped
    5. spawn       new pipe at the right edge when there's room
    6. score       +1 per trailing edge that just crossed bird_x
    7. collide     padded bird box vs. each pipe's segments
    8. game over   state → GAME_OVER, high score raised if beaten

A tick that hits the floor still runs 4–7, so a pipe cleared on the
same tick still counts.

Each stage is also a standalone function so it can be tested alone.
"""

from __future__ import annotations
import random
from dataclasses import replace

from components.game import (
    BirdState, GameSession, GameState, Physics, Pipe, Screen,
    StepResult, TickInput,
)
from core.collision import bird_box, hits_pipe


# ── Bird ─────────────────────────────────────────────────────────────

def apply_jump(bird: BirdState, physics: Physics) -> BirdState:
    """Replace the current velocity with the jump impulse."""
    return replace(bird, velocity=physics.jump_force)


def apply_gravity(bird: BirdState, physics: Physics) -> BirdState:
    return replace(bird, velocity=bird.velocity + physics.gravity)


def integrate(bird: BirdState, physics: Physics,
              screen: Screen) -> tuple[BirdState, bool]:
    """Move the bird by its velocity, clamped to the playfield.

    Returns ``(bird, grounded)``; *grounded* is True when the bird
    ended the move resting on the ground.
    """
    floor = physics.max_bird_y(screen)
    y = min(max(bird.y + bird.velocity, 0.0), floor)
    return replace(bird, y=y), y >= floor


# ── Pipes ────────────────────────────────────────────────────────────

def advance_pipes(pipes: tuple[Pipe, ...],
                  physics: Physics) -> tuple[Pipe, ...]:
    """Scroll every pipe left and drop those fully off-screen."""
    moved = (replace(p, x=p.x - physics.pipe_speed) for p in pipes)
    return tuple(p for p in moved if p.x + physics.pipe_width > 0)


def needs_spawn(pipes: tuple[Pipe, ...], physics: Physics,
                screen: Screen) -> bool:
    if not pipes:
        return True
    return pipes[-1].x < screen.width - physics.spawn_distance


def random_gap(rng: random.Random, physics: Physics, screen: Screen) -> float:
    """Gap offset drawn uniformly from ``Physics.gap_range``."""
    lo, hi = physics.gap_range(screen)
    return rng.random() * (hi - lo) + lo


def maybe_spawn_pipe(pipes: tuple[Pipe, ...], physics: Physics,
                     screen: Screen, rng: random.Random) -> tuple[Pipe, ...]:
    if not needs_spawn(pipes, physics, screen):
        return pipes
    return pipes + (Pipe(x=float(screen.width),
                         gap_y=random_gap(rng, physics, screen)),)


def count_passed(pipes: tuple[Pipe, ...], physics: Physics) -> int:
    """Pipes whose trailing edge crossed ``bird_x`` during this tick.

    The window is one ``pipe_speed`` wide, so each pipe is counted on
    exactly one tick.  A pipe narrower than ``pipe_speed`` could jump
    the window and never be counted.
    """
    # TODO: track a per-pipe "scored" flag if pipe_speed is ever tuned above pipe_width.
    passed = 0
    for p in pipes:
        trailing = p.x + physics.pipe_width
        if physics.bird_x - physics.pipe_speed <= trailing < physics.bird_x:
            passed += 1
    return passed


def collides(bird: BirdState, pipes: tuple[Pipe, ...],
             physics: Physics) -> bool:
    box = bird_box(bird.y, physics)
    return any(hits_pipe(box, p, physics) for p in pipes)


# ── Step ─────────────────────────────────────────────────────────────

def step(session: GameSession, tick_input: TickInput, physics: Physics,
         screen: Screen, rng: random.Random) -> StepResult:
    """Advance *session* by one tick.  No-op unless PLAYING."""
    if session.state is not GameState.PLAYING:
        return StepResult(session=session)

    bird = session.bird
    if tick_input.jump:
        bird = apply_jump(bird, physics)
    bird = apply_gravity(bird, physics)
    bird, grounded = integrate(bird, physics, screen)

    pipes = advance_pipes(session.pipes, physics)
    pipes = maybe_spawn_pipe(pipes, physics, screen, rng)

    passed = count_passed(pipes, physics)
    score = session.score + passed

    game_over = grounded or collides(bird, pipes, physics)

    state = session.state
    high_score = session.high_score
    new_high_score = None
    if game_over:
        state = GameState.GAME_OVER
        if score > high_score:
            high_score = score
            new_high_score = score

    return StepResult(
        session=replace(session, state=state, bird=bird, pipes=pipes,
                        score=score, high_score=high_score),
        passed=passed,
        game_over=game_over,
        new_high_score=new_high_score,
    )
