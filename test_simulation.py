"""test_simulation.py — Headless verification of the simulation step.

Covers the per-tick physics in ``logic/physics.py`` and the collision
primitives in ``core/collision.py``:
1. Bird kinematics (gravity, jump override, clamping, floor)
2. Pipe scrolling, removal, spawning and gap bounds
3. Scoring window
4. Padded collision box
5. Game over / high score bookkeeping
6. Determinism under a seeded RNG

Run: python test_simulation.py   (or: pytest test_simulation.py)
"""
from __future__ import annotations
import math, random, sys, traceback
from dataclasses import replace

from components import (
    BirdState, GameSession, GameState, Physics, Pipe, Screen, TickInput,
)
from core.collision import bird_box, hits_pipe
from logic.physics import (
    advance_pipes, apply_gravity, apply_jump, count_passed, integrate,
    maybe_spawn_pipe, random_gap, step,
)

# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


# ── Helpers ──────────────────────────────────────────────────────────

PHYS = Physics()
SCREEN = Screen(width=400.0, height=800.0)      # floor at y = 680
NO_JUMP = TickInput(jump=False)
JUMP = TickInput(jump=True)

# Zero gravity and a collapsed gap range: every gap sits at 240..490,
# so a bird parked at y=300 flies through every pipe.
CORRIDOR = replace(PHYS, gravity=0.0, gap_margin=240.0)


def playing(y: float = 300.0, velocity: float = 0.0, **kw) -> GameSession:
    return GameSession(state=GameState.PLAYING,
                       bird=BirdState(y=y, velocity=velocity), **kw)


def run(session: GameSession, n: int, physics: Physics = PHYS,
        rng: random.Random | None = None) -> GameSession:
    rng = rng or random.Random(0)
    for _ in range(n):
        session = step(session, NO_JUMP, physics, SCREEN, rng).session
    return session


# ════════════════════════════════════════════════════════════════════════
#  SECTION 1 — Bird kinematics
# ════════════════════════════════════════════════════════════════════════

def test_bird_kinematics():
    print("\n=== 1: Bird kinematics ===")

    res = step(playing(300.0, 0.0), NO_JUMP, PHYS, SCREEN, random.Random(1))
    bird = res.session.bird
    assert math.isclose(bird.velocity, 0.8), bird
    assert math.isclose(bird.y, 300.8), bird
    ok("y=300, v=0, g=0.8 → one tick → v=0.8, y=300.8")

    assert apply_jump(BirdState(300.0, 7.3), PHYS).velocity == -12.0
    assert apply_jump(BirdState(300.0, -3.0), PHYS).velocity == -12.0
    ok("Jump sets velocity to -12 regardless of prior velocity")

    a = step(playing(300.0, 9.0), JUMP, PHYS, SCREEN, random.Random(1)).session
    b = step(playing(300.0, -5.0), JUMP, PHYS, SCREEN, random.Random(1)).session
    assert math.isclose(a.bird.velocity, -12.0 + 0.8)
    assert a.bird == b.bird
    ok("Jump tick: impulse then gravity, prior velocity has no effect")

    assert math.isclose(apply_gravity(BirdState(0.0, 1.0), PHYS).velocity, 1.8)
    ok("Gravity adds 0.8 per tick")

    bird, grounded = integrate(BirdState(5.0, -11.2), PHYS, SCREEN)
    assert bird.y == 0.0 and not grounded
    ok("Ceiling clamps to 0 without ending the run")

    res = step(playing(5.0, 0.0), JUMP, PHYS, SCREEN, random.Random(1))
    assert res.session.bird.y == 0.0
    assert res.session.state is GameState.PLAYING
    ok("Jumping into the ceiling keeps playing")


def test_floor_and_bounds():
    print("\n=== 2: Floor and bounds ===")

    floor = PHYS.max_bird_y(SCREEN)
    assert floor == 800.0 - 70.0 - 50.0
    ok(f"max_bird_y = {floor}")

    res = step(playing(floor - 1.0, 5.0), NO_JUMP, PHYS, SCREEN, random.Random(1))
    assert res.session.bird.y == floor
    assert res.game_over
    assert res.session.state is GameState.GAME_OVER
    ok("Reaching max_bird_y → GameOver on that tick")

    # Random tap sequences never leave [0, floor]
    rng_in = random.Random(99)
    for trial in range(20):
        s = playing(rng_in.uniform(0, floor), rng_in.uniform(-15, 15))
        rng = random.Random(trial)
        for _ in range(300):
            res = step(s, TickInput(jump=rng_in.random() < 0.15),
                       PHYS, SCREEN, rng)
            s = res.session
            assert 0.0 <= s.bird.y <= floor, s.bird
            if s.state is not GameState.PLAYING:
                break
    ok("Bird y stays within [0, max_bird_y] over 20 random runs")


# ════════════════════════════════════════════════════════════════════════
#  SECTION 2 — Pipes
# ════════════════════════════════════════════════════════════════════════

def test_pipe_motion():
    print("\n=== 3: Pipe scrolling and removal ===")

    pipes = (Pipe(400.0, 200.0),)
    for _ in range(75):
        pipes = advance_pipes(pipes, PHYS)
    assert pipes[0].x == 100.0
    ok("Pipe spawned at x=400 is at x=100 after 75 ticks at speed 4")

    s = step(playing(), NO_JUMP, CORRIDOR, SCREEN, random.Random(3)).session
    assert len(s.pipes) == 1 and s.pipes[0].x == 400.0
    s = run(s, 75, CORRIDOR, random.Random(3))
    assert s.state is GameState.PLAYING
    assert s.pipes[0].x == 100.0
    ok("Same scenario through step(): first pipe at x=100")

    before = (Pipe(300.0, 150.0), Pipe(120.0, 180.0))
    after = advance_pipes(before, PHYS)
    assert [p.x for p in after] == [296.0, 116.0]
    assert [p.gap_y for p in after] == [150.0, 180.0]
    ok("Each pipe moves left by exactly pipe_speed, gap unchanged")

    assert advance_pipes((Pipe(-56.0, 100.0),), PHYS) == ()
    ok("Removed when trailing edge reaches 0")
    kept = advance_pipes((Pipe(-55.0, 100.0),), PHYS)
    assert len(kept) == 1 and kept[0].x == -59.0
    ok("Kept while trailing edge is still > 0")


def test_spawning():
    print("\n=== 4: Spawning ===")
    rng = random.Random(5)

    pipes = maybe_spawn_pipe((), PHYS, SCREEN, rng)
    assert len(pipes) == 1 and pipes[0].x == 400.0
    ok("Empty sequence spawns at screen width")

    # threshold = 400 - 200 = 200, strict
    assert maybe_spawn_pipe((Pipe(200.0, 150.0),), PHYS, SCREEN, rng) == (Pipe(200.0, 150.0),)
    ok("No spawn while last pipe is at the threshold")
    grown = maybe_spawn_pipe((Pipe(199.0, 150.0),), PHYS, SCREEN, rng)
    assert len(grown) == 2 and grown[-1].x == 400.0
    ok("Spawn once last pipe crosses the threshold")

    lo, hi = PHYS.gap_range(SCREEN)
    assert (lo, hi) == (100.0, 380.0)
    gaps = [random_gap(rng, PHYS, SCREEN) for _ in range(2000)]
    assert all(lo <= g <= hi for g in gaps)
    assert max(gaps) - min(gaps) > 200.0
    ok(f"2000 gaps drawn within [{lo}, {hi}] and spread across it")

    tiny = Screen(width=300.0, height=400.0)
    lo, hi = PHYS.gap_range(tiny)
    assert lo == hi == 100.0
    ok("Inverted gap range collapses to the minimum")


def test_determinism():
    print("\n=== 5: Seeded determinism ===")
    a = run(playing(), 200, CORRIDOR, random.Random(42))
    b = run(playing(), 200, CORRIDOR, random.Random(42))
    assert a == b
    ok("Same seed → identical session after 200 ticks")

    g1 = [random_gap(random.Random(1), PHYS, SCREEN) for _ in range(3)]
    g2 = random_gap(random.Random(2), PHYS, SCREEN)
    assert g1[0] == g1[1] == g1[2] and g1[0] != g2
    ok("Gap depends only on the injected generator")

    s = playing()
    step(s, JUMP, PHYS, SCREEN, random.Random(0))
    assert s == playing()
    ok("step() leaves its input session untouched")

    start = GameSession()
    assert step(start, JUMP, PHYS, SCREEN, random.Random(0)).session is start
    over = replace(playing(), state=GameState.GAME_OVER)
    assert step(over, JUMP, PHYS, SCREEN, random.Random(0)).session is over
    ok("Ticks are no-ops outside PLAYING")


# ════════════════════════════════════════════════════════════════════════
#  SECTION 3 — Scoring
# ════════════════════════════════════════════════════════════════════════

def test_scoring():
    print("\n=== 6: Scoring ===")

    # window: bird_x - speed <= trailing < bird_x  →  x in [36, 40)
    assert count_passed((Pipe(36.0, 0.0),), PHYS) == 1
    assert count_passed((Pipe(39.0, 0.0),), PHYS) == 1
    assert count_passed((Pipe(40.0, 0.0),), PHYS) == 0
    assert count_passed((Pipe(35.0, 0.0),), PHYS) == 0
    ok("Trailing edge counted only inside the one-tick window")

    # First pipe spawns at tick 1 (x=400) and reaches x=36 on tick 92
    s = run(playing(), 91, CORRIDOR, random.Random(8))
    assert s.score == 0 and s.state is GameState.PLAYING
    s = step(s, NO_JUMP, CORRIDOR, SCREEN, random.Random(8)).session
    assert s.score == 1
    ok("Score 0 → 1 on the tick the first trailing edge crosses bird_x")

    s = run(s, 40, CORRIDOR, random.Random(8))
    assert s.score == 1
    ok("Same pipe is never counted twice")

    rng = random.Random(8)
    s = playing()
    total = 0
    for _ in range(1500):
        res = step(s, NO_JUMP, CORRIDOR, SCREEN, rng)
        assert res.passed in (0, 1)
        total += res.passed
        s = res.session
    assert s.state is GameState.PLAYING
    assert s.score == total > 0
    ok(f"Over 1500 ticks score == sum of per-tick passes ({total})")


# ════════════════════════════════════════════════════════════════════════
#  SECTION 4 — Collision
# ════════════════════════════════════════════════════════════════════════

def test_collision_box():
    print("\n=== 7: Collision ===")

    assert bird_box(250.0, PHYS) == (110.0, 260.0, 140.0, 290.0)
    ok("Bird box shrunk by 10 on every side")

    pipe = Pipe(x=100.0, gap_y=200.0)       # gap 200..450
    assert not hits_pipe(bird_box(250.0, PHYS), pipe, PHYS)
    assert not hits_pipe(bird_box(190.0, PHYS), pipe, PHYS)   # top == gap start
    assert not hits_pipe(bird_box(410.0, PHYS), pipe, PHYS)   # bottom == gap end
    ok("Box inside the gap and the pipe column → no collision")

    assert hits_pipe(bird_box(185.0, PHYS), pipe, PHYS)
    ok("Box poking into the top segment → collision")
    assert hits_pipe(bird_box(415.0, PHYS), pipe, PHYS)
    ok("Box poking into the bottom segment → collision")

    high = bird_box(50.0, PHYS)
    assert not hits_pipe(high, Pipe(x=140.0, gap_y=200.0), PHYS)
    assert not hits_pipe(high, Pipe(x=50.0, gap_y=200.0), PHYS)
    assert hits_pipe(high, Pipe(x=139.0, gap_y=200.0), PHYS)
    assert hits_pipe(high, Pipe(x=51.0, gap_y=200.0), PHYS)
    ok("Horizontal overlap is strict on both pipe edges")

    s = playing(100.0, 0.0, pipes=(Pipe(x=104.0, gap_y=300.0),))
    res = step(s, NO_JUMP, PHYS, SCREEN, random.Random(0))
    assert res.game_over and res.session.state is GameState.GAME_OVER
    ok("Pipe contact inside step() → GameOver")


# ════════════════════════════════════════════════════════════════════════
#  SECTION 5 — Game over and high score
# ════════════════════════════════════════════════════════════════════════

def test_high_score_on_game_over():
    print("\n=== 8: High score at GameOver ===")
    floor = PHYS.max_bird_y(SCREEN)

    res = step(playing(floor - 1.0, 5.0, score=5, high_score=3),
               NO_JUMP, PHYS, SCREEN, random.Random(0))
    assert res.session.state is GameState.GAME_OVER
    assert res.session.high_score == 5
    assert res.new_high_score == 5
    ok("Score 5 beats 3 → high score 5, persist value 5 reported")

    res = step(playing(floor - 1.0, 5.0, score=2, high_score=9),
               NO_JUMP, PHYS, SCREEN, random.Random(0))
    assert res.session.high_score == 9
    assert res.new_high_score is None
    ok("Lower score leaves the high score alone, nothing to persist")

    res = step(playing(floor - 1.0, 5.0, score=4, high_score=4),
               NO_JUMP, PHYS, SCREEN, random.Random(0))
    assert res.new_high_score is None
    ok("Equal score is not a new record")

    res = step(playing(300.0, 0.0, score=8, high_score=3),
               NO_JUMP, PHYS, SCREEN, random.Random(0))
    assert res.session.high_score == 3 and res.new_high_score is None
    ok("High score only changes on the GameOver tick")

    rng = random.Random(11)
    hs = 0
    for _ in range(50):
        score = rng.randint(0, 20)
        res = step(playing(floor - 1.0, 5.0, score=score, high_score=hs),
                   NO_JUMP, PHYS, SCREEN, rng)
        assert res.session.high_score >= hs
        assert res.session.high_score == max(hs, res.session.score)
        hs = res.session.high_score
    ok("High score never decreases over 50 GameOver transitions")


# ════════════════════════════════════════════════════════════════════════
#  MAIN
# ════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Bird kinematics", test_bird_kinematics),
        ("Floor and bounds", test_floor_and_bounds),
        ("Pipe motion", test_pipe_motion),
        ("Spawning", test_spawning),
        ("Determinism", test_determinism),
        ("Scoring", test_scoring),
        ("Collision", test_collision_box),
        ("High score", test_high_score_on_game_over),
    ]
    for name, fn in sections:
        try:
            fn()
        except Exception:
            fail(name, traceback.format_exc())

    print(f"\n{'═' * 50}")
    print(f"  Results: {_passed} passed, {_failed} failed")
    print(f"{'═' * 50}")
    sys.exit(1 if _failed else 0)
