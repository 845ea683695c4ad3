"""logic — Game rules.

Modules
-------
physics    — the pure per-tick simulation step and its stages
session    — start / restart state machine around the step
tick       — fixed-tick accumulator + step → events orchestration
highscore  — background load / fire-and-forget persist of the record
input      — raw pygame events → "tap" intents
"""
