"""scenes — pygame scenes.

game_scene  GameScene, the playfield with its start / game-over overlays
game_draw   drawing helpers for the playfield, HUD and debug overlay
"""
