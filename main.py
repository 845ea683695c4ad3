"""
main.py — Bootstrap

1. Load tuning (data/tuning.toml)
2. Create the app window at the design resolution
3. Pick the high-score backend
4. Hand the app its one scene
5. Run
"""

from core import tuning
from core.app import App
from core.save import store_from_tuning
from logic.highscore import HighScoreSync
from scenes.game_scene import GameScene


def main():
    tuning.load()

    app = App(
        title=tuning.get("window", "title", "Flappy Pipes"),
        width=int(tuning.get("window", "width", 400)),
        height=int(tuning.get("window", "height", 800)),
        fps=int(tuning.get("window", "fps", 60)),
    )

    store = store_from_tuning()
    print(f"[MAIN] High score backend: {store.describe()}")

    app.set_scene(GameScene(sync=HighScoreSync(store)))
    app.run()


if __name__ == "__main__":
    main()
