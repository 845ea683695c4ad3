"""ui — Overlay UI.

The start menu and the game-over panel are ``Modal`` subclasses shown
one at a time in a ``ModalSlot``.  They return ``UICommand`` objects
instead of changing the session.
"""

from ui.modal import Modal, ModalSlot
from ui.commands import QuitGame, RestartRun, StartRun, UICommand
from ui.start_menu import StartMenuModal
from ui.game_over import GameOverModal

__all__ = [
    "Modal", "ModalSlot",
    "QuitGame", "RestartRun", "StartRun", "UICommand",
    "StartMenuModal", "GameOverModal",
]
