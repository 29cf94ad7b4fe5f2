import argparse
import logging
import random
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.config import LOG_FORMAT, VS_OPPONENT_DEFAULT
from tictactoe.coordinator import TurnCoordinator
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK PALETTE
# -----------------------------------------------------------------------------

DARK = QColor(53, 53, 53)
DARKER = QColor(35, 35, 35)
BUTTON = QColor(66, 66, 66)
ACCENT = QColor(42, 130, 218)
MUTED = QColor(127, 127, 127)

PALETTE_ROLES = {
    QPalette.Window: DARK,
    QPalette.WindowText: Qt.white,
    QPalette.Base: DARKER,
    QPalette.AlternateBase: DARK,
    QPalette.Text: Qt.white,
    QPalette.Button: BUTTON,
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: ACCENT,
    QPalette.HighlightedText: Qt.white,
}
# greyed out when a widget is disabled
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)

def apply_dark_palette(app: QApplication):
    """
    Apply the dark theme palette to the whole app.
    """
    palette = QPalette()
    for role, color in PALETTE_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe with an optional AI opponent.")
    parser.add_argument("--two-player", action="store_true",
                        help="start in local two-player mode instead of vs AI")
    parser.add_argument("--seed", type=int, default=None,
                        help="fixed seed for the AI's random moves")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: WARNING)")
    # Qt consumes its own flags from sys.argv
    args, _ = parser.parse_known_args(argv)
    return args

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

if __name__ == '__main__':
    args = parse_args(sys.argv[1:])
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    rng = random.Random(args.seed) if args.seed is not None else None
    coordinator = TurnCoordinator(
        vs_opponent=VS_OPPONENT_DEFAULT and not args.two_player, rng=rng
    )

    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    apply_dark_palette(app)

    window = TicTacToeWindow(coordinator)
    window.show()
    sys.exit(app.exec())
