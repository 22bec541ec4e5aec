import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe_history.game_logic import GameLogic
from tictactoe_history.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

DARK_PALETTE = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
}

DISABLED_COLOR = QColor(127, 127, 127)
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    app.setPalette(palette)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe with move history")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move, jump and reset"
    )
    parser.add_argument(
        "--newest-first",
        action="store_true",
        help="Start with the move list in reverse order"
    )
    return parser.parse_args(argv)


# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    # Qt consumes its own flags from sys.argv
    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow(GameLogic(revert_order=args.newest_first))
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
