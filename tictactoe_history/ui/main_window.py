import logging

from ..game_logic import GameLogic
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QCheckBox,
    QListWidget, QListWidgetItem, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

logger = logging.getLogger(__name__)

MOVE_ROLE = Qt.UserRole  # list item data: history step


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, game_logic=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic or GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)

        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QListWidget { background-color: #2b2b2b; color: #eee; border: 1px solid #444; }
            QListWidget::item { padding: 4px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QHBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu

        # left: board + switch + reset
        board_column = QVBoxLayout()
        board_column.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self._create_board_controls()
        board_column.addWidget(self.controls_widget)
        self.main_layout.addLayout(board_column, 2)

        # right: status + move list
        self._create_game_info()
        self.main_layout.addWidget(self.info_widget, 1)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_board_controls(self):
        # order switch + reset button
        self.controls_widget = QWidget()
        hl = QHBoxLayout(self.controls_widget)
        self.order_switch = QCheckBox("Newest first")
        self.order_switch.setStyleSheet("color: #eee;")
        self.order_switch.toggled.connect(self._on_order_toggled)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.order_switch); hl.addStretch(1); hl.addWidget(self.reset_button)

    def _create_game_info(self):
        # status label + move list
        self.info_widget = QWidget()
        vl = QVBoxLayout(self.info_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.move_list = QListWidget()
        self.move_list.itemClicked.connect(self._on_move_item_clicked)
        vl.addWidget(self.message_label)
        vl.addWidget(self.move_list, 1)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _rebuild_move_list(self):
        # one row per history entry, current step in bold
        self.move_list.clear()
        for item in self.game_logic.move_list():
            text = item.label
            if item.last_move_label:
                text += f"\n    {item.last_move_label}"
            row = QListWidgetItem(text)
            row.setData(MOVE_ROLE, item.move)
            f = row.font(); f.setBold(item.is_current); row.setFont(f)
            self.move_list.addItem(row)
            if item.is_current:
                self.move_list.setCurrentItem(row)

    def refresh(self):
        """
        sync every widget with the game state
        """
        logic = self.game_logic
        if logic.winner_info:
            self._update_message(logic.status_text(), is_success=True)
        elif logic.is_draw:
            self._update_message(logic.status_text())
        else:
            self._update_message(logic.status_text(), is_turn=True)
        # keep the switch in step without re-entering toggle_order
        self.order_switch.blockSignals(True)
        self.order_switch.setChecked(logic.checked_switch)
        self.order_switch.blockSignals(False)
        self.board_widget.set_accept_clicks(not logic.game_over)
        self._rebuild_move_list()
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, i):
        res = self.game_logic.handle_click(i)
        if res == "invalid":
            return  # occupied cell or finished board
        if res == "win":
            logger.info("player %s wins", self.game_logic.winner_info.winner)
        elif res == "draw":
            logger.info("game ended in a draw")
        self.refresh()

    @Slot(QListWidgetItem)
    def _on_move_item_clicked(self, row):
        # rebuild after Qt is done with the clicked item
        step = row.data(MOVE_ROLE)
        QTimer.singleShot(0, lambda: self.jump_to_move(step))

    def jump_to_move(self, step):
        self.game_logic.jump_to(step)
        self.refresh()

    @Slot(bool)
    def _on_order_toggled(self, checked):
        self.game_logic.toggle_order()
        self.refresh()

    @Slot()
    def reset_game(self):
        # fresh game, toggles off
        self.game_logic.reset_game()
        self.refresh()
