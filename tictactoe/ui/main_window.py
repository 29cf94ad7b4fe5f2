from ..config import FEATURE_CHECKLIST, MODE_CHECKBOX_TEXT, WINDOW_TITLE
from ..coordinator import TurnCoordinator
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QCheckBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

class TicTacToeWindow(QMainWindow):
    """
    main window UI; forwards input to the coordinator and redraws
    """
    def __init__(self, coordinator=None):
        """
        init coordinator, ui widgets, signals
        """
        super().__init__()
        self.coordinator = coordinator or TurnCoordinator()
        self.board_widget = BoardWidget(self.coordinator, parent=self)
        self._setup_ui()
        self.coordinator.start_up()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel, QCheckBox { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_top_controls()        # reset + mode toggle
        self.main_layout.addWidget(self.controls_top_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + checklist
        self.main_layout.addWidget(self.controls_bottom_widget)

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

    def _create_top_controls(self):
        # reset button + vs ai checkbox
        self.controls_top_widget = QWidget()
        hl = QHBoxLayout(self.controls_top_widget)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        self.mode_checkbox = QCheckBox(MODE_CHECKBOX_TEXT)
        self.mode_checkbox.setChecked(self.coordinator.vs_opponent)
        self.mode_checkbox.toggled.connect(self._on_mode_toggled)
        hl.addWidget(self.reset_button); hl.addWidget(self.mode_checkbox); hl.addStretch(1)

    def _create_bottom_controls(self):
        # status label + feature list
        self.controls_bottom_widget = QWidget()
        vl = QVBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.checklist_label = QLabel(
            "Features:\n" + "\n".join(f"  • {item}" for item in FEATURE_CHECKLIST)
        )
        self.checklist_label.setStyleSheet("color: #888;")
        vl.addWidget(self.message_label); vl.addWidget(self.checklist_label)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _refresh(self):
        # redraw board + status from current snapshot
        snap = self.coordinator.snapshot()
        self._update_message(snap.status_text, is_success=snap.game_over,
                             is_turn=not snap.game_over)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # human move, plus the ai reply when enabled
        if self.coordinator.on_cell_clicked(index):
            self._refresh()

    @Slot(bool)
    def _on_mode_toggled(self, checked):
        self.coordinator.on_mode_toggled(checked)
        self._refresh()

    @Slot()
    def reset_game(self):
        # full reset, keep current mode
        self.coordinator.on_reset_requested()
        self._refresh()
