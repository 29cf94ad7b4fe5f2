from .game_logic import Mark

# -----------------------------------------------------------------------------
# GAME DEFAULTS
# -----------------------------------------------------------------------------

VS_OPPONENT_DEFAULT = True            # play vs AI as O on startup
HUMAN_MARK = Mark.X                   # human always plays X vs the AI
OPPONENT_MARK = Mark.O

PLAYER_LABELS = {
    Mark.X: "Player 1 (X)",
    Mark.O: "Player 2 (O)",
}
OPPONENT_LABEL = "AI (O)"

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
MODE_CHECKBOX_TEXT = "Play vs AI (O)"
FEATURE_CHECKLIST = (
    "Turn-by-turn input",
    "Win/draw detection",
    "Reset supported",
    "Simple AI opponent",
)

X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
GRID_COLOR = "#555"
BOARD_BG_COLOR = "#333"
DISABLED_CELL_COLOR = "#2b2b2b"
WIN_LINE_COLOR = "lime"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
