import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

BOARD_SIZE = 3                        # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

EMPTY_BOARD = (None,) * CELL_COUNT


@dataclass(frozen=True)
class LastMove:
    """
    who played where
    """
    player: str
    row: int
    col: int

    @property
    def label(self):
        # column first, like the move list always showed it
        return f"{self.player} - ({self.col}, {self.row})"


@dataclass(frozen=True)
class HistoryEntry:
    squares: tuple
    last_move: Optional[LastMove] = None


@dataclass(frozen=True)
class WinnerInfo:
    winner: str
    squares: tuple


@dataclass(frozen=True)
class MoveListItem:
    move: int
    label: str
    last_move_label: str
    is_current: bool


def index_to_position(i):
    """
    board index -> (row, col)
    """
    return i // BOARD_SIZE, i % BOARD_SIZE


def calculate_winner(squares):
    """
    scan the 8 lines for 3 equal marks
    returns WinnerInfo or None
    """
    if len(squares) != CELL_COUNT:
        raise ValueError(f"board must have {CELL_COUNT} cells, got {len(squares)}")
    for a, b, c in LINES:
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return WinnerInfo(winner=squares[a], squares=(a, b, c))
    return None


def is_board_full(squares):
    """
    true when no cell is empty
    """
    return all(squares)


class GameLogic:
    """
    tic-tac-toe state with move history and replay
    """
    def __init__(self, revert_order=False):
        """
        init history with the empty board
        """
        self.reset_game()
        if revert_order:
            self.toggle_order()

    def reset_game(self):
        """
        back to a fresh game, toggles off
        """
        self.history = [HistoryEntry(squares=EMPTY_BOARD)]
        self.step_number = 0              # index into history
        self.x_is_next = True
        self.revert_order = False         # newest move first in the list
        self.checked_switch = False       # switch widget state
        logger.debug("game reset")

    # --- read model -------------------------------------------------------

    @property
    def current_entry(self):
        return self.history[self.step_number]

    @property
    def current_squares(self):
        return self.current_entry.squares

    @property
    def current_player(self):
        return 'X' if self.x_is_next else 'O'

    @property
    def winner_info(self):
        return calculate_winner(self.current_squares)

    @property
    def winning_squares(self):
        info = self.winner_info
        return info.squares if info else ()

    @property
    def is_draw(self):
        # full board and not already won
        return is_board_full(self.current_squares) and self.winner_info is None

    @property
    def game_over(self):
        return self.winner_info is not None or is_board_full(self.current_squares)

    def status_text(self):
        info = self.winner_info
        if info:
            return f"Winner {info.winner}"
        if self.is_draw:
            return "It's a TIE"
        return f"Next player: {self.current_player}"

    def move_list(self):
        """
        one item per history entry, newest first when revert_order is set
        """
        moves = range(len(self.history))
        if self.revert_order:
            moves = reversed(moves)
        items = []
        for move in moves:
            last_move = self.history[move].last_move
            items.append(MoveListItem(
                move=move,
                label=f"Go to move #{move}" if move > 0 else "Go to game start",
                last_move_label=last_move.label if last_move else "",
                is_current=move == self.step_number,
            ))
        return items

    # --- transitions ------------------------------------------------------

    def handle_click(self, i):
        """
        mark cell i for the current player from the current step
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        squares = list(self.current_squares)
        if not 0 <= i < CELL_COUNT or squares[i] or calculate_winner(squares):
            logger.debug("rejected move at %s on step %d", i, self.step_number)
            return "invalid"

        player = self.current_player
        squares[i] = player
        row, col = index_to_position(i)
        # drop any future entries left over from a jump back
        del self.history[self.step_number + 1:]
        self.history.append(HistoryEntry(
            squares=tuple(squares),
            last_move=LastMove(player=player, row=row, col=col),
        ))
        self.step_number = len(self.history) - 1
        self.x_is_next = not self.x_is_next
        logger.debug("%s played %d, step %d", player, i, self.step_number)

        if calculate_winner(squares):
            return "win"
        if is_board_full(squares):
            return "draw"
        return "continue"

    def jump_to(self, step):
        """
        move the step pointer, history untouched
        """
        if not 0 <= step < len(self.history):
            raise IndexError(f"step {step} outside history of {len(self.history)}")
        self.step_number = step
        self.x_is_next = step % 2 == 0
        logger.debug("jumped to step %d", step)

    def toggle_order(self):
        self.revert_order = not self.revert_order
        self.checked_switch = not self.checked_switch
        logger.debug("move list newest first: %s", self.revert_order)
