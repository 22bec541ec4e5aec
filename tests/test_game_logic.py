import pytest

from tictactoe_history.game_logic import (
    EMPTY_BOARD, LINES, GameLogic, calculate_winner, index_to_position,
)


def play(game, moves):
    return [game.handle_click(i) for i in moves]


@pytest.mark.parametrize("line", LINES)
@pytest.mark.parametrize("mark", ["X", "O"])
def test_calculate_winner_finds_every_line(line, mark):
    squares = [None] * 9
    for i in line:
        squares[i] = mark
    info = calculate_winner(squares)
    assert info.winner == mark
    assert info.squares == line


def test_calculate_winner_returns_none_without_line():
    assert calculate_winner(EMPTY_BOARD) is None
    # full board, no three in a row
    assert calculate_winner(["X", "O", "X",
                             "X", "O", "O",
                             "O", "X", "X"]) is None
    # mixed marks on a line don't count
    assert calculate_winner(["X", "X", "O"] + [None] * 6) is None


def test_calculate_winner_rejects_bad_board():
    with pytest.raises(ValueError):
        calculate_winner([None] * 8)


def test_index_to_position():
    assert index_to_position(0) == (0, 0)
    assert index_to_position(5) == (1, 2)
    assert index_to_position(7) == (2, 1)


def test_initial_state():
    game = GameLogic()
    assert len(game.history) == 1
    assert game.current_squares == EMPTY_BOARD
    assert game.history[0].last_move is None
    assert game.step_number == 0
    assert game.x_is_next
    assert not game.revert_order and not game.checked_switch
    assert game.status_text() == "Next player: X"


def test_players_alternate():
    game = GameLogic()
    moves = [4, 0, 8, 2, 1, 7]
    play(game, moves)
    for k, i in enumerate(moves):
        expected = "X" if k % 2 == 0 else "O"
        assert game.history[k + 1].last_move.player == expected
        assert game.current_squares[i] == expected
    assert game.status_text() == "Next player: X"


def test_x_wins_on_diagonal():
    game = GameLogic()
    results = play(game, [0, 1, 4, 2, 8])
    assert results == ["continue"] * 4 + ["win"]
    info = game.winner_info
    assert info.winner == "X"
    assert info.squares == (0, 4, 8)
    assert game.winning_squares == (0, 4, 8)
    assert game.game_over
    assert game.status_text() == "Winner X"


def test_occupied_cell_is_ignored():
    game = GameLogic()
    game.handle_click(4)
    before = list(game.history)
    assert game.handle_click(4) == "invalid"
    assert game.history == before
    assert game.step_number == 1
    assert not game.x_is_next


def test_no_moves_after_win():
    game = GameLogic()
    play(game, [0, 3, 1, 4, 2])
    assert game.handle_click(8) == "invalid"
    assert len(game.history) == 6


def test_out_of_range_cell_is_ignored():
    game = GameLogic()
    assert game.handle_click(9) == "invalid"
    assert game.handle_click(-1) == "invalid"
    assert len(game.history) == 1


def test_draw_after_nine_moves():
    game = GameLogic()
    results = play(game, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert results[-1] == "draw"
    assert game.winner_info is None
    assert game.is_draw
    assert game.game_over
    assert game.status_text() == "It's a TIE"
    assert len(game.history) == 10


def test_last_move_label_is_column_then_row():
    game = GameLogic()
    game.handle_click(5)  # row 1, col 2
    last_move = game.current_entry.last_move
    assert (last_move.row, last_move.col) == (1, 2)
    assert last_move.label == "X - (2, 1)"


def test_jump_does_not_touch_history():
    game = GameLogic()
    play(game, [0, 4, 8])
    game.jump_to(1)
    assert len(game.history) == 4
    assert game.step_number == 1
    assert not game.x_is_next
    assert game.current_squares[0] == "X"
    assert game.current_squares[4] is None
    game.jump_to(2)
    assert game.x_is_next


def test_jump_then_move_truncates_future():
    game = GameLogic()
    play(game, [0, 4, 8])
    game.jump_to(0)
    assert game.handle_click(2) == "continue"
    assert len(game.history) == 2
    assert game.step_number == 1
    assert game.current_squares == (None, None, "X") + (None,) * 6


def test_jump_back_from_won_game_allows_play():
    game = GameLogic()
    play(game, [0, 3, 1, 4, 2])
    game.jump_to(4)
    assert game.winner_info is None
    assert game.handle_click(5) == "continue"
    assert game.current_entry.last_move.player == "X"
    assert len(game.history) == 6


def test_jump_out_of_range():
    game = GameLogic()
    with pytest.raises(IndexError):
        game.jump_to(1)
    with pytest.raises(IndexError):
        game.jump_to(-1)


def test_move_list_labels_and_order():
    game = GameLogic()
    play(game, [0, 4])
    items = game.move_list()
    assert [item.move for item in items] == [0, 1, 2]
    assert items[0].label == "Go to game start"
    assert items[0].last_move_label == ""
    assert items[2].label == "Go to move #2"
    assert items[2].last_move_label == "O - (1, 1)"
    assert [item.is_current for item in items] == [False, False, True]

    game.toggle_order()
    assert [item.move for item in game.move_list()] == [2, 1, 0]


def test_toggle_flips_both_flags():
    game = GameLogic()
    game.toggle_order()
    assert game.revert_order and game.checked_switch
    game.toggle_order()
    assert not game.revert_order and not game.checked_switch


def test_reset_restores_initial_state():
    game = GameLogic(revert_order=True)
    assert game.revert_order
    play(game, [0, 1, 2])
    game.jump_to(1)
    game.reset_game()
    assert len(game.history) == 1
    assert game.step_number == 0
    assert game.x_is_next
    assert not game.revert_order and not game.checked_switch
