"""
tests/test_moves.py

Тесты правил: допустимость хода, толкание, выталкивание, очередь хода.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import AbaloneBoard, Rejection
from core.move import Move
from core.pieces import Color, Player
from utils.error_handling import GameOverError, WrongTurnError


def total_balls(board: AbaloneBoard) -> int:
    return board.ball_count(Player.HUMAN) + board.ball_count(Player.MACHINE)


def line_end(board: AbaloneBoard, move: Move):
    """Первая клетка после непрерывной линии шаров в направлении хода."""
    row, diag = move.source
    d_row, d_diag = move.direction
    while board.ball_at(row, diag) is not None:
        row += d_row
        diag += d_diag
    return row, diag


def test_single_step_scenario():
    """Тест: одиночный шаг в пустую клетку - счёт тот же, ход переходит машине."""
    board = AbaloneBoard()
    result = board.apply_human_move(2, 2, 3, 2)

    assert result.accepted
    assert result.move == Move(2, 2, 3, 2)
    new_board = result.board
    assert new_board is not board
    assert new_board.piece_count(Color.BLACK) == 14
    assert new_board.piece_count(Color.WHITE) == 14
    assert new_board.slot(3, 2) is Color.BLACK
    assert new_board.slot(2, 2) is Color.NONE
    assert new_board.ball_at(3, 2).position == (3, 2)
    assert new_board.next_player is Player.MACHINE

    # Исходная доска не изменилась
    assert board.slot(2, 2) is Color.BLACK
    assert board.slot(3, 2) is Color.NONE
    assert board.next_player is Player.HUMAN


def test_push_two_against_one():
    """Тест: два шара толкают один, никто не покидает доску."""
    board = AbaloneBoard.from_pieces(9, [(2, 4), (3, 4)], [(4, 4), (8, 8)])
    result = board.apply_human_move(2, 4, 3, 4)

    assert result.accepted
    new_board = result.board
    assert new_board.slot(2, 4) is Color.NONE
    assert new_board.slot(3, 4) is Color.BLACK
    assert new_board.slot(4, 4) is Color.BLACK
    assert new_board.slot(5, 4) is Color.WHITE
    assert total_balls(new_board) == total_balls(board)


def test_push_over_edge_scenario():
    """Тест: три против одного у края - чужой шар вытолкнут."""
    board = AbaloneBoard.from_pieces(9, [(5, 4), (6, 4), (7, 4)], [(8, 4), (4, 0)])
    move = Move(5, 4, 6, 4)

    assert board.is_legal_move(move)
    result = board.apply_human_move(*move)

    assert result.accepted
    new_board = result.board
    assert new_board.piece_count(Color.WHITE) == board.piece_count(Color.WHITE) - 1
    assert new_board.piece_count(Color.BLACK) == 3
    assert [b.position for b in new_board.pieces(Player.HUMAN)] == [(6, 4), (7, 4), (8, 4)]
    assert new_board.slot(8, 4) is Color.BLACK
    assert new_board.next_player is Player.MACHINE


def test_equal_strength_cannot_push():
    """Тест: один против одного и два против двух - ход недопустим."""
    one = AbaloneBoard.from_pieces(9, [(3, 4)], [(4, 4)])
    assert not one.is_legal_move(Move(3, 4, 4, 4))

    two = AbaloneBoard.from_pieces(9, [(2, 4), (3, 4)], [(4, 4), (5, 4)])
    assert not two.is_legal_move(Move(2, 4, 3, 4))

    result = two.apply_human_move(2, 4, 3, 4)
    assert result.rejection is Rejection.ILLEGAL_MOVE
    assert result.board is two


def test_sandwiched_line_is_illegal():
    """Тест: больше одной смены цвета в линии - ход недопустим."""
    board = AbaloneBoard.from_pieces(9, [(2, 4), (3, 4), (5, 4)], [(4, 4)])
    assert not board.is_legal_move(Move(2, 4, 3, 4))


def test_only_six_directions():
    """Тест: (1,-1), (-1,1), (0,0) и дальние ходы недопустимы."""
    board = AbaloneBoard.from_pieces(9, [(4, 4)], [(8, 8)])

    assert len(board.possible_moves(board.ball_at(4, 4))) == 6
    assert not board.is_legal_move(Move(4, 4, 5, 3))
    assert not board.is_legal_move(Move(4, 4, 3, 5))
    assert not board.is_legal_move(Move(4, 4, 4, 4))
    assert not board.is_legal_move(Move(4, 4, 6, 4))


def test_empty_or_off_board_source_is_illegal():
    board = AbaloneBoard()
    assert not board.is_legal_move(Move(4, 4, 5, 4))
    assert not board.is_legal_move(Move(0, 5, 1, 5))


def test_single_ball_may_leave_board():
    """Тест: одиночный шар может сам уйти за край (и выбывает)."""
    board = AbaloneBoard.from_pieces(9, [(0, 0), (0, 2)], [(8, 8)])
    result = board.apply_human_move(0, 0, -1, 0)

    assert result.accepted
    assert result.board.ball_count(Player.HUMAN) == 1
    assert result.board.slot(0, 0) is Color.NONE


def test_human_move_rejections():
    """Тест: ошибки ввода возвращаются как значения, а не исключения."""
    board = AbaloneBoard()

    assert board.apply_human_move(0, 5, 1, 5).rejection is Rejection.INVALID_POSITION
    assert board.apply_human_move(0, 0, -2, 0).rejection is Rejection.INVALID_TARGET
    assert board.apply_human_move(4, 4, 5, 4).rejection is Rejection.ILLEGAL_MOVE
    assert board.apply_human_move(8, 4, 7, 4).rejection is Rejection.ILLEGAL_MOVE, \
        "Шары машины человеку не принадлежат"
    assert board.apply_human_move(1, 1, 2, 0).rejection is Rejection.ILLEGAL_MOVE

    result = board.apply_human_move(0, 5, 1, 5)
    assert not result.accepted
    assert result.board is board


def test_turn_errors():
    """Тест: ход не в свою очередь и после конца партии - ошибки вызова."""
    machine_first = AbaloneBoard(9, Player.MACHINE, 1)
    with pytest.raises(WrongTurnError):
        machine_first.apply_human_move(2, 2, 3, 2)

    human_first = AbaloneBoard()
    with pytest.raises(WrongTurnError):
        human_first.machine_move()

    reference = AbaloneBoard()
    over = AbaloneBoard.from_pieces(
        9,
        [b.position for b in reference.pieces(Player.HUMAN)],
        [b.position for b in reference.pieces(Player.MACHINE)][:8],
        start_balls=14
    )
    with pytest.raises(GameOverError):
        over.apply_human_move(2, 2, 3, 2)


def test_turn_is_kept_when_opponent_cannot_move():
    """Тест: у машины нет ходов - очередь остаётся у человека."""
    surrounded = [(4, 5), (5, 5), (5, 4), (4, 3), (3, 3), (3, 4)]
    board = AbaloneBoard.from_pieces(9, surrounded + [(0, 0)], [(4, 4)])

    assert not board.has_legal_moves(Player.MACHINE)
    assert board.legal_moves(Player.MACHINE) == []

    result = board.apply_human_move(0, 0, 0, 1)
    assert result.accepted
    assert result.board.next_player is Player.HUMAN

    again = result.board.apply_human_move(0, 1, 0, 2)
    assert again.accepted
    assert again.board.next_player is Player.HUMAN


@pytest.mark.parametrize("board_factory", [
    lambda: AbaloneBoard(),
    lambda: AbaloneBoard(7),
    lambda: AbaloneBoard.from_pieces(9, [(5, 4), (6, 4), (7, 4), (0, 0)], [(8, 4), (4, 0), (1, 1)]),
])
def test_piece_conservation(board_factory):
    """Тест: ход убирает не больше одного шара, и только если линия ушла за край."""
    board = board_factory()
    for player in Player:
        for move in board.legal_moves(player):
            new_board = board.execute_move(move)
            delta = total_balls(new_board) - total_balls(board)
            end = line_end(board, move)

            assert delta in (0, -1)
            assert (delta == -1) == (not board.is_on_board(*end)), f"Ход {move}"
            for p in Player:
                for ball in new_board.pieces(p):
                    assert new_board.ball_at(ball.row, ball.diag) is ball


def test_execute_move_does_not_touch_source_board():
    """Тест: ход на копии, исходная позиция неизменна."""
    board = AbaloneBoard()
    snapshot = str(board)
    positions = [b.position for b in board.pieces(Player.HUMAN)]

    for move in board.legal_moves(Player.HUMAN):
        board.execute_move(move)

    assert str(board) == snapshot
    assert board.next_player is Player.HUMAN
    assert [b.position for b in board.pieces(Player.HUMAN)] == positions


def test_move_order_follows_ball_list_and_directions():
    """Тест: ходы перечисляются по шарам, затем по направлениям."""
    board = AbaloneBoard.from_pieces(9, [(4, 4)], [(8, 8)])
    moves = board.legal_moves(Player.HUMAN)

    assert moves[0] == Move(4, 4, 4, 5)
    assert moves[1] == Move(4, 4, 5, 5)
    assert [m.direction for m in moves] == [(0, 1), (1, 1), (1, 0), (0, -1), (-1, -1), (-1, 0)]
