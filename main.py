#!/usr/bin/env python3
"""
main.py

Точка входа для Abalone: неинтерактивный прогон партии.

Ходы человека передаются аргументами (нумерация с 1), машина отвечает
на каждый из них.

Использование:
    python main.py                              # новая партия, вывод доски
    python main.py "3 3 4 3" "3 4 4 4"          # два хода человека
    python main.py --opening machine --level 3  # машина открывает партию
    python main.py --dump-tree "3 3 4 3"        # с деревом поиска
"""

import sys
import argparse
import logging
from typing import Optional, Tuple

from core.board import AbaloneBoard, MoveResult
from core.pieces import Player
from core.utils import DEFAULT_SIZE, DEFAULT_LEVEL
from abalone_io import (
    parse_move, parse_size, parse_level, parse_player,
    display_board, format_piece_counts, format_winner, format_result
)
from search import ENGINES, BaseSearch, CancellationToken
from utils.error_handling import handle_errors
from utils.logging import get_logger, setup_file_logging
from utils.monitoring import get_monitor


@handle_errors(default_return=None)
def play_machine(board: AbaloneBoard, engine: BaseSearch) -> Optional[MoveResult]:
    """Ход машины; None, если поиск прерван."""
    return board.machine_move(engine)


def machine_turns(board: AbaloneBoard, engine: BaseSearch,
                  dump_tree: bool = False) -> Tuple[AbaloneBoard, bool]:
    """
    Ходы машины, пока очередь за ней (человек может пропускать ходы).

    Returns:
        (доска, успешно ли отработал поиск)
    """
    while not board.is_game_over() and board.next_player is Player.MACHINE:
        result = play_machine(board, engine)
        if result is None:
            return board, False

        print(format_result(result, Player.MACHINE))
        if result.skipped:
            break
        if dump_tree and engine.last_result is not None and engine.last_result.tree is not None:
            print(engine.last_result.tree.to_string(), end="")

        board = result.board
        if not board.is_game_over() and board.next_player is Player.MACHINE:
            print("Вы пропускаете ход (нет допустимых ходов).")
    return board, True


def play(board: AbaloneBoard, moves, engine: BaseSearch, dump_tree: bool = False) -> int:
    """Разыгрывает ходы человека и ответы машины. Возвращает код выхода."""
    if board.opening_player is Player.MACHINE:
        board, ok = machine_turns(board, engine, dump_tree)
        if not ok:
            return 1

    code = 0
    for text in moves:
        if board.is_game_over():
            print("Партия уже окончена, оставшиеся ходы пропущены")
            break
        if board.next_player is not Player.HUMAN:
            print("Ни у одного игрока нет ходов")
            break

        try:
            move = parse_move(text)
        except ValueError as e:
            print(f"❌ Ошибка: {e}")
            code = 1
            break

        result = board.apply_human_move(*move)
        print(format_result(result, Player.HUMAN))
        if not result.accepted:
            code = 1
            break

        board = result.board
        if board.is_game_over():
            break
        if board.next_player is Player.HUMAN:
            print("Машина пропускает ход (нет допустимых ходов).")
        else:
            board, ok = machine_turns(board, engine, dump_tree)
            if not ok:
                code = 1
                break

    print()
    print(display_board(board))
    print(format_piece_counts(board))
    if board.is_game_over():
        print(format_winner(board))
    return code


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Abalone: человек против машины',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py "3 3 4 3"                 # один ход человека
  python main.py --level 3 "3 3 4 3"       # машина считает на 3 хода
  python main.py --opening machine         # машина открывает партию
  python main.py --dump-tree "3 3 4 3"     # дерево поиска (движок tree)
        """
    )
    parser.add_argument(
        'moves', nargs='*',
        help='Ходы человека: "r1 d1 r2 d2" (нумерация с 1)'
    )
    parser.add_argument('--size', type=parse_size, default=DEFAULT_SIZE,
                        help=f'Размер доски (default: {DEFAULT_SIZE})')
    parser.add_argument('--level', '-l', type=parse_level, default=DEFAULT_LEVEL,
                        help=f'Глубина поиска машины (default: {DEFAULT_LEVEL})')
    parser.add_argument('--opening', type=parse_player, default=Player.HUMAN,
                        metavar='{human,machine}',
                        help='Кто делает первый ход и играет чёрными (default: human)')
    parser.add_argument('--engine', '-e', choices=list(ENGINES.keys()), default=None,
                        help='Поисковый движок (default: minimax, с --dump-tree: tree)')
    parser.add_argument('--dump-tree', action='store_true',
                        help='Печатать дерево поиска после каждого хода машины')
    parser.add_argument('--node-budget', type=int, default=None,
                        help='Прервать поиск после N узлов')
    parser.add_argument('--time-limit', type=float, default=None,
                        help='Прервать поиск через N секунд')
    parser.add_argument('--log-file', default=None,
                        help='Писать подробный лог (уровень DEBUG) в файл')
    parser.add_argument('--stats', action='store_true',
                        help='Показать статистику производительности')
    parser.add_argument('--verbose', '-v', action='store_true')

    args = parser.parse_args(argv)

    # Дерево хранит только движок tree
    if args.dump_tree and args.engine == 'minimax':
        parser.error("--dump-tree работает только с --engine tree")
    engine_name = args.engine or ('tree' if args.dump_tree else 'minimax')

    logger = get_logger()
    console_level = logging.DEBUG if args.verbose else logging.WARNING
    file_handler = None
    if args.log_file:
        # Логгер пропускает всё, фильтруют handlers
        logger.set_level(logging.DEBUG)
        logger.set_level(console_level, console_only=True)
        file_handler = setup_file_logging(args.log_file, logging.DEBUG)
    else:
        logger.set_level(console_level)

    board = AbaloneBoard(args.size, args.opening, args.level)

    token = None
    if args.node_budget is not None or args.time_limit is not None:
        token = CancellationToken(node_budget=args.node_budget, time_limit=args.time_limit)
    engine = ENGINES[engine_name](verbose=args.verbose, cancel_token=token)

    print("=" * 50)
    print("⬡ Abalone")
    print("=" * 50)
    print(f"Новая партия. Вы играете: {board.human_color}")

    try:
        code = play(board, args.moves, engine, args.dump_tree)
    finally:
        if file_handler is not None:
            logger.logger.removeHandler(file_handler)
            file_handler.close()

    if args.stats:
        print()
        print(get_monitor().format_stats())
    return code


if __name__ == "__main__":
    sys.exit(main())
