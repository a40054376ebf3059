"""
core/board.py

Доска Abalone (упрощённые правила): человек против машины.

Шары человека стоят в нижних строках, шары машины - в верхних. Первым
ходит тот, кто играет чёрными. Побеждает тот, кто первым вытолкнет шесть
шаров соперника.

Отличия от классического Abalone:
- игрок без допустимого хода пропускает ход, соперник ходит в любом случае;
- толкать можно больше трёх своих шаров;
- боковые ходы группой запрещены, боком двигается только одиночный шар;
- партия может не закончиться никогда.

Доска персистентна: ход возвращает новую доску, исходная не меняется.
Единственное изменяемое поле - уровень сложности.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .geometry import (
    validate_size, first_diag, last_diag, is_on_board, is_valid_destination
)
from .move import Move
from .pieces import Ball, Color, Player
from .utils import (
    DIRECTIONS, DEFAULT_SIZE, DEFAULT_LEVEL, ELIMINATION_THRESHOLD, is_direction
)
from utils.error_handling import (
    InvalidCoordinatesError, InvalidColorError,
    GameOverError, GameNotOverError, WrongTurnError, validate_level
)
from utils.logging import get_logger
from utils.monitoring import monitor_time

Position = Tuple[int, int]


class Rejection(Enum):
    """Причина отказа в ходе человека (ошибка ввода, не исключение)."""
    INVALID_POSITION = 'invalid position'
    INVALID_TARGET = 'invalid target coordinates'
    ILLEGAL_MOVE = 'move could not be executed'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MoveResult:
    """
    Результат хода.

    board - новая доска; при отказе или пропуске хода - исходная доска.
    """
    board: 'AbaloneBoard'
    move: Optional[Move] = None
    rejection: Optional[Rejection] = None
    skipped: bool = False
    score: Optional[float] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None and not self.skipped


class AbaloneBoard:
    """Состояние партии: сетка, списки шаров, очередь хода."""
    __slots__ = ('_size', '_grid', '_balls', 'opening_player', '_next_player',
                 'start_balls', '_level')

    def __init__(self, size: int = DEFAULT_SIZE,
                 opening_player: Player = Player.HUMAN,
                 difficulty_level: int = DEFAULT_LEVEL):
        """
        Создаёт доску со стандартной расстановкой.

        Args:
            size: нечётный размер не меньше 7
            opening_player: кто ходит первым (он играет чёрными)
            difficulty_level: глубина дерева поиска машины

        Raises:
            InvalidBoardError: недопустимый размер
            InvalidLevelError: уровень меньше 1
        """
        self._size = validate_size(size)
        self.opening_player = opening_player
        self._next_player = opening_player
        self._level = validate_level(difficulty_level)
        self._grid: List[List[Optional[Ball]]] = [[None] * size for _ in range(size)]
        self._balls: Dict[Player, List[Ball]] = {Player.HUMAN: [], Player.MACHINE: []}
        self._initialize_board()
        self.start_balls = len(self._balls[Player.MACHINE])

    def _initialize_board(self):
        """Стандартная расстановка: человек снизу, машина сверху."""
        size = self._size
        half = size // 2
        human_color = self.human_color

        for row in range(size):
            for diag in range(first_diag(row, size), last_diag(row, size) + 1):
                if row <= 1 or (row == 2 and 2 <= diag <= half):
                    self._place(Ball(human_color, Player.HUMAN, row, diag))
                elif row >= size - 2 or (row == size - 3 and half <= diag <= size - 3):
                    self._place(Ball(human_color.other(), Player.MACHINE, row, diag))

        # Шары машины перечисляются от верхнего края
        self._balls[Player.MACHINE].reverse()

    @classmethod
    def from_pieces(cls, size: int,
                    human: Iterable[Position],
                    machine: Iterable[Position],
                    opening_player: Player = Player.HUMAN,
                    next_player: Optional[Player] = None,
                    difficulty_level: int = DEFAULT_LEVEL,
                    start_balls: Optional[int] = None) -> 'AbaloneBoard':
        """
        Создаёт доску с произвольной расстановкой.

        Args:
            size: размер доски
            human: координаты шаров человека (в порядке перебора ходов)
            machine: координаты шаров машины
            opening_player: кто открыл партию (определяет цвета)
            next_player: чей ход (по умолчанию opening_player)
            difficulty_level: глубина поиска
            start_balls: начальное число шаров; по умолчанию - число шаров машины

        Raises:
            InvalidCoordinatesError: клетка вне доски или занята дважды
        """
        board = cls._blank(size, opening_player,
                           next_player or opening_player, difficulty_level)
        human_color = board.human_color

        for player, color, positions in (
            (Player.HUMAN, human_color, human),
            (Player.MACHINE, human_color.other(), machine),
        ):
            for row, diag in positions:
                if not board.is_on_board(row, diag):
                    raise InvalidCoordinatesError(f"Клетка ({row},{diag}) вне доски")
                if board._grid[row][diag] is not None:
                    raise InvalidCoordinatesError(f"Клетка ({row},{diag}) уже занята")
                board._place(Ball(color, player, row, diag))

        if start_balls is None:
            start_balls = len(board._balls[Player.MACHINE])
        board.start_balls = start_balls
        return board

    @classmethod
    def _blank(cls, size: int, opening_player: Player, next_player: Player,
               level: int) -> 'AbaloneBoard':
        board = cls.__new__(cls)
        board._size = validate_size(size)
        board.opening_player = opening_player
        board._next_player = next_player
        board._level = validate_level(level)
        board._grid = [[None] * size for _ in range(size)]
        board._balls = {Player.HUMAN: [], Player.MACHINE: []}
        board.start_balls = 0
        return board

    def _place(self, ball: Ball):
        self._grid[ball.row][ball.diag] = ball
        self._balls[ball.owner].append(ball)

    def copy(self) -> 'AbaloneBoard':
        """Глубокая копия: сетка и списки шаров не разделяются с оригиналом."""
        clone = AbaloneBoard._blank(self._size, self.opening_player,
                                    self._next_player, self._level)
        clone.start_balls = self.start_balls
        for player, balls in self._balls.items():
            for ball in balls:
                clone._place(ball.clone())
        return clone

    # --- Запросы -------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def difficulty_level(self) -> int:
        return self._level

    @property
    def human_color(self) -> Color:
        return Color.BLACK if self.opening_player is Player.HUMAN else Color.WHITE

    @property
    def next_player(self) -> Player:
        """
        Чей ход.

        Raises:
            GameOverError: партия окончена
        """
        if self.is_game_over():
            raise GameOverError("Партия уже окончена")
        return self._next_player

    def is_on_board(self, row: int, diag: int) -> bool:
        return is_on_board(row, diag, self._size)

    def is_valid_destination(self, row: int, diag: int) -> bool:
        return is_valid_destination(row, diag, self._size)

    def slot(self, row: int, diag: int) -> Color:
        """
        Цвет шара в клетке или Color.NONE.

        Raises:
            InvalidCoordinatesError: клетка вне доски
        """
        if not self.is_on_board(row, diag):
            raise InvalidCoordinatesError(f"Клетка ({row},{diag}) вне доски")
        ball = self._grid[row][diag]
        return Color.NONE if ball is None else ball.color

    def ball_at(self, row: int, diag: int) -> Optional[Ball]:
        if not self.is_on_board(row, diag):
            return None
        return self._grid[row][diag]

    def pieces(self, player: Player) -> Tuple[Ball, ...]:
        """Живые шары игрока в порядке перебора ходов."""
        return tuple(self._balls[player])

    def ball_count(self, player: Player) -> int:
        return len(self._balls[player])

    def piece_count(self, color: Color) -> int:
        """
        Число шаров цвета.

        Raises:
            InvalidColorError: для Color.NONE
        """
        if color is self.human_color:
            return len(self._balls[Player.HUMAN])
        if color is self.human_color.other():
            return len(self._balls[Player.MACHINE])
        raise InvalidColorError("У цвета NONE нет шаров")

    def is_game_over(self) -> bool:
        return (self.start_balls - len(self._balls[Player.HUMAN]) >= ELIMINATION_THRESHOLD
                or self.start_balls - len(self._balls[Player.MACHINE]) >= ELIMINATION_THRESHOLD)

    @property
    def winner(self) -> Player:
        """
        Победитель: у кого больше шаров, при равенстве - человек.

        Raises:
            GameNotOverError: партия не окончена
        """
        if not self.is_game_over():
            raise GameNotOverError("Партия ещё не окончена")
        if len(self._balls[Player.HUMAN]) < len(self._balls[Player.MACHINE]):
            return Player.MACHINE
        return Player.HUMAN

    # --- Правила -------------------------------------------------------

    def is_legal_move(self, move: Move) -> bool:
        """
        Допустим ли ход по правилу толкания. Владелец шара не учитывается.

        От исходного шара идём по направлению хода до первой пустой клетки
        или края доски. Своих шаров в линии должно быть строго больше, чем
        чужих, и цвет может смениться не более одного раза.
        """
        row, diag = move.source
        if not self.is_on_board(row, diag):
            return False
        d_row, d_diag = move.direction
        ball = self._grid[row][diag]
        if ball is None or not is_direction(d_row, d_diag):
            return False

        initial_color = ball.color
        last_color = initial_color
        color_changes = 0
        same, opposite = 1, 0

        while True:
            row += d_row
            diag += d_diag
            if not self.is_on_board(row, diag):
                break
            ball = self._grid[row][diag]
            if ball is None:
                break
            if ball.color is not last_color:
                last_color = ball.color
                color_changes += 1
            if ball.color is initial_color:
                same += 1
            else:
                opposite += 1

        return (same > opposite and color_changes <= 1
                and self.is_valid_destination(row, diag))

    def possible_moves(self, ball: Ball) -> List[Move]:
        """Допустимые ходы шара во всех шести направлениях."""
        moves = []
        for direction in DIRECTIONS:
            move = Move.step(ball.row, ball.diag, direction)
            if self.is_legal_move(move):
                moves.append(move)
        return moves

    def legal_moves(self, player: Player) -> List[Move]:
        """Все допустимые ходы игрока."""
        moves = []
        for ball in self._balls[player]:
            moves.extend(self.possible_moves(ball))
        return moves

    def has_legal_moves(self, player: Player) -> bool:
        return any(self.possible_moves(ball) for ball in self._balls[player])

    def execute_move(self, move: Move) -> 'AbaloneBoard':
        """
        Выполняет ход на копии доски без проверки допустимости.

        Все шары линии сдвигаются на клетку. Шар, ушедший за край,
        удаляется. Ход переходит к сопернику, если у него есть ход.
        """
        clone = self.copy()
        row, diag = move.source
        d_row, d_diag = move.direction
        carried: Optional[Ball] = None

        while True:
            ball = clone._grid[row][diag]
            clone._grid[row][diag] = carried
            if carried is not None:
                carried.row, carried.diag = row, diag
            if ball is None:
                break
            carried = ball
            row += d_row
            diag += d_diag
            if not clone.is_on_board(row, diag):
                clone._balls[carried.owner].remove(carried)
                break

        clone._update_next_player()
        return clone

    def _update_next_player(self):
        """Передаёт ход сопернику, если у него есть хотя бы один ход."""
        if self.has_legal_moves(self._next_player.other()):
            self._next_player = self._next_player.other()

    def _check_turn(self, player: Player):
        if self.is_game_over():
            raise GameOverError("Партия уже окончена")
        if self._next_player is not player:
            raise WrongTurnError(f"Сейчас ход: {self._next_player}")

    # --- Операции ------------------------------------------------------

    def apply_human_move(self, row_from: int, diag_from: int,
                         row_to: int, diag_to: int) -> MoveResult:
        """
        Ход человека.

        Raises:
            GameOverError: партия окончена
            WrongTurnError: ход машины

        Returns:
            MoveResult с новой доской или с причиной отказа
        """
        self._check_turn(Player.HUMAN)
        move = Move(row_from, diag_from, row_to, diag_to)

        if not self.is_on_board(row_from, diag_from):
            return MoveResult(self, move, rejection=Rejection.INVALID_POSITION)
        if not self.is_valid_destination(row_to, diag_to):
            return MoveResult(self, move, rejection=Rejection.INVALID_TARGET)

        ball = self._grid[row_from][diag_from]
        if ball is None or ball.owner is not Player.HUMAN or not self.is_legal_move(move):
            return MoveResult(self, move, rejection=Rejection.ILLEGAL_MOVE)

        get_logger().debug(f"Ход человека: {move}")
        return MoveResult(self.execute_move(move), move)

    @monitor_time('machine_move')
    def machine_move(self, engine=None) -> MoveResult:
        """
        Ход машины, выбранный поисковым движком.

        Args:
            engine: движок из пакета search (по умолчанию MinimaxSearch)

        Raises:
            GameOverError: партия окончена
            WrongTurnError: ход человека

        Returns:
            MoveResult с новой доской, либо skipped=True и та же доска,
            если у машины нет ходов
        """
        self._check_turn(Player.MACHINE)

        if not self.has_legal_moves(Player.MACHINE):
            get_logger().debug("У машины нет ходов, пропуск")
            return MoveResult(self, skipped=True)

        if engine is None:
            from search.minimax import MinimaxSearch
            engine = MinimaxSearch()

        result = engine.search(self)
        get_logger().debug(f"Ход машины: {result.move} (оценка {result.score:.3f})")
        return MoveResult(self.execute_move(result.move), result.move,
                          score=result.score)

    def set_level(self, level: int):
        """
        Меняет глубину поиска.

        Raises:
            InvalidLevelError: уровень меньше 1
        """
        self._level = validate_level(level)

    # --- Вывод ---------------------------------------------------------

    def row_symbols(self, row: int) -> Sequence[str]:
        size = self._size
        return [str(self.slot(row, diag))
                for diag in range(first_diag(row, size), last_diag(row, size) + 1)]

    def to_string(self) -> str:
        """Текстовая доска: верхняя строка первой, отступы образуют шестиугольник."""
        size = self._size
        lines = []
        for row in range(size - 1, -1, -1):
            indentation = abs(row - size // 2)
            lines.append(' ' * indentation + ' '.join(self.row_symbols(row)))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (f"AbaloneBoard(size={self._size}, "
                f"human={len(self._balls[Player.HUMAN])}, "
                f"machine={len(self._balls[Player.MACHINE])})")
