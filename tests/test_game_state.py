"""
Tests for the domain package - the snake game engine.
"""

import pytest
import sys
import os
from collections import deque

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Coordinate,
    GameState,
    Snake,
    SnakeChange,
    advance_coordinate,
    turn_direction,
    NORTH, SOUTH, EAST, WEST,
    LEFT, RIGHT,
    VALID_DIRECTIONS,
)


ALL_DIRECTIONS = [NORTH, SOUTH, EAST, WEST]


class TestDirections:
    """Tests for turning and coordinate arithmetic."""

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_turn_changes_direction(self, direction):
        """Turning left always changes the heading."""
        assert turn_direction(direction, LEFT) != direction

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_turn_left_then_right_is_identity(self, direction):
        """Opposite turns cancel out."""
        assert turn_direction(turn_direction(direction, LEFT), RIGHT) == direction

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_turn_left_four_times_is_identity(self, direction):
        """Four left turns return to the original heading."""
        d = direction
        for _ in range(4):
            d = turn_direction(d, LEFT)
        assert d == direction

    def test_turn_table(self):
        """Headings rotate as on a compass with y growing downward."""
        assert turn_direction(EAST, LEFT) == NORTH
        assert turn_direction(EAST, RIGHT) == SOUTH
        assert turn_direction(NORTH, LEFT) == WEST
        assert turn_direction(SOUTH, RIGHT) == WEST

    def test_unknown_turn_rejected(self):
        """Only LEFT and RIGHT are turns."""
        with pytest.raises(ValueError, match="Unknown turn"):
            turn_direction(EAST, "UP")

    @pytest.mark.parametrize("direction", ALL_DIRECTIONS)
    def test_advance_changes_coordinate_by_one(self, direction):
        """Every step moves exactly one cell."""
        c = Coordinate(100, 200)
        advanced = advance_coordinate(c, direction)
        assert advanced != c
        assert abs(c.x - advanced.x) + abs(c.y - advanced.y) == 1

    def test_advance_north_east_south_west_returns_home(self):
        """A closed loop of steps ends where it started."""
        c = Coordinate(100, 200)
        for direction in (NORTH, EAST, SOUTH, WEST):
            c = advance_coordinate(c, direction)
        assert c == Coordinate(100, 200)

    def test_north_is_up_the_screen(self):
        """North decreases y, East increases x."""
        assert advance_coordinate(Coordinate(5, 5), NORTH) == (5, 4)
        assert advance_coordinate(Coordinate(5, 5), EAST) == (6, 5)

    def test_coordinate_is_a_value(self):
        """Coordinates compare and hash by value."""
        assert Coordinate(1, 2) == Coordinate(1, 2)
        assert Coordinate(1, 2) == (1, 2)
        assert len({Coordinate(1, 2), Coordinate(1, 2)}) == 1

    def test_out_of_bounds(self):
        """Cells outside [0, width) x [0, height) are out of bounds."""
        assert not Coordinate(0, 0).out_of_bounds(20, 20)
        assert not Coordinate(19, 19).out_of_bounds(20, 20)
        assert Coordinate(20, 5).out_of_bounds(20, 20)
        assert Coordinate(-1, 5).out_of_bounds(20, 20)
        assert Coordinate(5, -1).out_of_bounds(20, 20)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_head_and_tail(self):
        """Head is the first position, tail the last."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert len(snake) == 3

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_push_and_pop_keep_occupancy_in_step(self):
        """The occupancy set always mirrors the positions."""
        snake = Snake([(5, 5), (4, 5)])
        snake.push_head(Coordinate(6, 5))
        assert snake.occupied == set(snake.positions)
        removed = snake.pop_tail()
        assert removed == (4, 5)
        assert (4, 5) not in snake
        assert snake.occupied == {(6, 5), (5, 5)}

    def test_duplicate_positions_rejected(self):
        """A snake cannot cover the same cell twice."""
        with pytest.raises(ValueError, match="distinct"):
            Snake([(1, 1), (1, 2), (1, 1)])

    def test_push_onto_body_rejected(self):
        """push_head refuses an occupied cell."""
        snake = Snake([(1, 1), (1, 2)])
        with pytest.raises(ValueError):
            snake.push_head(Coordinate(1, 2))


class TestGameCreation:
    """Tests for GameState construction."""

    @pytest.mark.parametrize("width,height,x,y", [
        (100, 100, 50, 50),
        (99, 99, 49, 49),
        (100, 200, 50, 100),
        (30, 10, 15, 5),
    ])
    def test_snake_starts_in_centre_of_board(self, width, height, x, y):
        """The snake starts with length 1 in the middle of the board."""
        game = GameState(width, height)
        assert len(game.snake) == 1
        assert game.snake.head == Coordinate(x, y)
        assert game.direction == EAST
        assert game.growth == 3
        assert game.game_over is False

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 5)])
    def test_non_positive_dimensions_rejected(self, width, height):
        """Boards must have positive dimensions."""
        with pytest.raises(ValueError, match="must be positive"):
            GameState(width, height)

    def test_non_integer_dimensions_rejected(self):
        """Board dimensions must be integers."""
        with pytest.raises(ValueError, match="must be an integer"):
            GameState(10.5, 10)

    def test_repr(self):
        """GameState has a useful string representation."""
        game = GameState(20, 20)
        assert "20x20" in repr(game)
        assert "length=1" in repr(game)


class TestGrowth:
    """Tests for growth and tail removal."""

    def test_snake_initially_grows_to_length_four(self):
        """The initial growth of 3 gives a snake of length 4."""
        game = GameState(100, 100)
        assert len(game.snake) == 1
        game.advance()
        assert len(game.snake) == 2
        game.advance()
        assert len(game.snake) == 3
        game.advance()
        assert len(game.snake) == 4
        for _ in range(5):
            game.advance()
            assert len(game.snake) == 4

    def test_snake_can_grow_to_any_length(self):
        """grow(n) adds n cells over the next n advances."""
        game = GameState(100, 100)
        game.grow(6)
        for i in range(1, 11):
            assert len(game.snake) == i
            game.advance()

        for _ in range(5):
            game.advance()
            assert len(game.snake) == 10

    def test_grow_zero_is_a_no_op(self):
        """Growing by zero changes nothing."""
        game = GameState(20, 20)
        game.grow(0)
        assert game.growth == 3

    def test_negative_growth_rejected(self):
        """Growth cannot be negative."""
        game = GameState(20, 20)
        with pytest.raises(ValueError):
            game.grow(-1)

    def test_growth_and_removal_are_exclusive(self):
        """Each surviving tick either consumes growth or removes the tail."""
        game = GameState(100, 100)
        for _ in range(10):
            growth_before = game.growth
            change = game.advance()
            assert change.added is not None
            if growth_before > 0:
                assert change.removed is None
                assert game.growth == growth_before - 1
            else:
                assert change.removed is not None

    def test_occupancy_mirrors_snake(self):
        """The occupancy set equals the snake cells after every tick."""
        game = GameState(20, 20)
        game.grow(5)
        for turn in [None, LEFT, None, LEFT, None, None, RIGHT, None, None, RIGHT]:
            if turn:
                game.turn(turn)
            game.advance()
            assert game.snake.occupied == set(game.snake.positions)
            assert len(game.snake.occupied) == len(game.snake)


class TestAdvance:
    """Tests for GameState.advance()."""

    def test_advance_returns_changed_coordinates(self):
        """Each advance reports the added head and removed tail."""
        game = GameState(20, 20)

        assert game.advance() == SnakeChange(added=Coordinate(11, 10), removed=None)
        assert game.advance() == SnakeChange(added=Coordinate(12, 10), removed=None)
        assert game.advance() == SnakeChange(added=Coordinate(13, 10), removed=None)
        assert game.advance() == SnakeChange(added=Coordinate(14, 10), removed=Coordinate(10, 10))

        game.turn(RIGHT)
        assert game.advance() == SnakeChange(added=Coordinate(14, 11), removed=Coordinate(11, 10))
        assert game.advance() == SnakeChange(added=Coordinate(14, 12), removed=Coordinate(12, 10))

    def test_snake_hits_wall_game_over(self):
        """Heading east from the centre of a 20-wide board dies on the 10th advance."""
        game = GameState(20, 20)
        assert not game.game_over
        for _ in range(9):
            game.advance()
            assert not game.game_over
        change = game.advance()
        assert game.game_over
        assert change.added is None
        assert game.death_reason == "wall"
        assert game.death_tick == 10

    def test_snake_bites_self_game_over(self):
        """Looping back into the body ends the game."""
        game = GameState(20, 20)
        game.grow(10)
        assert not game.game_over
        for _ in range(3):
            game.advance()
            assert not game.game_over
            game.turn(LEFT)
        game.turn(LEFT)
        change = game.advance()
        assert game.game_over
        assert game.death_reason == "self"
        # Growth was pending, so nothing moved at all
        assert change == SnakeChange(removed=None, added=None)

    def test_snake_can_chase_its_tail(self):
        """Moving into the cell the tail vacates on the same tick is safe."""
        game = GameState(20, 20)
        game.advance()
        game.turn(RIGHT)
        game.advance()
        game.turn(RIGHT)
        game.advance()
        assert game.growth == 0
        assert list(game.snake) == [(10, 11), (11, 11), (11, 10), (10, 10)]

        game.turn(RIGHT)
        change = game.advance()
        assert not game.game_over
        assert change == SnakeChange(removed=Coordinate(10, 10), added=Coordinate(10, 10))
        assert game.snake.head == (10, 10)

    def test_length_one_snake_moves_off_its_own_cell(self):
        """A single-cell snake with no growth never collides with itself."""
        game = GameState(20, 20, growth=0)
        change = game.advance()
        assert not game.game_over
        assert change == SnakeChange(removed=Coordinate(10, 10), added=Coordinate(11, 10))
        assert len(game.snake) == 1

    def test_advance_after_game_over_is_a_no_op(self):
        """Once over, advance() returns an empty change and mutates nothing."""
        game = GameState(20, 20)
        while not game.game_over:
            game.advance()

        positions = list(game.snake)
        occupied = game.snake.occupied
        tick = game.tick
        for _ in range(5):
            change = game.advance()
            assert change.removed is None
            assert change.added is None
            assert change.is_empty
            assert list(game.snake) == positions
            assert game.snake.occupied == occupied
            assert game.tick == tick
            assert game.game_over is True

    def test_turn_after_game_over_is_ignored(self):
        """Turning a finished game leaves the heading alone."""
        game = GameState(20, 20)
        while not game.game_over:
            game.advance()
        game.turn(LEFT)
        assert game.direction == EAST

    def test_snake_stays_in_bounds_while_alive(self):
        """Every live cell is inside the board."""
        game = GameState(30, 10)
        turns = [None, None, LEFT, None, None, None, LEFT, None, LEFT, RIGHT]
        for turn in turns * 3:
            if turn:
                game.turn(turn)
            game.advance()
            if game.game_over:
                break
            for cell in game.snake:
                assert not cell.out_of_bounds(game.width, game.height)

    def test_print_board(self):
        """print_board() marks the head and body with row 0 first."""
        game = GameState(5, 3)
        game.advance()
        board = game.print_board()
        assert board.split("\n") == [
            ".....",
            "..oH.",
            ".....",
        ]

    def test_score_is_length(self):
        """The score is the snake length."""
        game = GameState(20, 20)
        for _ in range(3):
            game.advance()
        assert game.score == 4

    def test_all_directions_are_valid(self):
        """The headings constant lists the four compass points."""
        assert VALID_DIRECTIONS == set(ALL_DIRECTIONS)
