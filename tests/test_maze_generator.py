# test_maze_generator.py
import pytest
import numpy as np
from game.maze_generator import Map, CollectResult
from config import (MAZE_WIDTH, MAZE_HEIGHT, TILE_WALL, TILE_EMPTY, TILE_PELLET, TILE_POWER_PELLET,
                    PELLET_SCORE, POWER_PELLET_SCORE, PLAYER_SPAWN, GHOST_ROSTER)


@pytest.fixture
def small_maze():
    return Map.from_rows([
        "#######",
        "#.E . #",
        "#.##  #",
        "#.....#",
        "#######",
    ])


def test_map_initialization():
    maze = Map(MAZE_WIDTH, MAZE_HEIGHT)
    assert maze.width == MAZE_WIDTH
    assert maze.height == MAZE_HEIGHT
    assert maze.get_tile(0, 0) == TILE_WALL
    assert maze.get_tile(MAZE_WIDTH - 1, MAZE_HEIGHT - 1) == TILE_WALL
    assert maze.get_tile(1, 1) == TILE_PELLET
    maze.validate_boundary()


def test_map_too_small():
    with pytest.raises(ValueError):
        Map(2, 5)


def test_generate_maze():
    maze = Map(MAZE_WIDTH, MAZE_HEIGHT)
    maze.generate_maze()
    maze.validate_boundary()
    power = [(x, y) for y in range(MAZE_HEIGHT) for x in range(MAZE_WIDTH)
             if maze.get_tile(x, y) == TILE_POWER_PELLET]
    assert len(power) == 5
    assert (MAZE_WIDTH // 2, MAZE_HEIGHT // 2) in power
    # 出生點必須可通行
    assert maze.is_passable(*PLAYER_SPAWN)
    for ghost in GHOST_ROSTER:
        assert maze.is_passable(*ghost["spawn"])


def test_generate_maze_is_deterministic():
    a, b = Map(), Map()
    a.generate_maze()
    b.generate_maze()
    assert str(a) == str(b)


def test_from_rows_rejects_bad_layouts():
    with pytest.raises(ValueError):
        Map.from_rows(["#####", "#..#", "#####"])  # 列長度不一致
    with pytest.raises(ValueError):
        Map.from_rows(["#####", "#.x.#", "#####"])  # 未知圖塊
    with pytest.raises(ValueError):
        Map.from_rows(["#####", "....#", "#####"])  # 邊界缺口
    with pytest.raises(ValueError):
        Map.from_rows([])


def test_is_passable(small_maze):
    assert small_maze.is_passable(1, 1)
    assert small_maze.is_passable(3, 1)  # 空格也可通行
    assert not small_maze.is_passable(2, 2)
    assert not small_maze.is_passable(-1, 1)
    assert not small_maze.is_passable(7, 1)
    assert small_maze.get_tile(7, 1) is None


def test_neighbors_order(small_maze):
    # 上、下、左、右
    assert small_maze.neighbors(1, 2) == [(1, 1), (1, 3)]
    assert small_maze.neighbors(4, 1) == [(4, 2), (3, 1), (5, 1)]


def test_collect_pellet_is_idempotent(small_maze):
    assert small_maze.collect(1, 1) == CollectResult(PELLET_SCORE, False)
    assert small_maze.get_tile(1, 1) == TILE_EMPTY
    assert small_maze.collect(1, 1) == CollectResult(0, False)


def test_collect_power_pellet_is_idempotent(small_maze):
    assert small_maze.collect(2, 1) == CollectResult(POWER_PELLET_SCORE, True)
    assert small_maze.collect(2, 1) == CollectResult(0, False)


def test_collect_wall_and_empty(small_maze):
    assert small_maze.collect(0, 0) == CollectResult(0, False)
    assert small_maze.collect(3, 1) == CollectResult(0, False)
    assert small_maze.get_tile(0, 0) == TILE_WALL


def test_line_of_sight(small_maze):
    assert small_maze.has_clear_line_of_sight((1, 3), (5, 3))
    assert small_maze.has_clear_line_of_sight((1, 1), (1, 3))
    # (2, 2) 與 (3, 2) 是牆壁
    assert not small_maze.has_clear_line_of_sight((2, 1), (2, 3))
    assert not small_maze.has_clear_line_of_sight((1, 1), (4, 3))
    # 端點本身是牆壁
    assert not small_maze.has_clear_line_of_sight((1, 1), (0, 1))
    assert small_maze.has_clear_line_of_sight((4, 1), (4, 1))


def test_line_of_sight_is_symmetric_on_straight_lines(small_maze):
    assert small_maze.has_clear_line_of_sight((5, 3), (1, 3))
    assert not small_maze.has_clear_line_of_sight((2, 3), (2, 1))


def test_all_pellets_collected_and_reset(small_maze):
    assert small_maze.count_pellets() == 9
    assert not small_maze.all_pellets_collected()
    for y in range(small_maze.height):
        for x in range(small_maze.width):
            small_maze.collect(x, y)
    assert small_maze.all_pellets_collected()
    small_maze.reset_pellets()
    assert small_maze.count_pellets() == 9
    assert small_maze.get_tile(2, 1) == TILE_POWER_PELLET


def test_to_array(small_maze):
    small_maze.collect(1, 1)
    grid = small_maze.to_array()
    assert isinstance(grid, np.ndarray)
    assert grid.shape == (5, 7)
    assert grid[0, 0] == 1
    assert grid[1, 1] == 0
    assert grid[1, 2] == 3
    assert grid[3, 1] == 2


def test_reset_pellets_keeps_added_walls():
    maze = Map(9, 5)
    for y in range(1, 4):
        maze.set_tile(4, y, TILE_WALL)
    maze.collect(1, 1)
    maze.reset_pellets()
    assert not maze.is_passable(4, 2)
    assert maze.get_tile(1, 1) == TILE_PELLET
    assert maze.count_pellets() == 7 * 3 - 3
