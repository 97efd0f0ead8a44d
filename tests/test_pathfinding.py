# test_pathfinding.py
import random
from collections import deque
import pytest
from game.maze_generator import Map
from game.pathfinding import find_path, manhattan
from config import TILE_WALL


def bfs_distance(maze, start, goal):
    """以 BFS 計算真正的最短步數，找不到時返回 None。"""
    queue = deque([(start, 0)])
    visited = {start}
    while queue:
        current, dist = queue.popleft()
        if current == goal:
            return dist
        for neighbor in maze.neighbors(*current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, dist + 1))
    return None


def random_maze(seed, width=12, height=10, wall_ratio=0.25):
    rng = random.Random(seed)
    maze = Map(width, height)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if rng.random() < wall_ratio:
                maze.set_tile(x, y, TILE_WALL)
    return maze


@pytest.fixture
def walled_maze():
    return Map.from_rows([
        "#########",
        "#.......#",
        "#.#####.#",
        "#.#...#.#",
        "#.#.#.#.#",
        "#...#...#",
        "#########",
    ])


def test_manhattan():
    assert manhattan((1, 2), (4, 6)) == 7
    assert manhattan((3, 3), (3, 3)) == 0


def test_start_equals_goal(walled_maze):
    assert find_path((1, 1), (1, 1), walled_maze) == [(1, 1)]


def test_path_goes_around_walls(walled_maze):
    path = find_path((3, 5), (5, 5), walled_maze)
    assert path[0] == (3, 5)
    assert path[-1] == (5, 5)
    assert len(path) - 1 == bfs_distance(walled_maze, (3, 5), (5, 5)) == 6
    # 每一步都是相鄰且可通行的格子
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
        assert walled_maze.is_passable(*b)


def test_unreachable_goal_returns_empty():
    maze = Map.from_rows([
        "#######",
        "#..#..#",
        "#######",
    ])
    assert find_path((1, 1), (5, 1), maze) == []


def test_expansion_cap():
    maze = Map.from_rows(["#" * 106, "#" + "." * 104 + "#", "#" * 106])
    # 走廊長度超過 100 格，達到展開上限時返回空路徑
    assert find_path((1, 1), (104, 1), maze) == []
    path = find_path((1, 1), (104, 1), maze, max_expansions=200)
    assert len(path) == 104


def test_on_expand_hook(walled_maze):
    calls = []
    path = find_path((1, 1), (7, 1), walled_maze, on_expand=lambda pos, i: calls.append((pos, i)))
    assert path
    assert calls[0] == ((1, 1), 1)
    assert calls[-1][0] == (7, 1)
    assert [i for _, i in calls] == list(range(1, len(calls) + 1))
    assert len(calls) <= 100


def test_tie_break_is_deterministic():
    maze = Map(8, 8)
    paths = {tuple(find_path((1, 1), (6, 6), maze)) for _ in range(5)}
    assert len(paths) == 1
    assert len(next(iter(paths))) == 11


@pytest.mark.parametrize("seed", range(20))
def test_path_length_is_optimal_on_random_mazes(seed):
    maze = random_maze(seed)
    cells = [(x, y) for y in range(maze.height) for x in range(maze.width) if maze.is_passable(x, y)]
    rng = random.Random(seed)
    for _ in range(15):
        start, goal = rng.choice(cells), rng.choice(cells)
        expected = bfs_distance(maze, start, goal)
        path = find_path(start, goal, maze, max_expansions=10_000)
        if expected is None:
            assert path == []
        else:
            assert len(path) - 1 == expected


def test_default_maze_paths_within_cap_are_optimal():
    maze = Map()
    maze.generate_maze()
    start = (2, maze.height - 2)
    for goal in [(5, 27), (10, 29), (1, 20), (2, 24)]:
        path = find_path(start, goal, maze)
        assert path, goal
        assert len(path) - 1 == bfs_distance(maze, start, goal)
