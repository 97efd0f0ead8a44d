# game/entities/entity_initializer.py
"""
提供遊戲實體的初始化功能，負責根據設定建立 Pac-Man 和鬼魂名單。

所有設定錯誤（出生點在牆上、巡邏距離設定矛盾、未知的行為類型）都在這裡以 ValueError 拋出，
遊戲開始後就不需要再逐步檢查。
"""

# 匯入相關的實體類
from .pacman import PacMan
from .ghost import Ghost, BehaviorKind, GHOST_CLASSES
# 匯入型別提示模組
from typing import Dict, List, Optional, Sequence, Tuple
import random
from config import PLAYER_SPAWN, GHOST_ROSTER, GHOST_RANDOM_SEED


def _check_spawn(maze, spawn: Tuple[int, int], owner: str) -> None:
    """確認出生點在迷宮範圍內且不是牆壁。"""
    x, y = spawn
    if not maze.is_passable(x, y):
        raise ValueError(f"{owner} 的出生點 {spawn} 不在迷宮內或位於牆壁上")


def create_ghost(spec: Dict, rng: Optional[random.Random] = None) -> Ghost:
    """
    根據單一名單項目建立鬼魂。

    Args:
        spec (Dict): 名單項目，需包含 name、behavior、spawn，可選 color 與行為參數。
        rng (random.Random, optional): 巡邏鬼魂使用的亂數產生器。

    Returns:
        Ghost: 對應行為類型的鬼魂物件。
    """
    try:
        kind = BehaviorKind(spec["behavior"])
    except ValueError:
        raise ValueError(f"未知的鬼魂行為類型：{spec['behavior']!r}") from None
    x, y = spec["spawn"]
    kwargs = {"name": spec["name"]}
    if "color" in spec:
        kwargs["color"] = spec["color"]
    if kind is BehaviorKind.PATROL:
        for key in ("chase_distance", "lose_distance"):
            if key in spec:
                kwargs[key] = spec[key]
        kwargs["rng"] = rng
    elif kind is BehaviorKind.PATH_FOLLOWER and "close_range" in spec:
        kwargs["close_range"] = spec["close_range"]
    return GHOST_CLASSES[kind](x, y, **kwargs)


def initialize_entities(maze, roster: Sequence[Dict] = GHOST_ROSTER,
                        player_spawn: Tuple[int, int] = PLAYER_SPAWN,
                        rng: Optional[random.Random] = None) -> Tuple[PacMan, List[Ghost]]:
    """
    初始化所有遊戲實體，包括 Pac-Man 和鬼魂。

    原理：
    - Pac-Man 和每個鬼魂都在固定的出生點生成，不做隨機化，確保每局開局一致。
    - 鬼魂名單在整局遊戲中不會改變，鬼魂只會被重置位置，不會被重新建立。
    - 若未提供 rng，巡邏鬼魂共用一個以 GHOST_RANDOM_SEED 建立的亂數產生器。

    Args:
        maze: 迷宮物件，提供通行性檢查。
        roster (Sequence[Dict]): 鬼魂名單，預設為 config.GHOST_ROSTER。
        player_spawn (Tuple[int, int]): Pac-Man 出生點。
        rng (random.Random, optional): 巡邏鬼魂使用的亂數產生器。

    Returns:
        Tuple: (pacman, ghosts)

    Raises:
        ValueError: 名單為空、名稱重複、出生點無效或鬼魂參數不合法時。
    """
    # 初始化 Pac-Man
    _check_spawn(maze, player_spawn, "Pac-Man")
    pacman = PacMan(player_spawn[0], player_spawn[1])

    if not roster:
        raise ValueError("鬼魂名單不可為空")
    names = [spec["name"] for spec in roster]
    if len(set(names)) != len(names):
        raise ValueError(f"鬼魂名稱重複：{names}")

    if rng is None:
        rng = random.Random(GHOST_RANDOM_SEED)
    # 依名單順序建立鬼魂
    ghosts = []
    for spec in roster:
        _check_spawn(maze, tuple(spec["spawn"]), spec["name"])
        ghosts.append(create_ghost(spec, rng))

    return pacman, ghosts
