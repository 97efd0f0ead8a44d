# game/entities/ghost.py
"""
定義基礎鬼魂類別（Ghost）及其子類（AggressiveGhost, PatrolGhost, PathFollowerGhost），
提供通用的逃跑行為和各自的追逐策略。

每個子類只需實作 decide_next_move；能量球生效時的逃跑行為由遊戲控制器在分派前套用，
避免在三種策略中重複同一條規則。
"""

# 匯入必要的模組
from abc import ABC, abstractmethod  # 用於定義抽象基類
from enum import Enum  # 用於定義鬼魂模式與行為類型
import random  # 用於巡邏鬼魂的隨機遊蕩
from typing import List, Optional, Tuple  # 用於型別提示
from .entity_base import Entity  # 匯入實體基類
from ..pathfinding import find_path, manhattan  # 匯入 A* 尋路與曼哈頓距離
from config import (RED, CYAN, PURPLE, DIRECTION_NONE, CLOSE_RANGE_DISTANCE,
                    PATROL_CHASE_DISTANCE, PATROL_LOSE_DISTANCE, GHOST_RANDOM_SEED)


class GhostMode(Enum):
    """鬼魂目前的行為模式。"""
    CHASING = "chasing"
    WANDERING = "wandering"
    FRIGHTENED = "frightened"


class BehaviorKind(Enum):
    """鬼魂的行為類型。"""
    AGGRESSIVE = "aggressive"
    PATROL = "patrol"
    PATH_FOLLOWER = "path_follower"

    @property
    def is_slow(self) -> bool:
        """A* 鬼魂使用較慢的邏輯步長，其他鬼魂使用一般鬼魂步長。"""
        return self is BehaviorKind.PATH_FOLLOWER


def closest_neighbor(maze, position: Tuple[int, int], target: Tuple[int, int]) -> Tuple[int, int]:
    """
    貪婪追逐：返回與目標曼哈頓距離最小的可通行相鄰格子。

    距離相同時保留最先檢查到的格子（上、下、左、右）；沒有可通行格子時留在原地。
    """
    best, best_distance = position, float('inf')
    for neighbor in maze.neighbors(position[0], position[1]):
        distance = manhattan(neighbor, target)
        if distance < best_distance:
            best, best_distance = neighbor, distance
    return best


def farthest_neighbor(maze, position: Tuple[int, int], target: Tuple[int, int]) -> Tuple[int, int]:
    """
    貪婪逃跑：返回與目標曼哈頓距離最大的可通行相鄰格子。

    距離相同時保留最先檢查到的格子（上、下、左、右）；沒有可通行格子時留在原地。
    """
    worst, worst_distance = position, -1
    for neighbor in maze.neighbors(position[0], position[1]):
        distance = manhattan(neighbor, target)
        if distance > worst_distance:
            worst, worst_distance = neighbor, distance
    return worst


class Ghost(Entity, ABC):
    # 每個子類都必須指定自己的行為類型，基類不提供預設值
    behavior: BehaviorKind
    default_mode = GhostMode.CHASING

    def __init__(self, x: int, y: int, name: str = "Ghost", color: Tuple[int, int, int] = RED):
        """
        初始化基礎鬼魂，設置位置、名稱、顏色和狀態屬性。

        原理：
        - 鬼魂是遊戲中的敵人，每個鬼魂有固定的出生點、顏色與行為類型。
        - mode：目前模式（追逐或遊蕩），只有巡邏鬼魂會在兩種模式之間切換。
        - last_direction：上一步的移動方向，用於避免遊蕩時來回移動。

        Args:
            x (int): 迷宮中的 x 坐標（格子坐標）。
            y (int): 迷宮中的 y 坐標（格子坐標）。
            name (str): 鬼魂名稱，預設為 "Ghost"。
            color (Tuple[int, int, int]): 鬼魂的 RGB 顏色，預設為紅色。
        """
        # 調用基類 Entity 的初始化方法，設置坐標和符號 'G'
        super().__init__(x, y, 'G')
        # 設置鬼魂名稱，用於區分不同鬼魂
        self.name = name
        # 設置鬼魂顏色，用於遊戲渲染
        self.color = color
        # 初始化模式與上一步方向
        self.mode = self.default_mode
        self.last_direction: Tuple[int, int] = DIRECTION_NONE

    @abstractmethod
    def decide_next_move(self, pacman, maze) -> Tuple[int, int]:
        """
        決定下一步要前往的格子，由子類實作各自的追逐策略。

        Args:
            pacman: PacMan 物件，提供位置信息。
            maze: 迷宮物件，提供通行性查詢。

        Returns:
            Tuple[int, int]: 下一步的格子坐標，返回目前位置表示本步不動。
        """

    def escape_from_pacman(self, pacman, maze) -> Tuple[int, int]:
        """
        能量球生效期間的逃跑行為：選擇離 Pac-Man 曼哈頓距離最遠的相鄰格子。

        Args:
            pacman: PacMan 物件。
            maze: 迷宮物件。

        Returns:
            Tuple[int, int]: 下一步的格子坐標。
        """
        return farthest_neighbor(maze, self.position, pacman.position)

    def advance(self, target: Tuple[int, int]) -> bool:
        """
        移動到 decide_next_move 或 escape_from_pacman 選出的格子，並記錄移動方向。

        Returns:
            bool: 是否離開了原本的格子。
        """
        if target == self.position:
            return False
        self.last_direction = (target[0] - self.x, target[1] - self.y)
        self.move_to(target[0], target[1])
        return True

    def reset(self) -> None:
        """
        玩家死亡後重置鬼魂：回到出生點、清除上一步方向並恢復預設模式。
        """
        self.return_to_spawn()
        self.last_direction = DIRECTION_NONE
        self.mode = self.default_mode

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, position={self.position}, mode={self.mode.value})"


class AggressiveGhost(Ghost):
    behavior = BehaviorKind.AGGRESSIVE

    def decide_next_move(self, pacman, maze) -> Tuple[int, int]:
        """
        直接追逐策略：每一步都走向離 Pac-Man 最近的相鄰格子。

        原理：
        - 只看一步，不做任何前瞻，因此可能在障礙物附近卡在局部最小值。
        """
        return closest_neighbor(maze, self.position, pacman.position)


class PatrolGhost(Ghost):
    behavior = BehaviorKind.PATROL
    default_mode = GhostMode.WANDERING

    def __init__(self, x: int, y: int, name: str = "Patrol", color: Tuple[int, int, int] = CYAN,
                 chase_distance: int = PATROL_CHASE_DISTANCE, lose_distance: int = PATROL_LOSE_DISTANCE,
                 rng: Optional[random.Random] = None):
        """
        初始化巡邏鬼魂。

        原理：
        - 兩種模式之間使用遲滯區間切換：
          - 遊蕩 → 追逐：與 Pac-Man 的距離 <= chase_distance。
          - 追逐 → 遊蕩：與 Pac-Man 的距離 > lose_distance。
        - lose_distance 必須大於 chase_distance，中間的空檔避免在單一門檻附近反覆切換。

        Args:
            x (int): x 坐標。
            y (int): y 坐標。
            name (str): 鬼魂名稱。
            color (Tuple[int, int, int]): 鬼魂顏色。
            chase_distance (int): 開始追逐的距離。
            lose_distance (int): 放棄追逐的距離。
            rng (random.Random, optional): 遊蕩使用的亂數產生器，可指定種子以重現路線。

        Raises:
            ValueError: 若 lose_distance <= chase_distance。
        """
        if lose_distance <= chase_distance:
            raise ValueError(f"{name}: lose_distance ({lose_distance}) 必須大於 chase_distance ({chase_distance})")
        super().__init__(x, y, name, color)
        self.chase_distance = chase_distance
        self.lose_distance = lose_distance
        self.rng = rng if rng is not None else random.Random(GHOST_RANDOM_SEED)

    def update_mode(self, pacman) -> GhostMode:
        """根據與 Pac-Man 的距離更新模式，並返回更新後的模式。"""
        distance = manhattan(self.position, pacman.position)
        if self.mode is GhostMode.WANDERING and distance <= self.chase_distance:
            self.mode = GhostMode.CHASING  # 玩家進入偵測範圍
        elif self.mode is GhostMode.CHASING and distance > self.lose_distance:
            self.mode = GhostMode.WANDERING  # 玩家逃出範圍
        return self.mode

    def decide_next_move(self, pacman, maze) -> Tuple[int, int]:
        """
        巡邏策略：追逐模式下與直接追逐相同，遊蕩模式下隨機選擇方向。
        """
        if self.update_mode(pacman) is GhostMode.CHASING:
            return closest_neighbor(maze, self.position, pacman.position)
        return self.wander(maze)

    def wander(self, maze) -> Tuple[int, int]:
        """
        隨機遊蕩：在可通行的相鄰格子中均勻隨機選擇一個。

        除非只剩回頭路，否則排除與上一步方向相反的格子。
        """
        available = maze.neighbors(self.x, self.y)
        if not available:
            return self.position
        reverse = (self.x - self.last_direction[0], self.y - self.last_direction[1])
        forward = [cell for cell in available if cell != reverse]
        return self.rng.choice(forward or available)


class PathFollowerGhost(Ghost):
    behavior = BehaviorKind.PATH_FOLLOWER

    def __init__(self, x: int, y: int, name: str = "PathFollower", color: Tuple[int, int, int] = PURPLE,
                 close_range: int = CLOSE_RANGE_DISTANCE):
        """
        初始化 A* 鬼魂，沿快取的最短路徑追逐 Pac-Man。

        Args:
            x (int): x 坐標。
            y (int): y 坐標。
            name (str): 鬼魂名稱。
            color (Tuple[int, int, int]): 鬼魂顏色。
            close_range (int): 近距離重新計算路徑的距離門檻，預設為 4。
        """
        super().__init__(x, y, name, color)
        self.close_range = close_range
        # 快取的路徑，path[0] 為目前位置
        self.path: List[Tuple[int, int]] = []

    def decide_next_move(self, pacman, maze) -> Tuple[int, int]:
        """
        路徑追逐策略：依優先順序決定是否重新計算路徑，再沿路徑前進一格。

        原理：
        - (a) 距離 <= close_range、兩者之間沒有牆壁且自己有可通行方向時，
          每一步都重新計算 A* 路徑，近距離時追得更精準。
        - (b) 否則當快取路徑已用完（長度 <= 1）且有可通行方向時，重新計算。
        - 路徑長度 > 1 時前進到 path[1] 並丟棄已走過的起點；
          沒有可用路徑時本步停在原地，等待下次重新計算。
        """
        distance = manhattan(self.position, pacman.position)
        can_move = bool(maze.neighbors(self.x, self.y))
        if (distance <= self.close_range and maze.has_clear_line_of_sight(self.position, pacman.position)
                and can_move):
            self.path = find_path(self.position, pacman.position, maze)
        elif len(self.path) <= 1 and can_move:
            self.path = find_path(self.position, pacman.position, maze)

        if len(self.path) > 1:
            self.path.pop(0)
            return self.path[0]
        return self.position

    def escape_from_pacman(self, pacman, maze) -> Tuple[int, int]:
        """逃跑時放棄快取路徑，能量效果結束後重新計算。"""
        self.path = []
        return super().escape_from_pacman(pacman, maze)

    def return_to_spawn(self) -> None:
        super().return_to_spawn()
        self.path = []


# 行為類型與鬼魂類別的對應表
GHOST_CLASSES = {
    BehaviorKind.AGGRESSIVE: AggressiveGhost,
    BehaviorKind.PATROL: PatrolGhost,
    BehaviorKind.PATH_FOLLOWER: PathFollowerGhost,
}
