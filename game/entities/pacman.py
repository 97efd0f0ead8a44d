# game/entities/pacman.py
"""
定義玩家角色 Pac-Man，負責緩衝轉向與逐格移動。
"""

from typing import Tuple  # 用於型別提示
from .entity_base import Entity  # 匯入實體基類
from config import DIRECTION_NONE


class PacMan(Entity):
    def __init__(self, x: int, y: int):
        """
        初始化 Pac-Man，設置位置與移動方向。

        原理：
        - direction：目前移動方向，每個玩家邏輯步沿此方向前進一格。
        - pending_direction：最近一次輸入的方向，只要該方向的下一格可通行就立即採用，
          否則保留目前方向（經典的「預先轉彎」操作手感）。

        Args:
            x (int): 迷宮中的 x 坐標（格子坐標）。
            y (int): 迷宮中的 y 坐標（格子坐標）。
        """
        super().__init__(x, y, 'P')
        self.direction: Tuple[int, int] = DIRECTION_NONE
        self.pending_direction: Tuple[int, int] = DIRECTION_NONE

    def set_pending_direction(self, dx: int, dy: int) -> None:
        """記錄玩家輸入的方向，於下一個玩家邏輯步生效。"""
        self.pending_direction = (dx, dy)

    def step(self, maze) -> bool:
        """
        執行一個玩家邏輯步。

        原理：
        - 若 pending_direction 指向可通行格子，改用該方向；否則保留目前方向。
        - 沿目前方向前進一格，若前方是牆壁則停在原地。

        Args:
            maze: 迷宮物件。

        Returns:
            bool: 本步是否移動到新格子。
        """
        pdx, pdy = self.pending_direction
        if maze.is_passable(self.x + pdx, self.y + pdy):
            self.direction = self.pending_direction
        dx, dy = self.direction
        if (dx, dy) == DIRECTION_NONE:
            return False
        return self.set_new_target(dx, dy, maze)

    def reset(self) -> None:
        """回到出生點並清除移動方向與輸入方向。"""
        self.return_to_spawn()
        self.direction = DIRECTION_NONE
        self.pending_direction = DIRECTION_NONE
