# game/entities/entity_base.py
"""
定義遊戲中實體的基類，提供格子坐標、出生點與移動功能，適用於玩家和鬼魂。
"""

# 匯入型別提示模組
from typing import Tuple


class Entity:
    def __init__(self, x: int, y: int, symbol: str):
        """
        初始化基本實體，設置位置、出生點和符號。

        原理：
        - Entity 基類為所有遊戲實體（Pac-Man、鬼魂）提供通用的屬性和方法。
        - 遊戲邏輯完全以格子坐標 (x, y) 運作，每個邏輯步最多移動一格。
        - 出生點 (spawn_x, spawn_y) 在建立後固定不變，死亡或重新開始時回到此處。

        Args:
            x (int): 迷宮中的 x 坐標（格子坐標）。
            y (int): 迷宮中的 y 坐標（格子坐標）。
            symbol (str): 實體的符號表示（例如 'P' 表示 Pac-Man，'G' 表示鬼魂）。
        """
        # 設置格子坐標
        self.x = x
        self.y = y
        # 設置實體符號
        self.symbol = symbol
        # 記錄出生點
        self.spawn_x = x
        self.spawn_y = y

    @property
    def position(self) -> Tuple[int, int]:
        """當前格子坐標 (x, y)。"""
        return self.x, self.y

    @property
    def spawn(self) -> Tuple[int, int]:
        """出生點坐標 (x, y)。"""
        return self.spawn_x, self.spawn_y

    def move_to(self, x: int, y: int) -> None:
        """直接移動到指定格子，不做通行性檢查。"""
        self.x, self.y = x, y

    def return_to_spawn(self) -> None:
        """回到出生點。"""
        self.x, self.y = self.spawn_x, self.spawn_y

    def set_new_target(self, dx: int, dy: int, maze) -> bool:
        """
        嘗試朝指定方向移動一格，檢查是否可通行。

        原理：
        - 目標位置 (x + dx, y + dy) 必須在迷宮內且不是牆壁。
        - 若不可通行，位置保持不變，不拋出例外。

        Args:
            dx (int): x 方向偏移（例如 -1 表示左，1 表示右）。
            dy (int): y 方向偏移（例如 -1 表示上，1 表示下）。
            maze: 迷宮物件，提供 is_passable 檢查。

        Returns:
            bool: 是否成功移動。
        """
        # 計算新目標格子坐標
        new_x, new_y = self.x + dx, self.y + dy
        # 檢查目標是否可通行
        if maze.is_passable(new_x, new_y):
            self.move_to(new_x, new_y)
            return True
        return False
