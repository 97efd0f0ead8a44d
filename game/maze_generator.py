# game/maze_generator.py
"""
迷宮模組，負責建立遊戲使用的格狀迷宮，並管理牆壁與分數球的狀態。

這個模組提供 Map 類別：固定的牆壁佈局、只會被吃掉一次的分數球與能量球，
以及通行性、視線與勝利條件等查詢。
"""

# 匯入必要的模組
from typing import List, NamedTuple, Optional, Tuple  # 用於型別提示
import numpy as np  # 用於輸出迷宮快照陣列
# 從 config 檔案匯入常數，例如迷宮尺寸、圖塊類型和分數
from config import (MAZE_WIDTH, MAZE_HEIGHT, TILE_EMPTY, TILE_WALL, TILE_PELLET, TILE_POWER_PELLET,
                    CELL_CODES, DIRECTIONS, PELLET_SCORE, POWER_PELLET_SCORE)


class CollectResult(NamedTuple):
    """吃掉一個格子的結果：增加的分數與是否觸發能量效果。"""
    score_delta: int
    power_up: bool


class Map:
    def __init__(self, width: int = MAZE_WIDTH, height: int = MAZE_HEIGHT):
        """
        初始化迷宮，設置尺寸並填滿分數球，外圍一圈為牆壁。

        原理：
        - 迷宮格子儲存在一維陣列中，索引計算公式：i = x + y * width。
        - 外圍邊界（第一列、最後一列、第一行、最後一行）固定為牆壁，
          確保任何移動都不會越界。
        - 建立後記錄一份初始佈局，重新開始遊戲時用來恢復所有分數球。

        Args:
            width (int): 迷宮寬度（格子數）。
            height (int): 迷宮高度（格子數）。

        Raises:
            ValueError: 若迷宮尺寸小於 3x3，無法同時容納邊界和通道。
        """
        if width < 3 or height < 3:
            raise ValueError(f"迷宮尺寸過小：{width}x{height}，至少需要 3x3")
        # 設置迷宮寬度和高度
        self.width = width
        self.height = height
        # 初始化迷宮格子陣列，所有格子初始為分數球
        self.tiles = [TILE_PELLET for _ in range(self.width * self.height)]
        # 定義四個移動方向：上、下、左、右
        self.directions = list(DIRECTIONS)
        # 初始化迷宮邊界
        self._initialize_map()
        self.save_pellet_layout()

    @classmethod
    def from_rows(cls, rows: List[str]) -> 'Map':
        """
        從字串列表建立迷宮，每個字串代表一列，每個字元代表一個圖塊。

        Args:
            rows (List[str]): 迷宮各列的圖塊字串，長度必須一致。

        Returns:
            Map: 建立完成的迷宮物件。

        Raises:
            ValueError: 列長度不一致、出現未知圖塊或外圍不是完整牆壁時。
        """
        if not rows or len({len(row) for row in rows}) != 1:
            raise ValueError("迷宮的每一列長度必須一致且不可為空")
        maze = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            for x, tile in enumerate(row):
                if tile not in CELL_CODES:
                    raise ValueError(f"未知的圖塊 {tile!r} 位於 ({x}, {y})")
                maze.set_tile(x, y, tile)
        maze.validate_boundary()
        maze.save_pellet_layout()
        return maze

    def _initialize_map(self):
        """
        初始化迷宮邊界，設置為牆壁圖塊。
        """
        # 設置頂部和底部邊界
        for x in range(self.width):
            self.set_tile(x, 0, TILE_WALL)  # 頂部邊界
            self.set_tile(x, self.height - 1, TILE_WALL)  # 底部邊界
        # 設置左側和右側邊界
        for y in range(self.height):
            self.set_tile(0, y, TILE_WALL)  # 左側邊界
            self.set_tile(self.width - 1, y, TILE_WALL)  # 右側邊界

    def validate_boundary(self) -> None:
        """
        檢查外圍一圈是否全為牆壁。

        Raises:
            ValueError: 若邊界上有任何非牆壁格子。
        """
        for x in range(self.width):
            for y in (0, self.height - 1):
                if self.get_tile(x, y) != TILE_WALL:
                    raise ValueError(f"迷宮邊界 ({x}, {y}) 必須是牆壁")
        for y in range(self.height):
            for x in (0, self.width - 1):
                if self.get_tile(x, y) != TILE_WALL:
                    raise ValueError(f"迷宮邊界 ({x}, {y}) 必須是牆壁")

    def generate_maze(self):
        """
        生成預設的遊戲迷宮佈局。

        原理：
        - 中央十字牆，正中央留下三格寬的缺口，讓四個區域互通。
        - 四個角落各有一個只有兩面牆的小房間，並留下一個入口。
        - 左右各一道有缺口的垂直屏障、上下各一道有缺口的水平屏障，形成關鍵通道。
        - 能量球放在四個角落和迷宮中心。
        - 佈局完全固定，不使用隨機數，同樣尺寸每次生成結果相同。
        """
        w, h = self.width, self.height
        mid_x, mid_y = w // 2, h // 2
        self.tiles = [TILE_PELLET for _ in range(w * h)]
        self._initialize_map()

        # 中央十字，正中央三格不設牆
        for y in range(3, h - 3):
            if y not in (mid_y - 1, mid_y, mid_y + 1):
                self.set_tile(mid_x, y, TILE_WALL)
                self.set_tile(mid_x - 1, y, TILE_WALL)
        for x in range(3, w - 3):
            if x not in (mid_x - 1, mid_x, mid_x + 1):
                self.set_tile(x, mid_y, TILE_WALL)
                self.set_tile(x, mid_y - 1, TILE_WALL)

        # 角落房間
        for y in range(2, 6):
            for x in range(2, 6):
                if y == 2 or x == 2:
                    self.set_tile(x, y, TILE_WALL)  # 左上
        self.set_tile(2, 3, TILE_PELLET)
        for y in range(2, 6):
            for x in range(w - 6, w - 2):
                if y == 2 or x == w - 3:
                    self.set_tile(x, y, TILE_WALL)  # 右上
        self.set_tile(w - 3, 3, TILE_PELLET)
        for y in range(h - 6, h - 2):
            for x in range(2, 6):
                if y == h - 3 or x == 2:
                    self.set_tile(x, y, TILE_WALL)  # 左下
        self.set_tile(2, h - 4, TILE_PELLET)
        for y in range(h - 6, h - 2):
            for x in range(w - 6, w - 2):
                if y == h - 3 or x == w - 3:
                    self.set_tile(x, y, TILE_WALL)  # 右下
        self.set_tile(w - 3, h - 4, TILE_PELLET)

        # 有缺口的屏障
        for y in range(8, h - 8):
            if y % 3 != 0:
                self.set_tile(8, y, TILE_WALL)
                self.set_tile(w - 9, y, TILE_WALL)
        for x in range(8, w - 8):
            if x % 4 != 0:
                self.set_tile(x, 8, TILE_WALL)
                self.set_tile(x, h - 9, TILE_WALL)

        # 能量球
        for x, y in [(2, 2), (w - 3, 2), (2, h - 3), (w - 3, h - 3), (mid_x, mid_y)]:
            self.set_tile(x, y, TILE_POWER_PELLET)

        self.save_pellet_layout()

    def __str__(self):
        """
        返回迷宮的字串表示，每行表示迷宮的一列格子，用於調試。
        """
        s = ""
        for y in range(self.height):
            for x in range(self.width):
                s += self.tiles[self.xy_to_i(x, y)]  # 添加當前格子的圖塊字符
            s += "\n"  # 每行結束後換行
        return s

    def xy_to_i(self, x, y):
        """將 (x, y) 坐標轉換為一維索引：i = x + y * width。"""
        return x + y * self.width

    def i_to_xy(self, i):
        """將一維索引轉換為 (x, y) 坐標：x = i % width, y = i // width。"""
        return i % self.width, i // self.width

    def xy_valid(self, x, y):
        """檢查座標是否在迷宮範圍內：0 <= x < width 且 0 <= y < height。"""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x, y) -> Optional[str]:
        """
        獲取指定座標的圖塊。

        Args:
            x (int): x 坐標。
            y (int): y 坐標。

        Returns:
            str or None: 圖塊類型，若坐標無效則返回 None。
        """
        if not self.xy_valid(x, y):
            return None
        return self.tiles[self.xy_to_i(x, y)]

    def set_tile(self, x, y, value):
        """設置指定座標的圖塊類型，僅在坐標有效時執行。"""
        if self.xy_valid(x, y):
            self.tiles[self.xy_to_i(x, y)] = value

    def is_passable(self, x, y) -> bool:
        """
        檢查格子是否可通行：在迷宮範圍內且不是牆壁。
        """
        return self.xy_valid(x, y) and self.get_tile(x, y) != TILE_WALL

    def neighbors(self, x, y) -> List[Tuple[int, int]]:
        """
        返回四個方向中可通行的相鄰格子，順序固定為上、下、左、右。

        Args:
            x (int): x 坐標。
            y (int): y 坐標。

        Returns:
            List[Tuple[int, int]]: 可通行的相鄰格子坐標。
        """
        return [(x + dx, y + dy) for dx, dy in self.directions if self.is_passable(x + dx, y + dy)]

    def collect(self, x, y) -> CollectResult:
        """
        吃掉指定格子上的分數球或能量球。

        原理：
        - 分數球：格子變為空格，返回 PELLET_SCORE。
        - 能量球：格子變為空格，返回 POWER_PELLET_SCORE 並標記觸發能量效果。
        - 空格、牆壁或越界：不做任何事，返回 0 分。
        - 每個球只會被吃一次，重複呼叫同一格子不會再得分。

        Args:
            x (int): x 坐標。
            y (int): y 坐標。

        Returns:
            CollectResult: (score_delta, power_up)。
        """
        tile = self.get_tile(x, y)
        if tile == TILE_PELLET:
            self.set_tile(x, y, TILE_EMPTY)
            return CollectResult(PELLET_SCORE, False)
        if tile == TILE_POWER_PELLET:
            self.set_tile(x, y, TILE_EMPTY)
            return CollectResult(POWER_PELLET_SCORE, True)
        return CollectResult(0, False)

    def has_clear_line_of_sight(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        """
        檢查兩個格子之間的直線上是否沒有牆壁（包含兩端點）。

        原理：
        - 使用 Bresenham 整數直線演算法，逐格走過兩點之間的離散線段。
        - 以列方向（y）為主軸推進誤差項，只要經過任何牆壁格子即返回 False。
        - 只用於 A* 鬼魂的近距離觸發判斷，不是完整的視野系統。

        Args:
            a (Tuple[int, int]): 起點 (x, y)。
            b (Tuple[int, int]): 終點 (x, y)。

        Returns:
            bool: 線段上沒有牆壁時為 True。
        """
        (x1, y1), (x2, y2) = a, b
        dy = abs(y2 - y1)
        dx = abs(x2 - x1)
        sy = 1 if y1 < y2 else -1
        sx = 1 if x1 < x2 else -1
        err = dy - dx
        x, y = x1, y1
        while True:
            if self.get_tile(x, y) == TILE_WALL:
                return False
            if x == x2 and y == y2:
                return True
            e2 = 2 * err
            if e2 > -dx:
                err -= dx
                y += sy
            if e2 < dy:
                err += dy
                x += sx

    def count_pellets(self) -> int:
        """返回剩餘的分數球與能量球總數。"""
        return sum(1 for tile in self.tiles if tile in (TILE_PELLET, TILE_POWER_PELLET))

    def all_pellets_collected(self) -> bool:
        """所有分數球與能量球都被吃完時返回 True，即勝利條件。"""
        return self.count_pellets() == 0

    def save_pellet_layout(self) -> None:
        """記錄目前所有分數球與能量球的位置，作為 reset_pellets 的恢復依據。"""
        self._pellet_layout = {i: tile for i, tile in enumerate(self.tiles)
                               if tile in (TILE_PELLET, TILE_POWER_PELLET)}

    def reset_pellets(self) -> None:
        """
        恢復最近一次記錄的分數球與能量球。

        只改寫記錄中的球格，牆壁不會被移除；之後才加上的牆壁也維持原狀。
        """
        for i, tile in self._pellet_layout.items():
            if self.tiles[i] != TILE_WALL:
                self.tiles[i] = tile

    def to_array(self) -> np.ndarray:
        """
        將迷宮轉換為 numpy 陣列，形狀為 (height, width)。

        Returns:
            np.ndarray: int8 陣列，圖塊編碼見 config.CELL_CODES（0 空格、1 牆壁、2 分數球、3 能量球）。
        """
        codes = [CELL_CODES[tile] for tile in self.tiles]
        return np.array(codes, dtype=np.int8).reshape(self.height, self.width)
