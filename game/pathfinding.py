# game/pathfinding.py
"""
A* 尋路模組，在四連通的格狀迷宮上計算最短路徑。

這個模組不保存任何跨呼叫的狀態，每次搜尋都使用自己的開放集合與封閉集合，
因此可以安全地被多個鬼魂重複呼叫。
"""

from heapq import heappush, heappop  # 用於 A* 算法的優先級隊列
from itertools import count  # 用於記錄節點加入順序
from typing import Callable, List, Optional, Tuple  # 用於型別提示
from config import PATHFINDING_MAX_EXPANSIONS

Position = Tuple[int, int]


def manhattan(a: Position, b: Position) -> int:
    """計算兩個格子的曼哈頓距離：|x1 - x2| + |y1 - y2|。"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(start: Position, goal: Position, maze,
              max_expansions: int = PATHFINDING_MAX_EXPANSIONS,
              on_expand: Optional[Callable[[Position, int], None]] = None) -> List[Position]:
    """
    使用 A* 算法找到從 start 到 goal 的最短路徑。

    原理：
    - 每一步移動成本為 1，啟發式函數為曼哈頓距離 h(a, b) = |ax - bx| + |ay - by|。
      在四連通格子上此函數既可接受又一致，因此找到的路徑必為最短路徑。
    - 優先級隊列以 (f, 加入順序) 排序：f 相同時，先加入的節點先展開。
    - 已展開（封閉）的節點若再次從隊列取出，直接略過，不計入展開次數。
    - 展開次數達到 max_expansions 仍未抵達目標時返回空列表；
      呼叫者應將空路徑視為「這一步沒有可用路徑」，稍後再重新計算。

    Args:
        start (Tuple[int, int]): 起始位置 (x, y)。
        goal (Tuple[int, int]): 目標位置 (x, y)。
        maze: 迷宮物件，需提供 neighbors(x, y)。
        max_expansions (int): 最多展開的節點數，預設為 100。
        on_expand (Callable, optional): 每展開一個節點時呼叫 on_expand(position, 展開序號)，用於觀察搜尋過程。

    Returns:
        List[Tuple[int, int]]: 包含起點（索引 0）與終點的路徑；找不到路徑時為空列表。
    """
    if start == goal:
        return [start]

    # 初始化 A* 算法的數據結構
    order = count()
    open_set = []
    heappush(open_set, (manhattan(start, goal), next(order), start))  # (f_score, 加入順序, 節點)
    came_from = {}  # 記錄路徑來源
    g_score = {start: 0}  # 記錄到起點的實際成本
    closed_set = set()  # 已展開節點集合
    expansions = 0

    # A* 算法主循環
    while open_set and expansions < max_expansions:
        _, _, current = heappop(open_set)  # 取出 f_score 最小的節點
        if current in closed_set:
            continue
        closed_set.add(current)
        expansions += 1
        if on_expand is not None:
            on_expand(current, expansions)

        # 如果到達目標，回溯重建路徑
        if current == goal:
            path = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            path.reverse()
            return path

        # 檢查四個方向的鄰居
        for neighbor in maze.neighbors(current[0], current[1]):
            if neighbor in closed_set:
                continue
            tentative_g_score = g_score[current] + 1
            # 如果找到更低成本的路徑，更新數據
            if tentative_g_score < g_score.get(neighbor, float('inf')):
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g_score
                heappush(open_set, (tentative_g_score + manhattan(neighbor, goal), next(order), neighbor))

    return []
