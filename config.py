# config.py
"""
遊戲的全局設定參數，包括迷宮尺寸、圖塊類型、顏色、分數、計時器與鬼魂名單。

所有模組透過 `from config import ...` 取得常數；需要不同設定時，可在建構物件時以參數覆寫。
"""

# 迷宮尺寸（格子數）與每格像素大小
MAZE_WIDTH = 28
MAZE_HEIGHT = 31
CELL_SIZE = 20
# 畫面更新頻率（每秒幀數），僅影響前端迴圈，不影響遊戲邏輯速度
FPS = 60

# 圖塊類型
TILE_EMPTY = ' '  # 已被吃掉的空格
TILE_WALL = '#'  # 牆壁（含外圍邊界）
TILE_PELLET = '.'  # 分數球
TILE_POWER_PELLET = 'E'  # 能量球
# 圖塊在 numpy 快照中的編碼
CELL_CODES = {TILE_EMPTY: 0, TILE_WALL: 1, TILE_PELLET: 2, TILE_POWER_PELLET: 3}

# 方向向量 (dx, dy)，順序固定為上、下、左、右
DIRECTION_NONE = (0, 0)
DIRECTION_UP = (0, -1)
DIRECTION_DOWN = (0, 1)
DIRECTION_LEFT = (-1, 0)
DIRECTION_RIGHT = (1, 0)
DIRECTIONS = [DIRECTION_UP, DIRECTION_DOWN, DIRECTION_LEFT, DIRECTION_RIGHT]

# 分數
PELLET_SCORE = 10
POWER_PELLET_SCORE = 50
GHOST_EAT_SCORE = 200
STARTING_LIVES = 3

# 計時器（毫秒）
POWER_DURATION_MS = 4000  # 能量球效果持續時間
INVINCIBLE_DURATION_MS = 2000  # 死亡重生後的無敵時間

# 固定邏輯步長（毫秒）
PLAYER_STEP_MS = 100  # 玩家每 100ms 移動一格
GHOST_STEP_MS = 133  # 約玩家速度的 75%（追擊與巡邏鬼魂）
SLOW_GHOST_STEP_MS = 166  # 約玩家速度的 60%（A* 鬼魂較慢）
MAX_FRAME_DELTA_MS = 50  # 單幀時間差上限，避免長暫停後連續補跑大量邏輯步

# 尋路與鬼魂行為參數
PATHFINDING_MAX_EXPANSIONS = 100
CLOSE_RANGE_DISTANCE = 4
PATROL_CHASE_DISTANCE = 5
PATROL_LOSE_DISTANCE = 10
GHOST_RANDOM_SEED = None  # 設為整數可重現巡邏鬼魂的隨機路線

# 顏色定義 (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (253, 224, 71)
GOLD = (251, 191, 36)
RED = (239, 68, 68)
CYAN = (34, 211, 238)
PURPLE = (139, 92, 246)
DARK_BLUE = (30, 58, 138)
DARK_GRAY = (31, 41, 55)
LIGHT_GRAY = (229, 231, 235)

# 出生點 (x, y)
PLAYER_SPAWN = (2, MAZE_HEIGHT - 2)

# 鬼魂名單：名稱、行為類型、顏色、出生點與行為參數
GHOST_ROSTER = [
    {"name": "John", "behavior": "aggressive", "color": RED,
     "spawn": (MAZE_WIDTH - 3, 2)},
    {"name": "Kevin", "behavior": "patrol", "color": CYAN,
     "spawn": (2, 2),
     "chase_distance": PATROL_CHASE_DISTANCE, "lose_distance": PATROL_LOSE_DISTANCE},
    {"name": "Doug", "behavior": "path_follower", "color": PURPLE,
     "spawn": (MAZE_WIDTH - 3, MAZE_HEIGHT - 3)},
]
