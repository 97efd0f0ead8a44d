# game/game.py
"""
定義遊戲的核心邏輯，包括初始化、逐幀更新、碰撞處理和遊戲結束條件。

這個模組的 Game 類別獨自擁有迷宮、Pac-Man、鬼魂、計時器與分數，
外部只需要每幀呼叫 tick / tick_at，並透過 snapshot 取得渲染所需的唯讀狀態。
"""

# 匯入必要的模組
from enum import Enum  # 用於定義遊戲結果
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple  # 用於型別提示
import random
import numpy as np  # 快照中的迷宮陣列
from .entities.pacman import PacMan  # 匯入 Pac-Man 類，管理玩家角色
from .entities.ghost import Ghost, GhostMode  # 匯入鬼魂基類與模式
from .entities.entity_initializer import initialize_entities  # 匯入實體初始化函數
from .maze_generator import Map  # 匯入迷宮類，用於生成和管理迷宮
from .clock import SimulationClock  # 匯入固定步長時鐘
# 從 config 檔案匯入常數，例如分數、生命數和計時器長度
from config import (GHOST_ROSTER, PLAYER_SPAWN, STARTING_LIVES, GHOST_EAT_SCORE, POWER_DURATION_MS,
                    INVINCIBLE_DURATION_MS, DIRECTIONS, DIRECTION_NONE)


class Outcome(Enum):
    """遊戲結果，WON 與 LOST 為終止狀態。"""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GhostView(NamedTuple):
    """快照中單一鬼魂的唯讀狀態；能量效果期間 mode 一律為 FRIGHTENED。"""
    name: str
    position: Tuple[int, int]
    color: Tuple[int, int, int]
    mode: GhostMode


class GameSnapshot(NamedTuple):
    """提供給渲染器的唯讀遊戲狀態。"""
    grid: np.ndarray
    player: Tuple[int, int]
    player_direction: Tuple[int, int]
    ghosts: Tuple[GhostView, ...]
    score: int
    lives: int
    outcome: Outcome
    power_remaining_ms: float
    invincible_remaining_ms: float
    message: str


class Game:
    def __init__(self, maze: Optional[Map] = None, roster: Sequence[Dict] = GHOST_ROSTER,
                 player_spawn: Tuple[int, int] = PLAYER_SPAWN, clock: Optional[SimulationClock] = None,
                 rng: Optional[random.Random] = None):
        """
        初始化遊戲，設置迷宮、Pac-Man、鬼魂、時鐘與計分狀態。

        原理：
        - 未提供迷宮時使用預設佈局（Map.generate_maze）。
        - 所有設定錯誤（邊界不完整、出生點無效、巡邏距離矛盾）都在建構時以 ValueError 拋出，
          遊戲進行中不再做逐步檢查。
        - 遊戲狀態全部屬於這個物件，沒有任何模組層級的全域狀態。

        Args:
            maze (Map, optional): 迷宮物件。
            roster (Sequence[Dict]): 鬼魂名單。
            player_spawn (Tuple[int, int]): Pac-Man 出生點。
            clock (SimulationClock, optional): 模擬時鐘，預設使用 config 中的步長。
            rng (random.Random, optional): 巡邏鬼魂使用的亂數產生器。
        """
        if maze is None:
            maze = Map()
            maze.generate_maze()
        else:
            maze.validate_boundary()
        # 以開局時的佈局作為重新開始時的分數球配置
        maze.save_pellet_layout()
        # 初始化迷宮與所有實體
        self.maze = maze
        self.pacman, self.ghosts = initialize_entities(maze, roster, player_spawn, rng)
        # 初始化模擬時鐘
        self.clock = clock if clock is not None else SimulationClock()
        self._reset_session()

    def _reset_session(self) -> None:
        """重置分數、生命數、計時器和遊戲結果。"""
        self.score = 0
        self.lives = STARTING_LIVES
        self.power_remaining_ms = 0.0
        self.invincible_remaining_ms = 0.0
        self.outcome = Outcome.PLAYING
        self.message = ""

    def restart(self) -> None:
        """
        重新開始遊戲：恢復所有分數球，重置分數、生命數、計時器與所有角色位置。
        """
        self.maze.reset_pellets()
        self.pacman.reset()
        for ghost in self.ghosts:
            ghost.reset()
        self.clock.reset()
        self._reset_session()

    def set_pending_direction(self, dx: int, dy: int) -> None:
        """
        設置玩家輸入的方向，於下一個玩家邏輯步生效。

        Raises:
            ValueError: 若方向不是上下左右或靜止。
        """
        if (dx, dy) not in DIRECTIONS and (dx, dy) != DIRECTION_NONE:
            raise ValueError(f"無效的方向：{(dx, dy)}")
        self.pacman.set_pending_direction(dx, dy)

    def tick_at(self, now_ms: float) -> None:
        """
        以遞增的時間戳記更新遊戲，時間差由時鐘計算並限制上限。

        Args:
            now_ms (float): 目前時間戳記（毫秒）。
        """
        self.tick(self.clock.delta_since(now_ms))

    def tick(self, delta_ms: float) -> None:
        """
        更新遊戲狀態一幀。

        原理：
        - 遊戲已結束（勝利或失敗）時不做任何事。
        - 時鐘先以限制後的時間差遞減計時器（每幀一次），
          再依序執行到期的玩家步、一般鬼魂步和慢速鬼魂步，每一步之後都檢查碰撞。
        - 所有邏輯步結束後重新判斷遊戲結果：生命數 <= 0 為失敗，所有球被吃完為勝利。

        Args:
            delta_ms (float): 距離上一幀的時間差（毫秒）。
        """
        if self.outcome is not Outcome.PLAYING:
            return
        self.clock.advance(delta_ms, self._player_step, self._ghost_step, self._slow_ghost_step,
                           self._update_timers)
        self._update_outcome()

    def _update_timers(self, delta_ms: float) -> None:
        # 計時器不會低於 0
        self.power_remaining_ms = max(0.0, self.power_remaining_ms - delta_ms)
        self.invincible_remaining_ms = max(0.0, self.invincible_remaining_ms - delta_ms)

    def _player_step(self) -> None:
        """
        玩家邏輯步：移動 Pac-Man，抵達新格子時吃球，吃到能量球則啟動能量計時器。
        """
        if self.pacman.step(self.maze):
            result = self.maze.collect(self.pacman.x, self.pacman.y)
            self.score += result.score_delta
            if result.power_up:
                self.power_remaining_ms = POWER_DURATION_MS
        self.check_collision()

    def _ghost_step(self) -> None:
        """一般鬼魂邏輯步：移動追擊與巡邏鬼魂。"""
        for ghost in self.ghosts:
            if not ghost.behavior.is_slow:
                self._move_ghost(ghost)

    def _slow_ghost_step(self) -> None:
        """慢速鬼魂邏輯步：移動 A* 鬼魂。"""
        for ghost in self.ghosts:
            if ghost.behavior.is_slow:
                self._move_ghost(ghost)

    def _move_ghost(self, ghost: Ghost) -> None:
        # 能量效果期間所有鬼魂改為逃跑，不執行各自的策略
        if self.is_frightened():
            target = ghost.escape_from_pacman(self.pacman, self.maze)
        else:
            target = ghost.decide_next_move(self.pacman, self.maze)
        ghost.advance(target)
        self.check_collision()

    def check_collision(self) -> None:
        """
        檢查 Pac-Man 與鬼魂的碰撞，根據能量與無敵狀態更新分數或扣除生命。

        原理：
        - 同一格即視為碰撞。
        - 能量效果期間：獲得 GHOST_EAT_SCORE 分，該鬼魂傳送回自己的出生點，不扣生命，
          並繼續檢查其他鬼魂。
        - 否則若無敵計時器為 0：扣除一條命並執行死亡重置。
        - 無敵期間的碰撞直接忽略。
        """
        for ghost in self.ghosts:
            if ghost.position != self.pacman.position:
                continue
            if self.is_frightened():
                self.score += GHOST_EAT_SCORE
                ghost.return_to_spawn()
            elif not self.is_invincible():
                self.lives = max(0, self.lives - 1)
                self._reset_after_death()
                break

    def _reset_after_death(self) -> None:
        """
        死亡重置：Pac-Man 回到出生點並獲得短暫無敵，所有鬼魂回到各自的出生點並恢復預設模式。
        """
        self.pacman.reset()
        self.invincible_remaining_ms = INVINCIBLE_DURATION_MS
        for ghost in self.ghosts:
            ghost.reset()
        if self.lives > 0:
            self.message = "Ouch! Be careful."
            print(f"損失一條命！剩餘生命：{self.lives}")
        else:
            self.message = "Game Over"

    def _update_outcome(self) -> None:
        if self.lives <= 0:
            self.outcome = Outcome.LOST
            self.message = "Game Over"
            print(f"遊戲結束！分數：{self.score}")
        elif self.maze.all_pellets_collected():
            self.outcome = Outcome.WON
            self.message = "You cleared the maze!"
            print(f"遊戲勝利！所有彈丸已收集。最終分數：{self.score}")

    def snapshot(self) -> GameSnapshot:
        """
        返回目前遊戲狀態的唯讀快照，供渲染器使用。

        原理：
        - 迷宮以 numpy 陣列複製一份，渲染器修改快照不會影響遊戲。
        - 能量效果期間，所有鬼魂的模式顯示為 FRIGHTENED。

        Returns:
            GameSnapshot: 遊戲快照。
        """
        frightened = self.is_frightened()
        ghosts = tuple(
            GhostView(g.name, g.position, g.color, GhostMode.FRIGHTENED if frightened else g.mode)
            for g in self.ghosts
        )
        return GameSnapshot(
            grid=self.maze.to_array(),
            player=self.pacman.position,
            player_direction=self.pacman.direction,
            ghosts=ghosts,
            score=self.score,
            lives=self.lives,
            outcome=self.outcome,
            power_remaining_ms=self.power_remaining_ms,
            invincible_remaining_ms=self.invincible_remaining_ms,
            message=self.message,
        )

    def is_frightened(self) -> bool:
        """能量計時器大於 0 時，所有鬼魂處於逃跑狀態。"""
        return self.power_remaining_ms > 0

    def is_invincible(self) -> bool:
        """無敵計時器大於 0 時，Pac-Man 與鬼魂的碰撞被忽略。"""
        return self.invincible_remaining_ms > 0

    def is_running(self) -> bool:
        """檢查遊戲是否仍在進行。"""
        return self.outcome is Outcome.PLAYING

    def did_player_win(self) -> bool:
        """檢查玩家是否贏得遊戲。"""
        return self.outcome is Outcome.WON

    def get_pacman(self) -> PacMan:
        return self.pacman

    def get_maze(self) -> Map:
        return self.maze

    def get_ghosts(self) -> List[Ghost]:
        return self.ghosts

    def get_score(self) -> int:
        return self.score

    def get_lives(self) -> int:
        return self.lives
