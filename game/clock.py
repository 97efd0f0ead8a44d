# game/clock.py
"""
固定步長的模擬時鐘，將不固定的畫面更新間隔轉換為三種固定速率的邏輯步。
"""

from typing import Callable, Optional  # 用於型別提示
from config import PLAYER_STEP_MS, GHOST_STEP_MS, SLOW_GHOST_STEP_MS, MAX_FRAME_DELTA_MS


class SimulationClock:
    def __init__(self, player_step_ms: float = PLAYER_STEP_MS, ghost_step_ms: float = GHOST_STEP_MS,
                 slow_ghost_step_ms: float = SLOW_GHOST_STEP_MS, max_delta_ms: float = MAX_FRAME_DELTA_MS):
        """
        初始化模擬時鐘。

        原理：
        - 玩家、一般鬼魂、慢速鬼魂各有一個累加器，彼此獨立。
        - 每次外部呼叫時，時間差先被限制在 max_delta_ms 以內，再加到三個累加器上。
        - 累加器每累積到一個步長就執行一次對應的邏輯步並扣掉步長，
          因此一幀內可能執行多步，但步數永遠有上限（避免長時間暫停後連續補跑）。

        Args:
            player_step_ms (float): 玩家邏輯步長（毫秒）。
            ghost_step_ms (float): 一般鬼魂邏輯步長（毫秒）。
            slow_ghost_step_ms (float): 慢速鬼魂邏輯步長（毫秒）。
            max_delta_ms (float): 單次時間差上限（毫秒）。

        Raises:
            ValueError: 任何步長或上限不是正數時。
        """
        for label, value in (("player_step_ms", player_step_ms), ("ghost_step_ms", ghost_step_ms),
                             ("slow_ghost_step_ms", slow_ghost_step_ms), ("max_delta_ms", max_delta_ms)):
            if value <= 0:
                raise ValueError(f"{label} 必須是正數，目前為 {value}")
        self.player_step_ms = player_step_ms
        self.ghost_step_ms = ghost_step_ms
        self.slow_ghost_step_ms = slow_ghost_step_ms
        self.max_delta_ms = max_delta_ms
        self.reset()

    def reset(self) -> None:
        """清空三個累加器與上一次的時間戳記。"""
        self.player_acc = 0.0
        self.ghost_acc = 0.0
        self.slow_ghost_acc = 0.0
        self.last_now: Optional[float] = None

    def clamp(self, delta_ms: float) -> float:
        """將時間差限制在 [0, max_delta_ms]。"""
        return max(0.0, min(self.max_delta_ms, delta_ms))

    def delta_since(self, now_ms: float) -> float:
        """
        根據遞增的時間戳記計算時間差，第一次呼叫時返回 0。

        Args:
            now_ms (float): 目前時間戳記（毫秒）。

        Returns:
            float: 與上一次時間戳記的差值（尚未限制上限）。
        """
        if self.last_now is None:
            self.last_now = now_ms
        delta = now_ms - self.last_now
        self.last_now = now_ms
        return delta

    def advance(self, delta_ms: float,
                on_player_step: Callable[[], None],
                on_ghost_step: Callable[[], None],
                on_slow_ghost_step: Callable[[], None],
                on_timers: Optional[Callable[[float], None]] = None) -> float:
        """
        推進時鐘並執行到期的邏輯步。

        原理：
        - 執行順序固定：先呼叫 on_timers（每幀一次，傳入限制後的時間差），
          再依序跑完玩家步、一般鬼魂步、慢速鬼魂步。

        Args:
            delta_ms (float): 距離上一幀的時間差（毫秒）。
            on_player_step (Callable): 玩家邏輯步。
            on_ghost_step (Callable): 一般鬼魂邏輯步。
            on_slow_ghost_step (Callable): 慢速鬼魂邏輯步。
            on_timers (Callable, optional): 倒數計時器更新函數。

        Returns:
            float: 限制後實際使用的時間差。
        """
        delta = self.clamp(delta_ms)
        self.player_acc += delta
        self.ghost_acc += delta
        self.slow_ghost_acc += delta
        if on_timers is not None:
            on_timers(delta)

        while self.player_acc >= self.player_step_ms:
            on_player_step()
            self.player_acc -= self.player_step_ms
        while self.ghost_acc >= self.ghost_step_ms:
            on_ghost_step()
            self.ghost_acc -= self.ghost_step_ms
        while self.slow_ghost_acc >= self.slow_ghost_step_ms:
            on_slow_ghost_step()
            self.slow_ghost_acc -= self.slow_ghost_step_ms
        return delta
