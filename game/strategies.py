# game/strategies.py
"""
定義 Pac-Man 的玩家控制策略，將鍵盤輸入轉換為移動方向或重新開始的請求。
"""

# 匯入必要的模組
from abc import ABC, abstractmethod  # 用於定義抽象基類
import pygame  # 用於處理鍵盤輸入和遊戲事件
from config import DIRECTION_UP, DIRECTION_DOWN, DIRECTION_LEFT, DIRECTION_RIGHT


class ControlStrategy(ABC):
    """
    抽象基類，定義控制策略的接口。

    原理：
    - 控制策略只把外部事件轉換為對 Game 的請求（預定方向或重新開始），不包含任何遊戲規則。
    """
    @abstractmethod
    def handle_event(self, event, game) -> bool:
        """處理一個事件，返回事件是否被處理。"""


class PlayerControl(ControlStrategy):
    """
    玩家控制策略，通過鍵盤輸入控制 Pac-Man。

    原理：
    - 方向鍵與 WASD 都可以控制方向，輸入只會記錄為「預定方向」，
      實際轉向由遊戲在下一個玩家邏輯步決定。
    - R 鍵重新開始整局遊戲。
    """
    KEY_DIRECTIONS = {
        pygame.K_UP: DIRECTION_UP,
        pygame.K_w: DIRECTION_UP,
        pygame.K_DOWN: DIRECTION_DOWN,
        pygame.K_s: DIRECTION_DOWN,
        pygame.K_LEFT: DIRECTION_LEFT,
        pygame.K_a: DIRECTION_LEFT,
        pygame.K_RIGHT: DIRECTION_RIGHT,
        pygame.K_d: DIRECTION_RIGHT,
    }
    RESTART_KEY = pygame.K_r

    def handle_event(self, event, game) -> bool:
        """
        處理鍵盤輸入事件。

        Args:
            event (pygame.event.Event): Pygame 事件物件，包含按鍵信息。
            game (Game): 遊戲實例。

        Returns:
            bool: 事件是否被處理。
        """
        if event.type != pygame.KEYDOWN:
            return False
        if event.key in self.KEY_DIRECTIONS:
            dx, dy = self.KEY_DIRECTIONS[event.key]
            game.set_pending_direction(dx, dy)
            return True
        if event.key == self.RESTART_KEY:
            game.restart()
            return True
        return False
