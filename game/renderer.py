# game/renderer.py
"""
負責渲染遊戲畫面，包括迷宮、Pac-Man、鬼魂和分數顯示。

渲染器只讀取 Game.snapshot() 返回的快照，不會修改任何遊戲狀態。
"""
import pygame
from config import (BLACK, WHITE, YELLOW, GOLD, DARK_BLUE, DARK_GRAY, LIGHT_GRAY, CELL_SIZE,
                    CELL_CODES, TILE_WALL, TILE_PELLET, TILE_POWER_PELLET)
from .entities.ghost import GhostMode

WALL_CODE = CELL_CODES[TILE_WALL]
PELLET_CODE = CELL_CODES[TILE_PELLET]
POWER_PELLET_CODE = CELL_CODES[TILE_POWER_PELLET]


class Renderer:
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, screen_width: int, screen_height: int):
        """
        初始化渲染器。

        Args:
            screen (pygame.Surface): Pygame 畫面物件。
            font (pygame.font.Font): 用於渲染文字的字體。
            screen_width (int): 螢幕寬度。
            screen_height (int): 螢幕高度。
        """
        self.screen = screen
        self.font = font
        self.screen_width = screen_width
        self.screen_height = screen_height

    @staticmethod
    def cell_center(x: int, y: int):
        """計算格子中心的像素坐標。"""
        return x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2

    @staticmethod
    def player_color(snapshot):
        """
        決定 Pac-Man 的顏色：能量效果期間為亮黃色，無敵期間每 100ms 在黃白之間閃爍。
        """
        if snapshot.power_remaining_ms > 0:
            return GOLD
        if snapshot.invincible_remaining_ms > 0:
            return YELLOW if int(snapshot.invincible_remaining_ms // 100) % 2 == 0 else WHITE
        return YELLOW

    def render(self, snapshot) -> None:
        """
        渲染遊戲畫面。

        Args:
            snapshot (GameSnapshot): 遊戲快照。
        """
        self.screen.fill(BLACK)  # 清空畫面

        # 渲染迷宮與分數球
        height, width = snapshot.grid.shape
        for y in range(height):
            for x in range(width):
                code = snapshot.grid[y, x]
                if code == WALL_CODE:
                    rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                    pygame.draw.rect(self.screen, DARK_GRAY, rect)  # 牆壁
                elif code == PELLET_CODE:
                    pygame.draw.circle(self.screen, LIGHT_GRAY, self.cell_center(x, y), 2)  # 分數球
                elif code == POWER_PELLET_CODE:
                    pygame.draw.circle(self.screen, GOLD, self.cell_center(x, y), 5)  # 能量球

        # 渲染 Pac-Man
        radius = int(CELL_SIZE * 0.45)
        pygame.draw.circle(self.screen, self.player_color(snapshot), self.cell_center(*snapshot.player), radius)

        # 渲染鬼魂，逃跑狀態顯示為深藍色
        for ghost in snapshot.ghosts:
            color = DARK_BLUE if ghost.mode is GhostMode.FRIGHTENED else ghost.color
            pygame.draw.circle(self.screen, color, self.cell_center(*ghost.position), radius)

        # 渲染分數、生命數與提示訊息
        score_text = self.font.render(f"Score: {snapshot.score}", True, WHITE)
        self.screen.blit(score_text, (10, 10))
        lives_text = self.font.render(f"Lives: {snapshot.lives}", True, WHITE)
        self.screen.blit(lives_text, (self.screen_width - 10 - lives_text.get_width(), 10))
        if snapshot.message:
            message_text = self.font.render(snapshot.message, True, WHITE)
            self.screen.blit(message_text, message_text.get_rect(center=(self.screen_width // 2,
                                                                        self.screen_height // 2)))
