# main.py
"""
Maze Muncher 的主程式，負責建立視窗、處理事件和運行主迴圈。
使用 Pygame 作為前端：提供時間戳記、鍵盤輸入與畫面繪製，遊戲規則全部在 Game 類別中。
"""

import sys
import pygame
from game.game import Game
from game.renderer import Renderer
from game.strategies import PlayerControl
from config import MAZE_WIDTH, MAZE_HEIGHT, CELL_SIZE, FPS


def main():
    """
    主遊戲入口，負責設置遊戲環境並運行主迴圈。

    原理：
    - 初始化 Pygame 螢幕、時鐘和字體。
    - 每幀：處理事件（方向鍵 / WASD 控制、R 重新開始、關閉視窗退出），
      以 pygame.time.get_ticks() 的時間戳記推進遊戲，再渲染快照。
    - 遊戲結束後畫面停在結果訊息，按 R 可重新開始。
    - 螢幕尺寸計算公式：screen_width = MAZE_WIDTH * CELL_SIZE, screen_height = MAZE_HEIGHT * CELL_SIZE。
    """
    pygame.init()
    # 設置螢幕尺寸
    screen_width = MAZE_WIDTH * CELL_SIZE  # 螢幕寬度（像素）
    screen_height = MAZE_HEIGHT * CELL_SIZE  # 螢幕高度（像素）
    screen = pygame.display.set_mode((screen_width, screen_height))  # 創建遊戲視窗
    pygame.display.set_caption("Maze Muncher")  # 設置視窗標題

    # 設置遊戲時鐘和字體
    clock = pygame.time.Clock()  # 控制幀率
    font = pygame.font.SysFont(None, 28)

    game = Game()  # 創建遊戲實例
    renderer = Renderer(screen, font, screen_width, screen_height)  # 創建渲染器
    control = PlayerControl()  # 鍵盤控制

    # 主遊戲迴圈
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()  # 退出 Pygame
                sys.exit()  # 終止程式
            control.handle_event(event, game)

        game.tick_at(pygame.time.get_ticks())  # 更新遊戲狀態
        renderer.render(game.snapshot())  # 渲染當前畫面

        pygame.display.flip()  # 更新螢幕顯示
        clock.tick(FPS)  # 控制幀率為 FPS（每秒幀數）


if __name__ == "__main__":
    main()  # 執行主程式
