# test_renderer.py
import pytest
import pygame
from unittest.mock import MagicMock, patch, ANY
from game.renderer import Renderer
from game.game import Game, Outcome, GameSnapshot, GhostView
from game.maze_generator import Map
from game.entities.ghost import GhostMode
from config import CELL_SIZE, MAZE_WIDTH, MAZE_HEIGHT, BLACK, WHITE, YELLOW, GOLD, RED, DARK_BLUE


@pytest.fixture
def setup_renderer():
    """
    設置 Pygame 環境並創建 Renderer 實例。
    """
    pygame.init()
    screen = pygame.display.set_mode((MAZE_WIDTH * CELL_SIZE, MAZE_HEIGHT * CELL_SIZE))
    font = pygame.font.SysFont(None, 36)
    renderer = Renderer(screen, font, MAZE_WIDTH * CELL_SIZE, MAZE_HEIGHT * CELL_SIZE)
    yield renderer
    pygame.quit()


@pytest.fixture
def corridor_snapshot():
    maze = Map.from_rows([
        "##########",
        "#.E......#",
        "##########",
    ])
    return GameSnapshot(
        grid=maze.to_array(),
        player=(1, 1),
        player_direction=(0, 0),
        ghosts=(GhostView("John", (8, 1), RED, GhostMode.CHASING),),
        score=120,
        lives=2,
        outcome=Outcome.PLAYING,
        power_remaining_ms=0.0,
        invincible_remaining_ms=0.0,
        message="",
    )


def test_render_real_game(setup_renderer):
    """
    使用真實的 pygame 畫面渲染預設遊戲，確保無異常。
    """
    game = Game()
    setup_renderer.render(game.snapshot())


def test_render_draw_calls(corridor_snapshot):
    screen = MagicMock()
    font = MagicMock()
    font.render.return_value.get_width.return_value = 50
    renderer = Renderer(screen, font, 200, 60)
    with patch('pygame.draw.rect') as mock_rect, patch('pygame.draw.circle') as mock_circle:
        renderer.render(corridor_snapshot)
    screen.fill.assert_called_once_with(BLACK)
    assert mock_rect.call_count == 22  # 外圍牆壁
    radius = int(CELL_SIZE * 0.45)
    mock_circle.assert_any_call(screen, GOLD, Renderer.cell_center(2, 1), 5)
    mock_circle.assert_any_call(screen, YELLOW, Renderer.cell_center(1, 1), radius)
    mock_circle.assert_any_call(screen, RED, Renderer.cell_center(8, 1), radius)
    # 7 顆分數球、1 顆能量球、玩家與一隻鬼魂
    assert mock_circle.call_count == 10
    font.render.assert_any_call("Score: 120", True, WHITE)
    font.render.assert_any_call("Lives: 2", True, WHITE)
    screen.blit.assert_any_call(font.render.return_value, (10, 10))
    screen.blit.assert_any_call(font.render.return_value, (140, 10))
    assert screen.blit.call_count == 2


def test_render_message_and_frightened_ghosts(corridor_snapshot):
    screen = MagicMock()
    font = MagicMock()
    renderer = Renderer(screen, font, 200, 60)
    snapshot = corridor_snapshot._replace(
        message="Game Over",
        ghosts=(GhostView("John", (8, 1), RED, GhostMode.FRIGHTENED),),
    )
    with patch('pygame.draw.rect'), patch('pygame.draw.circle') as mock_circle:
        renderer.render(snapshot)
    mock_circle.assert_any_call(screen, DARK_BLUE, Renderer.cell_center(8, 1), ANY)
    font.render.assert_any_call("Game Over", True, WHITE)
    font.render.return_value.get_rect.assert_called_once_with(center=(100, 30))
    assert screen.blit.call_count == 3


def test_player_color(corridor_snapshot):
    assert Renderer.player_color(corridor_snapshot) == YELLOW
    assert Renderer.player_color(corridor_snapshot._replace(power_remaining_ms=500.0)) == GOLD
    assert Renderer.player_color(corridor_snapshot._replace(invincible_remaining_ms=1950.0)) == WHITE
    assert Renderer.player_color(corridor_snapshot._replace(invincible_remaining_ms=1850.0)) == YELLOW


def test_cell_center():
    assert Renderer.cell_center(0, 0) == (CELL_SIZE // 2, CELL_SIZE // 2)
    assert Renderer.cell_center(3, 2) == (3 * CELL_SIZE + CELL_SIZE // 2, 2 * CELL_SIZE + CELL_SIZE // 2)
