# tests/conftest.py
import os

# 測試環境沒有顯示器，使用 SDL 的虛擬驅動
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
