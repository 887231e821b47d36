"""Pygame renderer for Coffee Catcher.

Draws a FrameSnapshot and nothing else: the renderer has no reference
to the engine and cannot change simulation state. Image assets are
optional; any that fail to load are replaced by flat colours.
"""

from pathlib import Path
from typing import Dict, Optional

import pygame

from catcher.logging import get_logger
from games.CoffeeCatcher import config
from games.CoffeeCatcher.snapshot import FrameSnapshot
from models import Rectangle

log = get_logger('renderer')

ASSET_FILES = {
    'background': 'bg.png',
    'player': 'player.png',
    'item': 'bean.png',
}


def load_assets(assets_dir: Path) -> Dict[str, Optional[pygame.Surface]]:
    """Load sprite images, falling back to None for any that fail.

    Args:
        assets_dir: Directory containing bg.png, player.png and bean.png

    Returns:
        Mapping of asset name to surface (None if unavailable)
    """
    assets: Dict[str, Optional[pygame.Surface]] = {}
    for name, filename in ASSET_FILES.items():
        path = Path(assets_dir) / filename
        try:
            assets[name] = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError) as e:
            log.warning("could not load %s: %s (using fallback colour)", path, e)
            assets[name] = None
    return assets


class Renderer:
    """Draws background, player, items, HUD and the game-over overlay."""

    def __init__(self, width: int, height: int, assets: Optional[Dict[str, Optional[pygame.Surface]]] = None):
        self._width = width
        self._height = height
        self._assets = assets or {}
        self._scaled: Dict[tuple, pygame.Surface] = {}
        self._hud_font = pygame.font.Font(None, 28)
        self._title_font = pygame.font.Font(None, 48)
        self._hint_font = pygame.font.Font(None, 26)

    def _sprite(self, name: str, rect: Rectangle) -> Optional[pygame.Surface]:
        image = self._assets.get(name)
        if image is None:
            return None
        size = (max(1, int(rect.width)), max(1, int(rect.height)))
        key = (name, size)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.smoothscale(image, size)
        return self._scaled[key]

    def _draw_box(self, screen: pygame.Surface, name: str, rect: Rectangle, color) -> None:
        sprite = self._sprite(name, rect)
        if sprite is not None:
            screen.blit(sprite, (rect.x, rect.y))
        else:
            pygame.draw.rect(screen, color, pygame.Rect(*rect.as_tuple))

    def draw(self, screen: pygame.Surface, frame: FrameSnapshot) -> None:
        """Render one frame.

        Args:
            screen: Target surface
            frame: Snapshot produced by SimulationEngine.tick()
        """
        arena = Rectangle(x=0.0, y=0.0, width=self._width, height=self._height)
        self._draw_box(screen, 'background', arena, config.BACKGROUND_COLOR)

        self._draw_shadow(screen, frame.player)
        self._draw_box(screen, 'player', frame.player, config.PLAYER_COLOR)
        for item in frame.items:
            self._draw_box(screen, 'item', item, config.ITEM_COLOR)

        self._draw_hud(screen, frame)
        if not frame.running:
            self._draw_game_over(screen)

    def _draw_shadow(self, screen: pygame.Surface, player: Rectangle) -> None:
        width = player.width * 0.7
        height = max(6.0, player.height * 0.10)
        shadow = pygame.Surface((int(width), int(height)), pygame.SRCALPHA)
        pygame.draw.ellipse(shadow, config.SHADOW_COLOR, shadow.get_rect())
        center_x = player.x + player.width / 2
        center_y = player.bottom - 6
        screen.blit(shadow, (center_x - width / 2, center_y - height / 2))

    def _draw_hud(self, screen: pygame.Surface, frame: FrameSnapshot) -> None:
        score = self._hud_font.render(f"Score: {frame.score}", True, config.HUD_COLOR)
        screen.blit(score, (16, 14))
        misses = self._hud_font.render(f"Misses: {frame.misses}/{frame.miss_limit}", True, config.HUD_COLOR)
        screen.blit(misses, (self._width - misses.get_width() - 16, 14))

    def _draw_game_over(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface((self._width, self._height), pygame.SRCALPHA)
        overlay.fill(config.OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))

        title = self._title_font.render("Game Over", True, config.HUD_COLOR)
        screen.blit(title, title.get_rect(center=(self._width // 2, self._height // 2 - 20)))
        hint = self._hint_font.render("Press SPACE or tap to restart", True, config.HUD_COLOR)
        screen.blit(hint, hint.get_rect(center=(self._width // 2, self._height // 2 + 16)))
