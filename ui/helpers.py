"""ui.helpers — Shared drawing utilities for the overlays."""

from __future__ import annotations
import pygame


def draw_overlay(surface: pygame.Surface, alpha: int = 136) -> None:
    """Full-screen semi-transparent dark overlay."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


def draw_centered(surface: pygame.Surface, app, text: str, y: int,
                  color=(255, 255, 255), font=None) -> pygame.Rect:
    """Draw *text* horizontally centred at height *y*."""
    f = font or app.font
    img = f.render(text, True, color)
    x = (surface.get_width() - img.get_width()) // 2
    return surface.blit(img, (x, y))


BUTTON_W = 160
BUTTON_H = 44


def button_rect(surface: pygame.Surface, y: int) -> pygame.Rect:
    return pygame.Rect((surface.get_width() - BUTTON_W) // 2, y,
                       BUTTON_W, BUTTON_H)


def draw_button(surface: pygame.Surface, app, rect: pygame.Rect,
                label: str, *, hovered: bool = False) -> pygame.Rect:
    """Rounded button with a centred label.  Returns *rect* for hit-testing."""
    bg = (110, 90, 200) if hovered else (90, 70, 170)
    pygame.draw.rect(surface, bg, rect, border_radius=22)
    img = app.font_lg.render(label, True, (255, 255, 255))
    surface.blit(img, img.get_rect(center=rect.center))
    return rect


def draw_text_field(surface: pygame.Surface, app, rect: pygame.Rect,
                    text: str, placeholder: str, *, caret: bool) -> None:
    pygame.draw.rect(surface, (235, 232, 240), rect, border_radius=4)
    pygame.draw.rect(surface, (90, 70, 170), rect, width=2, border_radius=4)
    shown = text if text else placeholder
    color = (20, 20, 20) if text else (130, 130, 130)
    img = app.font_lg.render(shown, True, color)
    surface.blit(img, (rect.x + 10, rect.centery - img.get_height() // 2))
    if caret:
        cx = rect.x + 10 + (img.get_width() if text else 0) + 1
        pygame.draw.line(surface, (20, 20, 20),
                         (cx, rect.y + 8), (cx, rect.bottom - 8), 2)
