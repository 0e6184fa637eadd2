# ==================================================
#   RENDERING FUNCTIONS
# ==================================================
import math
import pygame
import numpy as np
from config import (
    WIDTH, HEIGHT, SKY_HEIGHT, SKY, WATER_TOP, WATER_BOTTOM, HEAD_COLOR,
    BODY_COLOR, FISH_COLOR, CRAB_COLOR, HOOKLINE, HUD_COLOR, OVERLAY, CRAB,
)
from session import DEAD

_water = None


def water_gradient(width, height):
    """RGB array (width, height, 3) fading from WATER_TOP to WATER_BOTTOM."""
    t = np.linspace(0.0, 1.0, height, dtype=np.float32)[None, :, None]
    top = np.array(WATER_TOP, dtype=np.float32)
    bottom = np.array(WATER_BOTTOM, dtype=np.float32)
    column = top + (bottom - top) * t
    return np.repeat(column, width, axis=0).astype(np.uint8)


def draw_water(surf):
    """Draw sky band and the water gradient below it."""
    global _water
    if _water is None:
        _water = pygame.surfarray.make_surface(water_gradient(WIDTH, HEIGHT - SKY_HEIGHT))
    surf.fill(SKY)
    surf.blit(_water, (0, SKY_HEIGHT))


def draw_prey(surf, prey):
    """Draw fish and crabs."""
    for x, y, kind in prey:
        x, y = int(x), int(y)
        if kind == CRAB:
            pygame.draw.ellipse(surf, CRAB_COLOR, pygame.Rect(x - 10, y - 7, 20, 14))
            pygame.draw.polygon(surf, CRAB_COLOR, [(x - 12, y - 4), (x - 16, y - 8), (x - 16, y)])
            pygame.draw.polygon(surf, CRAB_COLOR, [(x + 12, y - 4), (x + 16, y - 8), (x + 16, y)])
            for lx in (-10, -4, 2, 8):
                pygame.draw.line(surf, CRAB_COLOR, (x + lx, y + 6), (x + lx, y + 10), 2)
        else:
            pygame.draw.ellipse(surf, FISH_COLOR, pygame.Rect(x - 12, y - 7, 24, 14))
            pygame.draw.polygon(surf, FISH_COLOR, [(x - 12, y), (x - 16, y - 8), (x - 16, y + 8)])
            pygame.draw.circle(surf, (0, 0, 0), (x + 4, y - 2), 2)


def draw_hooks(surf, hooks):
    """Draw each hook on its line, with any cargo hanging off it."""
    for h in hooks:
        tx, ty = int(h.tip[0]), int(h.tip[1])
        pygame.draw.line(surf, HOOKLINE, (tx, 0), (tx, ty - 8), 1)
        pygame.draw.circle(surf, HOOKLINE, (tx, ty - 10), 2, 1)
        pygame.draw.line(surf, HOOKLINE, (tx, ty - 8), (tx, ty), 2)
        pygame.draw.line(surf, HOOKLINE, (tx, ty), (tx - 4, ty + 4), 2)
        pygame.draw.line(surf, HOOKLINE, (tx, ty), (tx + 4, ty + 4), 2)
        for cx, cy in h.cargo:
            pygame.draw.ellipse(surf, BODY_COLOR, pygame.Rect(int(cx) - 14, int(cy) - 8, 28, 16))


def draw_eel(surf, frame):
    """Draw body tail-first so the head ends up on top."""
    for x, y in reversed(frame.body):
        pygame.draw.ellipse(surf, BODY_COLOR, pygame.Rect(int(x) - 14, int(y) - 8, 28, 16))

    hx, hy = frame.head
    vx, vy = frame.heading
    angle = math.degrees(math.atan2(-vy, vx)) if (vx or vy) else 0.0
    head = pygame.Surface((40, 22), pygame.SRCALPHA)
    pygame.draw.ellipse(head, HEAD_COLOR, pygame.Rect(0, 0, 36, 22))
    pygame.draw.polygon(head, HEAD_COLOR, [(36, 11), (30, 6), (30, 16)])
    pygame.draw.circle(head, (0, 0, 0), (26, 8), 2)
    head = pygame.transform.rotate(head, angle)
    surf.blit(head, head.get_rect(center=(int(hx), int(hy))))


def draw_hud(surf, font, frame):
    """Draw length and score in the sky band."""
    text = f"Length: {len(frame.body)}   Score: {frame.score}"
    surf.blit(font.render(text, True, HUD_COLOR), (8, 3))


def draw_game_over(surf, font, reason):
    """Dim the arena and show the reason the run ended."""
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    surf.blit(overlay, (0, 0))
    for i, line in enumerate((f"Game over: {reason}", "Tap to restart")):
        text = font.render(line, True, (255, 255, 255))
        surf.blit(text, (WIDTH / 2 - text.get_width() / 2, HEIGHT / 2 - 12 + i * 24))


def draw_frame(surf, font, frame):
    """Render one full snapshot."""
    draw_water(surf)
    draw_prey(surf, frame.prey)
    draw_hooks(surf, frame.hooks)
    draw_eel(surf, frame)
    draw_hud(surf, font, frame)
    if frame.state == DEAD:
        draw_game_over(surf, font, frame.reason)
