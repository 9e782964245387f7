import pygame
from config import WHITE

# Fonts are created on first use; pygame.font must be initialised by then
_fonts = {}

def get_font(size=14):
    if size not in _fonts:
        _fonts[size] = pygame.font.Font(None, size)
    return _fonts[size]

def draw_label(surf, text, pos, col=WHITE, size=14, bg=None):
    """Blit one line of text, optionally on a filled backing box. Returns the covered rect."""
    img = get_font(size).render(text, True, col)
    rect = img.get_rect(topleft=pos)
    if bg is not None:
        rect = rect.inflate(6, 4)
        rect.topleft = pos
        pygame.draw.rect(surf, bg, rect)
        surf.blit(img, (pos[0] + 3, pos[1] + 2))
    else:
        surf.blit(img, pos)
    return rect
