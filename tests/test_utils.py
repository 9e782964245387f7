import pygame
import pytest

from src.core.utils import draw_label, get_font


@pytest.fixture(scope="module", autouse=True)
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


def test_font_is_cached_per_size():
    assert get_font(14) is get_font(14)
    assert get_font(14) is not get_font(20)


def test_label_draws_backing_box():
    surf = pygame.Surface((200, 40))
    surf.fill((0, 0, 0))
    rect = draw_label(surf, "free=2", (4, 4), (255, 255, 255), size=14, bg=(10, 20, 30))
    assert rect.topleft == (4, 4)
    # box corner keeps the backing color, text starts inside it
    assert surf.get_at((4, 4))[:3] == (10, 20, 30)


def test_label_without_backing_box():
    surf = pygame.Surface((200, 40))
    rect = draw_label(surf, "reach=50.0", (0, 0))
    assert rect.topleft == (0, 0)
    assert rect.width > 0
