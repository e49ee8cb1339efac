"""Shared test fixtures."""

from __future__ import annotations

import pytest

from identicon.controllers.app_controller import AppController
from identicon.services.identicon_service import IdenticonService
from identicon.services.image_service import ImageService
from identicon.services.render_service import RenderService


# md5("test") = 098f6bcd4621d373cade4e832627b4f6, last byte dropped
TEST_DIGEST = (9, 143, 107, 205, 70, 33, 211, 115, 202, 222, 78, 131, 38, 39, 180)
TEST_COLOR = (9, 143, 107)
TEST_FULL_GRID = (
    (9, 0), (143, 1), (107, 2), (143, 3), (9, 4),
    (205, 5), (70, 6), (33, 7), (70, 8), (205, 9),
    (211, 10), (115, 11), (202, 12), (115, 13), (211, 14),
    (222, 15), (78, 16), (131, 17), (78, 18), (222, 19),
    (38, 20), (39, 21), (180, 22), (39, 23), (38, 24),
)
TEST_FILTERED_GRID = (
    (70, 6), (70, 8), (202, 12), (222, 15), (78, 16),
    (78, 18), (222, 19), (38, 20), (180, 22), (38, 24),
)
TEST_PIXEL_MAP = (
    ((50, 50), (100, 100)),
    ((150, 50), (200, 100)),
    ((100, 100), (150, 150)),
    ((0, 150), (50, 200)),
    ((50, 150), (100, 200)),
    ((150, 150), (200, 200)),
    ((200, 150), (250, 200)),
    ((0, 200), (50, 250)),
    ((100, 200), (150, 250)),
    ((200, 200), (250, 250)),
)

SEEDS = ["test", "", "alice@example.com", "Bob", "ünïcødé ✓", "a" * 1000, "0"]


@pytest.fixture
def identicon_service() -> IdenticonService:
    return IdenticonService()


@pytest.fixture
def render_service() -> RenderService:
    return RenderService()


@pytest.fixture
def image_service() -> ImageService:
    return ImageService()


@pytest.fixture
def controller(tmp_path) -> AppController:
    return AppController(output_dir=tmp_path)
