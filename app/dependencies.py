from __future__ import annotations

from pathlib import Path

from app import config
from app.services.markdown_renderer import RenderOptions, options_from_config


def get_posts_dir() -> Path:
    return config.POSTS_DIR


def get_render_options() -> RenderOptions:
    return options_from_config()


def get_posts_per_page() -> int:
    return config.POSTS_PER_PAGE
