from __future__ import annotations

import argparse
import json
import logging
import shutil
import sys
from pathlib import Path
from typing import Any

BASE_DIR = Path(__file__).resolve().parent.parent

sys.path.insert(0, str(BASE_DIR))

from app import config
from app.services import markdown_loader
from app.services.markdown_renderer import RenderOptions, options_from_config

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = BASE_DIR / "site"


def ensure_output_dir(output: Path) -> None:
    if output.exists():
        shutil.rmtree(output)
    output.mkdir(parents=True, exist_ok=True)
    (output / "posts").mkdir()


def write_json(destination: Path, payload: Any) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def build_site(posts_dir: Path, output_dir: Path, options: RenderOptions) -> int:
    """Write a static snapshot of the posts API into ``output_dir``.

    ``posts.json`` mirrors ``GET /api/posts`` and ``posts/<slug>.json``
    mirrors ``GET /api/posts/<slug>``. Returns the number of posts written.
    """
    posts = markdown_loader.list_posts(posts_dir, with_content=True, options=options)
    skipped = sorted(set(markdown_loader.list_post_slugs(posts_dir)) - {post.slug for post in posts})
    if skipped:
        logger.warning("Not exporting %d unreadable posts: %s", len(skipped), ", ".join(skipped))

    ensure_output_dir(output_dir)
    write_json(output_dir / "posts.json", [post.as_summary() for post in posts])
    for post in posts:
        write_json(output_dir / "posts" / f"{post.slug}.json", post.as_dict())

    logger.info("Exported %d posts to %s", len(posts), output_dir)
    return len(posts)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export posts as static JSON files.")
    parser.add_argument("--posts-dir", type=Path, default=config.POSTS_DIR, help="Directory holding <year>/<slug>.md files.")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="Output directory (default: ./site).")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    args = parse_args(argv)
    build_site(args.posts_dir.resolve(), args.output.resolve(), options_from_config())


if __name__ == "__main__":
    main()
