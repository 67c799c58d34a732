from __future__ import annotations

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, TypeVar, Union

import frontmatter
import yaml

from app.errors import PostIOError, PostNotFoundError, PostParseError
from app.models.post import Post
from app.services.markdown_renderer import DEFAULT_RENDER_OPTIONS, RenderOptions, render_markdown


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
T = TypeVar("T")

REQUIRED_KEYS = ("title", "date")
POST_SUFFIX = ".md"

_year_dir_pattern = re.compile(r"^\d{4}$")
_slug_pattern = re.compile(r"^(\d{4})-[^/\\\x00]+$")


def list_posts(
    root_dir: PathLike,
    *,
    with_content: bool = False,
    options: RenderOptions = DEFAULT_RENDER_OPTIONS,
) -> List[Post]:
    """Load every post under ``root_dir``, newest first.

    Files that fail to load are logged and skipped. Content is left out
    unless ``with_content`` is set.
    """
    posts: List[Post] = []

    for path in _iter_post_files(Path(root_dir)):
        try:
            post = _load_post(path, with_content=with_content, options=options)
        except (PostParseError, PostIOError) as exc:
            logger.warning("Skipping post %s: %s", path, exc.reason)
            continue

        posts.append(post)

    posts.sort(key=lambda item: (item.date, item.slug), reverse=True)
    return posts


def list_post_slugs(root_dir: PathLike) -> List[str]:
    """Return the slug of every post file without parsing any of them."""
    return sorted(path.stem for path in _iter_post_files(Path(root_dir)))


def get_post_by_slug(
    slug: str,
    root_dir: PathLike,
    *,
    with_content: bool = True,
    options: RenderOptions = DEFAULT_RENDER_OPTIONS,
) -> Post:
    root = Path(root_dir)
    if not root.is_dir():
        raise PostNotFoundError(f"Posts directory not found: {root}")

    match = _slug_pattern.match(slug)
    if match is None:
        raise PostNotFoundError(f"Post not found: {slug}", slug=slug)

    path = root / match.group(1) / f"{slug}{POST_SUFFIX}"
    if not path.is_file():
        raise PostNotFoundError(f"Post not found: {slug}", slug=slug)

    return _load_post(path, with_content=with_content, options=options)


def paginate(posts: Sequence[T], page: int, per_page: int) -> List[T]:
    """Return the 1-based ``page`` of ``posts``; past the end is empty."""
    if page < 1:
        raise ValueError("page must be >= 1")
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    start = (page - 1) * per_page
    return list(posts[start : start + per_page])


def _iter_post_files(root: Path) -> Iterator[Path]:
    # Only posts/<year>/<slug>.md is scanned; anything deeper is ignored.
    if not root.is_dir():
        raise PostNotFoundError(f"Posts directory not found: {root}")

    for year_dir in _sorted_entries(root):
        if not year_dir.is_dir():
            logger.debug("Ignoring %s: not a directory", year_dir)
            continue
        if not _year_dir_pattern.match(year_dir.name):
            logger.debug("Ignoring %s: not a year directory", year_dir)
            continue

        try:
            entries = _sorted_entries(year_dir)
        except PostIOError as exc:
            logger.warning("Skipping year directory %s: %s", year_dir, exc.reason)
            continue

        for path in entries:
            if path.is_dir():
                logger.debug("Ignoring nested directory %s", path)
                continue
            if path.suffix != POST_SUFFIX:
                continue
            yield path


def _sorted_entries(directory: Path) -> List[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as exc:
        raise PostIOError(directory, str(exc)) from exc


def _load_post(path: Path, *, with_content: bool, options: RenderOptions) -> Post:
    try:
        parsed = frontmatter.load(path)
    except OSError as exc:
        raise PostIOError(path, str(exc)) from exc
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        raise PostParseError(path, f"invalid front-matter: {exc}") from exc

    meta = parsed.metadata or {}
    missing = [key for key in REQUIRED_KEYS if _is_blank(meta.get(key))]
    if missing:
        raise PostParseError(path, f"missing required front-matter: {', '.join(missing)}")

    post_date = _parse_date(meta["date"])
    if post_date is None:
        raise PostParseError(path, f"invalid date {meta['date']!r}")

    slug = path.stem
    year = path.parent.name
    if not slug.startswith(f"{year}-"):
        raise PostParseError(path, f"slug {slug!r} does not start with its year directory {year!r}")

    body = parsed.content
    content = render_markdown(body, options) if with_content else None

    return Post(
        slug=slug,
        title=str(meta["title"]).strip(),
        date=post_date.isoformat(),
        excerpt=_extract_excerpt(meta, body),
        content=content,
    )


def _parse_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M:%S"):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None

    return None


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def _extract_excerpt(meta: dict, body: str) -> str:
    summary = meta.get("summary")
    if isinstance(summary, str) and summary.strip():
        return summary.strip()

    for line in body.splitlines():
        if line.strip():
            return line.strip()
    return ""
