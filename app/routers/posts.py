from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_posts_dir, get_posts_per_page, get_render_options
from app.services import markdown_loader
from app.services.markdown_renderer import RenderOptions


router = APIRouter(prefix="/api")


@router.get("/posts", name="list_posts")
def list_posts(
    page: Optional[int] = Query(None, ge=1),
    posts_dir: Path = Depends(get_posts_dir),
    per_page: int = Depends(get_posts_per_page),
) -> List[Dict[str, str]]:
    """Post summaries sorted by date, newest first."""
    posts = markdown_loader.list_posts(posts_dir)
    if page is not None:
        posts = markdown_loader.paginate(posts, page, per_page)
    return [post.as_summary() for post in posts]


@router.get("/posts/{slug}", name="post_detail")
def post_detail(
    slug: str,
    posts_dir: Path = Depends(get_posts_dir),
    options: RenderOptions = Depends(get_render_options),
) -> Dict[str, Optional[str]]:
    post = markdown_loader.get_post_by_slug(slug, posts_dir, options=options)
    return post.as_dict()
