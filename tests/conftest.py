from pathlib import Path

import pytest


def write_post(root: Path, slug: str, front_matter: str, body: str = "Hello there.\n\nMore text.") -> Path:
    year = slug.split("-")[0]
    path = root / year / f"{slug}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{front_matter}\n---\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    root = tmp_path / "posts"
    write_post(root, "2024-01-01-hello", "title: Hello\ndate: 2024-01-01", "First line of hello.\n\nSecond paragraph.")
    write_post(root, "2023-06-15-summer", "title: Summer\ndate: 2023-06-15", "```python\nprint('hi')\n```")
    write_post(root, "2024-03-10-spring", "title: Spring\ndate: 2024-03-10", "\n\nSpring is here.")
    return root
