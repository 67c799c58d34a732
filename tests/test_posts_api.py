import logging
from pathlib import Path

import frontmatter
from fastapi.testclient import TestClient

from app.dependencies import get_posts_dir, get_posts_per_page
from app.main import app
from tests.conftest import write_post


def build_client(posts_dir, per_page=10):
    app.dependency_overrides[get_posts_dir] = lambda: posts_dir
    app.dependency_overrides[get_posts_per_page] = lambda: per_page
    return TestClient(app)


def teardown_function():
    app.dependency_overrides.clear()


def test_health():
    client = TestClient(app)
    assert client.get("/health").json() == {"status": "ok"}


def test_list_posts_returns_sorted_summaries(posts_dir):
    client = build_client(posts_dir)
    res = client.get("/api/posts")
    assert res.status_code == 200
    body = res.json()
    assert [item["slug"] for item in body] == ["2024-03-10-spring", "2024-01-01-hello", "2023-06-15-summer"]
    assert set(body[0]) == {"slug", "title", "date", "excerpt"}


def test_list_posts_paginates(posts_dir):
    client = build_client(posts_dir, per_page=2)
    assert [item["slug"] for item in client.get("/api/posts?page=2").json()] == ["2023-06-15-summer"]
    assert client.get("/api/posts?page=3").json() == []
    assert client.get("/api/posts?page=0").status_code == 422


def test_list_posts_skips_bad_file(posts_dir):
    write_post(posts_dir, "2024-05-05-untitled", "date: 2024-05-05")
    client = build_client(posts_dir)
    res = client.get("/api/posts")
    assert res.status_code == 200
    assert len(res.json()) == 3


def test_post_detail_returns_rendered_content(posts_dir):
    client = build_client(posts_dir)
    res = client.get("/api/posts/2023-06-15-summer")
    assert res.status_code == 200
    post = res.json()
    assert post["title"] == "Summer"
    assert post["date"] == "2023-06-15"
    assert '<code class="language-python">' in post["content"]


def test_post_detail_unknown_slug_is_404(posts_dir):
    client = build_client(posts_dir)
    res = client.get("/api/posts/2024-12-31-missing")
    assert res.status_code == 404
    assert res.json() == {"detail": "Post not found"}


def test_post_detail_malformed_post_is_500(posts_dir):
    write_post(posts_dir, "2024-07-07-notitle", "date: 2024-07-07")
    client = build_client(posts_dir)
    res = client.get("/api/posts/2024-07-07-notitle")
    assert res.status_code == 500


def test_missing_posts_dir_is_404(tmp_path):
    client = build_client(tmp_path / "missing")
    assert client.get("/api/posts").status_code == 404


def test_post_detail_unknown_slug_logs_slug(posts_dir, caplog):
    client = build_client(posts_dir)
    with caplog.at_level(logging.INFO, logger="app.main"):
        client.get("/api/posts/2024-12-31-missing")
    assert "slug=2024-12-31-missing" in caplog.text


def test_post_detail_unreadable_file_is_500(posts_dir, monkeypatch):
    original = frontmatter.load

    def load(path, *args, **kwargs):
        if Path(path).stem == "2024-01-01-hello":
            raise PermissionError(13, "denied", str(path))
        return original(path, *args, **kwargs)

    monkeypatch.setattr(frontmatter, "load", load)
    client = build_client(posts_dir)

    assert client.get("/api/posts/2024-01-01-hello").status_code == 500
    res = client.get("/api/posts")
    assert res.status_code == 200
    assert len(res.json()) == 2
