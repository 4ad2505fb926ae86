"""HTTP tests for the feed server."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from podcast_site.api import feed_server


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, posts_file: Path):
    monkeypatch.setattr(feed_server, "POSTS_PATH", str(posts_file))
    feed_server.app.config["TESTING"] = True
    return feed_server.app.test_client()


class TestFeedRoute:
    """Tests for GET /feed.xml."""

    def test_returns_rss(self, client) -> None:
        resp = client.get("/feed.xml")

        assert resp.status_code == 200
        assert resp.mimetype == "application/rss+xml"
        root = ET.fromstring(resp.data)
        assert len(root.findall("channel/item")) == 2

    def test_self_link_follows_host(self, client) -> None:
        resp = client.get("/feed.xml", base_url="http://podcast.local:3001")

        assert b"http://podcast.local:3001/feed.xml" in resp.data

    def test_render_failure_is_500(self, client, monkeypatch: pytest.MonkeyPatch) -> None:
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(feed_server.renderer, "render_feed", explode)
        resp = client.get("/feed.xml")

        assert resp.status_code == 500
        assert resp.get_data(as_text=True) == "Error generating RSS feed"

    def test_missing_catalog_is_empty_feed(self, client, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(feed_server, "POSTS_PATH", str(tmp_path / "missing.json"))
        resp = client.get("/feed.xml")

        assert resp.status_code == 200
        assert ET.fromstring(resp.data).findall("channel/item") == []

    def test_cors_header(self, client) -> None:
        resp = client.get("/feed.xml", headers={"Origin": "https://elsewhere.example"})

        assert resp.headers.get("Access-Control-Allow-Origin") in ("*", "https://elsewhere.example")


class TestPostsApi:
    """Tests for the JSON endpoints."""

    def test_list_posts(self, client, episodes: list[dict]) -> None:
        resp = client.get("/api/posts")

        assert resp.status_code == 200
        assert resp.get_json() == episodes

    def test_get_post(self, client, episodes: list[dict]) -> None:
        resp = client.get("/api/posts/7")

        assert resp.status_code == 200
        assert resp.get_json() == episodes[1]

    @pytest.mark.parametrize("post_id", ["99", "abc", "+1", "0_1", "\u0661"])
    def test_unknown_post_is_404(self, client, post_id: str) -> None:
        resp = client.get(f"/api/posts/{post_id}")

        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Post not found"}

    def test_load_failure_is_500(self, client, monkeypatch: pytest.MonkeyPatch) -> None:
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(feed_server, "load_episodes", explode)

        assert client.get("/api/posts").get_json() == {"error": "Error loading posts"}
        resp = client.get("/api/posts/1")
        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Error loading post"}
