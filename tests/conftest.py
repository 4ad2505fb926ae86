"""Shared fixtures for podcast site tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def episodes() -> list[dict]:
    """Two sample episodes in catalog order."""
    return [
        {
            "id": 1,
            "title": "Intro",
            "description": "A short one.",
            "author": "A",
            "url": "/posts/intro/",
            "audio_url": "/a1.mp3",
            "pubDate": "2020-01-01",
            "duration": "10:00",
            "file_size": 1000,
            "categories": ["Technology", "Design"],
            "content": "Intro show notes.",
        },
        {
            "id": 7,
            "title": "Reputation",
            "description": "R" * 150,
            "author": "B",
            "url": "/posts/reputation/",
            "audio_url": "/a7.mp3",
            "pubDate": "2020-02-15T10:30:00Z",
            "duration": "1:02:03",
            "file_size": 2048,
            "content": "Reputation show notes.",
        },
    ]


@pytest.fixture
def posts_file(tmp_path: Path, episodes: list[dict]) -> Path:
    """Write the sample episodes to a JSON file."""
    path = tmp_path / "posts.json"
    path.write_text(json.dumps(episodes), encoding="utf-8")
    return path


@pytest.fixture
def episodes_dir(tmp_path: Path) -> Path:
    """Empty directory for pre-rendered pages."""
    path = tmp_path / "episodes"
    path.mkdir()
    return path
