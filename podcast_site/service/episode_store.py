import json
import logging
from typing import Iterable, NotRequired, TypedDict

from podcast_site.config.settings import POSTS_PATH
from podcast_site.service.errors import EpisodeLoadError

logger = logging.getLogger(__name__)


class Episode(TypedDict):
    id: int
    title: str
    description: str
    author: str
    url: str
    audio_url: str
    pubDate: str
    duration: str
    file_size: int
    categories: NotRequired[list[str]]
    content: NotRequired[str]


def read_episodes(path: str) -> list[Episode]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise EpisodeLoadError(f"{path}: {e}") from e
    if not isinstance(data, list):
        raise EpisodeLoadError(f"{path}: expected a JSON array, got {type(data).__name__}")
    return data


def load_episodes(path: str | None = None) -> list[Episode]:
    """Load the episode catalog, re-reading the file on every call.

    Errors are logged and an empty list is returned, so callers cannot tell
    "no episodes" apart from "load failed".
    """
    try:
        return read_episodes(path or POSTS_PATH)
    except EpisodeLoadError:
        logger.exception("Error loading posts")
        return []


def parse_episode_id(raw: str) -> int | None:
    # plain ASCII digits only; int() would also take "1_0", "+1" or non-Latin digits
    raw = str(raw)
    if not (raw.isascii() and raw.removeprefix("-").isdigit()):
        return None
    return int(raw)


def find_episode(episodes: Iterable[Episode], episode_id: int | None) -> Episode | None:
    if episode_id is None:
        return None
    for ep in episodes:
        ep_id = ep.get("id")
        # bool is an int subclass; only real integer ids match
        if type(ep_id) is int and ep_id == episode_id:
            return ep
    return None
