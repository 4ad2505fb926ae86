import logging
import os
from dataclasses import dataclass
from typing import Callable, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from podcast_site.config.settings import EPISODES_DIR, HOSTS_CREDIT, PODCAST_DESCRIPTION, PODCAST_TITLE, TEMPLATES_DIR
from podcast_site.service.episode_store import Episode, find_episode, parse_episode_id
from podcast_site.service.errors import StaticPageUnavailable

logger = logging.getLogger(__name__)

SITE_NAME = "Social Media Clarity Podcast"
NOT_FOUND_HTML = "<h1>Episode not found</h1>"

EpisodeSource = Sequence[Episode] | Callable[[], Sequence[Episode]]

_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
)


@dataclass(frozen=True)
class PageResult:
    found: bool
    content: str | bytes

    @classmethod
    def from_content(cls, content: str | bytes) -> "PageResult":
        return cls(found=True, content=content)

    @classmethod
    def not_found(cls) -> "PageResult":
        return cls(found=False, content=NOT_FOUND_HTML)


def render_template(name: str, **context) -> str:
    return _env.get_template(name).render(**context)


def render_index(episodes: Sequence[Episode]) -> str:
    return render_template(
        "index.html",
        title=PODCAST_TITLE,
        tagline=PODCAST_DESCRIPTION.rstrip("."),
        hosts=HOSTS_CREDIT,
        episodes=episodes,
    )


def render_episode_detail(episode: Episode) -> str:
    return render_template("episode.html", ep=episode, site_name=SITE_NAME)


def static_page_path(raw_id: str, episodes_dir: str | None = None) -> str:
    return os.path.join(episodes_dir or EPISODES_DIR, f"{raw_id}.html")


def read_static_page(raw_id: str, episodes_dir: str | None = None) -> bytes:
    path = static_page_path(raw_id, episodes_dir)
    if not raw_id or os.path.basename(raw_id) != raw_id:
        raise StaticPageUnavailable(path, "invalid episode id")
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise StaticPageUnavailable(path, "not found") from e
    except OSError as e:
        raise StaticPageUnavailable(path, str(e)) from e


def render_episode_page(raw_id: str, episodes: EpisodeSource, episodes_dir: str | None = None) -> PageResult:
    """Resolve the detail page for one episode.

    A pre-rendered file under ``episodes_dir`` wins and is returned byte for
    byte. Otherwise the episode is looked up by integer id and a minimal page
    is synthesized. ``episodes`` may be a loader so the catalog is only read
    when no pre-rendered file exists.
    """
    try:
        return PageResult.from_content(read_static_page(raw_id, episodes_dir))
    except StaticPageUnavailable as e:
        if e.reason == "not found":
            logger.debug("No pre-rendered page at %s", e.path)
        else:
            logger.warning("Pre-rendered page unreadable, falling back: %s", e)

    try:
        catalog = episodes() if callable(episodes) else episodes
        episode = find_episode(catalog, parse_episode_id(raw_id))
        if episode is None:
            return PageResult.not_found()
        return PageResult.from_content(render_episode_detail(episode))
    except Exception:
        logger.exception("Error rendering episode page %s", raw_id)
        return PageResult.not_found()
