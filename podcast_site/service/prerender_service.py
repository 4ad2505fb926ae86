import logging
import os
from typing import Sequence

import requests
from bs4 import BeautifulSoup
from markupsafe import Markup

from podcast_site.config.settings import EPISODES_DIR, PRERENDER_TIMEOUT, SITE_BASE_URL
from podcast_site.service.episode_store import Episode
from podcast_site.service.errors import PrerenderError
from podcast_site.service.page_service import SITE_NAME, render_template, static_page_path

logger = logging.getLogger(__name__)

# Tried in order; the first match holds the show notes.
NOTES_SELECTORS = ["article", ".entry-content", ".post-content", "main"]


def fetch_page(url: str) -> str:
    r = requests.get(url, timeout=PRERENDER_TIMEOUT)
    r.raise_for_status()
    return r.text


def extract_show_notes(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for selector in NOTES_SELECTORS:
        node = soup.select_one(selector)
        if node is not None:
            break
    else:
        raise PrerenderError("no show notes container found in page")
    for tag in node.find_all(["script", "style"]):
        tag.decompose()
    return node.decode_contents().strip()


def build_detail_page(episode: Episode, notes_html: str) -> str:
    # notes come from our own published site and are inserted as markup
    return render_template("prerendered.html", ep=episode, site_name=SITE_NAME, notes=Markup(notes_html))


def prerender_episode(
    episode: Episode,
    episodes_dir: str | None = None,
    site_base_url: str | None = None,
    force: bool = False,
) -> str | None:
    """Fetch an episode's published page and write its pre-rendered detail file.

    Returns the written path, or None when the file already exists and
    ``force`` is not set.
    """
    out_dir = episodes_dir or EPISODES_DIR
    path = static_page_path(str(episode["id"]), out_dir)
    if os.path.exists(path) and not force:
        logger.info("Pre-rendered page exists for episode %s, skipping", episode["id"])
        return None

    url = f"{site_base_url or SITE_BASE_URL}{episode['url']}"
    try:
        html = fetch_page(url)
    except requests.RequestException as e:
        raise PrerenderError(f"failed to fetch {url}: {e}") from e
    page = build_detail_page(episode, extract_show_notes(html))

    os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(page)
    logger.info("Wrote %s", path)
    return path


def prerender_all(
    episodes: Sequence[Episode],
    episodes_dir: str | None = None,
    site_base_url: str | None = None,
    force: bool = False,
) -> tuple[int, int]:
    written = 0
    failed = 0
    for ep in episodes:
        try:
            if prerender_episode(ep, episodes_dir, site_base_url, force):
                written += 1
        except PrerenderError as e:
            logger.error("Episode %s: %s", ep.get("id"), e)
            failed += 1
    return written, failed
