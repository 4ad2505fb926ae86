from datetime import datetime, timezone
from typing import Sequence

from dateutil import parser as date_parser
from feedgen.feed import FeedGenerator

from podcast_site.config.settings import FeedConfig
from podcast_site.service.episode_store import Episode
from podcast_site.service.errors import FeedRenderError
from podcast_site.service.itunes_ext import ItunesVerbatimEntryExtension, ItunesVerbatimExtension

SUBTITLE_LENGTH = 100
AUDIO_MIME_TYPE = "audio/mpeg"
EXPLICIT = "false"


def itunes_subtitle(description: str) -> str:
    # The ellipsis is appended even when nothing was cut off.
    return description[:SUBTITLE_LENGTH] + "..."


def parse_pub_date(value: str) -> datetime:
    dt = date_parser.parse(str(value))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class FeedRenderer:
    def __init__(self, config: FeedConfig | None = None):
        self.config = config or FeedConfig()

    def _site_url(self, path: str) -> str:
        return f"{self.config.site_base_url}{path}"

    def _build_channel(self, feed_url: str) -> FeedGenerator:
        cfg = self.config
        fg = FeedGenerator()
        fg.load_extension("podcast")
        fg.load_extension("dc")
        fg.register_extension("itunes_verbatim", ItunesVerbatimExtension, ItunesVerbatimEntryExtension, atom=False)

        fg.title(cfg.feed_title)
        fg.description(cfg.feed_description)
        fg.link(href=cfg.site_base_url, rel="alternate")
        fg.link(href=feed_url, rel="self")
        fg.language(cfg.language)
        fg.ttl(cfg.ttl)
        fg.pubDate(datetime.now(timezone.utc))

        fg.podcast.itunes_author(cfg.itunes_author)
        fg.podcast.itunes_summary(cfg.feed_description)
        fg.podcast.itunes_category({"cat": cfg.itunes_category})
        fg.podcast.itunes_image(cfg.image_url)
        fg.itunes_verbatim.explicit(EXPLICIT)
        fg.podcast.itunes_owner(name=cfg.itunes_owner.name, email=cfg.itunes_owner.email)
        return fg

    def _add_item(self, fg: FeedGenerator, episode: Episode) -> None:
        link = self._site_url(episode["url"])
        description = episode["description"]

        fe = fg.add_entry(order="append")
        fe.title(episode["title"])
        fe.description(description)
        fe.link(href=link)
        fe.guid(link, permalink=True)
        fe.dc.dc_creator(episode["author"])
        fe.pubDate(parse_pub_date(episode["pubDate"]))
        for category in episode.get("categories") or []:
            fe.category(term=category)
        fe.enclosure(self._site_url(episode["audio_url"]), str(episode["file_size"]), AUDIO_MIME_TYPE)

        fe.itunes_verbatim.duration(episode["duration"])
        fe.itunes_verbatim.explicit(EXPLICIT)
        fe.podcast.itunes_subtitle(itunes_subtitle(description))

    def render_feed(self, episodes: Sequence[Episode], request_scheme: str, request_host: str) -> str:
        """Render the podcast RSS document.

        Items keep the order of ``episodes``. The self link points back at the
        host the request came in on; everything else uses the configured site
        base URL.
        """
        feed_url = f"{request_scheme}://{request_host}/feed.xml"
        try:
            fg = self._build_channel(feed_url)
            for episode in episodes:
                self._add_item(fg, episode)
            return fg.rss_str(pretty=True).decode("utf-8")
        except Exception as e:
            raise FeedRenderError(f"Error generating RSS feed: {e}") from e
