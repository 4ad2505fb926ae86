import os
from dataclasses import dataclass, field

# Configuration entry points. Every path and host can be overridden from the
# environment; the defaults match the production layout.
SITE_BASE_URL = os.environ.get("PODCAST_SITE_BASE_URL", "https://socialmediaclarity.net")

# File layout
POSTS_PATH = os.environ.get("PODCAST_POSTS_PATH", os.path.join("content", "posts.json"))
PUBLIC_DIR = os.environ.get("PODCAST_PUBLIC_DIR", "public")
EPISODES_DIR = os.path.join(PUBLIC_DIR, "episodes")
TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

# Listening addresses
FEED_HOST = "127.0.0.1"
FEED_PORT = int(os.environ.get("PODCAST_FEED_PORT", "3001"))
WEB_HOST = "127.0.0.1"
WEB_PORT = int(os.environ.get("PODCAST_WEB_PORT", "3000"))

# Prerender tool
PRERENDER_TIMEOUT = 30

PODCAST_TITLE = "The Social Media Clarity Podcast"
PODCAST_DESCRIPTION = (
    "15 minutes of concentrated analysis and advice about social media "
    "in platform and product design."
)
PODCAST_HOSTS = "Randy Farmer, Scott Moore, Marc Smith"
HOSTS_CREDIT = "Randy Farmer, Scott Moore, and Marc Smith"


@dataclass(frozen=True)
class FeedOwner:
    name: str = "Randy Farmer"
    email: str = "randy.farmer@pobox.com"


@dataclass(frozen=True)
class FeedConfig:
    """Channel-level metadata for the RSS feed.

    Item and site URLs are built from ``site_base_url``. The feed's own
    self link comes from the incoming request instead, so it is not part of
    this structure.
    """

    site_base_url: str = SITE_BASE_URL
    feed_title: str = PODCAST_TITLE
    feed_description: str = PODCAST_DESCRIPTION
    itunes_author: str = PODCAST_HOSTS
    itunes_category: str = "Technology"
    itunes_image_url: str | None = None
    itunes_owner: FeedOwner = field(default_factory=FeedOwner)
    language: str = "en"
    ttl: int = 60

    @property
    def image_url(self) -> str:
        return self.itunes_image_url or f"{self.site_base_url}/icon.jpg"
