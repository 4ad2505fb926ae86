"""Exceptions raised by the podcast site services."""


class PodcastSiteError(Exception):
    """Base exception for the podcast site."""

    pass


class EpisodeLoadError(PodcastSiteError):
    """Episode data file is missing, unreadable or malformed."""

    pass


class FeedRenderError(PodcastSiteError):
    """RSS feed could not be generated."""

    pass


class StaticPageUnavailable(PodcastSiteError):
    """Pre-rendered episode page is absent or cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class PrerenderError(PodcastSiteError):
    """Show notes could not be fetched or extracted."""

    pass
