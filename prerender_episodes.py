import argparse
import logging
import sys

from podcast_site.config.settings import EPISODES_DIR, POSTS_PATH, SITE_BASE_URL
from podcast_site.service.episode_store import find_episode, read_episodes
from podcast_site.service.errors import EpisodeLoadError, PrerenderError
from podcast_site.service.prerender_service import prerender_all, prerender_episode

logger = logging.getLogger("prerender_episodes")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Write pre-rendered episode pages from the published show notes.")
    parser.add_argument("--id", dest="episode_id", type=int, default=None, help="only this episode")
    parser.add_argument("--force", action="store_true", help="overwrite existing pages")
    parser.add_argument("--posts", dest="posts", default=POSTS_PATH)
    parser.add_argument("--out", dest="out_dir", default=EPISODES_DIR)
    parser.add_argument("--site", dest="site", default=SITE_BASE_URL)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    # Unlike the servers, a broken catalog is fatal here.
    try:
        episodes = read_episodes(args.posts)
    except EpisodeLoadError as e:
        logger.error("Cannot load episodes: %s", e)
        return 1

    if args.episode_id is not None:
        episode = find_episode(episodes, args.episode_id)
        if episode is None:
            logger.error("Episode %s not found in %s", args.episode_id, args.posts)
            return 1
        try:
            prerender_episode(episode, args.out_dir, args.site, force=args.force)
        except PrerenderError as e:
            logger.error("Episode %s: %s", args.episode_id, e)
            return 1
        return 0

    written, failed = prerender_all(episodes, args.out_dir, args.site, force=args.force)
    logger.info("Pre-rendered %d episode page(s), %d failed", written, failed)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
