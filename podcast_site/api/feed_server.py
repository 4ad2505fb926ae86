import logging

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

from podcast_site.config.settings import FEED_HOST, FEED_PORT, POSTS_PATH, FeedConfig
from podcast_site.service.episode_store import find_episode, load_episodes, parse_episode_id
from podcast_site.service.feed_service import FeedRenderer

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)

renderer = FeedRenderer(FeedConfig())


@app.route("/feed.xml")
def feed():
    try:
        posts = load_episodes(POSTS_PATH)
        xml = renderer.render_feed(posts, request.scheme, request.host)
    except Exception:
        logger.exception("Error generating RSS feed")
        return Response("Error generating RSS feed", status=500, mimetype="text/plain")
    return Response(xml, mimetype="application/rss+xml")


@app.route("/api/posts")
def api_posts():
    try:
        return jsonify(load_episodes(POSTS_PATH))
    except Exception:
        logger.exception("Error loading posts")
        return jsonify({"error": "Error loading posts"}), 500


@app.route("/api/posts/<post_id>")
def api_post(post_id):
    try:
        post = find_episode(load_episodes(POSTS_PATH), parse_episode_id(post_id))
        if not post:
            return jsonify({"error": "Post not found"}), 404
        return jsonify(post)
    except Exception:
        logger.exception("Error loading post %s", post_id)
        return jsonify({"error": "Error loading post"}), 500


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("RSS server running on %s:%s", FEED_HOST, FEED_PORT)
    app.run(host=FEED_HOST, port=FEED_PORT)
