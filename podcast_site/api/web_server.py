import logging
import os

from flask import Flask, Response

from podcast_site.config.settings import EPISODES_DIR, POSTS_PATH, PUBLIC_DIR, WEB_HOST, WEB_PORT
from podcast_site.service.episode_store import load_episodes
from podcast_site.service.page_service import render_episode_page, render_index

logger = logging.getLogger(__name__)

# Everything under public/ is served from the site root.
app = Flask(__name__, static_folder=os.path.abspath(PUBLIC_DIR), static_url_path="")


@app.route("/")
def index():
    try:
        html = render_index(load_episodes(POSTS_PATH))
    except Exception:
        logger.exception("Error loading episodes")
        return Response("Error loading episodes", status=500, mimetype="text/plain")
    return Response(html, mimetype="text/html")


@app.route("/post/<episode_id>")
def episode_page(episode_id):
    result = render_episode_page(episode_id, lambda: load_episodes(POSTS_PATH), EPISODES_DIR)
    status = 200 if result.found else 404
    return Response(result.content, status=status, mimetype="text/html")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Web server running on %s:%s", WEB_HOST, WEB_PORT)
    app.run(host=WEB_HOST, port=WEB_PORT)
