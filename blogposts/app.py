from datetime import datetime

from flask import Flask, request
from flask_cors import CORS

from .config import load_config
from .routes import log_routes, post_routes, test_routes
from .routes.log_routes import log
from .store import PostStore
from .utils import BlogError, err

# damit es nach dem Start etwas zu sehen gibt
EXAMPLE_POSTS = [
    ('Pointless Blog Post',
     'Not much to see here. If only I could think of a hot topic to blog about!',
     'Joe Enui'),
    ('This Blog is Crap!',
     'I cannot believe I wasted seconds of my life reading that other post.',
     'Mary Critique'),
]


def handle_blog_error(e: BlogError):
    return err(str(e), e.status_code)


def log_request(response):
    """One access line per request, Apache common log format."""
    stamp = datetime.now().astimezone().strftime('%d/%b/%Y:%H:%M:%S %z')
    path = request.full_path.rstrip('?')
    proto = request.environ.get('SERVER_PROTOCOL', 'HTTP/1.1')
    size = response.calculate_content_length()
    log(f'{request.remote_addr or "-"} - - [{stamp}] "{request.method} {path} {proto}" '
        f'{response.status_code} {size if size is not None else "-"}', 'HTTP')
    return response


def create_app(config: dict = None, store: PostStore = None) -> Flask:
    app = Flask(__name__)
    app.config.update(load_config(config))
    CORS(app)

    if store is None:
        store = PostStore()
    app.extensions['post_store'] = store
    if app.config['SEED_POSTS']:
        for title, content, author in EXAMPLE_POSTS:
            store.insert(title, content, author)

    app.register_error_handler(BlogError, handle_blog_error)
    app.after_request(log_request)

    post_routes.register(app, app.config['URL_PREFIX'])
    log_routes.register(app)
    if app.config['TESTING'] or app.config['ENABLE_TEST_ROUTES']:
        test_routes.register(app)
    return app
