"""
Server configuration. Defaults below, environment variables override them,
the mapping passed to create_app() overrides both.
"""

import os

from .utils import parse_bool

DEFAULT_PORT = 8080
DEFAULT_HOST = '127.0.0.1'
URL_PREFIX = '/posts'
LOG_FILE = 'logs.txt'


def load_config(overrides: dict = None) -> dict:
    cfg = {
        'PORT': int(os.environ.get('PORT', DEFAULT_PORT)),
        'HOST': os.environ.get('HOST', DEFAULT_HOST),
        'URL_PREFIX': os.environ.get('BLOG_URL_PREFIX', URL_PREFIX),
        'LOG_FILE': os.environ.get('BLOG_LOG_FILE', LOG_FILE),
        'SEED_POSTS': parse_bool(os.environ.get('BLOG_SEED_POSTS', True)),
        'ENABLE_TEST_ROUTES': parse_bool(os.environ.get('BLOG_TEST_ROUTES', False)),
    }
    if overrides:
        cfg.update(overrides)
    return cfg
