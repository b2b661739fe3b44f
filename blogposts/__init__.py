"""
blogposts - In-memory blog post REST service

    GET    /posts        → JSON array
    GET    /posts/<id>   → JSON object
    POST   /posts        → create
    PUT    /posts/<id>   → update
    DELETE /posts/<id>   → delete
"""

from .app import create_app
from .post import Post
from .store import PostStore, counter_ids

__all__ = ['create_app', 'Post', 'PostStore', 'counter_ids']
