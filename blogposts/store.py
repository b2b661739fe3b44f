"""
In-memory Post storage. Lebt nur so lange wie der Prozess.
"""

import itertools
import time
import uuid
from typing import Any, Callable

from .post import Post
from .utils import NotFound


def uuid_ids() -> str:
    """Default id strategy: random uuid4 as hex string."""
    return uuid.uuid4().hex


def counter_ids(start: int = 1) -> Callable[[], int]:
    """Incrementing integer ids: 1, 2, 3, ..."""
    counter = itertools.count(start)
    return lambda: next(counter)


def now_ms() -> int:
    return int(time.time() * 1000)


def _same_id(a: Any, b: Any) -> bool:
    # path ids arrive as strings, store ids may be ints
    return str(a) == str(b)


class PostStore:
    """
    Holds posts in insertion order.

    id_factory and clock are injectable so tests get predictable ids and
    timestamps. Not thread safe; the dev server runs with threaded=False.
    """

    def __init__(self, id_factory: Callable[[], Any] = None, clock: Callable[[], int] = None):
        self.id_factory = id_factory or uuid_ids
        self.clock = clock or now_ms
        self._posts: list[Post] = []

    def insert(self, title: str, content: str, author: str, publish_date: int = None) -> Post:
        post = Post({
            'id': self.id_factory(),
            'title': title,
            'content': content,
            'author': author,
            'publish_date': publish_date if publish_date is not None else self.clock(),
        })
        self._posts.append(post)
        return post

    def update(self, post: Post) -> Post:
        """Replace the mutable fields of the stored post with post.id.

        publish_date is only replaced when the update carries one.
        Raises NotFound if no post has that id.
        """
        current = self.get(post.id)
        if current is None:
            raise NotFound(f"Can't update item `{post.id}` because doesn't exist.")
        current.title = post.title
        current.content = post.content
        current.author = post.author
        if post.publish_date is not None:
            current.publish_date = post.publish_date
        return current

    def delete(self, id: Any) -> None:
        """Remove the post with this id. Unknown ids are ignored."""
        current = self.get(id)
        if current is not None:
            self._posts.remove(current)

    def get(self, id: Any) -> Post | None:
        """The post with this id, or None."""
        for p in self._posts:
            if _same_id(p.id, id): return p
        return None

    def list(self) -> list[Post]:
        """Shallow snapshot: a new list holding the stored Post objects."""
        return list(self._posts)
