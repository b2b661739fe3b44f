from flask import current_app, jsonify, request

from ..post import Post
from ..store import PostStore
from ..utils import NotFound, ValidationError
from .log_routes import log

REQUIRED_FIELDS = ['title', 'content', 'author']


def get_store() -> PostStore:
    return current_app.extensions['post_store']


def _payload() -> dict:
    # anything that is not a JSON object counts as an empty body
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _require_fields(data: dict):
    for field in REQUIRED_FIELDS:
        if field not in data:
            raise ValidationError(f"Missing '{field}' in request body.")


def _publish_date(data: dict) -> int | None:
    """publishDate from the body: absent/null, or milliseconds since epoch."""
    value = data.get('publishDate')
    # bool is an int subclass
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValidationError(f"'publishDate' must be milliseconds since epoch, got {value!r}.")
    return value


def register(app, prefix: str = '/posts'):
    """
        GET    /posts       → JSON array, insertion order
        GET    /posts/<id>  → JSON object
        POST   /posts       → 201 + created post
        PUT    /posts/<id>  → 204, body id must match path id
        DELETE /posts/<id>  → 204, also for unknown ids
    """

    @app.route(prefix, methods=['GET'], endpoint='post_all')
    def list_posts():
        return jsonify([p.to_dict() for p in get_store().list()])

    @app.route(f'{prefix}/<id>', methods=['GET'], endpoint='post_one')
    def get_post(id):
        post = get_store().get(id)
        if post is not None: return jsonify(post.to_dict())
        raise NotFound(f"Post '{id}' not found")

    @app.route(prefix, methods=['POST'], endpoint='post_create')
    def create_post():
        data = _payload()
        _require_fields(data)
        post = get_store().insert(data['title'], data['content'], data['author'], _publish_date(data))
        log(f"Created blog post '{post.id}'")
        return jsonify(post.to_dict()), 201

    @app.route(f'{prefix}/<id>', methods=['PUT'], endpoint='post_update')
    def update_post(id):
        data = _payload()
        _require_fields(data)
        publish_date = _publish_date(data)
        # a missing or null body id never matches, not even /posts/None
        if data.get('id') is None or str(data['id']) != id:
            raise ValidationError(
                f"Request path id ({id}) and request body id ({data.get('id')}) must match")
        log(f"Updating blog post item '{id}'")
        get_store().update(Post({
            'id': id,
            'title': data['title'],
            'content': data['content'],
            'author': data['author'],
            'publishDate': publish_date,
        }))
        return '', 204

    @app.route(f'{prefix}/<id>', methods=['DELETE'], endpoint='post_delete')
    def delete_post(id):
        get_store().delete(id)
        log(f"Deleted blog post '{id}'")
        return '', 204
