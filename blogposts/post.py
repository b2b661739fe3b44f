from .model import Model


class Post(Model):
    """
    Ein Blog-Post. id wird vom PostStore vergeben und danach nie geändert.
    publish_date: Millisekunden seit Epoch (wie Date.now() im Browser).
    """
    title: str = ""
    content: str = ""
    author: str = ""
    publish_date: int = None

    _json_names = {'publish_date': 'publishDate'}
