from typing import Any, get_type_hints


class Model:
    """
        Plain in-memory record. Fields are the annotated class attributes,
        their class values are the defaults.

        _json_names maps attribute names to the keys used on the wire,
        e.g. {'publish_date': 'publishDate'}. Both spellings are accepted
        when building a record from a dict.
    """
    id: Any = None
    _json_names = {}

    def __init__(self, data: dict[str, Any] = None):
        if data:
            attrs = {v: k for k, v in self._json_names.items()}
            for k, v in data.items():
                k = attrs.get(k, k)
                if k in self._props(self.__class__): setattr(self, k, v)

    def to_dict(self) -> dict:
        return {self._json_names.get(k, k): getattr(self, k) for k in self._props(self.__class__)}

    @staticmethod
    def _props(cls: type) -> list[str]:
        hints = get_type_hints(cls) if hasattr(cls, '__annotations__') else {}
        return [name for name in hints if not name.startswith('_')]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"
