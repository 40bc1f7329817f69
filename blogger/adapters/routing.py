from typing import Any
from urllib.parse import urlencode

from starlette.routing import Router


class StarletteRouter:
    """Builds URLs from route names registered on a Starlette/FastAPI app.

    Path parameters are passed as keyword arguments; a ``_query`` mapping, if
    given, is appended as the query string.
    """

    def __init__(self, router: Router, root_path: str = "") -> None:
        self._router = router
        self._root_path = root_path.rstrip("/")

    def generate(self, name: str, **params: Any) -> str:
        query = params.pop("_query", None)
        path = self._router.url_path_for(name, **{k: str(v) for k, v in params.items()})
        url = f"{self._root_path}{path}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return url
