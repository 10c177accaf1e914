"""HttpOnly cookie helpers with fixed security defaults."""

from typing import TYPE_CHECKING, Any

from starlette.requests import Request
from starlette.responses import Response

if TYPE_CHECKING:
    from gatekeeper.core.config import Settings

TOKEN_COOKIE_NAME = "token"


class CookieManager:
    """
    Sets, clears and reads cookies on Starlette responses/requests.

    clear() only removes a cookie when path/domain match the ones used by set();
    pass the same overrides to both if they were customized.
    """

    def __init__(self, settings: "Settings") -> None:
        self._secure = settings.is_production
        self._max_age = settings.COOKIE_MAX_AGE_SECONDS

    def default_options(self) -> dict[str, Any]:
        return {
            "httponly": True,
            "secure": self._secure,
            "samesite": "strict",
            "max_age": self._max_age,
        }

    def set(self, response: Response, name: str, value: str, **overrides: Any) -> None:
        options = {**self.default_options(), **overrides}
        response.set_cookie(key=name, value=value, **options)

    def clear(self, response: Response, name: str, **overrides: Any) -> None:
        options = {**self.default_options(), **overrides}
        # delete_cookie expires the cookie itself; max_age is not accepted.
        options.pop("max_age", None)
        response.delete_cookie(key=name, **options)

    def get(self, request: Request, name: str) -> str | None:
        return request.cookies.get(name)
