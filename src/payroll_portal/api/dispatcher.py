from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..core.exceptions import (
    DomainError,
    NotFoundError,
    RateLimitedError,
    RouteNotFoundError,
    UnauthenticatedError,
)
from ..core import messages
from ..users.service import AuthService
from .rate_limit import RateLimiter

logger = logging.getLogger(__name__)

# Expected business rejections answer 200 with ok=false.
STATUS_BY_ERROR: Tuple[Tuple[type, int], ...] = (
    (UnauthenticatedError, 401),
    (NotFoundError, 404),
    (RateLimitedError, 429),
    (DomainError, 200),
)


@dataclass(frozen=True)
class ApiRequest:
    method: str
    path: str
    params: Mapping[str, Any] = field(default_factory=dict)
    authorization: Optional[str] = None
    user_id: Optional[str] = None


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return bool(self.body.get("ok"))


Handler = Callable[[ApiRequest], Dict[str, Any]]


@dataclass(frozen=True)
class Route:
    handler: Handler
    public: bool = False


def normalize_path(path: str) -> str:
    return (path or "").strip().strip("/").split("?")[0]


class Router:
    """Method + path table; features add routes through ``register(router, container)``."""

    def __init__(self):
        self._routes: Dict[Tuple[str, str], Route] = {}

    def route(self, method: str, path: str, *, public: bool = False):
        def decorator(handler: Handler) -> Handler:
            self._routes[(method.upper(), normalize_path(path))] = Route(handler=handler, public=public)
            return handler

        return decorator

    def resolve(self, method: str, path: str) -> Route:
        route = self._routes.get((method.upper(), normalize_path(path)))
        if not route:
            raise RouteNotFoundError(messages.ROUTE_NOT_FOUND)
        return route


def error_body(message: str) -> Dict[str, Any]:
    return {"ok": False, "error": message}


def safe_message(exc: Exception) -> str:
    text = str(exc)
    if any(marker in text for marker in messages.SAFE_MESSAGE_MARKERS):
        return text
    return messages.SERVER_ERROR


class Dispatcher:
    """Transport-independent request surface.

    Resolves the caller, runs the handler, and turns every outcome into a
    uniform ``{"ok": ...}`` body plus an HTTP-equivalent status code.
    """

    def __init__(self, router: Router, auth_service: AuthService, *, rate_limiter: Optional[RateLimiter] = None):
        self._router = router
        self._auth = auth_service
        self._rate_limiter = rate_limiter

    def dispatch(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        authorization: Optional[str] = None,
        *,
        client_key: str = "",
    ) -> ApiResponse:
        path = normalize_path(path)
        logger.debug("%s %s", method.upper(), path)

        try:
            route = self._router.resolve(method, path)

            user_id = None
            if not route.public:
                try:
                    user_id = self._auth.resolve_user(authorization)
                except UnauthenticatedError:
                    self._throttle(client_key)
                    raise
            # Callers without a valid token are counted by address.
            self._throttle(authorization if user_id else client_key)

            request = ApiRequest(
                method=method.upper(),
                path=path,
                params=dict(params or {}),
                authorization=authorization,
                user_id=user_id,
            )
            payload = route.handler(request)
            return ApiResponse(200, {"ok": True, **payload})
        except DomainError as e:
            for error_type, status in STATUS_BY_ERROR:
                if isinstance(e, error_type):
                    return ApiResponse(status, error_body(str(e)))
            raise
        except Exception as e:
            logger.exception("Unhandled error on %s %s", method.upper(), path)
            return ApiResponse(500, error_body(safe_message(e)))

    def _throttle(self, key: Optional[str]) -> None:
        if self._rate_limiter:
            self._rate_limiter.hit(key or "anonymous")
