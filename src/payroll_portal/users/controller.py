from __future__ import annotations

from ..api.dispatcher import ApiRequest, Router
from ..container import Container
from ..core import messages


def register(router: Router, container: Container) -> None:
    auth = container.auth_service

    @router.route("GET", "health", public=True)
    def health(req: ApiRequest):
        return {"message": messages.SERVER_RUNNING}

    @router.route("POST", "register", public=True)
    def register_user(req: ApiRequest):
        token = auth.register(
            user_id=req.params.get("id"),
            name=req.params.get("name"),
            password=req.params.get("password"),
        )
        return {"token": token}

    @router.route("POST", "login", public=True)
    def login(req: ApiRequest):
        token = auth.login(user_id=req.params.get("id"), password=req.params.get("password"))
        return {"token": token}

    @router.route("POST", "logout")
    def logout(req: ApiRequest):
        auth.logout(req.authorization)
        return {"message": messages.LOGGED_OUT}
