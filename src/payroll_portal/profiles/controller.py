from __future__ import annotations

from ..api.dispatcher import ApiRequest, Router
from ..container import Container
from ..core import messages


def register(router: Router, container: Container) -> None:
    profiles = container.profile_service

    @router.route("GET", "profile")
    def get_profile(req: ApiRequest):
        return {"profile": profiles.get_profile(req.user_id).to_dict()}

    @router.route("POST", "profile/setup")
    def setup_profile(req: ApiRequest):
        profile = profiles.save_profile(req.user_id, req.params)
        return {"message": messages.PROFILE_SAVED, "profile": profile.to_dict()}
