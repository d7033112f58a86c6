from __future__ import annotations

from typing import Any, Dict

from flask import Flask, jsonify, request

from .dispatcher import Dispatcher


def _request_params() -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    params.update(request.args.to_dict())
    params.update(request.form.to_dict())
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        params.update(body)
    return params


def register(app: Flask, dispatcher: Dispatcher) -> None:
    def respond(path: str):
        params = _request_params()
        params.pop("path", None)
        authorization = request.headers.get("Authorization") or params.pop("authorization", None)

        result = dispatcher.dispatch(
            request.method,
            path,
            params,
            authorization,
            client_key=request.remote_addr or "",
        )
        return jsonify(result.body), result.status_code

    @app.route("/api/<path:path>", methods=["GET", "POST"], endpoint="api")
    def api(path: str):
        return respond(path)

    # Single-endpoint form used by the original deployment: /?path=attendance/stats
    @app.route("/", methods=["GET", "POST"], endpoint="api_by_param")
    def api_by_param():
        path = request.args.get("path") or request.form.get("path") or ""
        return respond(path)
