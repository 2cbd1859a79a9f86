from __future__ import annotations

from flask import Flask

from ..common.web import current_identity, login_required, result_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/<int:user_id>/stats", methods=["GET"], endpoint="api_user_stats")
    @login_required
    def api_user_stats(user_id: int):
        identity = current_identity()
        result = container.stats_service.fetch_user_stats(user_id, identity.user_id, identity.role)
        return result_response(result)
