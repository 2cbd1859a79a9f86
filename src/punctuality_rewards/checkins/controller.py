from __future__ import annotations

from flask import Flask, request

from ..common.web import current_identity, login_required, result_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkins", methods=["POST"], endpoint="api_checkin")
    @login_required
    def api_checkin():
        """QR check-in for the signed-in user."""
        data = request.get_json(silent=True) or {}
        identity = current_identity()

        result = container.checkin_service.process_check_in(
            identity.user_id,
            data.get("qr_code"),
            data.get("location"),
        )
        return result_response(result)
