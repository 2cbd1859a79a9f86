from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_positive_int
from ..common.web import current_identity, error_response, login_required
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from ..core.results import Failure

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    actions = {
        "approve": container.redemption_service.approve,
        "reject": container.redemption_service.reject,
        "fulfill": container.redemption_service.fulfill,
    }

    @app.route("/api/redemptions", methods=["POST"], endpoint="api_request_redemption")
    @login_required
    def api_request_redemption():
        data = request.get_json(silent=True) or {}
        identity = current_identity()
        try:
            reward_id = require_positive_int(data.get("reward_id"), "reward_id")
            redemption = container.redemption_service.request_redemption(
                user_id=identity.user_id, reward_id=reward_id
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Redemption request failed for user %s", identity.user_id)
            return jsonify(Failure.processing_failed("Redemption failed").to_dict()), 500
        return jsonify({"success": True, "redemption": redemption.to_dict()}), 201

    @app.route(
        "/api/admin/redemptions/<int:redemption_id>/<action>",
        methods=["POST"],
        endpoint="api_decide_redemption",
    )
    @login_required
    def api_decide_redemption(redemption_id: int, action: str):
        decide = actions.get(action)
        if decide is None:
            return error_response(ValidationError(f"Unknown action: {action}"))

        data = request.get_json(silent=True) or {}
        identity = current_identity()
        try:
            decide(
                current_role=identity.role,
                admin_user_id=identity.user_id,
                redemption_id=redemption_id,
                notes=data.get("notes") or "",
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Redemption %s failed to %s", redemption_id, action)
            return jsonify(Failure.processing_failed("Redemption update failed").to_dict()), 500
        return jsonify({"success": True}), 200
