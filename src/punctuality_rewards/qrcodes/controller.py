from __future__ import annotations

import io
import logging
from datetime import datetime

from flask import Flask, jsonify, request, send_file

from ..common.web import current_identity, error_response, login_required
from ..container import Container
from ..core.enums import Capability, RotationStrategy
from ..core.exceptions import AuthorizationError, DomainError, NotFoundError, ValidationError
from ..core.results import Failure

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _parse_rotation(value) -> RotationStrategy:
        try:
            return RotationStrategy(str(value or RotationStrategy.DAILY.value).lower())
        except ValueError:
            raise ValidationError(f"Unknown rotation strategy: {value}")

    def _parse_instant(value):
        if not value:
            return None
        try:
            return datetime.fromisoformat(str(value))
        except ValueError:
            raise ValidationError("valid_until must be an ISO 8601 timestamp")

    def _admin_company_id() -> int:
        identity = current_identity()
        if not identity.role.supports(Capability.MANAGE_QR_CODES):
            raise AuthorizationError("You are not allowed to manage QR codes")
        user = container.users_repo.get_by_id(identity.user_id)
        if not user or user.company_id is None:
            raise NotFoundError("Company not found")
        return int(user.company_id)

    @app.route("/api/admin/qrcodes", methods=["POST"], endpoint="api_issue_qr_code")
    @login_required
    def api_issue_qr_code():
        data = request.get_json(silent=True) or {}
        identity = current_identity()
        try:
            token = container.qr_code_service.issue_token(
                current_role=identity.role,
                company_id=_admin_company_id(),
                created_by=identity.user_id,
                rotation=_parse_rotation(data.get("rotation")),
                valid_until=_parse_instant(data.get("valid_until")),
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to issue QR code")
            return jsonify(Failure.processing_failed("Failed to issue QR code").to_dict()), 500

        payload = token.to_dict()
        payload["url"] = container.qr_code_service.checkin_url(token.code)
        return jsonify({"success": True, "qr_code": payload}), 201

    @app.route("/api/admin/qrcodes/active", methods=["GET"], endpoint="api_active_qr_code")
    @login_required
    def api_active_qr_code():
        try:
            token = container.qr_code_service.active_token(_admin_company_id())
        except DomainError as e:
            return error_response(e)
        if not token:
            return error_response(NotFoundError("No active QR code"))

        payload = token.to_dict()
        payload["url"] = container.qr_code_service.checkin_url(token.code)
        return jsonify({"success": True, "qr_code": payload}), 200

    @app.route("/api/admin/qrcodes/<code>/image", methods=["GET"], endpoint="api_qr_code_image")
    @login_required
    def api_qr_code_image(code: str):
        """PNG of the check-in URL for printing."""
        try:
            png = container.qr_code_service.render_png(code, company_id=_admin_company_id())
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Failed to render QR code %s", code)
            return jsonify(Failure.processing_failed("Failed to render QR code").to_dict()), 500
        return send_file(io.BytesIO(png), mimetype="image/png")
