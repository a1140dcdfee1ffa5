from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import PunchKind
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/punches/<int:employee_id>", methods=["POST"], endpoint="api_register_punch")
    def api_register_punch(employee_id: int):
        data = request.get_json(silent=True) or {}
        raw_kind = str(data.get("kind") or "").strip()

        try:
            kind = PunchKind(raw_kind) if raw_kind else None
        except ValueError:
            return jsonify({"success": False, "message": f"Tipo de batida inválido: {raw_kind}"}), 400

        try:
            punch = container.punch_service.register_punch(employee_id, kind=kind, note=data.get("note"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify(
            {
                "success": True,
                "punch_id": punch.punch_id,
                "kind": punch.kind.value,
                "timestamp": punch.timestamp.isoformat(),
            }
        ), 201

    @app.route("/api/punches/<int:employee_id>/today", methods=["GET"], endpoint="api_today_punches")
    def api_today_punches(employee_id: int):
        try:
            summary = container.punch_service.today_summary(employee_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404

        return jsonify({"success": True, **summary.to_dict()})
