from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import MissingContractProfileError, ValidationError
from .service import REPORT_CSV_FIELDS, MonthlyReport


def register(app: Flask, container: Container) -> None:
    def _requested_month() -> tuple[int, int]:
        today = container.clock.today()
        try:
            year = int(request.args.get("year") or today.year)
            month = int(request.args.get("month") or today.month)
        except ValueError:
            raise ValidationError("Parâmetros year/month inválidos")
        return year, month

    def _build(employee_id: int) -> MonthlyReport:
        year, month = _requested_month()
        return container.monthly_report_service.build_monthly_report(employee_id, year=year, month=month)

    def _write_report_csv(*, report: MonthlyReport, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_CSV_FIELDS)
        writer.writeheader()
        for row in report.report_rows():
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.errorhandler(MissingContractProfileError)
    def _missing_profile(e: MissingContractProfileError):
        return jsonify({"success": False, "message": str(e)}), 422

    @app.route("/api/reports/<int:employee_id>/monthly", methods=["GET"], endpoint="api_monthly_report")
    def api_monthly_report(employee_id: int):
        try:
            report = _build(employee_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, "summary": report.summary(), "days": report.day_rows()})

    @app.route("/api/reports/<int:employee_id>/monthly.csv", methods=["GET"], endpoint="api_monthly_report_csv")
    def api_monthly_report_csv(employee_id: int):
        try:
            report = _build(employee_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        filename = f"ponto_{employee_id}_{report.year:04d}{report.month:02d}.csv"
        return _write_report_csv(report=report, filename=filename)
