from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import today_local
from ..common.http import confidential_flag, json_body, money
from ..container import Container
from ..exports.spreadsheet import employees_frame, export_filename, to_xlsx
from ..imports.employee_parser import parse_employee_batch
from ..imports.model import valid_rows
from .model import Employee

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _to_json(e: Employee, *, confidential: bool) -> dict:
        return {
            "employee_id": e.employee_id,
            "code": e.code,
            "name": e.name,
            "base_salary": money(e.base_salary, confidential=confidential),
            "is_active": e.is_active,
        }

    def _preview(rows) -> list[dict]:
        return [
            {
                "status": r.status.value,
                "line": r.original_line,
                "error": r.error,
                "code": r.data.code if r.data else None,
                "name": r.data.name if r.data else None,
                "base_salary": r.data.base_salary if r.data else None,
            }
            for r in rows
        ]

    @app.route("/api/employees", methods=["GET"], endpoint="api_employees_list")
    def api_employees_list():
        status = request.args.get("status") or "active"
        confidential = confidential_flag()
        items = container.employee_service.list_by_status(status)
        return jsonify([_to_json(e, confidential=confidential) for e in items])

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_create")
    def api_employees_create():
        data = json_body()
        employee_id = container.employee_service.create(
            code=data.get("code") or "",
            name=data.get("name") or "",
            base_salary=data.get("base_salary"),
        )
        return jsonify({"success": True, "employee_id": employee_id}), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="api_employees_update")
    def api_employees_update(employee_id: str):
        data = json_body()
        container.employee_service.update(
            employee_id,
            code=data.get("code") or "",
            name=data.get("name") or "",
            base_salary=data.get("base_salary"),
        )
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>/toggle", methods=["POST"], endpoint="api_employees_toggle")
    def api_employees_toggle(employee_id: str):
        is_active = container.employee_service.toggle_active(employee_id)
        return jsonify({"success": True, "is_active": is_active})

    @app.route("/api/employees/batch/preview", methods=["POST"], endpoint="api_employees_batch_preview")
    def api_employees_batch_preview():
        rows = parse_employee_batch(json_body().get("text") or "", container.employee_service.list_all())
        return jsonify(_preview(rows))

    @app.route("/api/employees/batch", methods=["POST"], endpoint="api_employees_batch")
    def api_employees_batch():
        rows = parse_employee_batch(json_body().get("text") or "", container.employee_service.list_all())
        ids = container.employee_service.import_batch(valid_rows(rows))
        rejected = [r for r in _preview(rows) if r["status"] == "invalid"]
        return jsonify({"success": True, "imported": ids, "rejected": rejected})

    @app.route("/api/employees/export.xlsx", methods=["GET"], endpoint="api_employees_export")
    def api_employees_export():
        items = container.employee_service.list_by_status(request.args.get("status") or "active")
        df = employees_frame(items, confidential=confidential_flag())
        out = to_xlsx(
            df,
            sheet_name="Funcionários",
            currency_columns=[c for c in df.columns if c.endswith("(R$)")],
        )
        return send_file(
            out,
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=export_filename("Funcionarios", today=today_local(), extension="xlsx"),
        )
