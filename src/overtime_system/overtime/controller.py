from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import today_local
from ..common.http import arg_date, confidential_flag, json_body, money
from ..container import Container
from ..core.constants import ALL_EMPLOYEES
from ..core.enums import SortDirection, SortKey
from ..core.exceptions import ValidationError
from ..exports.spreadsheet import export_filename, overtime_frame, to_csv_bytes, to_xlsx
from ..imports.model import valid_rows
from ..imports.overtime_parser import parse_overtime_batch
from ..payroll.filters import RecordFilter
from ..payroll.model import OvertimeRow
from ..payroll.sorting import SortConfig

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _sort_from_args() -> SortConfig:
        try:
            return SortConfig(
                key=SortKey(request.args.get("sort") or SortKey.DATE.value),
                direction=SortDirection(request.args.get("direction") or SortDirection.DESCENDING.value),
            )
        except ValueError:
            raise ValidationError("Ordenação inválida.")

    def _rows() -> list[OvertimeRow]:
        criteria = RecordFilter(
            employee_id=request.args.get("employee_id") or ALL_EMPLOYEES,
            start_date=arg_date("start"),
            end_date=arg_date("end"),
        )
        return container.payroll_report_service.build_overtime_rows(
            container.snapshot(),
            criteria=criteria,
            search=request.args.get("search") or "",
            sort=_sort_from_args(),
        )

    def _fields(data: dict) -> dict:
        return {
            "employee_id": str(data.get("employee_id") or ""),
            "date": data.get("date") or "",
            "start_time": data.get("start_time") or "",
            "end_time": data.get("end_time") or "",
            "service_type": data.get("service_type") or "",
            "observation": data.get("observation") or "",
        }

    def _preview(rows) -> list[dict]:
        out = []
        for r in rows:
            item = {"status": r.status.value, "line": r.original_line, "error": r.error, "employee_name": r.employee_name}
            if r.data:
                item.update(
                    date=r.data.date,
                    start_time=r.data.start_time,
                    end_time=r.data.end_time,
                    service_type=r.data.service_type.value,
                    observation=r.data.observation,
                )
            out.append(item)
        return out

    @app.route("/api/overtime", methods=["GET"], endpoint="api_overtime_list")
    def api_overtime_list():
        confidential = confidential_flag()
        rows = _rows()
        total_hours = sum(r.hours for r in rows)
        total_value = sum(r.value for r in rows)
        return jsonify(
            {
                "rows": [
                    {
                        "record_id": r.record.record_id,
                        "employee_id": r.record.employee_id,
                        "employee_name": r.employee_name,
                        "date": r.record.date,
                        "start_time": r.record.start_time,
                        "end_time": r.record.end_time,
                        "service_type": r.record.service_type.value,
                        "observation": r.record.observation,
                        "hours": round(r.hours, 2),
                        "value": money(r.value, confidential=confidential),
                    }
                    for r in rows
                ],
                "total_hours": round(total_hours, 2),
                "total_value": money(total_value, confidential=confidential),
            }
        )

    @app.route("/api/overtime", methods=["POST"], endpoint="api_overtime_create")
    def api_overtime_create():
        record_id = container.overtime_service.add(**_fields(json_body()))
        return jsonify({"success": True, "record_id": record_id}), 201

    @app.route("/api/overtime/<record_id>", methods=["PUT"], endpoint="api_overtime_update")
    def api_overtime_update(record_id: str):
        container.overtime_service.update(record_id, **_fields(json_body()))
        return jsonify({"success": True})

    @app.route("/api/overtime/<record_id>", methods=["DELETE"], endpoint="api_overtime_delete")
    def api_overtime_delete(record_id: str):
        container.overtime_service.delete(record_id)
        return jsonify({"success": True})

    @app.route("/api/overtime/batch/preview", methods=["POST"], endpoint="api_overtime_batch_preview")
    def api_overtime_batch_preview():
        rows = parse_overtime_batch(json_body().get("text") or "", container.employee_service.list_all())
        return jsonify(_preview(rows))

    @app.route("/api/overtime/batch", methods=["POST"], endpoint="api_overtime_batch")
    def api_overtime_batch():
        rows = parse_overtime_batch(json_body().get("text") or "", container.employee_service.list_all())
        ids = container.overtime_service.import_batch(valid_rows(rows))
        rejected = [r for r in _preview(rows) if r["status"] == "invalid"]
        return jsonify({"success": True, "imported": ids, "rejected": rejected})

    @app.route("/api/overtime/export.xlsx", methods=["GET"], endpoint="api_overtime_export_xlsx")
    def api_overtime_export_xlsx():
        rows = _rows()
        if not rows:
            raise ValidationError("Não há registros filtrados para exportar.")
        out = to_xlsx(
            overtime_frame(rows, confidential=confidential_flag()),
            sheet_name="Horas Extras",
            currency_columns=["Valor Total (R$)"],
        )
        return send_file(
            out,
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=export_filename("Relatorio_Horas_Extras", today=today_local(), extension="xlsx"),
        )

    @app.route("/api/overtime/export.csv", methods=["GET"], endpoint="api_overtime_export_csv")
    def api_overtime_export_csv():
        rows = _rows()
        if not rows:
            raise ValidationError("Não há registros filtrados para exportar.")
        filename = export_filename("Relatorio_Horas_Extras", today=today_local(), extension="csv")
        return app.response_class(
            to_csv_bytes(overtime_frame(rows, confidential=confidential_flag())),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
