from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import month_range, today_local
from ..common.http import arg_date, confidential_flag, money
from ..container import Container
from ..core.constants import ALL_EMPLOYEES
from ..exports.spreadsheet import export_filename, receipts_frame, to_xlsx
from .filters import RecordFilter

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _receipts():
        summaries = container.payroll_report_service.build_receipts(
            container.snapshot(),
            start_date=arg_date("start"),
            end_date=arg_date("end"),
            search=request.args.get("search") or "",
        )
        # Optional selection of employees to print, e.g. ?ids=1,4
        selected = {s for s in (request.args.get("ids") or "").split(",") if s}
        if selected:
            summaries = [s for s in summaries if s.employee_id in selected]
        return summaries

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        default_start, default_end = month_range(today_local())
        start = arg_date("start") or default_start
        end = arg_date("end") or default_end
        criteria = RecordFilter(
            employee_id=request.args.get("employee_id") or ALL_EMPLOYEES,
            start_date=start,
            end_date=end,
        )
        confidential = confidential_flag()
        data = container.payroll_report_service.recompute(container.snapshot(), criteria)

        return jsonify(
            {
                "start": start.strftime("%Y-%m-%d"),
                "end": end.strftime("%Y-%m-%d"),
                "employee_id": data.selected_employee_id or ALL_EMPLOYEES,
                "active_employees": data.active_employees,
                "total_hours": round(data.total_hours, 2),
                "total_value": money(data.total_value, confidential=confidential),
                "daily": [{"date": d.date, "hours": round(d.hours, 1)} for d in data.daily],
                "top_employees": [
                    {"employee_id": t.employee_id, "name": t.name, "hours": round(t.hours, 1)}
                    for t in data.top_employees
                ],
                "service_types": [
                    {"service_type": s.service_type.value, "hours": round(s.hours, 1)} for s in data.service_types
                ],
            }
        )

    @app.route("/api/receipts", methods=["GET"], endpoint="api_receipts")
    def api_receipts():
        confidential = confidential_flag()
        summaries = _receipts()
        total_hours, total_value = container.payroll_report_service.receipt_totals(summaries)
        return jsonify(
            {
                "receipts": [
                    {
                        "employee_id": s.employee_id,
                        "employee_code": s.employee_code,
                        "employee_name": s.employee_name,
                        "total_hours": round(s.total_hours, 2),
                        "total_value": money(s.total_value, confidential=confidential),
                        "last_date": s.last_date,
                    }
                    for s in summaries
                ],
                "total_hours": round(total_hours, 2),
                "total_value": money(total_value, confidential=confidential),
            }
        )

    @app.route("/api/receipts/export.xlsx", methods=["GET"], endpoint="api_receipts_export")
    def api_receipts_export():
        out = to_xlsx(
            receipts_frame(_receipts(), confidential=confidential_flag()),
            sheet_name="Recibos",
            currency_columns=["Valor Total (R$)"],
        )
        return send_file(
            out,
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=export_filename("Recibos", today=today_local(), extension="xlsx"),
        )
