from __future__ import annotations

import csv
import io
from urllib.parse import quote

from flask import Flask, abort, jsonify, request

from ..api.dispatcher import MockApiDispatcher
from ..common.datetime_utils import try_parse_iso_date
from ..container import Container

REPORT_FIELDS = [
    "date",
    "student_id",
    "registration_number",
    "student_name",
    "department",
    "subject_code",
    "subject",
    "instructor",
    "time",
    "status",
    "notes",
]


def register(app: Flask, container: Container, dispatcher: MockApiDispatcher) -> None:
    @app.route("/api/<path:subpath>", methods=["GET", "POST"], endpoint="api_gateway")
    def api_gateway(subpath: str):
        body = request.get_json(silent=True) if request.method == "POST" else None
        # request.path is decoded; the dispatcher takes an encoded URL
        url = quote(request.path)
        if request.query_string:
            url += "?" + request.query_string.decode("latin-1")
        res = dispatcher.dispatch(request.method, url, body)
        return app.response_class(res.text(), status=res.status, mimetype="application/json")

    @app.route("/admin/reset", methods=["POST"], endpoint="admin_reset")
    def admin_reset():
        if not app.config.get("ENABLE_RESET_ENDPOINT"):
            abort(404)
        dispatcher.reset()
        return jsonify({"message": "Mock stores reset"})

    @app.route("/reports/attendance.csv", methods=["GET"], endpoint="attendance_report_csv")
    def attendance_report_csv():
        start_s = request.args.get("startDate")
        end_s = request.args.get("endDate")
        start = try_parse_iso_date(start_s)
        end = try_parse_iso_date(end_s)
        if (start_s and not start) or (end_s and not end):
            return jsonify({"message": "startDate/endDate must be YYYY-MM-DD"}), 400

        data = container.attendance_report_service.build_attendance_report(
            start=start,
            end=end,
            student_id=request.args.get("studentId", type=int),
            registration_number=request.args.get("registrationNumber") or None,
            department=request.args.get("department") or None,
        )

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        suffix = f"_{start.strftime('%Y%m%d')}" if start else ""
        suffix += f"_{end.strftime('%Y%m%d')}" if end else ""
        filename = f"attendance{suffix}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
