from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..core.enums import WorkflowState
from ..core.exceptions import ConflictError, DomainError, NotFoundError, RequestError, ValidationError
from ..reports.export import export_csv
from ..reports.finance_summary import summarize
from ..workflow.model import MutationOutcome
from ..container import Container
from .attendance_page import AttendancePage
from .page import ResourcePage


_MARK_STATUS = {
    WorkflowState.SUCCESS: 200,
    WorkflowState.SUBMITTING: 409,
    WorkflowState.IDLE: 409,
}


def _outcome_status(outcome: MutationOutcome, success_status: int) -> int:
    if outcome.succeeded:
        return success_status
    if outcome.skipped:
        return 404
    if isinstance(outcome.error, ValidationError):
        return 422
    if isinstance(outcome.error, ConflictError):
        return 409
    if isinstance(outcome.error, RequestError) and 400 <= outcome.error.status < 500:
        return outcome.error.status
    if outcome.error is None:
        # rejected while the same operation was still submitting
        return 409
    return 502


def _outcome_body(page: ResourcePage, outcome: MutationOutcome) -> dict:
    return {
        "outcome": {
            "kind": outcome.kind.value,
            "state": outcome.state.value,
            "message": outcome.message,
            "record": outcome.record,
        },
        "page": page.snapshot(),
    }


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def _register_resource(app: Flask, page: ResourcePage, *, editable: bool = True) -> None:
    name = page.definition.name

    @app.route(f"/{name}", methods=["GET"], endpoint=f"{name}_list")
    async def list_view():
        await page.activate()
        page.search(request.args.get("q", ""))
        return jsonify(page.snapshot())

    @app.route(f"/{name}/reload", methods=["POST"], endpoint=f"{name}_reload")
    async def reload_view():
        if not await page.activate():
            await page.reload()
        return jsonify(page.snapshot())

    @app.route(f"/{name}/export.csv", methods=["GET"], endpoint=f"{name}_export")
    async def export_view():
        await page.activate()
        content = export_csv(page.store.project(request.args.get("q", "")), page.definition.export_columns)
        return _csv_response(content, f"{name}.csv")

    @app.route(f"/{name}/notifications/<notification_id>", methods=["DELETE"], endpoint=f"{name}_dismiss")
    def dismiss_view(notification_id: str):
        if not page.notifications.dismiss(notification_id):
            return jsonify({"error": "Notification not found"}), 404
        return "", 204

    if not editable:
        return

    @app.route(f"/{name}", methods=["POST"], endpoint=f"{name}_create")
    async def create_view():
        await page.activate()
        outcome = await page.submit_create(request.get_json(silent=True) or {})
        return jsonify(_outcome_body(page, outcome)), _outcome_status(outcome, 201)

    @app.route(f"/{name}/<key>", methods=["PUT"], endpoint=f"{name}_update")
    async def update_view(key: str):
        await page.activate()
        try:
            stored_key = page.resolve_key(key)
            outcome = await page.submit_update(stored_key, request.get_json(silent=True) or {})
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        return jsonify(_outcome_body(page, outcome)), _outcome_status(outcome, 200)

    @app.route(f"/{name}/<key>", methods=["DELETE"], endpoint=f"{name}_delete")
    async def delete_view(key: str):
        await page.activate()
        try:
            stored_key = page.resolve_key(key)
        except NotFoundError:
            # absent key: nothing to delete
            return jsonify({"page": page.snapshot()}), 404
        outcome = await page.delete(stored_key)
        return jsonify(_outcome_body(page, outcome)), _outcome_status(outcome, 200)

    @app.route(f"/{name}/edit/cancel", methods=["POST"], endpoint=f"{name}_cancel")
    def cancel_view():
        page.cancel_edit()
        return jsonify(page.snapshot())


def _register_attendance(app: Flask, page: AttendancePage) -> None:
    def _period():
        return request.args.get("month", type=int), request.args.get("year", type=int), request.args.get("q", "")

    @app.route("/attendance/<teacher_id>/mark", methods=["POST"], endpoint="attendance_mark")
    async def mark_view(teacher_id: str):
        await page.activate()
        state = await page.mark(teacher_id)
        marked = state == WorkflowState.SUCCESS
        status = _MARK_STATUS.get(state, 502)
        return jsonify({"marked": marked, "state": state.value, "page": page.snapshot()}), status

    @app.route("/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    async def summary_view():
        await page.activate()
        month, year, query = _period()
        teachers = page.summary(month=month, year=year, query=query)
        return jsonify({
            "teachers": [t.to_row() for t in teachers],
            "years": page.years(),
        })

    @app.route("/attendance/summary.csv", methods=["GET"], endpoint="attendance_summary_export")
    async def summary_export_view():
        await page.activate()
        month, year, query = _period()
        rows = [t.to_row() for t in page.summary(month=month, year=year, query=query)]
        content = export_csv(rows, page.definition.export_columns)
        page.notifications.success("Report exported successfully")
        return _csv_response(content, f"attendance_{month or 'current'}_{year or 'current'}.csv")


def _register_fee_summary(app: Flask, page: ResourcePage) -> None:
    @app.route("/fees/summary", methods=["GET"], endpoint="fees_summary")
    async def fees_summary_view():
        await page.activate()
        records = page.store.project(request.args.get("q", ""))
        return jsonify(summarize(records, category_field="feeType").to_dict())


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        return jsonify({"error": str(e)}), 400

    _register_fee_summary(app, container.fees_page)
    _register_attendance(app, container.attendance_page)

    for page in container.pages():
        _register_resource(app, page, editable=not isinstance(page, AttendancePage))
