from datetime import date

from flask import Flask, Response, jsonify, request

from .calendar_service import MAX_YEAR, MIN_YEAR, CalendarService
from .config import PlannerConfig
from .exceptions import CustomizationsNotFoundError, ExportError
from .holiday_provider import HolidayProvider
from .models.customizations import Customizations, MoonPhase
from .moon_phase import MoonPhaseCalculator
from .output.ics_writer import ICSWriter
from .storage.customization_repository import CustomizationRepository


def _error(message: str, status: int):
    return jsonify({"status": "error", "message": message}), status


def _year_arg(value) -> int | None:
    """Year from a query/body value; None if invalid."""
    if value is None:
        return date.today().year
    try:
        year = int(value)
    except (TypeError, ValueError):
        return None
    return year if MIN_YEAR <= year <= MAX_YEAR else None


def _bool_arg(name: str) -> bool:
    return request.args.get(name, "").lower() in ("1", "true", "yes")


def create_app(
    config: PlannerConfig | None = None,
    holiday_provider: HolidayProvider | None = None,
):
    app = Flask(__name__)

    config = config or PlannerConfig.from_env()
    service = CalendarService(config, holiday_provider=holiday_provider)
    repository = CustomizationRepository(config.storage_dir)

    @app.errorhandler(ValueError)
    def invalid_value(e):
        # Invalid user ids and similar bad input
        return _error(str(e), 400)

    @app.errorhandler(CustomizationsNotFoundError)
    def not_found(e):
        return _error(str(e), 404)

    @app.errorhandler(ExportError)
    def export_failed(e):
        return _error(str(e), 400)

    @app.route("/calendar/preview", methods=["POST"])
    def preview():
        """Generate a calendar from customizations in the request body."""
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return _error("Expected a JSON object", 400)

        year = _year_arg(body.get("year"))
        if year is None:
            return _error("Invalid year", 400)

        raw_customizations = body.get("customizations")
        if not isinstance(raw_customizations, dict):
            raw_customizations = {}
        customizations = Customizations.model_validate(raw_customizations)
        calendar_data = service.generator.generate(customizations, year)
        document = calendar_data.to_document()

        # Optional pagination by 0-based month index
        month = request.args.get("month", type=int)
        if month is not None:
            if not 0 <= month <= 11:
                return _error("Month must be between 0 and 11", 400)
            document["months"] = [document["months"][month]]

        return jsonify(
            {
                "status": "success",
                "calendar": document,
                "notices": service.notices(customizations, year),
            }
        )

    @app.route("/users/<user_id>/customizations", methods=["GET"])
    def get_customizations(user_id):
        saved = repository.load(user_id)
        if saved is None:
            return _error(f"No customizations saved for '{user_id}'", 404)
        return jsonify(saved.model_dump(mode="json", by_alias=True))

    @app.route("/users/<user_id>/customizations", methods=["PUT"])
    def put_customizations(user_id):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return _error("Expected a JSON object", 400)
        customizations = Customizations.model_validate(body)

        saved = repository.save(user_id, customizations)
        return jsonify(saved.model_dump(mode="json", by_alias=True))

    @app.route("/users/<user_id>/customizations", methods=["DELETE"])
    def delete_customizations(user_id):
        repository.delete(user_id)
        return "", 204

    @app.route("/users/<user_id>/calendar.json", methods=["GET"])
    def get_calendar_json(user_id):
        year = _year_arg(request.args.get("year"))
        if year is None:
            return _error("Invalid year", 400)

        customizations = repository.load_customizations(user_id)
        calendar_data = service.generator.generate(customizations, year)
        return jsonify(calendar_data.to_document())

    @app.route("/users/<user_id>/calendar.ics", methods=["GET"])
    def get_calendar_ics(user_id):
        """Serve the user's calendar as an iCalendar file."""
        year = _year_arg(request.args.get("year"))
        if year is None:
            return _error("Invalid year", 400)

        customizations = repository.load_customizations(user_id)
        export = service.build_export(
            customizations,
            year,
            time_zone=request.args.get("tz"),
            recurring=_bool_arg("recurring"),
        )
        return Response(
            ICSWriter().render(export),
            content_type="text/calendar; charset=utf-8",
            headers={
                "Content-Disposition": f"attachment; filename=planner-{year}.ics"
            },
        )

    @app.route("/users/<user_id>/events", methods=["GET"])
    def get_events(user_id):
        """Flattened sync events for an external calendar."""
        year = _year_arg(request.args.get("year"))
        if year is None:
            return _error("Invalid year", 400)

        customizations = repository.load_customizations(user_id)
        export = service.build_export(
            customizations,
            year,
            time_zone=request.args.get("tz"),
            recurring=_bool_arg("recurring"),
        )
        return jsonify(
            {
                "year": year,
                "timeZone": export.time_zone,
                "events": [
                    event.model_dump(mode="json", by_alias=True)
                    for event in export.events
                ],
            }
        )

    @app.route("/moon-phases", methods=["GET"])
    def get_moon_phases():
        year = _year_arg(request.args.get("year"))
        if year is None:
            return _error("Invalid year", 400)

        names = request.args.getlist("phase") or [phase.value for phase in MoonPhase]
        phases = Customizations.model_validate({"moonPhases": names}).moon_phases
        matches = MoonPhaseCalculator().for_year(year, phases)
        return jsonify(
            {
                "year": year,
                "phases": [
                    {"date": match.date.isoformat(), "phase": match.phase.value}
                    for match in matches
                ],
            }
        )

    return app
