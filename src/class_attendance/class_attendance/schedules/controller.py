from __future__ import annotations

from flask import Flask, request

from ..common.http import date_arg, date_field, domain_error_response, json_body, ok, unexpected_error_response
from ..common.serializers import schedule_json, schedule_view_json, volunteer_json
from ..container import Container
from ..core.constants import ALL_CLASSES
from ..core.exceptions import DomainError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedule", methods=["GET"], endpoint="api_schedule")
    def api_schedule():
        try:
            on = date_arg()
            entries = container.schedule_service.entries_for(on, request.args.get("class") or ALL_CLASSES)
            return ok({"date": on.isoformat(), "entries": [schedule_view_json(e) for e in entries]})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("loading schedule")

    @app.route("/api/schedule", methods=["POST"], endpoint="api_schedule_assign")
    def api_schedule_assign():
        try:
            data = json_body()
            ministers = data.get("ministerIds") or []
            if not isinstance(ministers, list):
                raise ValidationError("ministerIds deve ser uma lista")

            entry = container.schedule_service.assign(
                class_date=date_field(data),
                class_name=data.get("className"),
                supervisor_id=data.get("supervisorId"),
                coordinator_id=data.get("coordinatorId"),
                desk_id=data.get("deskId"),
                minister_ids=ministers,
            )
            return ok({"message": "Escala salva com sucesso.", "entry": schedule_json(entry)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("saving schedule")

    @app.route("/api/volunteers", methods=["GET"], endpoint="api_volunteers")
    def api_volunteers():
        try:
            return ok({"volunteers": [volunteer_json(v) for v in container.volunteer_service.list_all()]})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("listing volunteers")

    @app.route("/api/volunteers", methods=["POST"], endpoint="api_volunteers_create")
    def api_volunteers_create():
        try:
            volunteer = container.volunteer_service.create(name=json_body().get("name"))
            return ok({"volunteer": volunteer_json(volunteer)}, 201)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("creating volunteer")
