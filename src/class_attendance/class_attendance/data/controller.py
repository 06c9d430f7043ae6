from __future__ import annotations

from flask import Flask

from ..common.http import domain_error_response, ok, unexpected_error_response
from ..common.serializers import schedule_json, student_json, topic_json, volunteer_json
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/data", methods=["GET"], endpoint="api_data")
    def api_data():
        try:
            snap = container.data_service.load_all()
            return ok(
                {
                    "classNames": list(container.class_names),
                    "students": [student_json(s, attendance) for s, attendance in snap.students],
                    "volunteers": [volunteer_json(v) for v in snap.volunteers],
                    "schedule": [schedule_json(e) for e in snap.schedule],
                    "topics": [topic_json(t) for t in snap.topics],
                }
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("loading data")
