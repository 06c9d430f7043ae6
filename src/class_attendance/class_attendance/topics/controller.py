from __future__ import annotations

from flask import Flask

from ..common.http import date_field, domain_error_response, json_body, ok, unexpected_error_response
from ..common.serializers import topic_json
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/topics", methods=["GET"], endpoint="api_topics")
    def api_topics():
        try:
            return ok({"topics": [topic_json(t) for t in container.topic_service.list_recent()]})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("listing topics")

    @app.route("/api/topics", methods=["POST"], endpoint="api_topics_create")
    def api_topics_create():
        try:
            data = json_body()
            topic = container.topic_service.add(
                class_date=date_field(data),
                title=data.get("title"),
                description=data.get("description"),
            )
            return ok({"message": f'Assunto "{topic.title}" registrado com sucesso.', "topic": topic_json(topic)}, 201)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("creating topic")
