import json
from collections.abc import Callable
from typing import Any

from flask import Blueprint, Response, request
from flask.views import MethodView


def class_route(
    blp: Blueprint, rule: str, **kwargs: Any  # noqa: ANN401
) -> Callable[[type[MethodView]], type[MethodView]]:
    def decorator(cls: type[MethodView]) -> type[MethodView]:
        blp.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **kwargs)
        return cls

    return decorator


def json_response(data: dict[str, Any] | list[Any], status: int) -> Response:
    return Response(json.dumps(data), status=status, mimetype='application/json')


def error_response(msg: str, status: int) -> Response:
    return json_response({'code': status, 'message': msg}, status)


def json_body() -> dict[str, Any] | None:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data
