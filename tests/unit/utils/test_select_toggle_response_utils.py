"""
错误响应工具单元测试
"""

import re
from typing import Any

import pytest
from flask import Flask
from werkzeug.exceptions import NotFound

from select_toggle.errors import SelectToggleFieldNotFoundError, ValidationError
from select_toggle.utils.response_utils import jsonify_payload, jsonify_unified_error, unified_error_response


@pytest.fixture
def flask_app() -> Any:
    """构造临时 Flask 应用，供 jsonify 系列函数使用"""
    app = Flask(__name__)
    app.config["TESTING"] = True
    return app


@pytest.mark.unit
def test_unified_error_response_uses_app_error_metadata():
    payload, status = unified_error_response(ValidationError("参数缺失"))

    assert status == 400
    assert payload["success"] is False
    assert payload["error"] is True
    assert payload["message"] == "参数缺失"
    assert payload["message_code"] == "VALIDATION_ERROR"
    assert payload["category"] == "validation"
    assert payload["severity"] == "low"
    assert payload["recoverable"] is True
    assert re.match(r"\d{4}-\d{2}-\d{2}T", payload["timestamp"])


@pytest.mark.unit
def test_unified_error_response_includes_app_error_extra():
    payload, status = unified_error_response(SelectToggleFieldNotFoundError("users", "role"))

    assert status == 404
    assert payload["extra"] == {"resource_name": "users", "field_attribute": "role"}
    assert payload["suggestions"]


@pytest.mark.unit
def test_unified_error_response_hides_unexpected_error_text():
    payload, status = unified_error_response(RuntimeError("database password leaked"))

    assert status == 500
    assert payload["message_code"] == "INTERNAL_ERROR"
    assert "password" not in payload["message"]


@pytest.mark.unit
def test_unified_error_response_maps_http_exception():
    payload, status = unified_error_response(NotFound())

    assert status == 404
    assert payload["message_code"] == "INVALID_REQUEST"
    assert payload["category"] == "validation"


@pytest.mark.unit
def test_jsonify_helpers_return_responses(flask_app: Any):
    with flask_app.test_request_context("/"):
        error_response = jsonify_unified_error(ValidationError())
        success_response = jsonify_payload({"options": []})

    assert error_response.status_code == 400
    assert error_response.get_json()["success"] is False
    assert success_response.status_code == 200
    assert success_response.get_json() == {"options": []}
