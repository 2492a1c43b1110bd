# tests/test_client.py
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from construction_dashboard_client import ConstructionDashboardAPI


def _response(status_code: int, body: Any = None, url: str = "http://test") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


class _StubSession:
    """Records requests and replays queued responses."""

    def __init__(self, *responses: Any) -> None:
        self.responses: List[Any] = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def request(self, method: str, url: str, params: Optional[dict] = None, json: Any = None, timeout: Any = None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _client(*responses: Any) -> ConstructionDashboardAPI:
    return ConstructionDashboardAPI(base_url="http://dash.local/", session=_StubSession(*responses))


def test_list_tasks_drops_empty_params():
    api = _client(_response(200, [{"Id": 1}]))
    tasks, error = api.list_tasks(project_id=1, status="Completed")

    assert tasks == [{"Id": 1}]
    assert error is None
    call = api.session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://dash.local/api/v1/tasks/"
    assert call["params"] == {"project_id": 1, "status": "Completed"}


def test_get_returns_parsed_body():
    api = _client(_response(200, {"Id": 3, "name": "Tower"}))
    project, error = api.get("projects", 3)
    assert project == {"Id": 3, "name": "Tower"}
    assert error is None
    assert api.session.calls[0]["url"] == "http://dash.local/api/v1/projects/3"


def test_http_error_becomes_error_tuple():
    api = _client(_response(404, {"detail": "Task with ID 9 not found"}))
    task, error = api.get("tasks", 9)
    assert task is None
    assert error == {"status_code": 404, "message": "Task with ID 9 not found"}


def test_validation_error_detail_is_stringified():
    api = _client(_response(422, {"detail": [{"loc": ["body", "name"], "msg": "Field required"}]}))
    _, error = api.create("materials", {})
    assert error["status_code"] == 422
    assert "Field required" in error["message"]


def test_connection_error_becomes_error_tuple():
    api = _client(requests.ConnectionError("refused"))
    projects, error = api.list_projects()
    assert projects == []
    assert error == {"status_code": None, "message": "refused"}


def test_delete_reports_success_for_no_content():
    api = _client(_response(204))
    ok, error = api.delete("equipment", 2)
    assert ok is True
    assert error is None
    assert api.session.calls[0]["method"] == "DELETE"


def test_request_material_posts_payload():
    api = _client(_response(201, {"Id": 1, "materialId": 2, "quantity": 10}))
    request, error = api.request_material(2, 10, urgency="Urgent")

    assert error is None
    assert request["materialId"] == 2
    call = api.session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://dash.local/api/v1/materials/2/requests"
    assert call["json"] == {"quantity": 10, "notes": "", "urgency": "Urgent"}


def test_update_sends_put_with_changes():
    api = _client(_response(200, {"Id": 4, "status": "Completed"}))
    api.update("tasks", 4, {"status": "Completed"})
    call = api.session.calls[0]
    assert call["method"] == "PUT"
    assert call["json"] == {"status": "Completed"}


def test_unknown_resource_is_a_programming_error():
    api = _client()
    with pytest.raises(ValueError):
        api.list("cranes")
