"""Construction dashboard API client.

A thin wrapper around the ``/api/v1`` endpoints of the construction
dashboard service, built on the ``requests`` library.  It is what a
front end or a script would use to read and change projects, tasks and
resources without dealing with URLs.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is ``None`` (or an empty
list for list methods) and ``error`` is a dictionary with keys
``status_code`` and ``message``.  The client never raises for HTTP or
connection errors.

Payloads are plain dictionaries using the API's camelCase field names,
e.g. ``{"projectId": 1, "phaseId": 2, "dueDate": "2025-03-01"}``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]
ListResult = Tuple[List[Dict[str, Any]], Optional[Error]]


class ConstructionDashboardAPI:
    """Client for the construction dashboard API."""

    # Collection paths for the generic CRUD helpers.
    RESOURCES = {
        "projects": "/projects",
        "tasks": "/tasks",
        "materials": "/materials",
        "equipment": "/equipment",
        "subcontractors": "/subcontractors",
    }

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Prefix under which the versioned API is mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/tasks/``).
            params: Query parameters; entries whose value is ``None``
                are dropped.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as ``204 No Content``.
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not isinstance(message, str):
                # FastAPI validation errors carry a list of problems.
                message = str(message)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> ListResult:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    @classmethod
    def _collection(cls, resource: str) -> str:
        try:
            return cls.RESOURCES[resource]
        except KeyError:
            raise ValueError(f"Unknown resource {resource!r}") from None

    # ------------------------------------------------------------------
    # Generic CRUD
    # ------------------------------------------------------------------
    def list(self, resource: str, **params: Any) -> ListResult:
        """List records of ``resource`` (``"projects"``, ``"tasks"`` ...).

        Keyword arguments are passed as query parameters, e.g.
        ``client.list("materials", status="low", sort_by="stock")``.
        """
        return self._list(f"{self._collection(resource)}/", params)

    def get(self, resource: str, record_id: Any) -> Result:
        return self._request("GET", f"{self._collection(resource)}/{record_id}")

    def create(self, resource: str, payload: Dict[str, Any]) -> Result:
        return self._request("POST", f"{self._collection(resource)}/", json_body=payload)

    def update(self, resource: str, record_id: Any, changes: Dict[str, Any]) -> Result:
        """Apply a partial update; only the keys in ``changes`` are modified."""
        return self._request("PUT", f"{self._collection(resource)}/{record_id}", json_body=changes)

    def delete(self, resource: str, record_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a record.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{self._collection(resource)}/{record_id}")
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def list_projects(
        self, *, status: Optional[str] = None, search: Optional[str] = None, sort_by: Optional[str] = None
    ) -> ListResult:
        return self.list("projects", status=status, search=search, sort_by=sort_by)

    def get_project_stats(self) -> Result:
        return self._request("GET", "/projects/stats")

    def get_project_tasks(self, project_id: Any, **filters: Any) -> ListResult:
        """Tasks of one project, narrowed by the same filters as :meth:`list_tasks`."""
        return self._list(f"/projects/{project_id}/tasks", filters)

    def get_grouped_tasks(self, project_id: Any, **filters: Any) -> Result:
        """Tasks of one project grouped by phase with completion figures.

        Returns:
            A tuple ``(groups, error)`` where ``groups`` maps phase name
            to ``{"phaseName", "tasks", "completed", "total",
            "completionPercentage"}``.
        """
        return self._request("GET", f"/projects/{project_id}/tasks/grouped", params=filters)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def list_tasks(
        self,
        *,
        project_id: Optional[int] = None,
        search: Optional[str] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        assignee_id: Optional[int] = None,
        phase_id: Optional[int] = None,
    ) -> ListResult:
        return self.list(
            "tasks",
            project_id=project_id,
            search=search,
            status=status,
            priority=priority,
            assignee_id=assignee_id,
            phase_id=phase_id,
        )

    def get_task_due_status(self, task_id: Any) -> Result:
        return self._request("GET", f"/tasks/{task_id}/due-status")

    def get_assignees(self) -> ListResult:
        return self._list("/tasks/assignees")

    def get_phases(self) -> ListResult:
        return self._list("/tasks/phases")

    # ------------------------------------------------------------------
    # Materials
    # ------------------------------------------------------------------
    def list_materials(
        self,
        *,
        search: Optional[str] = None,
        status: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> ListResult:
        return self.list("materials", search=search, status=status, sort_by=sort_by, order=order)

    def get_material_stats(self) -> Result:
        return self._request("GET", "/materials/stats")

    def request_material(
        self, material_id: Any, quantity: int, *, notes: str = "", urgency: str = "Normal"
    ) -> Result:
        """Request more of a material.

        Args:
            material_id: Identifier of the material.
            quantity: Positive number of units to order.
            notes: Free-text notes for the purchaser.
            urgency: One of ``Low``, ``Normal``, ``High``, ``Urgent``.
        Returns:
            A tuple ``(request, error)`` where ``request`` is the logged
            material request.
        """
        payload = {"quantity": quantity, "notes": notes, "urgency": urgency}
        return self._request("POST", f"/materials/{material_id}/requests", json_body=payload)

    def list_material_requests(self, material_id: Optional[int] = None) -> ListResult:
        return self._list("/materials/requests", {"material_id": material_id})

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    def get_notifications(self, limit: int = 20) -> ListResult:
        return self._list("/notifications/", {"limit": limit})
