"""Exercise tracker API client.

A thin wrapper around the HTTP API using the ``requests`` library.
Each high‑level method returns a tuple ``(data, error)``:

* :meth:`hello` – liveness check.
* :meth:`create_user` – register a user.
* :meth:`list_users` – list every user.
* :meth:`add_exercise` – log an exercise for a user.
* :meth:`get_log` – read a user's (optionally filtered) exercise log.

The API reports some failures (unknown user, invalid exercise date)
with a success status and an ``error`` field in the body.  The client
folds those into the same ``error`` dictionary used for HTTP and
transport failures, so callers only check one value.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ExerciseTrackerClient:
    """Client for interacting with the exercise tracker API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.  ``None`` leaves the
                session default in place.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/users``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            options: Dict[str, Any] = {"params": params, "json": json_body}
            if self.timeout is not None:
                options["timeout"] = self.timeout
            response = self.session.request(method=method, url=url, **options)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            data = response.json() if response.content else None
        except ValueError as exc:
            logger.error("API returned a non‑JSON body: %s", exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON in response"}
        if isinstance(data, dict) and "error" in data:
            logger.warning("API reported an error: %s", data["error"])
            return None, {"status_code": response.status_code, "message": data["error"]}
        return data, None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def hello(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/api/hello")

    def create_user(self, username: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a user.

        Returns:
            A tuple ``(user, error)`` where ``user`` is ``{username, id}``.
        """
        return self._request("POST", "/api/users", json_body={"username": username})

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users in creation order.

        Returns:
            A tuple ``(users, error)``. ``users`` is empty on failure.
        """
        data, error = self._request("GET", "/api/users")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def add_exercise(
        self,
        user_id: Any,
        description: str,
        duration: int | str,
        date: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log an exercise for ``user_id``.

        Args:
            user_id: Identifier of the user.
            description: What was done.
            duration: Length in minutes.
            date: Optional ``yyyy-mm-dd`` date; the server uses today
                when omitted.
        Returns:
            A tuple ``(exercise, error)``.
        """
        payload: Dict[str, Any] = {"description": description, "duration": duration}
        if date is not None:
            payload["date"] = date
        return self._request("POST", f"/api/users/{user_id}/exercises", json_body=payload)

    def get_log(
        self,
        user_id: Any,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve the exercise log of ``user_id``.

        ``from_date`` and ``to_date`` are inclusive ``yyyy-mm-dd``
        bounds; ``limit`` caps the number of entries returned.
        """
        params: Dict[str, Any] = {}
        if from_date is not None:
            params["from"] = from_date
        if to_date is not None:
            params["to"] = to_date
        if limit is not None:
            params["limit"] = limit
        return self._request("GET", f"/api/users/{user_id}/logs", params=params or None)
