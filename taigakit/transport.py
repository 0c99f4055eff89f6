"""HTTP transport for the Taiga REST API."""

import json
from pathlib import Path
from typing import Any, Mapping
from urllib.parse import urlencode

import requests

SUCCESS_CODES = frozenset({200, 201, 202, 204})


class TaigaError(Exception):
    """Raised when a request to Taiga fails or returns an unusable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def is_successful(status_code: int) -> bool:
    """Return True if the status code is one Taiga uses for success."""
    return status_code in SUCCESS_CODES


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Mapping[str, Any]) -> str:
    """Encode query parameters sorted by key; sequences repeat their key."""
    pairs = []
    for key in sorted(params):
        value = params[key]
        values = value if isinstance(value, (list, tuple)) else [value]
        pairs.extend((key, _stringify(item)) for item in values)
    return urlencode(pairs)


class Transport:
    """Sends authenticated JSON requests to a Taiga instance."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        session: requests.Session | None = None,
        api_version: str = "v1",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session if session is not None else requests.Session()
        self.api_version = api_version

    def make_url(self, *args: Any) -> str:
        """Build an absolute API URL from path segments."""
        return "/".join([self.base_url, "api", self.api_version, *map(str, args)])

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _send(self, method: str, url: str, payload: Any = None) -> requests.Response:
        body = None if payload is None else json.dumps(payload)
        headers = {"Content-Type": "application/json", **self._auth_headers()}
        try:
            response = self.session.request(method, url, data=body, headers=headers)
        except requests.RequestException as exc:
            raise TaigaError(str(exc)) from exc
        if not is_successful(response.status_code):
            raise TaigaError(response.text, response.status_code)
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if response.status_code == 204:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise TaigaError("could not decode response body", response.status_code) from exc

    def get(self, url: str) -> Any:
        """GET a URL and return the decoded JSON body."""
        return self._decode(self._send("GET", url))

    def post(self, url: str, payload: Any = None) -> Any:
        """POST a JSON payload and return the decoded JSON body."""
        return self._decode(self._send("POST", url, payload))

    def put(self, url: str, payload: Any = None) -> Any:
        """PUT a JSON payload and return the decoded JSON body."""
        return self._decode(self._send("PUT", url, payload))

    def patch(self, url: str, payload: Any = None) -> Any:
        """PATCH a JSON payload and return the decoded JSON body."""
        return self._decode(self._send("PATCH", url, payload))

    def delete(self, url: str) -> requests.Response:
        """DELETE a URL and return the raw response."""
        return self._send("DELETE", url)

    def upload(self, url: str, file_path: str | Path, object_id: int, project: int) -> dict:
        """Upload a file as an attachment of an object; return the attachment data."""
        path = Path(file_path)
        try:
            handle = path.open("rb")
        except OSError as exc:
            raise TaigaError(f"Could not open file at specified location: {file_path}") from exc
        with handle:
            data = {
                "object_id": str(object_id),
                "project": str(project),
                "from_comment": "False",
            }
            files = {"attached_file": (path.name, handle)}
            try:
                response = self.session.post(
                    url, data=data, files=files, headers=self._auth_headers()
                )
            except requests.RequestException as exc:
                raise TaigaError(str(exc)) from exc
        if not is_successful(response.status_code):
            raise TaigaError(response.text, response.status_code)
        try:
            decoded = response.json()
        except ValueError:
            return {}
        return decoded if isinstance(decoded, dict) else {}