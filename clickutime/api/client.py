"""
ClickUpClient: A client for the ClickUp time tracking API.
"""
import requests
from typing import Optional, Dict, Any, List

from ..reports.interval import Interval


class ClickUpError(Exception):
    """Base class for failures while talking to the ClickUp API."""


class RequestBuildError(ClickUpError):
    """The request could not be built (bad URL or header)."""


class RequestFailedError(ClickUpError):
    """The request could not be sent or the API answered with an error status."""


class ResponseReadError(ClickUpError):
    """The response body could not be read."""


class ResponseParseError(ClickUpError):
    """The response body is not the JSON we expect."""


class ClickUpClient:
    """A client for the ClickUp time tracking API."""

    def __init__(self, token: str, team_id: str):
        """Initialize the ClickUpClient.

        Args:
            token: ClickUp personal API token
            team_id: ClickUp team (workspace) ID
        """
        self.token = token
        self.team_id = team_id
        self.base_url = "https://api.clickup.com/api/v2"

    def api_get(self, url: str, params: Optional[dict] = None) -> Any:
        """Make a GET request to the ClickUp API.

        Args:
            url: API endpoint URL
            params: Query parameters (optional)

        Returns:
            Decoded JSON body

        Raises:
            ClickUpError: If the request cannot be built, sent, read or decoded
        """
        headers = {"Authorization": self.token}
        try:
            resp = requests.get(url, headers=headers, params=params)
        except (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL, requests.exceptions.InvalidHeader) as e:
            raise RequestBuildError(f"Failed to build a request to ClickUp's API: {e}") from e
        except (requests.exceptions.ChunkedEncodingError, requests.exceptions.ContentDecodingError) as e:
            raise ResponseReadError(f"Failed to read response's body: {e}") from e
        except requests.RequestException as e:
            raise RequestFailedError(f"Failed to request ClickUp's API: {e}") from e

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise RequestFailedError(f"ClickUp's API answered with an error: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise ResponseParseError(f"Failed to parse response body: {e}") from e

    def get_time_entries(self, start_ms: int, end_ms: int) -> List[Interval]:
        """Get the non-billable time entries inside a millisecond window.

        Args:
            start_ms: Window start, milliseconds since epoch
            end_ms: Window end, milliseconds since epoch

        Returns:
            List of intervals
        """
        url = f"{self.base_url}/team/{self.team_id}/time_entries"
        params = {
            "is_billable": "false",
            "start_date": start_ms,
            "end_date": end_ms,
        }
        body = self.api_get(url, params)
        data = _get_data(body)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ResponseParseError("Failed to parse response body: 'data' is not a list")
        return [_to_interval(item) for item in data]

    def get_current_entry(self) -> Optional[Interval]:
        """Get the currently running time entry.

        Returns:
            The running interval, or None if nothing is being tracked
        """
        url = f"{self.base_url}/team/{self.team_id}/time_entries/current"
        data = _get_data(self.api_get(url))
        if data is None:
            return None
        return _to_interval(data)


def _get_data(body: Any) -> Any:
    if not isinstance(body, dict):
        raise ResponseParseError("Failed to parse response body: expected a JSON object")
    return body.get("data")


def _to_interval(item: Dict[str, Any]) -> Interval:
    try:
        return Interval.from_api(item)
    except (KeyError, TypeError) as e:
        raise ResponseParseError(f"Failed to parse response body: malformed entry {item!r}") from e
