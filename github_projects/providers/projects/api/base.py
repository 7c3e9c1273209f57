import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from github_projects.core.client import GitHubClient, get_github_client
from github_projects.core.response import (
    ResponseMode,
    handle_response,
    handle_transport_error,
)
from github_projects.schemas.result import Result

logger = logging.getLogger(__name__)

ORG_SCOPE = "orgs"
USER_SCOPE = "users"


def build_query_params(opts: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """
    Stringify option keys (per_page, before, after, q, fields).

    Scalar values go through as-is; a list or tuple is sent as repeated
    ``key[]`` pairs, e.g. fields=[1, 2] -> fields[]=1&fields[]=2.
    """
    params: List[Tuple[str, Any]] = []
    for key, value in opts.items():
        if isinstance(value, (list, tuple)):
            params.extend((f"{key}[]", element) for element in value)
        else:
            params.append((str(key), value))
    return params


def projects_path(scope: str, owner: str, *segments: Any) -> str:
    """/{orgs|users}/{owner}/projectsV2[/...]"""
    path = f"/{scope}/{owner}/projectsV2"
    for segment in segments:
        path += f"/{segment}"
    return path


class BaseAPI:
    """Sends one request and normalizes the outcome; nothing here raises per call."""

    def __init__(self, client: Optional[GitHubClient] = None):
        self.client = client or get_github_client()

    async def _send(
        self,
        method: str,
        path: str,
        mode: ResponseMode,
        json: Optional[Any] = None,
        params: Optional[List[Tuple[str, Any]]] = None,
    ) -> Result:
        try:
            if method == "GET":
                response = await self.client.get(path, params=params)
            elif method == "POST":
                response = await self.client.post(path, json=json)
            elif method == "PATCH":
                response = await self.client.patch(path, json=json)
            elif method == "DELETE":
                response = await self.client.delete(path)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")
        # RequestError covers transport failures plus DecodingError and
        # TooManyRedirects raised while the response is read
        except httpx.RequestError as e:
            return handle_transport_error(e)

        return handle_response(response, mode)
