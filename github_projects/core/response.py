"""
Response normalization shared by every project operation.

Maps (transport outcome, status, body) to Ok/Err in a single dispatch. Status
codes are not interpreted beyond the 2xx / 204 boundary: 401, 403, 404, 422,
429 and the rest all come back as Err(RemoteError(status, body)) so callers
can match on the numeric code themselves.
"""

import logging
from enum import Enum
from typing import Any, Mapping, Optional

import httpx

from github_projects.schemas.project_item import ProjectItem
from github_projects.schemas.result import Err, Ok, RawResponse, RemoteError, Result

logger = logging.getLogger(__name__)

HTTP_NO_CONTENT = 204


class ResponseMode(str, Enum):
    RAW = "raw"  # project / field endpoints: pass the body through
    LIST = "list"  # item list: decode each element into a ProjectItem
    SINGLE = "single"  # one item: decode into a ProjectItem
    DELETE = "delete"  # only an exact 204 counts as success


def is_success_status(status: int) -> bool:
    return 200 <= status <= 299


def decode_body(response: httpx.Response) -> Any:
    """Decoded JSON body, the raw text if it is not JSON, None if empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def normalize(
    status: int,
    body: Any,
    mode: ResponseMode,
    headers: Optional[Mapping[str, str]] = None,
) -> Result:
    if mode is ResponseMode.DELETE:
        if status == HTTP_NO_CONTENT:
            return Ok(None)
        return Err(RemoteError(status=status, body=body))

    if not is_success_status(status):
        return Err(RemoteError(status=status, body=body))

    if mode is ResponseMode.LIST:
        # 上游偶尔返回单个对象而非数组，按单元素列表处理
        items = body if isinstance(body, list) else [body]
        return Ok(ProjectItem.from_list(items))
    if mode is ResponseMode.SINGLE:
        return Ok(ProjectItem.from_object(body))
    return Ok(RawResponse(status=status, body=body, headers=dict(headers or {})))


def handle_response(response: httpx.Response, mode: ResponseMode) -> Result:
    result = normalize(
        response.status_code, decode_body(response), mode, headers=response.headers
    )
    logger.debug(
        "Normalized %d response (mode=%s) -> %s",
        response.status_code,
        mode.value,
        "ok" if result.is_success else "error",
    )
    return result


def handle_transport_error(exc: httpx.RequestError) -> Err:
    """The request failure (timeout, refused, bad encoding) is the error value, unwrapped."""
    logger.debug("Transport failure: %r", exc)
    return Err(exc)
