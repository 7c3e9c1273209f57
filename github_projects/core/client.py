"""
GitHub REST transport client.

A GitHubClient is built once (via new_client) and then only read: base URL,
fixed headers and timeout never change after construction, so one instance
can be shared by any number of concurrent callers.
"""

import logging
import os
import threading
from typing import Any, Dict, Optional

import httpx

from github_projects.core.config import (
    GITHUB_ACCEPT,
    GITHUB_API_BASE_URL,
    GITHUB_API_VERSION,
    HTTP_TIMEOUT,
    settings,
)

logger = logging.getLogger(__name__)

_github_client = None
_github_client_lock = threading.Lock()  # 线程安全锁

TOKEN_ENV_VAR = "GITHUB_TOKEN"


class TokenNotFoundError(ValueError):
    """No GitHub token could be resolved while building a client."""

    pass


def _mask_token(token: str, visible_chars: int = 4) -> str:
    """对 token 进行脱敏处理，仅显示前几个字符"""
    if not token or len(token) <= visible_chars:
        return "***"
    return f"{token[:visible_chars]}***"


def api_version() -> str:
    """Returns the GitHub API version sent with every request."""
    return GITHUB_API_VERSION


def resolve_token(token: Optional[str] = None) -> str:
    """
    Resolve the bearer token.

    Order: explicit argument, GITHUB_TOKEN environment variable, then the
    static settings value (which may come from a .env file).

    Raises:
        TokenNotFoundError: none of the three sources holds a token
    """
    resolved = token or os.environ.get(TOKEN_ENV_VAR) or settings.GITHUB_TOKEN
    if not resolved:
        raise TokenNotFoundError(
            "GitHub token not found! Provide one of:\n"
            '1. Pass it directly: new_client("ghp_your_token")\n'
            "2. Set the GITHUB_TOKEN environment variable\n"
            "3. Put GITHUB_TOKEN=ghp_your_token in a .env file"
        )
    return resolved


class GitHubClient:
    """
    GitHub REST API 异步客户端

    特性:
    - 固定请求头 (accept, authorization, x-github-api-version)
    - 30 秒超时
    - 不重试：请求异常 (httpx.RequestError) 原样抛出，由调用方处理
    """

    def __init__(self, token: str, base_url: Optional[str] = None):
        self._base_url = base_url or GITHUB_API_BASE_URL
        self._headers = {
            "accept": GITHUB_ACCEPT,
            "authorization": f"Bearer {token}",
            "x-github-api-version": GITHUB_API_VERSION,
        }
        self._timeout = HTTP_TIMEOUT
        logger.info(
            "Initializing GitHubClient with base_url=%s, token=%s",
            self._base_url,
            _mask_token(token),
        )
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=httpx.Timeout(self._timeout),
            trust_env=False,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    @property
    def timeout(self) -> float:
        return self._timeout

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Any] = None,
    ) -> httpx.Response:
        logger.debug("Making %s request to %s params=%s", method, path, params)
        if json is not None:
            logger.debug("%s payload: %s", method, json)
        response = await self._client.request(method, path, json=json, params=params)
        logger.debug("Response status: %d from %s %s", response.status_code, method, path)
        return response

    async def get(
        self, path: str, params: Optional[Any] = None
    ) -> httpx.Response:
        """GET 请求"""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json: Optional[Any] = None) -> httpx.Response:
        """POST 请求"""
        return await self._request("POST", path, json=json)

    async def patch(self, path: str, json: Optional[Any] = None) -> httpx.Response:
        """PATCH 请求"""
        return await self._request("PATCH", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        """DELETE 请求"""
        return await self._request("DELETE", path)

    async def close(self):
        """关闭客户端连接"""
        logger.info("Closing GitHubClient connection")
        await self._client.aclose()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def new_client(
    token: Optional[str] = None, base_url: Optional[str] = None
) -> GitHubClient:
    """
    Build a GitHub client.

    Args:
        token: personal access token; falls back to GITHUB_TOKEN, then settings
        base_url: override of the API root (tests, GitHub Enterprise)

    Raises:
        TokenNotFoundError: no token available. Treat client construction as a
            precondition; this is not a recoverable per-call error.
    """
    return GitHubClient(resolve_token(token), base_url=base_url)


def get_github_client() -> GitHubClient:
    """
    获取全局单例客户端（线程安全）

    使用双重检查锁定模式，防止多线程/多协程并发时重复实例化。

    Returns:
        GitHubClient: built from the environment/settings token
    """
    global _github_client

    # 快速路径：已初始化则直接返回
    if _github_client is not None:
        logger.debug("Reusing existing GitHubClient singleton instance")
        return _github_client

    # 慢路径：使用锁保护初始化
    with _github_client_lock:
        # 双重检查：防止等待锁期间其他线程已完成初始化
        if _github_client is not None:
            return _github_client

        logger.debug("Creating new GitHubClient singleton instance")
        _github_client = new_client()

    return _github_client
