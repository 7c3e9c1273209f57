"""
API 测试共享 Fixtures

提供 API 测试中通用的 Mock 对象和辅助函数。
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest


def create_mock_response(status: int, data: Any = None) -> httpx.Response:
    """
    创建模拟 HTTP 响应对象。

    Args:
        status: HTTP 状态码
        data: 响应 JSON 数据，None 表示空响应体

    Returns:
        httpx.Response
    """
    if data is None:
        return httpx.Response(status)
    return httpx.Response(status, json=data)


@pytest.fixture
def mock_client():
    """模拟 GitHubClient"""
    with patch("github_projects.providers.projects.api.base.get_github_client") as mock:
        client_instance = AsyncMock()
        mock.return_value = client_instance
        yield client_instance
