"""
FieldAPI 测试模块

测试覆盖:
1. list_org_fields / list_user_fields - 正常响应、分页参数、错误处理
2. get_org_field / get_user_field - 正常响应、错误处理
"""

import httpx
import pytest

from github_projects.providers.projects.api.field import FieldAPI
from github_projects.schemas.result import RawResponse
from tests.fixtures import error_response, field_response
from tests.unit.providers.projects.api.conftest import create_mock_response


@pytest.fixture
def api(mock_client):
    """创建 FieldAPI 实例"""
    return FieldAPI()


class TestListFields:
    @pytest.mark.asyncio
    async def test_list_org_fields_success(self, api, mock_client):
        body = [field_response(1, "Status"), field_response(2, "Priority")]
        mock_client.get.return_value = create_mock_response(200, body)

        result = await api.list_org_fields("my-org", 1)

        assert isinstance(result.value, RawResponse)
        assert [f["name"] for f in result.value.body] == ["Status", "Priority"]
        call_args = mock_client.get.call_args
        assert call_args[0][0] == "/orgs/my-org/projectsV2/1/fields"

    @pytest.mark.asyncio
    async def test_list_user_fields_with_cursor(self, api, mock_client):
        mock_client.get.return_value = create_mock_response(200, [])

        result = await api.list_user_fields("octocat", 2, per_page=50, after="Y3Vy")

        assert result.value.body == []
        call_args = mock_client.get.call_args
        assert call_args[0][0] == "/users/octocat/projectsV2/2/fields"
        assert call_args[1]["params"] == [("per_page", 50), ("after", "Y3Vy")]

    @pytest.mark.asyncio
    async def test_list_fields_unauthorized(self, api, mock_client):
        body = error_response("Requires authentication")
        mock_client.get.return_value = create_mock_response(401, body)

        result = await api.list_org_fields("my-org", 1)

        assert result.reason.status == 401
        assert result.reason.body == body


class TestGetField:
    @pytest.mark.asyncio
    async def test_get_org_field(self, api, mock_client):
        mock_client.get.return_value = create_mock_response(200, field_response())

        result = await api.get_org_field("my-org", 1, 12345)

        assert result.value.body["data_type"] == "single_select"
        assert mock_client.get.call_args[0][0] == "/orgs/my-org/projectsV2/1/fields/12345"

    @pytest.mark.asyncio
    async def test_get_user_field(self, api, mock_client):
        mock_client.get.return_value = create_mock_response(200, field_response())

        await api.get_user_field("octocat", 1, 12345)

        assert (
            mock_client.get.call_args[0][0]
            == "/users/octocat/projectsV2/1/fields/12345"
        )

    @pytest.mark.asyncio
    async def test_get_field_connection_refused(self, api, mock_client):
        exc = httpx.ConnectError("connection refused")
        mock_client.get.side_effect = exc

        result = await api.get_user_field("octocat", 1, 12345)

        assert result.reason is exc
