"""
FieldAPI - 项目字段只读接口

- GET /orgs/{org}/projectsV2/{project_number}/fields
- GET /orgs/{org}/projectsV2/{project_number}/fields/{field_id}
- GET /users/{username}/projectsV2/{project_number}/fields
- GET /users/{username}/projectsV2/{project_number}/fields/{field_id}

Fields are the custom properties of a project's items (single select,
text, number, date, iteration). Like projects, they come back as RawResponse.
"""

import logging
from typing import Any, Union

from github_projects.core.response import ResponseMode
from github_projects.providers.projects.api.base import (
    ORG_SCOPE,
    USER_SCOPE,
    BaseAPI,
    build_query_params,
    projects_path,
)
from github_projects.schemas.result import Result

logger = logging.getLogger(__name__)


class FieldAPI(BaseAPI):
    async def list_org_fields(
        self, org: str, project_number: int, **opts: Any
    ) -> Result:
        """
        List the fields of an organization-owned project.

        Args:
            org: organization name
            project_number: project number
            **opts: per_page, before, after
        """
        logger.debug(
            "Listing org fields: org=%s, project_number=%s", org, project_number
        )
        return await self._send(
            "GET",
            projects_path(ORG_SCOPE, org, project_number, "fields"),
            ResponseMode.RAW,
            params=build_query_params(opts),
        )

    async def get_org_field(
        self, org: str, project_number: int, field_id: Union[int, str]
    ) -> Result:
        return await self._send(
            "GET",
            projects_path(ORG_SCOPE, org, project_number, "fields", field_id),
            ResponseMode.RAW,
        )

    async def list_user_fields(
        self, username: str, project_number: int, **opts: Any
    ) -> Result:
        """List the fields of a user-owned project (options as list_org_fields)."""
        logger.debug(
            "Listing user fields: username=%s, project_number=%s",
            username,
            project_number,
        )
        return await self._send(
            "GET",
            projects_path(USER_SCOPE, username, project_number, "fields"),
            ResponseMode.RAW,
            params=build_query_params(opts),
        )

    async def get_user_field(
        self, username: str, project_number: int, field_id: Union[int, str]
    ) -> Result:
        return await self._send(
            "GET",
            projects_path(USER_SCOPE, username, project_number, "fields", field_id),
            ResponseMode.RAW,
        )
