"""
ProjectAPI - 项目 (Projects v2) 只读接口

- GET /orgs/{org}/projectsV2
- GET /orgs/{org}/projectsV2/{project_number}
- GET /users/{username}/projectsV2
- GET /users/{username}/projectsV2/{project_number}

Successful responses are returned as RawResponse (status, decoded body,
headers); projects are not projected into typed records.
"""

import logging
from typing import Any

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


class ProjectAPI(BaseAPI):
    """
    GitHub Projects v2 project API.

    Required permission: "Projects" organization/user permission (read).
    """

    async def list_org_projects(self, org: str, **opts: Any) -> Result:
        """
        List the projects of an organization visible to the authenticated user.

        Args:
            org: organization name (case insensitive)
            **opts: q, per_page (max 100, default 30), before, after

        Returns:
            Ok(RawResponse) with a list body, or Err
        """
        logger.debug("Listing org projects: org=%s, opts=%s", org, opts)
        return await self._send(
            "GET",
            projects_path(ORG_SCOPE, org),
            ResponseMode.RAW,
            params=build_query_params(opts),
        )

    async def get_org_project(self, org: str, project_number: int) -> Result:
        """Get one organization-owned project by number."""
        return await self._send(
            "GET", projects_path(ORG_SCOPE, org, project_number), ResponseMode.RAW
        )

    async def list_user_projects(self, username: str, **opts: Any) -> Result:
        """
        List the projects of a user visible to the authenticated user.

        Args:
            username: GitHub login
            **opts: q, per_page, before, after
        """
        logger.debug("Listing user projects: username=%s, opts=%s", username, opts)
        return await self._send(
            "GET",
            projects_path(USER_SCOPE, username),
            ResponseMode.RAW,
            params=build_query_params(opts),
        )

    async def get_user_project(self, username: str, project_number: int) -> Result:
        """Get one user-owned project by number."""
        return await self._send(
            "GET",
            projects_path(USER_SCOPE, username, project_number),
            ResponseMode.RAW,
        )
