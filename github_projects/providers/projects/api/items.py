"""
ProjectItemAPI - 项目条目 CRUD 接口 (org 与 user 共用实现)

- GET    /{scope}/{owner}/projectsV2/{project_number}/items
- POST   /{scope}/{owner}/projectsV2/{project_number}/items
- GET    /{scope}/{owner}/projectsV2/{project_number}/items/{item_id}
- PATCH  /{scope}/{owner}/projectsV2/{project_number}/items/{item_id}
- DELETE /{scope}/{owner}/projectsV2/{project_number}/items/{item_id}

Unlike projects and fields, item responses are decoded into ProjectItem.
Payloads are validated before any request is issued; an invalid one returns
Err(<message>) without touching the network.
"""

import logging
from typing import Any, Mapping, Union

from github_projects.core.response import ResponseMode
from github_projects.providers.projects.api.base import (
    BaseAPI,
    build_query_params,
    projects_path,
)
from github_projects.schemas.item_spec import (
    DraftItem,
    InvalidPayloadError,
    ItemSpec,
    ItemUpdate,
    parse_draft_item,
    parse_item_spec,
    parse_item_update,
)
from github_projects.schemas.result import Err, Result

logger = logging.getLogger(__name__)

ItemId = Union[int, str]


class ProjectItemAPI(BaseAPI):
    """Item operations for one owner scope; subclasses set ``scope``."""

    scope: str = ""

    def _items_path(self, owner: str, project_number: int, *segments: Any) -> str:
        return projects_path(self.scope, owner, project_number, "items", *segments)

    async def list_items(self, owner: str, project_number: int, **opts: Any) -> Result:
        """
        List the items of a project.

        Args:
            owner: organization name or username, depending on scope
            project_number: project number
            **opts: q, fields (field ids to include), before, after, per_page

        Returns:
            Ok([ProjectItem, ...]) or Err
        """
        logger.debug(
            "Listing items: %s/%s project_number=%s opts=%s",
            self.scope,
            owner,
            project_number,
            opts,
        )
        return await self._send(
            "GET",
            self._items_path(owner, project_number),
            ResponseMode.LIST,
            params=build_query_params(opts),
        )

    async def add_item(
        self,
        owner: str,
        project_number: int,
        item: Union[ItemSpec, Mapping[str, Any]],
    ) -> Result:
        """
        Add an issue or pull request (``{"type": "Issue"|"PullRequest", "id": n}``)
        to a project. A draft spec (``{"title": ..., "body"?: ...}``) is accepted
        too and creates a draft issue.

        Returns:
            Ok(ProjectItem) for the created item, or Err
        """
        try:
            spec = parse_item_spec(item)
        except InvalidPayloadError as e:
            logger.debug("Rejected add_item payload: %s", e)
            return Err(str(e))

        return await self._send(
            "POST",
            self._items_path(owner, project_number),
            ResponseMode.SINGLE,
            json=spec.to_payload(),
        )

    async def add_draft_item(
        self,
        owner: str,
        project_number: int,
        item: Union[DraftItem, Mapping[str, Any]],
    ) -> Result:
        """
        Add a draft issue, not linked to any repository.

        Args:
            item: ``{"title": <non-empty str>, "body": <str, optional>}``;
                an empty body is not sent
        """
        try:
            draft = parse_draft_item(item)
        except InvalidPayloadError as e:
            logger.debug("Rejected add_draft_item payload: %s", e)
            return Err(str(e))

        return await self._send(
            "POST",
            self._items_path(owner, project_number),
            ResponseMode.SINGLE,
            json=draft.to_payload(),
        )

    async def get_item(
        self, owner: str, project_number: int, item_id: ItemId
    ) -> Result:
        return await self._send(
            "GET", self._items_path(owner, project_number, item_id), ResponseMode.SINGLE
        )

    async def update_item(
        self,
        owner: str,
        project_number: int,
        item_id: ItemId,
        updates: Union[ItemUpdate, Mapping[str, Any]],
    ) -> Result:
        """
        Update field values of an item.

        Args:
            updates: ``{"fields": [{"id": <field id>, "value": <value or None>}]}``;
                a None value clears the field

        Returns:
            Ok(ProjectItem) for the updated item, or Err
        """
        try:
            update = parse_item_update(updates)
        except InvalidPayloadError as e:
            logger.debug("Rejected update_item payload: %s", e)
            return Err(str(e))

        return await self._send(
            "PATCH",
            self._items_path(owner, project_number, item_id),
            ResponseMode.SINGLE,
            json=update.to_payload(),
        )

    async def delete_item(
        self, owner: str, project_number: int, item_id: ItemId
    ) -> Result:
        """Delete an item. Ok(None) only on HTTP 204; anything else is Err."""
        return await self._send(
            "DELETE",
            self._items_path(owner, project_number, item_id),
            ResponseMode.DELETE,
        )
