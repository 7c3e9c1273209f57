"""
GitHub Projects v2 API 层 - 原子能力封装

- ProjectAPI: projects of an org/user (read-only, raw responses)
- FieldAPI: project fields (read-only, raw responses)
- OrgItemAPI / UserItemAPI: project item CRUD, decoded into ProjectItem

使用示例:
    from github_projects.core.client import new_client
    from github_projects.providers.projects.api import OrgItemAPI

    client = new_client("ghp_your_token")
    result = await OrgItemAPI(client).list_items("my-org", 1, per_page=50)
    if result.is_success:
        for item in result.value:
            print(item.id, item.content_type)
"""

from .project import ProjectAPI
from .field import FieldAPI
from .items import ProjectItemAPI
from .org import OrgItemAPI
from .user import UserItemAPI

__all__ = [
    "ProjectAPI",
    "FieldAPI",
    "ProjectItemAPI",
    "OrgItemAPI",
    "UserItemAPI",
]
