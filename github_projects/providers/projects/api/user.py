"""
UserItemAPI - 用户项目条目接口

Required permissions: "Projects" user permission, read for list/get and
write for add/update/delete. ``owner`` is the GitHub username.
"""

from github_projects.providers.projects.api.base import USER_SCOPE
from github_projects.providers.projects.api.items import ProjectItemAPI


class UserItemAPI(ProjectItemAPI):
    scope = USER_SCOPE
