"""
OrgItemAPI - 组织项目条目接口

Required permissions: "Projects" organization permission, read for
list/get and write for add/update/delete. ``owner`` is the organization name.
"""

from github_projects.providers.projects.api.base import ORG_SCOPE
from github_projects.providers.projects.api.items import ProjectItemAPI


class OrgItemAPI(ProjectItemAPI):
    scope = ORG_SCOPE
