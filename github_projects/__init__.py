"""
GitHub Projects (v2) REST client.

    from github_projects import new_client, OrgItemAPI

    client = new_client()  # token from argument, GITHUB_TOKEN or .env
    result = await OrgItemAPI(client).add_item("my-org", 1, {"type": "Issue", "id": 123})
"""

from github_projects.core.client import (
    GitHubClient,
    TokenNotFoundError,
    api_version,
    get_github_client,
    new_client,
)
from github_projects.providers.projects.api import (
    FieldAPI,
    OrgItemAPI,
    ProjectAPI,
    UserItemAPI,
)
from github_projects.schemas import (
    ContentItem,
    DraftItem,
    Err,
    ItemUpdate,
    Ok,
    ProjectItem,
    RawResponse,
    RemoteError,
)

__version__ = "0.1.0"

__all__ = [
    "GitHubClient",
    "TokenNotFoundError",
    "api_version",
    "get_github_client",
    "new_client",
    "FieldAPI",
    "OrgItemAPI",
    "ProjectAPI",
    "UserItemAPI",
    "ContentItem",
    "DraftItem",
    "Err",
    "ItemUpdate",
    "Ok",
    "ProjectItem",
    "RawResponse",
    "RemoteError",
]
