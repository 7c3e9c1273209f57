"""
GitHub API 响应测试数据
"""


def project_item_response():
    return {
        "id": 123,
        "node_id": "PVTI_lADOANN5s84ACbL0zgBueEI",
        "project_url": "https://api.github.com/orgs/github/projectsV2/1",
        "content": {
            "id": 456,
            "node_id": "I_kwDOANN5s85FtLts",
            "number": 42,
            "title": "Example Issue",
            "body": "This is a test issue",
            "state": "open",
        },
        "content_type": "Issue",
        "creator": {"login": "octocat", "id": 1, "type": "User"},
        "created_at": "2025-01-01T10:00:00Z",
        "updated_at": "2025-01-02T10:00:00Z",
        "archived_at": None,
        "item_url": "https://api.github.com/orgs/github/projectsV2/1/items/123",
        "fields": [
            {"id": 1, "name": "Status", "value": "In Progress"},
            {"id": 2, "name": "Priority", "value": "High"},
        ],
    }


def project_items_list_response():
    return [
        project_item_response(),
        {
            "id": 124,
            "node_id": "PVTI_lADOANN5s84ACbL0zgBueEJ",
            "project_url": "https://api.github.com/orgs/github/projectsV2/1",
            "content": {"id": 457, "number": 43, "title": "Another Issue"},
            "content_type": "Issue",
            "creator": {"login": "octocat", "id": 1},
            "created_at": "2025-01-03T10:00:00Z",
            "updated_at": "2025-01-03T10:00:00Z",
            "archived_at": None,
            "item_url": "https://api.github.com/orgs/github/projectsV2/1/items/124",
        },
    ]


def draft_item_response():
    item = project_item_response()
    item.update(
        {
            "id": 17,
            "content_type": "DraftIssue",
            "content": {"title": "New task", "body": "Description of the task"},
        }
    )
    return item


def project_response(number=1):
    return {
        "id": 2,
        "node_id": "PVT_kwDOBfXwz84AAm1d",
        "number": number,
        "title": "My Projects",
        "public": False,
        "closed": False,
        "owner": {"login": "octocat", "id": 1},
        "created_at": "2025-01-01T10:00:00Z",
        "updated_at": "2025-01-02T10:00:00Z",
    }


def field_response(field_id=12345, name="Priority"):
    return {
        "id": field_id,
        "node_id": "PVTSSF_lADOABCD1234567890",
        "name": name,
        "data_type": "single_select",
        "options": [
            {"id": "opt1", "name": {"raw": "High"}},
            {"id": "opt2", "name": {"raw": "Low"}},
        ],
    }


def error_response(message):
    return {"message": message, "documentation_url": "https://docs.github.com/rest"}
