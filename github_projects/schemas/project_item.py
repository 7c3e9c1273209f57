from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict


class ProjectItem(BaseModel):
    """
    An item on a GitHub project board (issue, pull request or draft issue).

    Every attribute is optional and defaults to None when the key is missing
    from the API payload. Building a record never fails: values are projected
    as-is, without validation.
    """

    id: Optional[int] = None
    node_id: Optional[str] = None
    project_url: Optional[str] = None
    content: Optional[Dict[str, Any]] = None
    # "Issue" | "PullRequest" | "DraftIssue"
    content_type: Optional[str] = None
    creator: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    archived_at: Optional[str] = None
    item_url: Optional[str] = None
    fields: Optional[List[Dict[str, Any]]] = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def from_object(cls, raw: Any) -> "ProjectItem":
        """Project one decoded JSON object; non-mappings give an empty record."""
        data = raw if isinstance(raw, Mapping) else {}
        return cls.model_construct(
            **{name: data.get(name) for name in cls.model_fields}
        )

    @classmethod
    def from_list(cls, items: List[Any]) -> List["ProjectItem"]:
        return [cls.from_object(item) for item in items]
