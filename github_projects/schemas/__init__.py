from .item_spec import (
    ContentItem,
    DraftItem,
    InvalidPayloadError,
    ItemSpec,
    ItemUpdate,
    parse_content_item,
    parse_draft_item,
    parse_item_spec,
    parse_item_update,
)
from .project_item import ProjectItem
from .result import Err, Ok, RawResponse, RemoteError, Result

__all__ = [
    "ContentItem",
    "DraftItem",
    "InvalidPayloadError",
    "ItemSpec",
    "ItemUpdate",
    "parse_content_item",
    "parse_draft_item",
    "parse_item_spec",
    "parse_item_update",
    "ProjectItem",
    "Ok",
    "Err",
    "RawResponse",
    "RemoteError",
    "Result",
]
