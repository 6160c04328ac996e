from filewiki.schemas.schemas import (
    OKResponse, ErrorResponse,
    PageBody, PageContent, PreviewContent,
)

__all__ = [
    "OKResponse", "ErrorResponse",
    "PageBody", "PageContent", "PreviewContent",
]
