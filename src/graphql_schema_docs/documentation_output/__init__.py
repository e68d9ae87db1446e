"""Documentation output exports."""

from .page_writer import (
    INDEX_PAGE_NAME,
    PLAIN_PAGE_SUFFIX,
    DocumentationOutcome,
    DocumentationOutputError,
    WrittenPage,
    write_documentation,
)

__all__ = [
    "INDEX_PAGE_NAME",
    "PLAIN_PAGE_SUFFIX",
    "DocumentationOutcome",
    "DocumentationOutputError",
    "WrittenPage",
    "write_documentation",
]
