"""Application pagination – page state, page slices and metadata."""
from listquery.application.pagination.page import Page, PaginationInfo, paginate, total_pages_for
from listquery.application.pagination.state import PaginationState

__all__ = ["Page", "PaginationInfo", "PaginationState", "paginate", "total_pages_for"]
