"""
listquery – searched, filtered, sorted and paginated views over in-memory records.

Import path convention::

    from listquery.application.query import ListQueryEngine
    from listquery.application.pagination import PaginationInfo
    from listquery.config import ListQuerySettings
    from listquery.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
