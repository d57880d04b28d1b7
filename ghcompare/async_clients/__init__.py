"""ghcompare async resource clients."""

from ghcompare.async_clients.compare import AsyncCompareClient
from ghcompare.async_clients.tags import AsyncTagsClient
from ghcompare.async_clients.users import AsyncUsersClient

__all__ = [
    "AsyncCompareClient",
    "AsyncTagsClient",
    "AsyncUsersClient",
]
