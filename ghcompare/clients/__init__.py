"""ghcompare resource clients."""

from ghcompare.clients.compare import CompareClient
from ghcompare.clients.tags import TagsClient
from ghcompare.clients.users import UsersClient

__all__ = [
    "CompareClient",
    "TagsClient",
    "UsersClient",
]
