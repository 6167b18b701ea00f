from .api_requester import ApiRequester, collection_path, entries_path

__all__ = [
    "ApiRequester",
    "collection_path",
    "entries_path",
]
