from .entry_data import ID_FIELD, EntryData, JsonValue

__all__ = [
    "ID_FIELD",
    "EntryData",
    "JsonValue",
]
