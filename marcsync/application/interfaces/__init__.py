from .transport import Transport, TransportResponse

__all__ = [
    "Transport",
    "TransportResponse",
]
