from .errors import ApiError, BondClientError, ErrorKind, NetworkError, ValidationError

__all__ = ["ApiError", "BondClientError", "ErrorKind", "NetworkError", "ValidationError"]
