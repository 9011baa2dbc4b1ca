"""Error types raised by the cache facade."""


class ResponseCode:
    DATA_ERROR = 'DATA_ERROR'


class CacheError(Exception):
    """Base exception carrying a response code and a readable message."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {'code': self.code, 'message': self.message}


class InvalidArgumentError(CacheError):
    def __init__(self, message: str, code: str = ResponseCode.DATA_ERROR):
        super().__init__(code, message)
