from __future__ import annotations


class ResponseDecodeError(RuntimeError):
    pass


class SuiRpcError(RuntimeError):
    def __init__(self, message: str, *, code: int | None = None, method: str | None = None):
        super().__init__(message)
        self.code = code
        self.method = method


class GraphQLRequestError(RuntimeError):
    def __init__(self, message: str, *, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []
