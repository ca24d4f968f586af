"""Errors surfaced to callers of callable handlers.

Rendered as ``{"error": {"status": ..., "message": ...}}`` by the error
handler registered in ``create_app``.
"""


class CallableError(Exception):
    status = 'INTERNAL'
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {'error': {'status': self.status, 'message': self.message}}


class Unauthenticated(CallableError):
    status = 'UNAUTHENTICATED'
    http_status = 401
