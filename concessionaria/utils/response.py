from typing import Any


def success_response(data: Any = None, message: str | None = None, **extra: Any) -> dict:
    body: dict = {"success": True}
    if message is not None:
        body["message"] = message
    body.update(extra)
    if data is not None:
        body["data"] = data
    return body


def error_response(message: str | None = None, error: str | None = None, **extra: Any) -> dict:
    body: dict = {"success": False}
    if message is not None:
        body["message"] = message
    if error is not None:
        body["error"] = error
    body.update(extra)
    return body
