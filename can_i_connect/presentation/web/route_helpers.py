from __future__ import annotations

from typing import Any, Optional

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .schemas import CanIConnectPayload


def handler_log(name: str, path: str) -> str:
    return f"->> HANDLER - {name} - {path}"


def bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def parse_payload(raw: Any) -> CanIConnectPayload | JSONResponse:
    try:
        return CanIConnectPayload.model_validate(raw)
    except ValidationError as e:
        details = "; ".join(f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in e.errors())
        return bad_request(f"Failed to deserialize payload: {details}")


def validate_hosts(payload: CanIConnectPayload) -> Optional[JSONResponse]:
    if not payload.http_hosts and not payload.tcp_hosts:
        return bad_request("Both 'http_hosts' and 'tcp_hosts' cannot be empty")
    return None
