"""Remote Route — connection test against the configured Local REST API.

Invariants:
    - Always 200: the body's success flag carries the outcome, so a settings
      screen can show the remote's own error text
"""

import httpx
from fastapi import APIRouter, Depends

from notebridge.api.dependencies import get_remote_config, get_remote_transport
from notebridge.config import RemoteApiConfig
from notebridge.schemas.placement import OperationResultResponse
from notebridge.services import connectivity

router = APIRouter(prefix="/api/v1/remote", tags=["remote"])


@router.get("/connection", response_model=OperationResultResponse)
async def check_connection(
    config: RemoteApiConfig = Depends(get_remote_config),
    transport: httpx.AsyncBaseTransport | None = Depends(get_remote_transport),
):
    result = await connectivity.test_connection(config, transport=transport)
    return OperationResultResponse.from_result(result)
