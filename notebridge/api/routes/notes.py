"""Notes Route — places a finished document into the remote vault.

Invariants:
    - Route contains no placement logic (delegates to place_note)
    - Success => 201 with the OperationResult
    - Failure => PlacementFailedError envelope (503 configuration,
      409 ambiguous existence in strict mode, 400 unencodable text,
      502 remote/transport), carrying that failure's category and severity
"""

import logging

import httpx
from fastapi import APIRouter, Depends, status

from notebridge.api.dependencies import get_remote_config, get_remote_transport
from notebridge.config import RemoteApiConfig
from notebridge.core.errors import ErrorContext, PlacementFailedError
from notebridge.schemas.placement import OperationResultResponse, PlaceNoteRequest
from notebridge.services.placement_resolver import place_note

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/notes", tags=["notes"])


@router.post(
    "", response_model=OperationResultResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    body: PlaceNoteRequest,
    config: RemoteApiConfig = Depends(get_remote_config),
    transport: httpx.AsyncBaseTransport | None = Depends(get_remote_transport),
):
    """Create, merge or overwrite a note according to body.behavior."""
    result = await place_note(
        body.content, body.note_name, body.directory, body.vault, body.behavior,
        config=config, transport=transport,
    )
    if not result.success:
        raise PlacementFailedError(
            result.error or "Placement failed",
            result.error_code,
            ErrorContext(
                vault=body.vault, remote_path=result.target_path,
                behavior=body.behavior.value,
            ),
        )
    return OperationResultResponse.from_result(result)
