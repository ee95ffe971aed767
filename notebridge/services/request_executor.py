"""Request Executor — issues one resolved OperationPlan and normalizes the outcome.

Invariants:
    - Exactly one HTTP request per plan; no retries
    - 2xx => success; other => "HTTP <status>: <body>"; transport => its message
    - Never raises for remote/transport problems
"""

import logging

from notebridge.core.errors import RemoteRejectionError, RemoteTransportError
from notebridge.core.placement_plan import OperationPlan, OperationResult
from notebridge.infrastructure.local_rest_client import LocalRestApiClient

logger = logging.getLogger(__name__)


class RequestExecutor:
    def __init__(self, client: LocalRestApiClient):
        self.client = client

    async def execute(self, plan: OperationPlan) -> OperationResult:
        extra = {
            "vault": plan.target.vault,
            "remote_path": plan.target.path,
            "method": plan.method.value,
        }
        try:
            response = await self.client.write_document(
                plan.method, plan.target, plan.payload, plan.content_type,
            )
        except RemoteTransportError as e:
            return OperationResult.failed(e.message, e.code, plan)

        if response.is_success:
            logger.info(
                f"{plan.method.value} '{plan.target.path}' succeeded",
                extra={**extra, "http_status": response.status_code},
            )
            return OperationResult.ok(plan)

        err = RemoteRejectionError(response.status_code, response.text)
        logger.warning(
            f"{plan.method.value} '{plan.target.path}' rejected: {err.message}",
            extra={**extra, "http_status": response.status_code, "error_code": err.code},
        )
        return OperationResult.failed(err.message, err.code, plan)
