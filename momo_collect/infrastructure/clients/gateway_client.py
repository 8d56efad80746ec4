"""HTTP implementation of PaymentGatewayClient."""

import asyncio
from urllib.parse import quote

import httpx
import structlog
from pydantic import ValidationError

from momo_collect.core.metrics import (
    track_gateway_latency,
    record_gateway_result,
    record_gateway_retry,
)
from momo_collect.domain.entities import PaymentRequest, TransactionStatus
from momo_collect.domain.exceptions import (
    GatewayException,
    GatewayUnavailableException,
    MalformedGatewayResponseException,
)
from momo_collect.domain.interfaces import PaymentGatewayClient

from .schemas import CollectResponse, TransactionStatusResponse

logger = structlog.get_logger(__name__)


class HttpPaymentGatewayClient(PaymentGatewayClient):
    """
    HTTP client for the payment gateway.

    Transport failures (connection errors, timeouts) are retried with a
    fixed wait. Error responses from the gateway are never retried.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        max_retries: int = 2,
        retry_wait: float = 1.0,
    ):
        self._http = http_client
        self._max_retries = max_retries
        self._retry_wait = retry_wait

    async def initiate(self, request: PaymentRequest) -> str:
        """Submit a collection request and return its reference."""
        response = await self._send(
            "initiate", "POST", "/collect/", json=request.to_payload()
        )

        try:
            body = CollectResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            record_gateway_result("initiate", "malformed")
            raise MalformedGatewayResponseException(
                "collect response is not a valid JSON object",
                status_code=response.status_code,
            )

        if not body.reference:
            record_gateway_result("initiate", "malformed")
            raise MalformedGatewayResponseException(
                f"no reference returned: {body.message or 'no message'}",
                status_code=response.status_code,
            )

        record_gateway_result("initiate", "success")
        logger.info(
            "payment_initiated",
            reference=body.reference,
            gateway_status=body.status,
        )
        return body.reference

    async def check_status(self, reference: str) -> TransactionStatus:
        """Fetch the current status of a transaction."""
        response = await self._send(
            "check_status", "GET", f"/transaction/{quote(reference, safe='')}/"
        )

        try:
            body = TransactionStatusResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            record_gateway_result("check_status", "malformed")
            raise MalformedGatewayResponseException(
                "status response is not a valid JSON object",
                status_code=response.status_code,
            )

        record_gateway_result("check_status", "success")

        status = TransactionStatus.parse(body.status)
        if status is None:
            logger.warning(
                "unrecognized_transaction_status",
                reference=reference,
                raw_status=body.status,
            )
            return TransactionStatus.PENDING

        return status

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        **kwargs,
    ) -> httpx.Response:
        """
        Send a request, retrying transport failures only.

        Makes at most max_retries + 1 attempts.
        """
        max_attempts = self._max_retries + 1
        last_error: Exception | None = None

        for attempt in range(max_attempts):
            try:
                with track_gateway_latency(operation):
                    response = await self._http.request(method, path, **kwargs)
            except httpx.TransportError as e:
                last_error = e
                logger.warning(
                    "gateway_transport_error",
                    operation=operation,
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                if attempt < max_attempts - 1:
                    record_gateway_retry(operation)
                    await asyncio.sleep(self._retry_wait)
                continue
            except httpx.RequestError as e:
                # Undecodable bodies, redirect loops: retrying will not help.
                record_gateway_result(operation, "error")
                logger.warning(
                    "gateway_request_error",
                    operation=operation,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise GatewayException(
                    message=str(e) or type(e).__name__,
                ) from e

            if not response.is_success:
                record_gateway_result(operation, "error")
                message = self._error_message(response)
                logger.warning(
                    "gateway_error_response",
                    operation=operation,
                    status_code=response.status_code,
                    message=message,
                )
                raise GatewayException(
                    message=message,
                    status_code=response.status_code,
                )

            return response

        record_gateway_result(operation, "unavailable")
        raise GatewayUnavailableException(
            detail=str(last_error) or type(last_error).__name__,
            attempts=max_attempts,
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the body's message field, falling back to raw text."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])

        return response.text[:200] or response.reason_phrase
