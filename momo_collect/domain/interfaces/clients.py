"""External client interfaces."""

from abc import ABC, abstractmethod

from momo_collect.domain.entities import PaymentRequest, TransactionStatus


class PaymentGatewayClient(ABC):
    """
    Abstract client for the mobile-money payment gateway.

    Submits collection requests and reports their status.
    """

    @abstractmethod
    async def initiate(self, request: PaymentRequest) -> str:
        """
        Submit a collection request.

        Args:
            request: A validated payment request

        Returns:
            The non-empty transaction reference assigned by the gateway

        Raises:
            GatewayException: If the gateway rejects the request
            GatewayUnavailableException: If the gateway cannot be reached
            MalformedGatewayResponseException: If no reference is returned
        """
        ...

    @abstractmethod
    async def check_status(self, reference: str) -> TransactionStatus:
        """
        Fetch the current status of a transaction.

        Args:
            reference: The reference returned by initiate()

        Returns:
            The transaction status; unrecognized values are reported as PENDING

        Raises:
            GatewayException: If the gateway returns an error
            GatewayUnavailableException: If the gateway cannot be reached
        """
        ...
