from typing import Any, Optional

import httpx
import orjson

from src.platform.exception.exceptions import PaymentGatewayError, PreconditionError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.payment_result import PaymentResult
from src.service.booking.app.interface.i_payment_gateway import IPaymentGateway


class HttpPaymentGatewayImpl(IPaymentGateway):
    """
    Payment provider over HTTP.

    POST {base_url}/payments/  {"creditCardNumber": "..."}
    ->   {"isValid": true, "paymentId": "..."}

    Transport failures, non-2xx answers and unreadable bodies surface as
    PaymentGatewayError; the booking pipeline reports them as a failed payment.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str],
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not base_url:
            raise PreconditionError('PAYMENT_API_BASE_URL is required for the external gateway')
        self.base_url = base_url.rstrip('/')
        self.timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    @Logger.io
    async def process_payment(self, *, card_number: str) -> PaymentResult:
        if not card_number or not card_number.strip():
            raise PaymentGatewayError('Credit card number is required')

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    '/payments/',
                    content=orjson.dumps({'creditCardNumber': card_number}),
                    headers={'Content-Type': 'application/json'},
                )
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise PaymentGatewayError(f'Payment service timed out: {e}') from e
        except httpx.HTTPStatusError as e:
            raise PaymentGatewayError(
                f'Payment service returned {e.response.status_code}'
            ) from e
        except httpx.HTTPError as e:
            raise PaymentGatewayError(f'Payment service unreachable: {e}') from e

        return self._parse(response.content)

    @staticmethod
    def _parse(body: bytes) -> PaymentResult:
        if not body.strip():
            return PaymentResult(is_valid=False)
        try:
            payload = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise PaymentGatewayError(f'Invalid payment service response: {e}') from e
        if payload is None:
            return PaymentResult(is_valid=False)
        if not isinstance(payload, dict):
            raise PaymentGatewayError('Invalid payment service response: expected an object')

        fields: dict[str, Any] = {str(key).lower(): value for key, value in payload.items()}
        payment_id = fields.get('paymentid')
        return PaymentResult(
            is_valid=bool(fields.get('isvalid', False)),
            payment_id=str(payment_id) if payment_id else None,
        )
