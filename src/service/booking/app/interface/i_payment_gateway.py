from abc import ABC, abstractmethod

from src.service.booking.app.dto.payment_result import PaymentResult


class IPaymentGateway(ABC):
    """Authorizes a card payment.

    Raises PaymentGatewayError when the card token is blank or the provider
    cannot be reached; a declined card is a normal ``PaymentResult(is_valid=False)``.
    """

    @abstractmethod
    async def process_payment(self, *, card_number: str) -> PaymentResult:
        pass
