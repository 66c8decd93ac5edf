import re

import uuid_utils

from src.platform.exception.exceptions import PaymentGatewayError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.payment_result import PaymentResult
from src.service.booking.app.interface.i_payment_gateway import IPaymentGateway


_SEPARATORS = re.compile(r'[\s-]')


class SimulatedPaymentGatewayImpl(IPaymentGateway):
    """
    In-process card check for local runs and tests

    A card is accepted when, after dropping spaces and dashes, it has
    13-19 digits and does not start with "0000".
    """

    MIN_CARD_LENGTH = 13
    MAX_CARD_LENGTH = 19
    DECLINED_PREFIX = '0000'

    @Logger.io
    async def process_payment(self, *, card_number: str) -> PaymentResult:
        if not card_number or not card_number.strip():
            raise PaymentGatewayError('Credit card number is required')

        if not self.is_valid_card(card_number):
            return PaymentResult(is_valid=False)

        return PaymentResult(is_valid=True, payment_id=str(uuid_utils.uuid7()))

    @classmethod
    def is_valid_card(cls, card_number: str) -> bool:
        digits = _SEPARATORS.sub('', card_number)
        return (
            cls.MIN_CARD_LENGTH <= len(digits) <= cls.MAX_CARD_LENGTH
            and digits.isdigit()
            and not digits.startswith(cls.DECLINED_PREFIX)
        )
