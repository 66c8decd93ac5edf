from src.service.booking.domain.enum.payment_status import PaymentStatus

__all__ = ['PaymentStatus']
