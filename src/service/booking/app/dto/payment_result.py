from typing import Optional

import attrs


@attrs.define(frozen=True)
class PaymentResult:
    is_valid: bool
    payment_id: Optional[str] = None
