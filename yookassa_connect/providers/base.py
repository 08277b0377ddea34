from typing import Protocol, Optional, runtime_checkable

from .yookassa.schemas import Amount, CreatePaymentRequest, Payment

@runtime_checkable
class PaymentGateway(Protocol):
    name: str

    async def create_payment(self, payment: CreatePaymentRequest) -> Payment:
        ...

    async def get_payment_status(self, payment_id: str) -> Payment:
        ...

    # amount=None — списать всю захолдированную сумму
    async def capture_payment(self, payment_id: str, amount: Optional[Amount] = None) -> Payment:
        ...

    async def cancel_payment(self, payment_id: str) -> Payment:
        ...
