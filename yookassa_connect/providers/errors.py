"""
Ошибки клиента платёжного шлюза.

Три вида, все пробрасываются вызывающему коду:
  - TransportError — не удалось собрать или отправить запрос (сеть, таймаут)
  - GatewayError   — шлюз ответил статусом, отличным от 200
  - DecodeError    — ответ 200, но тело не соответствует ожидаемой схеме
"""
import json
from typing import Optional


class PaymentClientError(Exception):
    """Base error for payment gateway clients"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)

    def __str__(self):
        parts = [self.message]
        if self.status_code:
            parts.append(f"Status: {self.status_code}")
        if self.body:
            parts.append(f"Body: {self.body}")
        return " | ".join(parts)


class TransportError(PaymentClientError):
    pass


class GatewayError(PaymentClientError):
    """Non-200 response. Gateway error JSON fields are parsed when present."""

    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message=message, status_code=status_code, body=body)
        self.code: Optional[str] = None
        self.description: Optional[str] = None
        self.parameter: Optional[str] = None
        self.request_id: Optional[str] = None

        try:
            js = json.loads(body) if body else None
        except ValueError:
            js = None
        if isinstance(js, dict):
            self.code = js.get("code")
            self.description = js.get("description")
            self.parameter = js.get("parameter")
            self.request_id = js.get("id")


class DecodeError(PaymentClientError):
    pass
