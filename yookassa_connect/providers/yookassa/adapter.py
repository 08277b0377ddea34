import logging
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ...settings import Settings
from ...utils.http import client
from ...utils.security import IDEMPOTENCE_HEADER, basic_auth, new_idempotence_key
from ..errors import DecodeError, GatewayError, TransportError
from .schemas import Amount, CapturePaymentRequest, CreatePaymentRequest, Payment

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.yookassa.ru/v3"


class YooKassaClient:
    """
    YooKassa API v3:
    - POST /payments                 (создать платёж)
    - GET  /payments/{id}            (статус платежа)
    - POST /payments/{id}/capture    (списать захолдированную сумму)
    - POST /payments/{id}/cancel     (отменить захолдированный платёж)

    Каждый вызов — один запрос без повторов: Basic-auth (shop_id, secret_key),
    свежий Idempotence-Key, ответ 200 разбирается в Payment.
    """

    name = "YooKassa"

    def __init__(
        self,
        shop_id: str,
        secret_key: str,
        *,
        base_url: Optional[str] = None,
        timeout_sec: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.shop_id = shop_id
        self._secret_key = secret_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout_sec = timeout_sec or 15
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "YooKassaClient":
        if not settings.YOOKASSA_SHOP_ID or not settings.YOOKASSA_SECRET_KEY:
            raise RuntimeError("YOOKASSA_SHOP_ID / YOOKASSA_SECRET_KEY not configured")
        return cls(
            settings.YOOKASSA_SHOP_ID,
            settings.YOOKASSA_SECRET_KEY,
            base_url=settings.YOOKASSA_BASE_URL,
            timeout_sec=settings.YOOKASSA_TIMEOUT_SEC,
            **kwargs,
        )

    def __repr__(self) -> str:
        return f"<YooKassaClient shop_id={self.shop_id!r} base_url={self.base_url!r}>"

    # ---- Utils ----
    def _payment_path(self, payment_id: str, action: str = "") -> str:
        if not payment_id:
            raise ValueError("payment_id must not be empty")
        path = f"/payments/{quote(payment_id, safe='')}"
        return f"{path}/{action}" if action else path

    async def _send(self, method: str, path: str, json_payload: Optional[Dict[str, Any]] = None) -> Payment:
        key = new_idempotence_key()
        headers = {IDEMPOTENCE_HEADER: key, "Content-Type": "application/json"}
        logger.debug("YooKassa %s %s idempotence_key=%s", method, path, key)

        try:
            async with client(
                self.timeout_sec,
                auth=basic_auth(self.shop_id, self._secret_key),
                transport=self._transport,
            ) as c:
                resp = await c.request(method, f"{self.base_url}{path}", json=json_payload, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("YooKassa %s %s transport failure: %r", method, path, e)
            raise TransportError(f"YooKassa {method} {path} failed: {e}") from e

        body = resp.text
        if resp.status_code != 200:
            logger.warning("YooKassa %s %s -> %s", method, path, resp.status_code)
            raise GatewayError(
                f"fail to send request to YooKassa {method} {path}",
                status_code=resp.status_code,
                body=body,
            )

        try:
            payment = Payment.model_validate_json(resp.content)
        except ValidationError as e:
            logger.warning("YooKassa %s %s: undecodable response", method, path)
            raise DecodeError(
                f"unexpected YooKassa response for {method} {path}: {e.error_count()} validation error(s)",
                status_code=resp.status_code,
                body=body,
            ) from e

        logger.info("YooKassa payment %s status=%s", payment.id, payment.status)
        return payment

    # ---- Gateway API ----
    async def create_payment(self, payment: Union[CreatePaymentRequest, Dict[str, Any]]) -> Payment:
        if not isinstance(payment, CreatePaymentRequest):
            payment = CreatePaymentRequest.model_validate(payment)
        return await self._send("POST", "/payments", json_payload=payment.model_dump(mode="json", exclude_none=True))

    async def get_payment_status(self, payment_id: str) -> Payment:
        return await self._send("GET", self._payment_path(payment_id))

    async def capture_payment(self, payment_id: str, amount: Optional[Amount] = None) -> Payment:
        """
        Transfer money held by a two-stage payment.
        Without amount the whole held sum is captured.
        """
        path = self._payment_path(payment_id, "capture")
        body = CapturePaymentRequest(amount=amount).model_dump(mode="json", exclude_none=True)
        return await self._send("POST", path, json_payload=body)

    async def cancel_payment(self, payment_id: str) -> Payment:
        # Отмена двухстадийного платежа, тело запроса не передаётся
        return await self._send("POST", self._payment_path(payment_id, "cancel"))
