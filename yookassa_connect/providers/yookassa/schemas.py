from datetime import datetime
from pydantic import BaseModel, Discriminator, Field, Tag
from typing import Annotated, Optional, Any, Dict, Literal, Union

# Модели повторяют JSON-схему YooKassa API v3.
# Суммы — строки с десятичной точкой ("100.00"), во float не переводим нигде.


class Amount(BaseModel):
    value: str
    currency: str


def _tag_by_type(known: set):
    # Неизвестные шлюзу/нам типы уходят в общий вариант "other", а не в ошибку
    def _tag(v: Any) -> str:
        t = v.get("type") if isinstance(v, dict) else getattr(v, "type", None)
        return t if t in known else "other"
    return _tag


# ====== Подтверждение платежа ======

class RedirectConfirmation(BaseModel):
    type: Literal["redirect"] = "redirect"
    return_url: str
    enforce: Optional[bool] = None
    locale: Optional[str] = None


class EmbeddedConfirmation(BaseModel):
    type: Literal["embedded"] = "embedded"
    locale: Optional[str] = None


class ExternalConfirmation(BaseModel):
    type: Literal["external"] = "external"
    locale: Optional[str] = None


class QrConfirmation(BaseModel):
    type: Literal["qr"] = "qr"
    return_url: Optional[str] = None
    locale: Optional[str] = None


class MobileApplicationConfirmation(BaseModel):
    type: Literal["mobile_application"] = "mobile_application"
    return_url: str
    locale: Optional[str] = None


Confirmation = Annotated[
    Union[
        RedirectConfirmation,
        EmbeddedConfirmation,
        ExternalConfirmation,
        QrConfirmation,
        MobileApplicationConfirmation,
    ],
    Field(discriminator="type"),
]


class ConfirmationInfo(BaseModel):
    """Confirmation as returned by the gateway (redirect url, widget token, qr data)."""
    type: str
    confirmation_url: Optional[str] = None
    confirmation_token: Optional[str] = None
    confirmation_data: Optional[str] = None
    return_url: Optional[str] = None
    model_config = {"extra": "allow"}


# ====== Способ оплаты (ответ) ======

class CardProduct(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    model_config = {"extra": "allow"}


class Card(BaseModel):
    first6: Optional[str] = None
    last4: Optional[str] = None
    expiry_year: Optional[str] = None
    expiry_month: Optional[str] = None
    card_type: Optional[str] = None
    issuer_country: Optional[str] = None
    issuer_name: Optional[str] = None
    source: Optional[str] = None
    card_product: Optional[CardProduct] = None
    model_config = {"extra": "allow"}


class PaymentMethodBase(BaseModel):
    type: str
    id: Optional[str] = None  # id метода оплаты для проведения автоплатежей
    saved: Optional[bool] = None
    title: Optional[str] = None
    issuer_country: Optional[str] = None
    model_config = {"extra": "allow"}


class BankCardPaymentMethod(PaymentMethodBase):
    type: Literal["bank_card"] = "bank_card"
    card: Optional[Card] = None


class YooMoneyPaymentMethod(PaymentMethodBase):
    type: Literal["yoo_money"] = "yoo_money"
    account_number: Optional[str] = None


class SberbankPaymentMethod(PaymentMethodBase):
    type: Literal["sberbank"] = "sberbank"
    phone: Optional[str] = None


class SbpPaymentMethod(PaymentMethodBase):
    type: Literal["sbp"] = "sbp"
    sbp_operation_id: Optional[str] = None


class OtherPaymentMethod(PaymentMethodBase):
    pass


PaymentMethod = Annotated[
    Union[
        Annotated[BankCardPaymentMethod, Tag("bank_card")],
        Annotated[YooMoneyPaymentMethod, Tag("yoo_money")],
        Annotated[SberbankPaymentMethod, Tag("sberbank")],
        Annotated[SbpPaymentMethod, Tag("sbp")],
        Annotated[OtherPaymentMethod, Tag("other")],
    ],
    Discriminator(_tag_by_type({"bank_card", "yoo_money", "sberbank", "sbp"})),
]


# ====== Данные способа оплаты (запрос) ======

class CardData(BaseModel):
    number: str
    expiry_year: str
    expiry_month: str
    cardholder: Optional[str] = None
    csc: Optional[str] = None


class BankCardPaymentMethodData(BaseModel):
    type: Literal["bank_card"] = "bank_card"
    card: Optional[CardData] = None


class SberbankPaymentMethodData(BaseModel):
    type: Literal["sberbank"] = "sberbank"
    phone: Optional[str] = None


class OtherPaymentMethodData(BaseModel):
    # yoo_money, sbp, tinkoff_bank, ... — достаточно одного type
    type: str
    model_config = {"extra": "allow"}


PaymentMethodData = Annotated[
    Union[
        Annotated[BankCardPaymentMethodData, Tag("bank_card")],
        Annotated[SberbankPaymentMethodData, Tag("sberbank")],
        Annotated[OtherPaymentMethodData, Tag("other")],
    ],
    Discriminator(_tag_by_type({"bank_card", "sberbank"})),
]


# ====== ЗАПРОСЫ ======

class CreatePaymentRequest(BaseModel):
    amount: Amount
    capture: Optional[bool] = None  # true - мгновенное списание, false - двухстадийная оплата с холдированием средств
    description: Optional[str] = None
    confirmation: Optional[Confirmation] = None
    payment_method_data: Optional[PaymentMethodData] = None
    payment_method_id: Optional[str] = None  # сохранённый метод для автоплатежа
    save_payment_method: Optional[bool] = None  # true - для сохранения метода оплаты и проведения автоплатежей
    client_ip: Optional[str] = None
    merchant_customer_id: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    model_config = {"extra": "allow"}


class CapturePaymentRequest(BaseModel):
    amount: Optional[Amount] = None


# ====== ОТВЕТ ======

class CancellationDetails(BaseModel):
    party: Optional[str] = None
    reason: Optional[str] = None


class Payment(BaseModel):
    """
    Единая модель платежа для всех четырёх операций.
    status — строка шлюза (pending | waiting_for_capture | succeeded | canceled),
    локально не проверяется.
    """
    id: str
    status: str
    amount: Optional[Amount] = None
    income_amount: Optional[Amount] = None  # сумма к зачислению после комиссии
    description: Optional[str] = None
    paid: Optional[bool] = None
    refundable: Optional[bool] = None
    test: Optional[bool] = None
    created_at: Optional[datetime] = None
    captured_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    confirmation: Optional[ConfirmationInfo] = None
    payment_method: Optional[PaymentMethod] = None
    cancellation_details: Optional[CancellationDetails] = None
    metadata: Optional[Dict[str, Any]] = None
    model_config = {"extra": "allow"}
