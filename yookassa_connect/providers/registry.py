from typing import Optional

from ..settings import Settings, settings as default_settings
from .base import PaymentGateway
from .yookassa.adapter import YooKassaClient

# Фабрики адаптеров: клиент создаётся с явными реквизитами из настроек
_registry = {
    "YooKassa": YooKassaClient.from_settings,
}

# Алиасы имён провайдеров → канонические ключи реестра
_aliases = {
    "yookassa": "YooKassa",
    "yoo_kassa": "YooKassa",
    "yoo-kassa": "YooKassa",
    "yandex_kassa": "YooKassa",
}

def get_provider_by_name(name: str | None, settings: Optional[Settings] = None) -> Optional[PaymentGateway]:
    if not name:
        return None
    key = _aliases.get(name.strip().lower(), name)
    factory = _registry.get(key)
    if factory is None:
        return None
    return factory(settings or default_settings)

def default_provider(settings: Optional[Settings] = None) -> Optional[PaymentGateway]:
    settings = settings or default_settings
    return get_provider_by_name(settings.DEFAULT_PROVIDER, settings)
