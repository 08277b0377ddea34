import uuid
import httpx

IDEMPOTENCE_HEADER = "Idempotence-Key"

def basic_auth(shop_id: str, secret_key: str) -> httpx.BasicAuth:
    return httpx.BasicAuth(shop_id, secret_key)

def new_idempotence_key() -> str:
    # Новый ключ на каждый запрос: шлюз дедуплицирует только повторы с тем же ключом
    return str(uuid.uuid4())
