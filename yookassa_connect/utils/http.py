from typing import Optional
import httpx

def client(
    timeout_sec: float = 15,
    auth: Optional[httpx.Auth] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout_sec, auth=auth, transport=transport)
