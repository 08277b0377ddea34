from yookassa_connect.providers.errors import DecodeError, GatewayError, PaymentClientError, TransportError


def test_error_hierarchy():
    assert issubclass(TransportError, PaymentClientError)
    assert issubclass(GatewayError, PaymentClientError)
    assert issubclass(DecodeError, PaymentClientError)


def test_gateway_error_str_carries_status_and_body():
    err = GatewayError("fail to send request", status_code=401, body='{"type": "error", "code": "invalid_credentials"}')

    text = str(err)
    assert "Status: 401" in text
    assert "invalid_credentials" in text
    assert err.code == "invalid_credentials"
    assert err.description is None


def test_gateway_error_with_empty_body():
    err = GatewayError("fail", status_code=500, body="")

    assert str(err) == "fail | Status: 500"
    assert err.code is None
