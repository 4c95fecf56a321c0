# tests/test_errors.py
from fastapi.testclient import TestClient
from starlette.exceptions import HTTPException

from product_api.config import Settings
from product_api.database import ProductStore
from product_api.errors import ApiError, ErrorKind, translate
from product_api.main import create_app


class BrokenStore(ProductStore):
    def list(self):
        raise RuntimeError("disk on fire")


def test_translate_api_errors():
    assert translate(ApiError.not_found()) == (404, {"error": {"message": "Product not found", "type": "NotFoundError"}})
    assert translate(ApiError.validation("Invalid price"))[0] == 400
    assert translate(ApiError.unauthorized())[1]["error"]["type"] == "UnauthorizedError"


def test_translate_http_exception_keeps_status():
    assert translate(HTTPException(status_code=405))[1]["error"]["type"] == "MethodNotAllowedError"
    status, body = translate(HTTPException(status_code=415, detail="Unsupported"))
    assert status == 415
    assert body["error"]["message"] == "Unsupported"


def test_translate_unknown_exception_hides_details():
    status, body = translate(ValueError("secret internals"))
    assert status == 500
    assert body == {"error": {"message": "Internal Server Error", "type": "ServerError"}}


def test_error_kind_from_status():
    assert ErrorKind.from_status(404) is ErrorKind.NOT_FOUND
    assert ErrorKind.from_status(418) is ErrorKind.CLIENT
    assert ErrorKind.from_status(503) is ErrorKind.SERVER


def test_unhandled_exception_becomes_500_body():
    client = TestClient(create_app(Settings(), BrokenStore()), raise_server_exceptions=False)
    r = client.get("/api/products")
    assert r.status_code == 500
    assert r.json() == {"error": {"message": "Internal Server Error", "type": "ServerError"}}


def test_unknown_route_uses_error_shape(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json()["error"]["type"] == "NotFoundError"


def test_wrong_method_uses_error_shape(client):
    r = client.patch("/api/products/1", json={})
    assert r.status_code == 405
    assert r.json()["error"]["type"] == "MethodNotAllowedError"


def test_unmapped_client_status_is_generic_client_error():
    for status in (403, 415, 422):
        code, body = translate(HTTPException(status_code=status))
        assert code == status
        assert body["error"]["type"] == "ClientError"
    assert translate(HTTPException(status_code=400))[1]["error"]["type"] == "ValidationError"


def test_server_error_keeps_cors_headers():
    client = TestClient(create_app(Settings(), BrokenStore()), raise_server_exceptions=False)
    r = client.get("/api/products", headers={"Origin": "http://shop.example"})
    assert r.status_code == 500
    assert r.json()["error"]["type"] == "ServerError"
    assert "access-control-allow-origin" in r.headers
