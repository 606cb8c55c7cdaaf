from fastapi import FastAPI
from fastapi.testclient import TestClient

from livefit.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    make_error,
    register_exception_handlers,
)
from livefit.core.responses import send_success


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/ok")
    def ok():
        return send_success(200, {"hello": "world"})

    @app.get("/conflict")
    def conflict():
        raise ConflictError("重複")

    @app.get("/forbidden")
    def forbidden():
        raise AuthorizationError("禁止")

    @app.get("/custom")
    def custom():
        raise make_error(418, "teapot")

    @app.get("/boom")
    def boom():
        raise RuntimeError("unexpected")

    return app


def test_success_envelope():
    client = TestClient(_build_app())
    response = client.get("/ok")
    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": {"hello": "world"}}


def test_app_errors_render_failed_envelope():
    client = TestClient(_build_app())
    assert client.get("/conflict").status_code == 409
    assert client.get("/conflict").json() == {"status": "failed", "message": "重複"}
    assert client.get("/forbidden").status_code == 403
    custom = client.get("/custom")
    assert custom.status_code == 418
    assert custom.json() == {"status": "failed", "message": "teapot"}


def test_not_found_error_uses_400():
    assert NotFoundError("x").status_code == 400


def test_unknown_route(client):
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"status": "failed", "message": "無此路由資訊"}


def test_unhandled_exception_returns_generic_500():
    client = TestClient(_build_app(), raise_server_exceptions=False)
    response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "伺服器錯誤"}
