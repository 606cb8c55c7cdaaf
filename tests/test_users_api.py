from datetime import timedelta

import pytest

from livefit.models import User

FIELDS_INVALID = "欄位未填寫正確"


def test_signup_login_profile_flow(client):
    signup = client.post(
        "/users/signup",
        json={"name": "Amy", "email": "a@x.com", "password": "Abcd1234"},
    )
    assert signup.status_code == 201
    body = signup.json()
    assert body["status"] == "success"
    assert body["data"]["user"]["name"] == "Amy"
    assert body["data"]["user"]["id"]

    login = client.post("/users/login", json={"email": "a@x.com", "password": "Abcd1234"})
    assert login.status_code == 201
    data = login.json()["data"]
    assert data["token"]
    assert data["user"] == {"name": "Amy"}

    profile = client.get(
        "/users/profile", headers={"Authorization": f"Bearer {data['token']}"}
    )
    assert profile.status_code == 200
    assert profile.json() == {
        "status": "success",
        "data": {"name": "Amy", "email": "a@x.com"},
    }


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@x.com", "password": "Abcd1234"},
        {"name": "   ", "email": "a@x.com", "password": "Abcd1234"},
        {"name": "Amy", "email": "", "password": "Abcd1234"},
        {"name": "Amy", "email": "a@x.com", "password": 12345678},
        {},
    ],
)
def test_signup_rejects_missing_or_blank_fields(client, db_session, payload):
    response = client.post("/users/signup", json=payload)
    assert response.status_code == 400
    assert response.json() == {"status": "failed", "message": FIELDS_INVALID}
    assert db_session.query(User).count() == 0


def test_signup_enforces_password_policy(client, db_session):
    response = client.post(
        "/users/signup", json={"name": "Amy", "email": "a@x.com", "password": "abcd1234"}
    )
    assert response.status_code == 400
    assert "密碼不符合規則" in response.json()["message"]
    assert db_session.query(User).count() == 0


def test_signup_duplicate_email_conflicts(client, db_session):
    payload = {"name": "Amy", "email": "a@x.com", "password": "Abcd1234"}
    assert client.post("/users/signup", json=payload).status_code == 201

    second = client.post("/users/signup", json=payload)
    assert second.status_code == 409
    assert second.json() == {"status": "failed", "message": "Email 已被使用"}
    assert db_session.query(User).filter(User.email == "a@x.com").count() == 1


def test_login_unknown_email(client):
    response = client.post("/users/login", json={"email": "nobody@x.com", "password": "Abcd1234"})
    assert response.status_code == 400
    assert response.json()["message"] == "使用者不存在"
    assert "token" not in response.text


def test_login_wrong_password(client, make_user):
    make_user(email="a@x.com", password="Abcd1234")
    response = client.post("/users/login", json={"email": "a@x.com", "password": "Abcd9999"})
    assert response.status_code == 400
    assert response.json()["message"] == "密碼輸入錯誤"


def test_login_password_policy_checked_after_lookup(client, make_user):
    make_user(email="a@x.com")
    response = client.post("/users/login", json={"email": "a@x.com", "password": "short"})
    assert response.status_code == 400
    assert "密碼不符合規則" in response.json()["message"]


def test_login_missing_fields(client):
    response = client.post("/users/login", json={"email": "a@x.com"})
    assert response.status_code == 400
    assert response.json()["message"] == FIELDS_INVALID


def test_profile_requires_token(client):
    response = client.get("/users/profile")
    assert response.status_code == 401
    assert response.json() == {"status": "failed", "message": "未登入"}


def test_profile_rejects_bad_token(client):
    response = client.get("/users/profile", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json()["message"] == "無效的 token"


def test_profile_rejects_expired_token(client, make_user, auth_headers):
    user = make_user()
    response = client.get(
        "/users/profile", headers=auth_headers(user, timedelta(seconds=-30))
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Token 已過期"


def test_profile_rejects_token_for_deleted_user(client, db_session, make_user, auth_headers):
    user = make_user()
    headers = auth_headers(user)
    db_session.delete(user)
    db_session.commit()

    response = client.get("/users/profile", headers=headers)
    assert response.status_code == 401
    assert response.json()["message"] == "無效的 token"


def test_update_profile_changes_name(client, db_session, make_user, auth_headers):
    user = make_user(name="Amy")
    response = client.put(
        "/users/profile", json={"name": "Amelia"}, headers=auth_headers(user)
    )
    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": {"user": {"name": "Amelia"}}}

    db_session.expire_all()
    assert db_session.get(User, user.id).name == "Amelia"


def test_update_profile_same_name_is_rejected(client, make_user, auth_headers):
    user = make_user(name="Amy")
    response = client.put("/users/profile", json={"name": "Amy"}, headers=auth_headers(user))
    assert response.status_code == 400
    assert response.json()["message"] == "使用者名稱未變更"


def test_update_profile_blank_name(client, make_user, auth_headers):
    user = make_user()
    response = client.put("/users/profile", json={"name": " "}, headers=auth_headers(user))
    assert response.status_code == 400
    assert response.json()["message"] == FIELDS_INVALID


def test_update_profile_requires_auth_before_validation(client):
    response = client.put("/users/profile", json={})
    assert response.status_code == 401
