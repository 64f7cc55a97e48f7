from datetime import timedelta

from zentro.models.admin_user import AdminUser
from zentro.services.auth_service import (
    create_access_token,
    ensure_admin_user,
    verify_password,
)


def test_login_returns_bearer_token(client, admin_user):
    r = client.post(
        "/admin/login",
        data={"username": "Admin@ZentroHomes.com", "password": "zentro2025"},
    )
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["token_type"] == "bearer"

    me = client.get(
        "/admin/me", headers={"Authorization": f"Bearer {data['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json() == {
        "id": admin_user.id,
        "email": "admin@zentrohomes.com",
        "role": "admin",
    }


def test_login_wrong_password_unauthorized(client, admin_user):
    r = client.post(
        "/admin/login",
        data={"username": "admin@zentrohomes.com", "password": "wrong"},
    )
    assert r.status_code == 401


def test_login_inactive_admin_forbidden(client, admin_user, db_session):
    admin_user.is_active = False
    db_session.commit()
    r = client.post(
        "/admin/login",
        data={"username": "admin@zentrohomes.com", "password": "zentro2025"},
    )
    assert r.status_code == 403


def test_me_rejects_invalid_token(client):
    r = client.get("/admin/me", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_non_admin_role_forbidden(client):
    token = create_access_token("viewer@example.com", 5, "viewer", timedelta(minutes=5))
    r = client.delete(
        "/property_images/1", headers={"Authorization": f"Bearer {token}"}
    )
    assert r.status_code == 403


def test_ensure_admin_user_is_idempotent(db_session):
    first = ensure_admin_user(db_session, " Owner@Zentro.com ", "s3cret")
    second = ensure_admin_user(db_session, "owner@zentro.com", "other")

    assert first.id == second.id
    assert first.email == "owner@zentro.com"
    assert verify_password("s3cret", second.password_hash)
    assert db_session.query(AdminUser).count() == 1


def test_health_check(client):
    r = client.get("/healthy")
    assert r.status_code == 200
    assert r.json() == {"status": "Healthy"}


def test_disabled_admin_token_is_rejected(client, admin_user, admin_headers, db_session):
    assert client.get("/admin/me", headers=admin_headers).status_code == 200

    admin_user.is_active = False
    db_session.commit()

    r = client.get("/admin/me", headers=admin_headers)
    assert r.status_code == 403
    assert r.json()["detail"] == "Admin account is disabled"


def test_deleted_admin_token_is_rejected(client, admin_user, admin_headers, db_session):
    db_session.delete(admin_user)
    db_session.commit()

    r = client.get("/admin/me", headers=admin_headers)
    assert r.status_code == 401
