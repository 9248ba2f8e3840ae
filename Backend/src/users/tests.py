import pytest
from django.urls import reverse
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from users.models import UserRole

User = get_user_model()


def make_user(email="editeur@paroisse.fr", password="StrongPassw0rd!", role=None):
    user = User.objects.create_user(username=email, email=email, password=password)
    if role:
        UserRole.objects.create(user=user, role=role)
    return user


@pytest.mark.django_db
def test_register_and_login_and_me():
    client = APIClient()

    # 1) Register
    r = client.post(
        reverse("register"),
        {
            "email": "Alice@Example.com",
            "password": "StrongPassw0rd!",
            "first_name": "Alice",
            "last_name": "Doe",
        },
        format="json",
    )
    assert r.status_code == 201, r.content
    assert r.data["item"]["email"] == "alice@example.com"
    assert r.data["item"]["roles"] == []

    # 2) Login (JWT)
    r = client.post(
        reverse("token_obtain_pair"),
        {"email": "alice@example.com", "password": "StrongPassw0rd!"},
        format="json",
    )
    assert r.status_code == 200, r.content
    assert "access" in r.data and "refresh" in r.data
    assert r.data["user"]["is_editor"] is False
    token = r.data["access"]

    # 3) /me
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    r = client.get(reverse("me"))
    assert r.status_code == 200
    assert r.data["email"] == "alice@example.com"

    # 4) Change password
    r = client.post(
        reverse("change_password"),
        {"old_password": "StrongPassw0rd!", "new_password": "An0therStrongPass!"},
        format="json",
    )
    assert r.status_code == 200


@pytest.mark.django_db
def test_login_with_bad_password_returns_french_message():
    make_user()
    r = APIClient().post(
        reverse("token_obtain_pair"),
        {"email": "editeur@paroisse.fr", "password": "mauvais"},
        format="json",
    )
    assert r.status_code == 401
    assert r.json()["error"]["detail"] == "Email ou mot de passe incorrect."


@pytest.mark.django_db
def test_roles_are_read_on_every_call():
    user = make_user()
    client = APIClient()
    client.force_authenticate(user)

    assert client.get(reverse("me")).data["is_editor"] is False

    UserRole.objects.create(user=user, role=UserRole.ADMIN)
    data = client.get(reverse("me")).data
    assert data["roles"] == ["admin"]
    assert data["is_admin"] is True
    assert data["is_editor"] is True


@pytest.mark.django_db
def test_admin_area_requires_login_then_role():
    client = APIClient()
    r = client.get(reverse("role-list"))
    assert r.status_code == 401

    client.force_authenticate(make_user(role=UserRole.EDITOR))
    r = client.get(reverse("role-list"))
    assert r.status_code == 403
    assert r.json()["error"]["detail"].startswith("Accès restreint")


@pytest.mark.django_db
def test_admin_grants_and_revokes_roles():
    admin = make_user("admin@paroisse.fr", role=UserRole.ADMIN)
    target = make_user("benevole@paroisse.fr")
    client = APIClient()
    client.force_authenticate(admin)

    r = client.post(reverse("role-list"), {"email": "benevole@paroisse.fr", "role": "editor"}, format="json")
    assert r.status_code == 201, r.content
    assert r.data["detail"] == "Rôle attribué"
    role_id = r.data["item"]["id"]
    assert UserRole.objects.filter(user=target, role="editor").exists()

    # attribution idempotente
    r = client.post(reverse("role-list"), {"email": "benevole@paroisse.fr", "role": "editor"}, format="json")
    assert r.status_code == 201
    assert UserRole.objects.filter(user=target).count() == 1

    r = client.post(reverse("role-list"), {"email": "inconnu@paroisse.fr", "role": "editor"}, format="json")
    assert r.status_code == 400

    r = client.delete(reverse("role-detail", args=[role_id]))
    assert r.status_code == 200
    assert not UserRole.objects.filter(user=target).exists()


@pytest.mark.django_db
def test_logout_blacklists_refresh_token():
    make_user()
    client = APIClient()
    tokens = client.post(
        reverse("token_obtain_pair"),
        {"email": "editeur@paroisse.fr", "password": "StrongPassw0rd!"},
        format="json",
    ).data

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
    r = client.post(reverse("logout"), {"refresh": tokens["refresh"]}, format="json")
    assert r.status_code == 200

    client.credentials()
    r = client.post(reverse("token_refresh"), {"refresh": tokens["refresh"]}, format="json")
    assert r.status_code == 401
