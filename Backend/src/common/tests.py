import logging

import pytest
from django.core.files.base import ContentFile
from django.http import HttpResponse
from django.test import RequestFactory
from django.urls import reverse
from rest_framework.test import APIClient

from common import storage
from common.exceptions import _flatten
from common.i18n import localized, message, resolve_language
from common.middleware import RequestIDFilter, RequestIDMiddleware
from common.text import generate_slug
from common.utils import blank_to_none, missing_required, truncate


@pytest.mark.django_db
def test_health_and_ping():
    client = APIClient()

    r = client.get(reverse("health"))
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = client.get(reverse("ping"))
    assert r.status_code == 200
    assert r.json()["pong"] is True


@pytest.mark.django_db
def test_request_id_is_echoed():
    client = APIClient()
    r = client.get(reverse("ping"), HTTP_X_REQUEST_ID="abc-123")
    assert r["X-Request-ID"] == "abc-123"


def test_log_records_carry_request_id():
    seen = {}

    def view(request):
        record = logging.LogRecord("paroisse", logging.INFO, __file__, 1, "msg", None, None)
        RequestIDFilter().filter(record)
        seen["id"] = record.request_id
        return HttpResponse("ok")

    RequestIDMiddleware(view)(RequestFactory().get("/", HTTP_X_REQUEST_ID="req-42"))
    assert seen["id"] == "req-42"

    record = logging.LogRecord("paroisse", logging.INFO, __file__, 1, "msg", None, None)
    RequestIDFilter().filter(record)
    assert record.request_id == "-"


@pytest.mark.django_db
def test_unknown_route_returns_json_404():
    r = APIClient().get("/nulle-part/")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "not_found"


@pytest.mark.parametrize("title,expected", [
    ("Événement d'Été!", "evenement-d-ete"),
    ("  Messe   de Noël  ", "messe-de-noel"),
    ("Rekolekcje wielkopostne 2024", "rekolekcje-wielkopostne-2024"),
    ("!!!", ""),
])
def test_generate_slug(title, expected):
    assert generate_slug(title) == expected


def test_resolve_language():
    rf = RequestFactory()
    assert resolve_language(rf.get("/", {"lang": "pl"})) == "pl"
    assert resolve_language(rf.get("/", HTTP_ACCEPT_LANGUAGE="pl-PL,pl;q=0.9")) == "pl"
    assert resolve_language(rf.get("/", {"lang": "fr"}, HTTP_ACCEPT_LANGUAGE="pl")) == "fr"
    assert resolve_language(rf.get("/", HTTP_ACCEPT_LANGUAGE="en-US")) == "fr"


def test_localized_falls_back_to_french_then_base():
    row = {"title": "Base", "title_fr": "Titre", "title_pl": ""}
    assert localized(row, "title", "pl") == "Titre"
    assert localized(row, "title", "fr") == "Titre"

    row = {"title": "Base", "title_fr": None, "title_pl": None}
    assert localized(row, "title", "pl") == "Base"

    row = {"title": "Base", "title_fr": "Titre", "title_pl": "Tytuł"}
    assert localized(row, "title", "pl") == "Tytuł"


def test_message_catalogue():
    assert message("article.created", "fr") == "Article créé"
    assert message("article.created", "pl") == "Artykuł utworzony"
    assert message("cle.inconnue", "fr") == message("error", "fr")


def test_form_helpers():
    data = blank_to_none({"excerpt": "  ", "title": "x"}, ["excerpt", "category"])
    assert data == {"excerpt": None, "title": "x"}
    assert missing_required({"title": ""}, None, ["title", "slug"]) == ["title", "slug"]
    assert truncate("a" * 70) == "a" * 60 + "..."
    assert truncate("court") == "court"


def test_flatten_error_detail():
    assert _flatten({"detail": "Accès restreint"}) == "Accès restreint"
    assert _flatten({"non_field_errors": ["Titre et slug requis"]}) == "Titre et slug requis"
    assert _flatten({"title": ["requis"]}) == {"title": ["requis"]}


def test_storage_upload_url_and_remove():
    path = storage.upload("audio", storage.unique_name("homélie du dimanche.mp3"), ContentFile(b"ID3"))
    assert path.endswith("-hom_lie_du_dimanche.mp3")

    url = storage.public_url("audio", path)
    assert url.startswith("http://localhost:8000/media/audio/")
    assert storage.path_from_public_url("audio", url) == path
    assert storage.path_from_public_url("media", url) is None
    assert storage.path_from_public_url("audio", "http://localhost:8000/media/audio/../attachments/x.pdf") is None
    assert storage.path_from_public_url("audio", "http://localhost:8000/media/audio/podcasts/../../x") is None

    assert storage.remove("audio", [path]) == 1
    assert storage.remove("audio", [path]) == 0


def test_storage_rejects_unknown_bucket():
    with pytest.raises(ValueError):
        storage.upload("secret", "x.txt", ContentFile(b"x"))
