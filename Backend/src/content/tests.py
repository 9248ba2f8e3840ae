import datetime

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import call_command
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from common import storage
from content.models import Article, AudioFile, FooterLink, MassSchedule, Page, SocialLink, TeamMember
from users.models import User, UserRole


@pytest.fixture
def editor_client(db):
    user = User.objects.create_user(username="ed@paroisse.fr", email="ed@paroisse.fr", password="x")
    UserRole.objects.create(user=user, role=UserRole.EDITOR)
    client = APIClient()
    client.force_authenticate(user)
    return client


@pytest.fixture
def article(db):
    return Article.objects.create(
        title="Kermesse",
        title_fr="Kermesse paroissiale",
        slug="kermesse",
        excerpt="Rendez-vous dans la cour",
        content="<p>Programme</p>",
        category="vie",
        published=False,
    )


# --- back-office ---

@pytest.mark.django_db
def test_admin_requires_editor_role():
    client = APIClient()
    assert client.get(reverse("admin-articles-list")).status_code == 401

    nobody = User.objects.create_user(username="n@p.fr", email="n@p.fr", password="x")
    client.force_authenticate(nobody)
    r = client.get(reverse("admin-articles-list"))
    assert r.status_code == 403


@pytest.mark.parametrize("payload", [
    {"title": "", "slug": "sans-titre"},
    {"title": "Sans slug", "slug": ""},
    {"slug": "titre-absent"},
    {"title": "Slug absent"},
])
def test_article_without_title_or_slug_is_rejected(editor_client, payload):
    r = editor_client.post(reverse("admin-articles-list"), payload, format="json")
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == "Titre et slug requis"
    assert Article.objects.count() == 0


def test_page_without_slug_is_rejected_in_polish(editor_client):
    r = editor_client.post(reverse("admin-pages-list") + "?lang=pl", {"title": "Strona"}, format="json")
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == "Tytuł i slug są wymagane"
    assert Page.objects.count() == 0


def test_duplicate_slug_is_rejected_with_localized_message(editor_client, article):
    r = editor_client.post(reverse("admin-articles-list"), {"title": "Autre", "slug": "kermesse"}, format="json")
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == {"slug": ["Ce slug est déjà utilisé"]}
    assert Article.objects.count() == 1

    Page.objects.create(title="Contact", slug="kontakt")
    r = editor_client.post(reverse("admin-pages-list") + "?lang=pl", {"title": "Kontakt", "slug": "kontakt"}, format="json")
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == {"slug": ["Ten slug jest już używany"]}


def test_article_create_sanitizes_and_blanks_to_null(editor_client):
    r = editor_client.post(
        reverse("admin-articles-list"),
        {
            "title": "Événement d'Été!",
            "slug": "evenement-d-ete",
            "content": "<p>Bienvenue<script>alert(1)</script></p>",
            "excerpt": "",
        },
        format="json",
    )
    assert r.status_code == 201, r.content
    assert r.data["detail"] == "Article créé"
    row = Article.objects.get(slug="evenement-d-ete")
    assert row.content == "<p>Bienvenue</p>"
    assert row.excerpt is None
    assert row.published is False


def test_partial_update_keeps_existing_required_fields(editor_client, article):
    r = editor_client.patch(reverse("admin-articles-detail", args=[article.pk]), {"excerpt": "Nouveau"}, format="json")
    assert r.status_code == 200, r.content
    assert r.data["detail"] == "Article mis à jour"
    article.refresh_from_db()
    assert article.excerpt == "Nouveau" and article.slug == "kermesse"

    r = editor_client.patch(reverse("admin-articles-detail", args=[article.pk]), {"title": "  "}, format="json")
    assert r.status_code == 400
    article.refresh_from_db()
    assert article.title == "Kermesse"


def test_toggle_flips_only_the_flag(editor_client, article):
    before = Article.objects.filter(pk=article.pk).values().get()

    r = editor_client.post(reverse("admin-articles-toggle", args=[article.pk]))
    assert r.status_code == 200
    assert r.data["detail"] == "Article publié"

    after = Article.objects.filter(pk=article.pk).values().get()
    assert after["published"] is True
    changed = {k for k in before if before[k] != after[k]}
    assert changed <= {"published", "updated_at"}

    r = editor_client.post(reverse("admin-articles-toggle", args=[article.pk]))
    assert r.data["detail"] == "Article dépublié"


def test_deleted_row_is_gone_from_list(editor_client, article):
    r = editor_client.delete(reverse("admin-articles-detail", args=[article.pk]))
    assert r.status_code == 200
    assert r.data["detail"] == "Article supprimé"
    ids = [row["id"] for row in editor_client.get(reverse("admin-articles-list")).data]
    assert article.pk not in ids


def test_admin_lists_are_sorted(editor_client):
    TeamMember.objects.create(name="B", role="Chantre", category="choir", sort_order=1)
    TeamMember.objects.create(name="A", role="Curé", category="priests", sort_order=2)
    TeamMember.objects.create(name="C", role="Vicaire", category="priests", sort_order=1)
    names = [row["name"] for row in editor_client.get(reverse("admin-team-list")).data]
    assert names == ["B", "C", "A"]


def test_team_member_required_fields(editor_client):
    r = editor_client.post(reverse("admin-team-list"), {"name": "Père Jean", "role": "Curé"}, format="json")
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == "Nom, fonction et catégorie requis"


def test_schedule_and_event_resources_are_separate(editor_client):
    r = editor_client.post(reverse("admin-schedules-list"), {"day_of_week": "Dimanche", "time": "10:30"}, format="json")
    assert r.status_code == 201, r.content
    assert r.data["detail"] == "Horaire ajouté"

    r = editor_client.post(reverse("admin-events-list"), {"title_fr": "Veillée pascale", "time": "21:00"}, format="json")
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == "Titre, heure et date requis"

    r = editor_client.post(
        reverse("admin-events-list"),
        {
            "title_fr": "Veillée pascale",
            "title_pl": "Wigilia Paschalna",
            "time": "21:00",
            "special_date": "2030-04-20",
            "location_fr": "Église Saint-Paul",
        },
        format="json",
    )
    assert r.status_code == 201, r.content
    event = MassSchedule.objects.get(is_special=True)
    assert event.day_of_week == "Veillée pascale"
    assert event.location == "Église Saint-Paul"
    assert r.data["item"]["title"] == "Veillée pascale"

    assert len(editor_client.get(reverse("admin-schedules-list")).data) == 1
    assert len(editor_client.get(reverse("admin-events-list")).data) == 1


def test_audio_upload_and_delete_removes_file(editor_client):
    upload = SimpleUploadedFile("Homélie Pâques.mp3", b"ID3" + b"\x00" * 64, content_type="audio/mpeg")
    r = editor_client.post(reverse("admin-audio-upload"), {"file": upload}, format="multipart")
    assert r.status_code == 201, r.content
    assert r.data["title"] == "Homélie Pâques"
    assert r.data["path"].startswith("podcasts/")

    r = editor_client.post(reverse("admin-audio-list"), {"title": r.data["title"], "file_url": r.data["url"]}, format="json")
    assert r.status_code == 201, r.content
    audio = AudioFile.objects.get()
    path = storage.path_from_public_url("audio", audio.file_url)

    r = editor_client.delete(reverse("admin-audio-detail", args=[audio.pk]))
    assert r.status_code == 200
    assert storage.remove("audio", [path]) == 0


def test_audio_delete_ignores_paths_outside_bucket(editor_client):
    kept = storage.upload("attachments", "garder.txt", SimpleUploadedFile("garder.txt", b"x"))
    audio = AudioFile.objects.create(
        title="Piege", file_url="http://localhost:8000/media/audio/../attachments/" + kept,
    )
    r = editor_client.delete(reverse("admin-audio-detail", args=[audio.pk]))
    assert r.status_code == 200
    assert not AudioFile.objects.exists()
    assert storage.remove("attachments", [kept]) == 1

    audio = AudioFile.objects.create(title="Piege", file_url="http://localhost:8000/media/audio/../../../etc/passwd")
    assert editor_client.delete(reverse("admin-audio-detail", args=[audio.pk])).status_code == 200


def test_audio_upload_rejects_bad_type_and_size(editor_client, settings):
    r = editor_client.post(
        reverse("admin-audio-upload"),
        {"file": SimpleUploadedFile("a.flac", b"x", content_type="audio/flac")},
        format="multipart",
    )
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == "Format audio non supporté (MP3, WAV, OGG, M4A)"

    settings.AUDIO_MAX_BYTES = 2
    r = editor_client.post(
        reverse("admin-audio-upload"),
        {"file": SimpleUploadedFile("a.mp3", b"xyz", content_type="audio/mpeg")},
        format="multipart",
    )
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == "Fichier trop volumineux (max 50Mo)"


def test_slug_preview(editor_client):
    r = editor_client.get(reverse("admin_slug"), {"title": "Événement d'Été!"})
    assert r.data == {"slug": "evenement-d-ete"}


# --- site public ---

@pytest.mark.django_db
def test_public_article_language_fallback(article):
    article.published = True
    article.title_pl = ""
    article.save()
    client = APIClient()

    r = client.get(reverse("public_article_detail", args=["kermesse"]), {"lang": "pl"})
    assert r.status_code == 200
    assert r.data["title"] == "Kermesse paroissiale"
    assert r.data["excerpt"] == "Rendez-vous dans la cour"
    assert r.data["content"] == "<p>Programme</p>"

    article.title_pl = "Festyn parafialny"
    article.save()
    r = client.get(reverse("public_article_detail", args=["kermesse"]), HTTP_ACCEPT_LANGUAGE="pl-PL")
    assert r.data["title"] == "Festyn parafialny"


@pytest.mark.django_db
def test_unpublished_article_is_not_public(article):
    r = APIClient().get(reverse("public_article_detail", args=["kermesse"]))
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "not_found"
    assert APIClient().get(reverse("public_articles")).data == []


@pytest.mark.django_db
def test_public_team_is_grouped_in_fixed_order():
    TeamMember.objects.create(name="Marie", role="Secrétaire", category="secretariat")
    TeamMember.objects.create(name="Père Paul", role="Curé", category="priests")
    TeamMember.objects.create(name="Absent", role="Chantre", category="choir", active=False)
    groups = APIClient().get(reverse("public_team")).data
    assert [g["category"] for g in groups] == ["priests", "secretariat"]
    assert groups[0]["label"] == "Prêtres"


@pytest.mark.django_db
def test_public_schedules_order_and_upcoming_events():
    MassSchedule.objects.create(day_of_week="Dimanche", time=datetime.time(11, 0))
    MassSchedule.objects.create(day_of_week="Mardi", time=datetime.time(8, 30))
    MassSchedule.objects.create(day_of_week="Dimanche", time=datetime.time(9, 0))
    today = timezone.localdate()
    MassSchedule.objects.create(day_of_week="Passé", time=datetime.time(20, 0), is_special=True,
                                special_date=today - datetime.timedelta(days=1))
    MassSchedule.objects.create(day_of_week="Toussaint", time=datetime.time(10, 0), is_special=True,
                                special_date=today + datetime.timedelta(days=3))

    data = APIClient().get(reverse("public_schedules")).data
    assert [(s["day_of_week"], s["time"]) for s in data["regular"]] == [
        ("Mardi", "08:30"), ("Dimanche", "09:00"), ("Dimanche", "11:00"),
    ]
    assert [e["title"] for e in data["events"]] == ["Toussaint"]


@pytest.mark.django_db
def test_public_faq_languages():
    fr = APIClient().get(reverse("public_faq")).data
    pl = APIClient().get(reverse("public_faq"), {"lang": "pl"}).data
    assert [c["title"] for c in fr] == ["Sacrements", "Vie paroissiale", "Informations pratiques"]
    assert pl[0]["title"] == "Sakramenty"
    assert all(len(c["questions"]) == 4 for c in pl)


@pytest.mark.django_db
def test_public_search():
    Article.objects.create(title="Concert de Noël", slug="concert-noel", published=True, excerpt="x" * 80)
    Article.objects.create(title="Noël brouillon", slug="noel-brouillon", published=False)
    Page.objects.create(title="Noël à la paroisse", slug="noel", meta_description="Programme des fêtes")
    TeamMember.objects.create(name="Noëlle", role="Organiste", category="choir")

    data = APIClient().get(reverse("public_search"), {"q": "Noël"}).data
    by_type = {r["type"]: r for r in data["results"]}
    assert set(by_type) == {"article", "page", "team"}
    assert by_type["article"]["url"] == "/articles/concert-noel"
    assert by_type["article"]["subtitle"] == "x" * 60 + "..."
    assert by_type["page"]["url"] == "/noel"
    assert by_type["team"]["url"] == "/equipe"

    assert APIClient().get(reverse("public_search"), {"q": "N"}).data["results"] == []


@pytest.mark.django_db
def test_public_footer_and_home():
    call_command("seed_parish")
    footer = APIClient().get(reverse("public_footer"), {"lang": "pl"}).data
    assert [s["section"] for s in footer["sections"]] == ["quick", "legal"]
    assert footer["sections"][0]["links"][0]["label"] == "Godziny Mszy"
    assert len(footer["social_links"]) == 3

    home = APIClient().get(reverse("public_home")).data
    assert home["schedules"][0]["day_of_week"] == "Mardi"
    assert home["articles"] == []


@pytest.mark.django_db
def test_seed_is_idempotent():
    call_command("seed_parish")
    counts = (MassSchedule.objects.count(), Page.objects.count(), SocialLink.objects.count(), FooterLink.objects.count())
    call_command("seed_parish")
    assert counts == (8, 3, 3, 9)
    assert (MassSchedule.objects.count(), Page.objects.count(), SocialLink.objects.count(), FooterLink.objects.count()) == counts
    assert APIClient().get(reverse("public_page_detail", args=["cookies"])).data["title"] == "Gestion des cookies"
