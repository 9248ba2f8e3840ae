import pytest
from django.core import mail
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework.test import APIClient

from common import storage
from contact.models import ContactMessage, NewsletterSubscriber
from users.models import User, UserRole


@pytest.fixture
def editor_client(db):
    user = User.objects.create_user(username="ed@paroisse.fr", email="ed@paroisse.fr", password="x")
    UserRole.objects.create(user=user, role=UserRole.EDITOR)
    client = APIClient()
    client.force_authenticate(user)
    return client


def form(**extra):
    data = {
        "name": "Jeanne Martin",
        "email": "Jeanne@Example.com",
        "subject": "Baptême",
        "message": "Bonjour, je souhaite baptiser mon fils.",
        "rgpd": True,
    }
    data.update(extra)
    return data


@pytest.mark.django_db
def test_contact_requires_consent():
    r = APIClient().post(reverse("public_contact"), form(rgpd=False), format="json")
    assert r.status_code == 400
    assert r.json()["error"]["detail"].startswith("Consentement requis")
    assert ContactMessage.objects.count() == 0


@pytest.mark.django_db
def test_contact_requires_all_fields():
    r = APIClient().post(reverse("public_contact"), form(subject=""), format="json")
    assert r.status_code == 400
    assert ContactMessage.objects.count() == 0


@pytest.mark.django_db
def test_contact_saves_message_and_notifies(django_capture_on_commit_callbacks, settings):
    settings.PARISH_CONTACT_EMAIL = "secretariat@paroisse.fr"
    with django_capture_on_commit_callbacks(execute=True):
        r = APIClient().post(reverse("public_contact"), form(), format="json")
    assert r.status_code == 201, r.content
    assert r.data["detail"].startswith("Message envoyé")

    msg = ContactMessage.objects.get()
    assert msg.email == "jeanne@example.com"
    assert msg.read is False
    assert NewsletterSubscriber.objects.count() == 0

    assert len(mail.outbox) == 1
    assert mail.outbox[0].to == ["secretariat@paroisse.fr"]
    assert "Baptême" in mail.outbox[0].subject


@pytest.mark.django_db
def test_newsletter_optin_upserts_subscriber():
    NewsletterSubscriber.objects.create(email="jeanne@example.com", active=False)
    r = APIClient().post(reverse("public_contact") + "?lang=pl", form(newsletter=True), format="json")
    assert r.status_code == 201
    sub = NewsletterSubscriber.objects.get()
    assert sub.active is True
    assert sub.language == "pl"
    assert sub.name == "Jeanne Martin"


@pytest.mark.django_db
def test_contact_with_attachment(settings):
    upload = SimpleUploadedFile("certificat.pdf", b"%PDF-1.4", content_type="application/pdf")
    r = APIClient().post(reverse("public_contact"), form(attachment=upload, rgpd="true"), format="multipart")
    assert r.status_code == 201, r.content
    msg = ContactMessage.objects.get()
    assert msg.attachment_name == "certificat.pdf"
    assert msg.attachment_size == 8
    path = storage.path_from_public_url("attachments", msg.attachment_url)
    assert path.endswith("-certificat.pdf")

    settings.ATTACHMENT_MAX_BYTES = 4
    upload = SimpleUploadedFile("gros.pdf", b"%PDF-1.4", content_type="application/pdf")
    r = APIClient().post(reverse("public_contact"), form(attachment=upload, rgpd="true"), format="multipart")
    assert r.status_code == 400
    assert ContactMessage.objects.count() == 1


def test_admin_messages_read_flow(editor_client):
    first = ContactMessage.objects.create(name="A", email="a@a.fr", subject="S1", message="M1")
    ContactMessage.objects.create(name="B", email="b@b.fr", subject="S2", message="M2")

    rows = editor_client.get(reverse("admin-messages-list")).data
    assert [row["subject"] for row in rows] == ["S2", "S1"]

    r = editor_client.get(reverse("admin-messages-detail", args=[first.pk]))
    assert r.status_code == 200
    first.refresh_from_db()
    assert first.read is True

    r = editor_client.post(reverse("admin-messages-read-all"))
    assert r.data["detail"] == "Tous les messages marqués comme lus"
    assert not ContactMessage.objects.filter(read=False).exists()

    stats = editor_client.get(reverse("admin_stats")).data
    assert stats == {"messages": 2, "unread": 0, "subscribers": 0, "active_subscribers": 0}


def test_admin_message_delete_removes_attachment(editor_client):
    path = storage.upload("attachments", storage.unique_name("note.txt"), SimpleUploadedFile("note.txt", b"x"))
    msg = ContactMessage.objects.create(
        name="A", email="a@a.fr", subject="S", message="M",
        attachment_url=storage.public_url("attachments", path), attachment_name="note.txt",
    )
    r = editor_client.delete(reverse("admin-messages-detail", args=[msg.pk]))
    assert r.status_code == 200
    assert r.data["detail"] == "Message supprimé"
    assert not ContactMessage.objects.exists()
    assert storage.remove("attachments", [path]) == 0


def test_messages_csv_export(editor_client):
    ContactMessage.objects.create(name="Jeanne", email="j@p.fr", subject="Mariage", message='Il a dit "oui"; merci',
                                  newsletter_optin=True)
    r = editor_client.get(reverse("admin-messages-export"))
    assert r.status_code == 200
    assert r["Content-Type"].startswith("text/csv")
    assert r["Content-Disposition"].startswith('attachment; filename="messages_')
    body = r.content.decode("utf-8")
    assert body.startswith("\ufeffDate;Nom;Email;Sujet;Message;Newsletter;Lu\n")
    assert '"Il a dit ""oui""; merci";Oui;Non' in body


def test_subscribers_toggle_delete_and_export(editor_client):
    sub = NewsletterSubscriber.objects.create(email="p@p.fr", name="Piotr", language="pl")

    r = editor_client.post(reverse("admin-subscribers-toggle", args=[sub.pk]))
    assert r.data["detail"] == "Abonné désactivé"
    sub.refresh_from_db()
    assert sub.active is False

    body = editor_client.get(reverse("admin-subscribers-export")).content.decode("utf-8")
    assert "p@p.fr;Piotr;pl;Non" in body

    r = editor_client.delete(reverse("admin-subscribers-detail", args=[sub.pk]))
    assert r.status_code == 200
    assert editor_client.get(reverse("admin-subscribers-list")).data == []


@pytest.mark.django_db
def test_admin_inbox_is_restricted():
    assert APIClient().get(reverse("admin-messages-list")).status_code == 401
