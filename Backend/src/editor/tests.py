import io

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from PIL import Image
from rest_framework.test import APIClient

from common import storage
from common.exceptions import EmbedNotRecognized
from editor.embeds import audio_block, drive_embed, podcast_embed, video_embed
from editor.images import compress_image
from editor.sanitize import sanitize_html
from users.models import User, UserRole


def png_bytes(size=(1600, 1200), fmt="PNG"):
    buffer = io.BytesIO()
    Image.new("RGB", size, (200, 30, 30)).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def editor_client(db):
    user = User.objects.create_user(username="ed@paroisse.fr", email="ed@paroisse.fr", password="x")
    UserRole.objects.create(user=user, role=UserRole.EDITOR)
    client = APIClient()
    client.force_authenticate(user)
    return client


# --- filtrage HTML ---

def test_sanitize_strips_script_and_keeps_trusted_iframe():
    dirty = (
        "<p>Bonjour<script>alert('x')</script></p>"
        '<iframe src="https://www.youtube.com/embed/dQw4w9WgXcQ" allowfullscreen></iframe>'
        '<iframe src="https://evil.example.com/embed/1"><p>repli</p></iframe>'
    )
    clean = sanitize_html(dirty)
    assert "<script" not in clean and "alert" not in clean
    assert '<iframe src="https://www.youtube.com/embed/dQw4w9WgXcQ" allowfullscreen></iframe>' in clean
    assert "evil.example.com" not in clean
    assert "repli" not in clean
    assert clean.startswith("<p>Bonjour</p>")


def test_sanitize_rejects_lookalike_domains():
    clean = sanitize_html('<iframe src="https://youtube.com.evil.net/embed/x"></iframe>')
    assert clean == ""
    clean = sanitize_html('<iframe src="https://player.vimeo.com/video/1"></iframe>')
    assert "player.vimeo.com" in clean


def test_sanitize_drops_unknown_tags_but_keeps_text():
    assert sanitize_html("<p><font color='red'>rouge</font></p>") == "<p>rouge</p>"
    assert sanitize_html("<style>p{}</style><p>ok</p>") == "<p>ok</p>"


def test_sanitize_attributes_and_urls():
    clean = sanitize_html('<a href="javascript:alert(1)" onclick="x()">lien</a>')
    assert clean == "<a>lien</a>"
    clean = sanitize_html('<a href="https://paroisse.fr" target="_blank">site</a>')
    assert 'rel="noopener noreferrer"' in clean
    clean = sanitize_html('<img src="/media/a.webp" data-align="center" onerror="x()">')
    assert clean == '<img src="/media/a.webp" data-align="center">'


def test_sanitize_closes_unclosed_tags():
    assert sanitize_html("<p><strong>gras") == "<p><strong>gras</strong></p>"
    assert sanitize_html("<ul><li>a<li>b</ul>") == "<ul><li>a<li>b</li></li></ul>"


def test_sanitize_void_tags_do_not_swallow_following_content():
    assert sanitize_html('<p>avant</p><embed src="x.swf"><p>important</p>') == "<p>avant</p><p>important</p>"
    clean = sanitize_html('<object data="x"><param name="a" value="b"><p>repli</p></object><p>suite</p>')
    assert clean == "<p>suite</p>"
    assert sanitize_html("<script><br><hr></script><p>fin</p>") == "<p>fin</p>"


def test_sanitize_keeps_svg_case_and_audio_block():
    clean = sanitize_html(drive_embed("https://drive.google.com/file/d/1AbCdEfGhIjKlMnOpQrStUvWxYz012345/view"))
    assert 'viewBox="0 0 24 24"' in clean
    assert "<polyline" in clean

    block = audio_block("https://cdn.example/audio/homelie.mp3", "Homélie")
    assert sanitize_html(block) == block


# --- embeds ---

def test_video_embeds():
    assert "https://www.youtube.com/embed/dQw4w9WgXcQ" in video_embed("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    assert "https://www.youtube.com/embed/dQw4w9WgXcQ" in video_embed("https://youtu.be/dQw4w9WgXcQ")
    assert "https://player.vimeo.com/video/76979871" in video_embed("https://vimeo.com/76979871")
    with pytest.raises(EmbedNotRecognized) as exc:
        video_embed("https://dailymotion.com/video/x1")
    assert str(exc.value.detail) == "URL de vidéo non reconnue (YouTube ou Vimeo)"


def test_podcast_embeds():
    assert "https://open.spotify.com/embed/episode/4rOoJ6Egrf8K2IrywzwOMk" in podcast_embed(
        "https://open.spotify.com/episode/4rOoJ6Egrf8K2IrywzwOMk?si=abc"
    )
    assert "https://embed.podcasts.apple.com/fr/podcast/x/id123" in podcast_embed("https://podcasts.apple.com/fr/podcast/x/id123")
    assert "w.soundcloud.com/player/?url=https%3A%2F%2Fsoundcloud.com%2Fparoisse%2Fhomelie" in podcast_embed(
        "https://soundcloud.com/paroisse/homelie"
    )
    assert "https://widget.deezer.com/widget/dark/episode/123456" in podcast_embed("https://www.deezer.com/fr/episode/123456")
    with pytest.raises(EmbedNotRecognized):
        podcast_embed("https://example.com/podcast")


def test_drive_embed_rejects_invalid_url():
    with pytest.raises(EmbedNotRecognized) as exc:
        drive_embed("https://drive.google.com/court", lang="pl")
    assert str(exc.value.detail) == "Nieprawidłowy adres Google Drive"


# --- images ---

def test_compress_image_bounds_and_webp():
    upload = SimpleUploadedFile("photo.png", png_bytes(), content_type="image/png")
    content, ext, content_type = compress_image(upload)
    assert (ext, content_type) == ("webp", "image/webp")
    with Image.open(io.BytesIO(content.read())) as img:
        assert img.format == "WEBP"
        assert img.size == (800, 600)


def test_compress_image_keeps_gif():
    raw = png_bytes((10, 10), fmt="GIF")
    content, ext, content_type = compress_image(SimpleUploadedFile("a.gif", raw, content_type="image/gif"))
    assert ext == "gif" and content.read() == raw


# --- endpoints ---

@pytest.mark.django_db
def test_editor_endpoints_require_login():
    assert APIClient().post(reverse("editor_preview"), {"html": "<p>x</p>"}, format="json").status_code == 401


def test_editor_image_upload(editor_client):
    upload = SimpleUploadedFile("Vitrail Nord.png", png_bytes(), content_type="image/png")
    r = editor_client.post(reverse("editor_image_upload"), {"file": upload}, format="multipart")
    assert r.status_code == 201, r.content
    assert r.data["path"].startswith("articles/") and r.data["path"].endswith("-Vitrail_Nord.webp")
    assert r.data["html"].startswith('<img src="http://localhost:8000/media/media/articles/')
    storage.remove("media", [r.data["path"]])


def test_editor_image_upload_rejects_large_and_non_images(editor_client, settings):
    r = editor_client.post(
        reverse("editor_image_upload"),
        {"file": SimpleUploadedFile("doc.pdf", b"%PDF", content_type="application/pdf")},
        format="multipart",
    )
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == "Seules les images sont acceptées"

    settings.EDITOR_IMAGE_MAX_BYTES = 10
    r = editor_client.post(
        reverse("editor_image_upload"),
        {"file": SimpleUploadedFile("a.png", png_bytes((20, 20)), content_type="image/png")},
        format="multipart",
    )
    assert r.status_code == 400
    assert r.json()["error"]["detail"] == "Image trop volumineuse (max 5Mo)"


def test_editor_image_upload_rejects_oversized_dimensions(editor_client, monkeypatch):
    # 64x64 depasse deux fois la limite de pixels -> DecompressionBombError
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
    upload = SimpleUploadedFile("bombe.png", png_bytes((64, 64)), content_type="image/png")
    r = editor_client.post(reverse("editor_image_upload"), {"file": upload}, format="multipart")
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "upload_rejected"
    assert r.json()["error"]["detail"] == "Image illisible"


def test_form_image_upload_uses_folder(editor_client):
    upload = SimpleUploadedFile("pretre.jpg", png_bytes((50, 50), fmt="JPEG"), content_type="image/jpeg")
    r = editor_client.post(reverse("form_image_upload"), {"file": upload, "folder": "team"}, format="multipart")
    assert r.status_code == 201, r.content
    assert r.data["path"].startswith("team/") and r.data["path"].endswith("-pretre.jpg")
    storage.remove("media", [r.data["path"]])


def test_embed_and_preview_endpoints(editor_client):
    r = editor_client.post(reverse("editor_embed"), {"kind": "video", "url": "https://youtu.be/dQw4w9WgXcQ"}, format="json")
    assert r.status_code == 200
    assert "youtube.com/embed/dQw4w9WgXcQ" in r.data["html"]

    r = editor_client.post(reverse("editor_embed"), {"kind": "podcast", "url": "https://example.com"}, format="json")
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "embed_not_recognized"

    r = editor_client.post(reverse("editor_preview"), {"html": "<p onclick='x'>a<script>b</script></p>"}, format="json")
    assert r.data["html"] == "<p>a</p>"


def test_editor_config_language(editor_client):
    r = editor_client.get(reverse("editor_config"), {"lang": "pl"})
    assert r.data["attributes"] == {"spellcheck": "true", "lang": "pl"}
    assert r.data["heading_levels"] == [1, 2, 3]
