"""
Langue de la requete, repli de langue des champs bilingues et catalogue
des messages de confirmation / d'erreur (les "toasts" du back-office).
"""
from typing import Any, Optional

from django.conf import settings

FR = "fr"
PL = "pl"


def resolve_language(request) -> str:
    """?lang= d'abord, puis Accept-Language. Tout ce qui commence par "pl" est polonais."""
    raw = ""
    if request is not None:
        params = getattr(request, "query_params", None) or getattr(request, "GET", {})
        raw = params.get("lang") or request.META.get("HTTP_ACCEPT_LANGUAGE", "")
    return PL if raw.strip().lower().startswith(PL) else getattr(settings, "PARISH_DEFAULT_LANGUAGE", FR)


def _read(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _filled(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def localized(obj: Any, field: str, lang: str) -> Any:
    """
    pl -> field_pl si renseigne, sinon field_fr, sinon field.
    fr -> field_fr si renseigne, sinon field.
    """
    if lang == PL:
        value = _read(obj, f"{field}_pl")
        if _filled(value):
            return value
    value = _read(obj, f"{field}_fr")
    if _filled(value):
        return value
    return _read(obj, field)


MESSAGES = {
    # generiques
    "error": {"fr": "Une erreur est survenue", "pl": "Wystąpił błąd"},
    "restricted": {
        "fr": "Accès restreint. Vous n'avez pas les droits nécessaires pour accéder à cette page.",
        "pl": "Dostęp ograniczony. Nie masz uprawnień do tej strony.",
    },
    "toggle_on": {"fr": "Activé", "pl": "Aktywowano"},
    "toggle_off": {"fr": "Désactivé", "pl": "Dezaktywowano"},

    # articles
    "article.required": {"fr": "Titre et slug requis", "pl": "Tytuł i slug są wymagane"},
    "article.created": {"fr": "Article créé", "pl": "Artykuł utworzony"},
    "article.updated": {"fr": "Article mis à jour", "pl": "Artykuł zaktualizowany"},
    "article.deleted": {"fr": "Article supprimé", "pl": "Artykuł usunięty"},
    "article.toggle_on": {"fr": "Article publié", "pl": "Artykuł opublikowany"},
    "article.toggle_off": {"fr": "Article dépublié", "pl": "Artykuł wycofany"},
    "article.slug_taken": {"fr": "Ce slug est déjà utilisé", "pl": "Ten slug jest już używany"},

    # pages
    "page.required": {"fr": "Titre et slug requis", "pl": "Tytuł i slug są wymagane"},
    "page.created": {"fr": "Page créée", "pl": "Strona utworzona"},
    "page.updated": {"fr": "Page mise à jour", "pl": "Strona zaktualizowana"},
    "page.deleted": {"fr": "Page supprimée", "pl": "Strona usunięta"},
    "page.toggle_on": {"fr": "Page publiée", "pl": "Strona opublikowana"},
    "page.toggle_off": {"fr": "Page dépubliée", "pl": "Strona wycofana"},
    "page.slug_taken": {"fr": "Ce slug est déjà utilisé", "pl": "Ten slug jest już używany"},

    # equipe
    "team.required": {"fr": "Nom, fonction et catégorie requis", "pl": "Imię, funkcja i kategoria są wymagane"},
    "team.created": {"fr": "Membre ajouté", "pl": "Członek dodany"},
    "team.updated": {"fr": "Membre mis à jour", "pl": "Członek zaktualizowany"},
    "team.deleted": {"fr": "Membre supprimé", "pl": "Członek usunięty"},
    "team.toggle_on": {"fr": "Membre activé", "pl": "Członek aktywowany"},
    "team.toggle_off": {"fr": "Membre désactivé", "pl": "Członek dezaktywowany"},

    # horaires
    "schedule.required": {"fr": "Jour et heure requis", "pl": "Dzień i godzina są wymagane"},
    "schedule.created": {"fr": "Horaire ajouté", "pl": "Godzina dodana"},
    "schedule.updated": {"fr": "Horaire mis à jour", "pl": "Godzina zaktualizowana"},
    "schedule.deleted": {"fr": "Horaire supprimé", "pl": "Godzina usunięta"},
    "schedule.toggle_on": {"fr": "Horaire activé", "pl": "Godzina aktywowana"},
    "schedule.toggle_off": {"fr": "Horaire désactivé", "pl": "Godzina dezaktywowana"},

    # evenements
    "event.required": {"fr": "Titre, heure et date requis", "pl": "Tytuł, godzina i data są wymagane"},
    "event.created": {"fr": "Événement ajouté", "pl": "Wydarzenie dodane"},
    "event.updated": {"fr": "Événement mis à jour", "pl": "Wydarzenie zaktualizowane"},
    "event.deleted": {"fr": "Événement supprimé", "pl": "Wydarzenie usunięte"},
    "event.toggle_on": {"fr": "Événement activé", "pl": "Wydarzenie aktywowane"},
    "event.toggle_off": {"fr": "Événement désactivé", "pl": "Wydarzenie dezaktywowane"},

    # audio
    "audio.required": {"fr": "Le titre et le fichier audio sont requis", "pl": "Tytuł i plik audio są wymagane"},
    "audio.created": {"fr": "Fichier audio créé", "pl": "Plik audio utworzony"},
    "audio.updated": {"fr": "Fichier audio mis à jour", "pl": "Plik audio zaktualizowany"},
    "audio.deleted": {"fr": "Fichier audio supprimé", "pl": "Plik audio usunięty"},
    "audio.toggle_on": {"fr": "Fichier audio activé", "pl": "Plik audio aktywowany"},
    "audio.toggle_off": {"fr": "Fichier audio désactivé", "pl": "Plik audio dezaktywowany"},
    "audio.uploaded": {"fr": "Fichier téléchargé", "pl": "Plik przesłany"},
    "audio.bad_type": {
        "fr": "Format audio non supporté (MP3, WAV, OGG, M4A)",
        "pl": "Nieobsługiwany format audio (MP3, WAV, OGG, M4A)",
    },
    "audio.too_large": {"fr": "Fichier trop volumineux (max 50Mo)", "pl": "Plik jest za duży (maks. 50 MB)"},

    # liens
    "social.required": {"fr": "Nom et URL requis", "pl": "Nazwa i URL są wymagane"},
    "social.created": {"fr": "Lien ajouté", "pl": "Link dodany"},
    "social.updated": {"fr": "Lien mis à jour", "pl": "Link zaktualizowany"},
    "social.deleted": {"fr": "Lien supprimé", "pl": "Link usunięty"},
    "social.toggle_on": {"fr": "Lien activé", "pl": "Link aktywowany"},
    "social.toggle_off": {"fr": "Lien désactivé", "pl": "Link dezaktywowany"},
    "footer.required": {"fr": "Libellé et URL requis", "pl": "Etykieta i URL są wymagane"},
    "footer.created": {"fr": "Lien ajouté", "pl": "Link dodany"},
    "footer.updated": {"fr": "Lien mis à jour", "pl": "Link zaktualizowany"},
    "footer.deleted": {"fr": "Lien supprimé", "pl": "Link usunięty"},
    "footer.toggle_on": {"fr": "Lien activé", "pl": "Link aktywowany"},
    "footer.toggle_off": {"fr": "Lien désactivé", "pl": "Link dezaktywowany"},

    # messages / newsletter
    "contact.required": {"fr": "Veuillez remplir tous les champs obligatoires.", "pl": "Wypełnij wszystkie wymagane pola."},
    "contact.consent": {
        "fr": "Consentement requis : veuillez accepter la politique de confidentialité.",
        "pl": "Wymagana zgoda: zaakceptuj politykę prywatności.",
    },
    "contact.sent": {
        "fr": "Message envoyé ! Nous vous répondrons dans les plus brefs délais.",
        "pl": "Wiadomość wysłana! Odpowiemy najszybciej, jak to możliwe.",
    },
    "contact.attachment_too_large": {"fr": "Pièce jointe trop volumineuse (max 10Mo)", "pl": "Załącznik jest za duży (maks. 10 MB)"},
    "contact.attachment_bad_type": {"fr": "Type de pièce jointe non accepté", "pl": "Nieobsługiwany typ załącznika"},
    "message.read": {"fr": "Message marqué comme lu", "pl": "Wiadomość oznaczona jako przeczytana"},
    "message.read_all": {"fr": "Tous les messages marqués comme lus", "pl": "Wszystkie wiadomości oznaczone jako przeczytane"},
    "message.deleted": {"fr": "Message supprimé", "pl": "Wiadomość usunięta"},
    "subscriber.deleted": {"fr": "Abonné supprimé", "pl": "Subskrybent usunięty"},
    "subscriber.toggle_on": {"fr": "Abonné activé", "pl": "Subskrybent aktywowany"},
    "subscriber.toggle_off": {"fr": "Abonné désactivé", "pl": "Subskrybent dezaktywowany"},

    # editeur
    "image.not_image": {"fr": "Seules les images sont acceptées", "pl": "Akceptowane są tylko obrazy"},
    "image.too_large": {"fr": "Image trop volumineuse (max 5Mo)", "pl": "Obraz jest za duży (maks. 5 MB)"},
    "image.bad_type": {"fr": "Format d'image non supporté (JPEG, PNG, WEBP, GIF)", "pl": "Nieobsługiwany format obrazu (JPEG, PNG, WEBP, GIF)"},
    "image.unreadable": {"fr": "Image illisible", "pl": "Nie można odczytać obrazu"},
    "image.uploaded": {"fr": "Image téléchargée", "pl": "Obraz przesłany"},
    "embed.video": {"fr": "URL de vidéo non reconnue (YouTube ou Vimeo)", "pl": "Nierozpoznany adres wideo (YouTube lub Vimeo)"},
    "embed.podcast": {
        "fr": "URL de podcast non reconnue (Spotify, Apple Podcasts, SoundCloud, Deezer)",
        "pl": "Nierozpoznany adres podcastu (Spotify, Apple Podcasts, SoundCloud, Deezer)",
    },
    "embed.drive": {"fr": "URL Google Drive non valide", "pl": "Nieprawidłowy adres Google Drive"},
    "embed.audio": {"fr": "URL audio requise", "pl": "Adres audio jest wymagany"},
    "embed.kind": {"fr": "Type d'intégration inconnu", "pl": "Nieznany typ osadzenia"},

    # comptes
    "auth.bad_credentials": {"fr": "Email ou mot de passe incorrect.", "pl": "Nieprawidłowy email lub hasło."},
    "auth.registered": {"fr": "Compte créé", "pl": "Konto utworzone"},
    "auth.logged_out": {"fr": "Déconnecté", "pl": "Wylogowano"},
    "auth.password_changed": {"fr": "Mot de passe modifié", "pl": "Hasło zmienione"},
    "auth.bad_password": {"fr": "Ancien mot de passe incorrect", "pl": "Nieprawidłowe stare hasło"},
    "role.granted": {"fr": "Rôle attribué", "pl": "Rola przypisana"},
    "role.revoked": {"fr": "Rôle retiré", "pl": "Rola odebrana"},
    "role.unknown_user": {"fr": "Utilisateur introuvable", "pl": "Nie znaleziono użytkownika"},
}


def message(key: str, lang: Optional[str] = None, **params) -> str:
    entry = MESSAGES.get(key) or MESSAGES["error"]
    text = entry.get(lang or FR) or entry[FR]
    return text.format(**params) if params else text
