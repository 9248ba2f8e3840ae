import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail

from .models import ContactMessage

logger = logging.getLogger(__name__)


@shared_task
def notify_new_message(message_id: int) -> bool:
    """E-mail au secretariat pour chaque nouveau message du formulaire de contact."""
    msg = ContactMessage.objects.filter(pk=message_id).first()
    if msg is None:
        logger.warning("notify_new_message: message %s introuvable", message_id)
        return False

    lines = [
        f"Nom : {msg.name}",
        f"Email : {msg.email}",
        f"Sujet : {msg.subject}",
        f"Newsletter : {'Oui' if msg.newsletter_optin else 'Non'}",
        "",
        msg.message,
    ]
    if msg.attachment_url:
        lines += ["", f"Pièce jointe : {msg.attachment_name} ({msg.attachment_url})"]

    send_mail(
        subject=f"[Site paroisse] {msg.subject}",
        message="\n".join(lines),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[settings.PARISH_CONTACT_EMAIL],
    )
    logger.info("Notification envoyee pour le message %s", msg.pk)
    return True
