from rest_framework import serializers

from common.i18n import message
from .models import ContactMessage, NewsletterSubscriber


class ContactSubmitSerializer(serializers.Serializer):
    """Formulaire de contact public."""

    REQUIRED = ("name", "email", "subject", "message")

    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    subject = serializers.CharField(max_length=255, required=False, allow_blank=True)
    message = serializers.CharField(required=False, allow_blank=True)
    newsletter = serializers.BooleanField(required=False, default=False)
    rgpd = serializers.BooleanField(required=False, default=False)
    attachment = serializers.FileField(required=False, allow_null=True)

    def validate(self, attrs):
        lang = self.context.get("lang")
        if any(not (attrs.get(name) or "").strip() for name in self.REQUIRED):
            raise serializers.ValidationError(message("contact.required", lang))
        if not attrs.get("rgpd"):
            raise serializers.ValidationError(message("contact.consent", lang))
        return attrs


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = [
            "id", "name", "email", "subject", "message", "newsletter_optin", "read",
            "attachment_url", "attachment_name", "attachment_size", "created_at",
        ]
        read_only_fields = fields


class NewsletterSubscriberSerializer(serializers.ModelSerializer):
    class Meta:
        model = NewsletterSubscriber
        fields = ["id", "email", "name", "language", "active", "created_at"]
        read_only_fields = fields
