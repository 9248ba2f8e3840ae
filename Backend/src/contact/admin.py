from django.contrib import admin

from .models import ContactMessage, NewsletterSubscriber


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ("created_at", "name", "email", "subject", "newsletter_optin", "read")
    list_filter = ("read", "newsletter_optin")
    search_fields = ("name", "email", "subject")


@admin.register(NewsletterSubscriber)
class NewsletterSubscriberAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "language", "active", "created_at")
    list_filter = ("active", "language")
