"""
Contenus editoriaux du site paroissial.

Chaque texte visible existe en trois variantes: le champ de base, `_fr`
et `_pl`. La lecture publique choisit la variante via common.i18n.localized.
"""
from django.db import models

from common.models import SortableModel, TimeStampedModel


class Article(TimeStampedModel):
    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255, null=True, blank=True)
    title_pl = models.CharField(max_length=255, null=True, blank=True)
    slug = models.SlugField(max_length=255, unique=True)
    content = models.TextField(null=True, blank=True)
    content_fr = models.TextField(null=True, blank=True)
    content_pl = models.TextField(null=True, blank=True)
    excerpt = models.TextField(null=True, blank=True)
    excerpt_fr = models.TextField(null=True, blank=True)
    excerpt_pl = models.TextField(null=True, blank=True)
    image_url = models.URLField(max_length=500, null=True, blank=True)
    category = models.CharField(max_length=100, null=True, blank=True)
    published = models.BooleanField(default=False)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title


class Page(TimeStampedModel):
    """Page libre (dont les pages legales: mentions-legales, confidentialite, cookies)."""

    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255, null=True, blank=True)
    title_pl = models.CharField(max_length=255, null=True, blank=True)
    slug = models.SlugField(max_length=255, unique=True)
    content = models.TextField(null=True, blank=True)
    content_fr = models.TextField(null=True, blank=True)
    content_pl = models.TextField(null=True, blank=True)
    meta_title = models.CharField(max_length=255, null=True, blank=True)
    meta_title_fr = models.CharField(max_length=255, null=True, blank=True)
    meta_title_pl = models.CharField(max_length=255, null=True, blank=True)
    meta_description = models.TextField(null=True, blank=True)
    meta_description_fr = models.TextField(null=True, blank=True)
    meta_description_pl = models.TextField(null=True, blank=True)
    published = models.BooleanField(default=True)

    class Meta:
        ordering = ["title"]

    def __str__(self) -> str:
        return self.title


class TeamMember(SortableModel, TimeStampedModel):
    PRIESTS = "priests"
    TEAM = "team"
    SERVICES = "services"
    SECRETARIAT = "secretariat"
    CHOIR = "choir"
    CATEGORY_CHOICES = [
        (PRIESTS, "Prêtres"),
        (TEAM, "Équipe animatrice"),
        (SERVICES, "Services"),
        (SECRETARIAT, "Secrétariat"),
        (CHOIR, "Chorale"),
    ]

    name = models.CharField(max_length=255)
    name_fr = models.CharField(max_length=255, null=True, blank=True)
    name_pl = models.CharField(max_length=255, null=True, blank=True)
    role = models.CharField(max_length=255)
    role_fr = models.CharField(max_length=255, null=True, blank=True)
    role_pl = models.CharField(max_length=255, null=True, blank=True)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    photo_url = models.URLField(max_length=500, null=True, blank=True)
    email = models.EmailField(null=True, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    bio = models.TextField(null=True, blank=True)
    bio_fr = models.TextField(null=True, blank=True)
    bio_pl = models.TextField(null=True, blank=True)
    active = models.BooleanField(default=True)

    class Meta:
        ordering = ["category", "sort_order"]

    def __str__(self) -> str:
        return f"{self.name} ({self.role})"


class MassSchedule(SortableModel, TimeStampedModel):
    """
    Horaire de messe regulier, ou evenement ponctuel (is_special=True).
    Pour un evenement, day_of_week porte le titre et special_date la date.
    """

    day_of_week = models.CharField(max_length=255)
    day_of_week_fr = models.CharField(max_length=255, null=True, blank=True)
    day_of_week_pl = models.CharField(max_length=255, null=True, blank=True)
    time = models.TimeField()
    location = models.CharField(max_length=255, null=True, blank=True)
    location_fr = models.CharField(max_length=255, null=True, blank=True)
    location_pl = models.CharField(max_length=255, null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    description_fr = models.TextField(null=True, blank=True)
    description_pl = models.TextField(null=True, blank=True)
    is_special = models.BooleanField(default=False)
    special_date = models.DateField(null=True, blank=True)
    active = models.BooleanField(default=True)
    language = models.CharField(max_length=10, null=True, blank=True)

    class Meta:
        ordering = ["sort_order", "day_of_week"]

    def __str__(self) -> str:
        return f"{self.day_of_week} {self.time:%H:%M}"


class AudioFile(SortableModel, TimeStampedModel):
    title = models.CharField(max_length=255)
    title_fr = models.CharField(max_length=255, null=True, blank=True)
    title_pl = models.CharField(max_length=255, null=True, blank=True)
    file_url = models.URLField(max_length=500)
    file_size = models.BigIntegerField(null=True, blank=True)
    duration = models.IntegerField(null=True, blank=True, help_text="secondes")
    active = models.BooleanField(default=True)

    class Meta:
        ordering = ["sort_order"]

    def __str__(self) -> str:
        return self.title


class SocialLink(SortableModel, TimeStampedModel):
    ICON_CHOICES = [
        ("facebook", "Facebook"),
        ("instagram", "Instagram"),
        ("youtube", "YouTube"),
        ("whatsapp", "WhatsApp"),
        ("flickr", "Flickr"),
        ("twitter", "Twitter / X"),
        ("linkedin", "LinkedIn"),
        ("github", "GitHub"),
        ("website", "Site web"),
    ]

    name = models.CharField(max_length=100)
    icon = models.CharField(max_length=20, choices=ICON_CHOICES, default="website")
    url = models.URLField(max_length=500)
    active = models.BooleanField(default=True)

    class Meta:
        ordering = ["sort_order"]

    def __str__(self) -> str:
        return self.name


class FooterLink(SortableModel, TimeStampedModel):
    QUICK = "quick"
    LEGAL = "legal"
    SECTION_CHOICES = [
        (QUICK, "Liens rapides"),
        (LEGAL, "Mentions"),
    ]

    label = models.CharField(max_length=255)
    label_fr = models.CharField(max_length=255, null=True, blank=True)
    label_pl = models.CharField(max_length=255, null=True, blank=True)
    url = models.CharField(max_length=500)
    section = models.CharField(max_length=20, choices=SECTION_CHOICES, default=QUICK)
    active = models.BooleanField(default=True)

    class Meta:
        ordering = ["sort_order"]

    def __str__(self) -> str:
        return self.label
