from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from common.i18n import localized, message, resolve_language
from common.utils import blank_to_none, missing_required
from editor.sanitize import sanitize_html
from .models import Article, AudioFile, FooterLink, MassSchedule, Page, SocialLink, TeamMember


# ---------------------------------------------------------------------------
# Back-office
# ---------------------------------------------------------------------------

class AdminSerializer(serializers.ModelSerializer):
    """
    Base des formulaires d'administration.

    - required_fields: verifies ensemble dans validate(), un seul message localise
      ("<message_key>.required") et aucune ecriture si un champ manque
    - rich_text_fields: HTML filtre avant enregistrement
    - les chaines optionnelles vides sont stockees a NULL
    - unique_messages: champ unique -> suffixe du message localise (slug deja pris)
    """
    message_key = None
    required_fields = ()
    rich_text_fields = ()
    unique_messages = {}

    def get_fields(self):
        fields = super().get_fields()
        for name in self.required_fields:
            field = fields[name]
            field.required = False
            field.allow_null = True
            if hasattr(field, "allow_blank"):
                field.allow_blank = True
        for name, suffix in self.unique_messages.items():
            for validator in fields[name].validators:
                if isinstance(validator, UniqueValidator):
                    validator.message = message(f"{self.message_key}.{suffix}", self._lang())
        return fields

    def _lang(self):
        return resolve_language(self.context.get("request"))

    def validate(self, attrs):
        sources = [self.fields[name].source for name in self.required_fields]
        if missing_required(attrs, self.instance, sources):
            raise serializers.ValidationError(message(f"{self.message_key}.required", self._lang()))

        optional = [
            f.source for name, f in self.fields.items()
            if isinstance(f, serializers.CharField) and not f.read_only and name not in self.required_fields
        ]
        blank_to_none(attrs, optional)

        for name in self.rich_text_fields:
            if attrs.get(name):
                attrs[name] = sanitize_html(attrs[name])
        return attrs


class ArticleAdminSerializer(AdminSerializer):
    message_key = "article"
    required_fields = ("title", "slug")
    rich_text_fields = ("content", "content_fr", "content_pl")
    unique_messages = {"slug": "slug_taken"}

    class Meta:
        model = Article
        fields = "__all__"
        read_only_fields = ["id", "created_at", "updated_at"]


class PageAdminSerializer(AdminSerializer):
    message_key = "page"
    required_fields = ("title", "slug")
    rich_text_fields = ("content", "content_fr", "content_pl")
    unique_messages = {"slug": "slug_taken"}

    class Meta:
        model = Page
        fields = "__all__"
        read_only_fields = ["id", "created_at", "updated_at"]


class TeamMemberAdminSerializer(AdminSerializer):
    message_key = "team"
    required_fields = ("name", "role", "category")

    class Meta:
        model = TeamMember
        fields = "__all__"
        read_only_fields = ["id", "created_at", "updated_at"]


class ScheduleAdminSerializer(AdminSerializer):
    message_key = "schedule"
    required_fields = ("day_of_week", "time")

    class Meta:
        model = MassSchedule
        exclude = ["is_special", "special_date"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate(self, attrs):
        attrs = super().validate(attrs)
        attrs["is_special"] = False
        return attrs


class EventAdminSerializer(AdminSerializer):
    """
    Evenement ponctuel: une ligne MassSchedule avec is_special=True.
    Le titre est porte par day_of_week; les champs de base reprennent le francais.
    """
    message_key = "event"
    required_fields = ("title_fr", "time", "special_date")

    title_fr = serializers.CharField(source="day_of_week_fr", max_length=255)
    title_pl = serializers.CharField(source="day_of_week_pl", max_length=255, required=False, allow_null=True, allow_blank=True)
    title = serializers.CharField(source="day_of_week", read_only=True)

    class Meta:
        model = MassSchedule
        fields = [
            "id", "title", "title_fr", "title_pl", "time", "special_date",
            "location", "location_fr", "location_pl",
            "description", "description_fr", "description_pl",
            "active", "sort_order", "language", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "location", "description", "created_at", "updated_at"]

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if "day_of_week_fr" in attrs:
            attrs["day_of_week"] = attrs["day_of_week_fr"]
        if "location_fr" in attrs:
            attrs["location"] = attrs["location_fr"]
        if "description_fr" in attrs:
            attrs["description"] = attrs["description_fr"]
        attrs["is_special"] = True
        return attrs


class AudioFileAdminSerializer(AdminSerializer):
    message_key = "audio"
    required_fields = ("title", "file_url")

    class Meta:
        model = AudioFile
        fields = "__all__"
        read_only_fields = ["id", "created_at", "updated_at"]


class SocialLinkAdminSerializer(AdminSerializer):
    message_key = "social"
    required_fields = ("name", "url")

    class Meta:
        model = SocialLink
        fields = "__all__"
        read_only_fields = ["id", "created_at", "updated_at"]


class FooterLinkAdminSerializer(AdminSerializer):
    message_key = "footer"
    required_fields = ("label", "url")

    class Meta:
        model = FooterLink
        fields = "__all__"
        read_only_fields = ["id", "created_at", "updated_at"]


# ---------------------------------------------------------------------------
# Lecture publique (langue choisie, repli fr puis base)
# ---------------------------------------------------------------------------

class LocalizedField(serializers.Field):
    """Valeur du champ dans la langue du contexte, avec repli."""

    def __init__(self, base, rich_text=False, **kwargs):
        kwargs["source"] = "*"
        kwargs["read_only"] = True
        super().__init__(**kwargs)
        self.base = base
        self.rich_text = rich_text

    def to_representation(self, obj):
        value = localized(obj, self.base, self.context.get("lang", "fr"))
        if self.rich_text:
            return sanitize_html(value)
        return value


class ArticleListSerializer(serializers.ModelSerializer):
    title = LocalizedField("title")
    excerpt = LocalizedField("excerpt")

    class Meta:
        model = Article
        fields = ["id", "slug", "title", "excerpt", "image_url", "category", "created_at"]


class ArticleDetailSerializer(ArticleListSerializer):
    content = LocalizedField("content", rich_text=True)

    class Meta(ArticleListSerializer.Meta):
        fields = ArticleListSerializer.Meta.fields + ["content", "updated_at"]


class PageSerializer(serializers.ModelSerializer):
    title = LocalizedField("title")
    content = LocalizedField("content", rich_text=True)
    meta_title = LocalizedField("meta_title")
    meta_description = LocalizedField("meta_description")

    class Meta:
        model = Page
        fields = ["id", "slug", "title", "content", "meta_title", "meta_description", "updated_at"]


class TeamMemberSerializer(serializers.ModelSerializer):
    name = LocalizedField("name")
    role = LocalizedField("role")
    bio = LocalizedField("bio")

    class Meta:
        model = TeamMember
        fields = ["id", "name", "role", "category", "photo_url", "email", "phone", "bio"]


class ScheduleSerializer(serializers.ModelSerializer):
    day_of_week = LocalizedField("day_of_week")
    location = LocalizedField("location")
    description = LocalizedField("description")

    class Meta:
        model = MassSchedule
        fields = ["id", "day_of_week", "time", "location", "description", "language"]


class EventSerializer(serializers.ModelSerializer):
    title = LocalizedField("day_of_week")
    location = LocalizedField("location")
    description = LocalizedField("description")

    class Meta:
        model = MassSchedule
        fields = ["id", "title", "special_date", "time", "location", "description", "language"]


class AudioFileSerializer(serializers.ModelSerializer):
    title = LocalizedField("title")

    class Meta:
        model = AudioFile
        fields = ["id", "title", "file_url", "file_size", "duration"]


class SocialLinkSerializer(serializers.ModelSerializer):
    class Meta:
        model = SocialLink
        fields = ["id", "name", "icon", "url"]


class FooterLinkSerializer(serializers.ModelSerializer):
    label = LocalizedField("label")

    class Meta:
        model = FooterLink
        fields = ["id", "label", "url", "section"]
