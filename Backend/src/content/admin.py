from django.contrib import admin

from .models import Article, AudioFile, FooterLink, MassSchedule, Page, SocialLink, TeamMember


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "category", "published", "created_at")
    list_filter = ("published", "category")
    search_fields = ("title", "title_fr", "title_pl", "slug")
    prepopulated_fields = {"slug": ("title",)}


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "published", "updated_at")
    list_filter = ("published",)
    search_fields = ("title", "slug")


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    list_display = ("name", "role", "category", "sort_order", "active")
    list_filter = ("category", "active")
    search_fields = ("name", "role")


@admin.register(MassSchedule)
class MassScheduleAdmin(admin.ModelAdmin):
    list_display = ("day_of_week", "time", "location", "is_special", "special_date", "active")
    list_filter = ("is_special", "active")


@admin.register(AudioFile)
class AudioFileAdmin(admin.ModelAdmin):
    list_display = ("title", "file_url", "sort_order", "active")


@admin.register(SocialLink)
class SocialLinkAdmin(admin.ModelAdmin):
    list_display = ("name", "icon", "url", "sort_order", "active")


@admin.register(FooterLink)
class FooterLinkAdmin(admin.ModelAdmin):
    list_display = ("label", "url", "section", "sort_order", "active")
    list_filter = ("section",)
