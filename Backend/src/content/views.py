"""Lecture publique du site (/api/public/...), sans authentification."""
from django.db.models import Case, IntegerField, Q, Value, When
from django.db.models.functions import Lower
from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from common.i18n import PL, localized, resolve_language
from common.utils import truncate
from .faq import faq_for
from .models import Article, AudioFile, FooterLink, MassSchedule, Page, SocialLink, TeamMember
from .serializers import (
    ArticleDetailSerializer,
    ArticleListSerializer,
    AudioFileSerializer,
    EventSerializer,
    FooterLinkSerializer,
    PageSerializer,
    ScheduleSerializer,
    SocialLinkSerializer,
    TeamMemberSerializer,
)

WEEKDAYS = ["lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"]

CATEGORY_LABELS_PL = {
    TeamMember.PRIESTS: "Kapłani",
    TeamMember.TEAM: "Zespół duszpasterski",
    TeamMember.SERVICES: "Posługi",
    TeamMember.SECRETARIAT: "Kancelaria",
    TeamMember.CHOIR: "Chór",
}

SECTION_LABELS_PL = {
    FooterLink.QUICK: "Szybkie linki",
    FooterLink.LEGAL: "Informacje prawne",
}

SEARCH_LIMIT = 5
SEARCH_MIN_LENGTH = 2


def _ctx(request):
    return {"request": request, "lang": resolve_language(request)}


def regular_schedules():
    day_index = Case(
        *[When(day_lower=day, then=Value(i)) for i, day in enumerate(WEEKDAYS)],
        default=Value(len(WEEKDAYS)),
        output_field=IntegerField(),
    )
    return (
        MassSchedule.objects.filter(active=True, is_special=False)
        .annotate(day_lower=Lower("day_of_week"))
        .annotate(day_index=day_index)
        .order_by("day_index", "time", "sort_order")
    )


def upcoming_events():
    return MassSchedule.objects.filter(
        active=True, is_special=True, special_date__gte=timezone.localdate()
    ).order_by("special_date", "time")


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def home(request):
    ctx = _ctx(request)
    latest = Article.objects.filter(published=True).order_by("-created_at")[:3]
    return Response({
        "articles": ArticleListSerializer(latest, many=True, context=ctx).data,
        "schedules": ScheduleSerializer(regular_schedules(), many=True, context=ctx).data,
        "events": EventSerializer(upcoming_events(), many=True, context=ctx).data,
        "social_links": SocialLinkSerializer(SocialLink.objects.filter(active=True).order_by("sort_order"), many=True).data,
    })


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def article_list(request):
    qs = Article.objects.filter(published=True).order_by("-created_at")
    category = request.query_params.get("category")
    if category:
        qs = qs.filter(category=category)
    return Response(ArticleListSerializer(qs, many=True, context=_ctx(request)).data)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def article_detail(request, slug):
    article = get_object_or_404(Article, slug=slug, published=True)
    return Response(ArticleDetailSerializer(article, context=_ctx(request)).data)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def page_detail(request, slug):
    page = get_object_or_404(Page, slug=slug, published=True)
    return Response(PageSerializer(page, context=_ctx(request)).data)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def team(request):
    """Membres actifs groupes par categorie, dans l'ordre fixe des categories."""
    ctx = _ctx(request)
    members = list(TeamMember.objects.filter(active=True).order_by("sort_order", "name"))
    groups = []
    for key, label in TeamMember.CATEGORY_CHOICES:
        rows = [m for m in members if m.category == key]
        if not rows:
            continue
        groups.append({
            "category": key,
            "label": CATEGORY_LABELS_PL[key] if ctx["lang"] == PL else label,
            "members": TeamMemberSerializer(rows, many=True, context=ctx).data,
        })
    return Response(groups)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def schedules(request):
    ctx = _ctx(request)
    return Response({
        "regular": ScheduleSerializer(regular_schedules(), many=True, context=ctx).data,
        "events": EventSerializer(upcoming_events(), many=True, context=ctx).data,
    })


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def faq(request):
    return Response(faq_for(resolve_language(request)))


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def audio(request):
    qs = AudioFile.objects.filter(active=True).order_by("sort_order")
    return Response(AudioFileSerializer(qs, many=True, context=_ctx(request)).data)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def footer(request):
    ctx = _ctx(request)
    sections = []
    links = list(FooterLink.objects.filter(active=True).order_by("sort_order"))
    for key, label in FooterLink.SECTION_CHOICES:
        rows = [link for link in links if link.section == key]
        if rows:
            sections.append({
                "section": key,
                "label": SECTION_LABELS_PL[key] if ctx["lang"] == PL else label,
                "links": FooterLinkSerializer(rows, many=True, context=ctx).data,
            })
    return Response({
        "sections": sections,
        "social_links": SocialLinkSerializer(SocialLink.objects.filter(active=True).order_by("sort_order"), many=True).data,
    })


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def search(request):
    """Recherche rapide: 5 articles, 5 pages, 5 membres de l'equipe au plus."""
    q = (request.query_params.get("q") or "").strip()
    if len(q) < SEARCH_MIN_LENGTH:
        return Response({"query": q, "results": []})
    lang = resolve_language(request)
    results = []

    articles = Article.objects.filter(published=True).filter(
        Q(title__icontains=q) | Q(title_fr__icontains=q) | Q(title_pl__icontains=q) | Q(excerpt__icontains=q)
    )[:SEARCH_LIMIT]
    for article in articles:
        results.append({
            "id": article.pk,
            "type": "article",
            "title": localized(article, "title", lang),
            "url": f"/articles/{article.slug}",
            "subtitle": truncate(localized(article, "excerpt", lang)),
        })

    pages = Page.objects.filter(published=True).filter(
        Q(title__icontains=q) | Q(title_fr__icontains=q) | Q(title_pl__icontains=q)
    )[:SEARCH_LIMIT]
    for page in pages:
        results.append({
            "id": page.pk,
            "type": "page",
            "title": localized(page, "title", lang),
            "url": f"/{page.slug}",
            "subtitle": truncate(localized(page, "meta_description", lang)),
        })

    members = TeamMember.objects.filter(active=True).filter(
        Q(name__icontains=q) | Q(name_fr__icontains=q) | Q(name_pl__icontains=q) | Q(role__icontains=q)
    )[:SEARCH_LIMIT]
    for member in members:
        results.append({
            "id": member.pk,
            "type": "team",
            "title": localized(member, "name", lang),
            "url": "/equipe",
            "subtitle": truncate(localized(member, "role", lang)),
        })

    return Response({"query": q, "results": results})
