from datetime import time

from django.core.management.base import BaseCommand
from django.db import transaction

from content.models import FooterLink, MassSchedule, Page, SocialLink

SCHEDULES = [
    # (jour fr, jour pl, heure, lieu, description)
    ("Dimanche", "Niedziela", time(9, 0), "Église Saint-Paul", "Messe dominicale"),
    ("Dimanche", "Niedziela", time(11, 0), "Église Saint-Paul", "Messe dominicale"),
    ("Dimanche", "Niedziela", time(18, 30), "Église Saint-Paul", "Messe dominicale"),
    ("Samedi", "Sobota", time(18, 0), "Église Saint-Paul", "Messe anticipée"),
    ("Mardi", "Wtorek", time(8, 30), "Chapelle", "Messe quotidienne"),
    ("Jeudi", "Czwartek", time(8, 30), "Chapelle", "Messe quotidienne"),
    ("Mercredi", "Środa", time(18, 30), "Chapelle", "Messe quotidienne"),
    ("Vendredi", "Piątek", time(18, 30), "Chapelle", "Messe quotidienne"),
]

LEGAL_PAGES = [
    ("mentions-legales", "Mentions légales", "Nota prawna",
     "<p>Site édité par la Paroisse Saint-Paul. Hébergement et responsable de publication : voir le secrétariat.</p>"),
    ("confidentialite", "Politique de confidentialité", "Polityka prywatności",
     "<p>Les données transmises via le formulaire de contact servent uniquement à vous répondre. "
     "Vous pouvez demander leur suppression à tout moment auprès du secrétariat.</p>"),
    ("cookies", "Gestion des cookies", "Pliki cookie",
     "<p>Ce site n'utilise que les cookies nécessaires à son fonctionnement.</p>"),
]

SOCIAL_LINKS = [
    ("Facebook", "facebook", "https://www.facebook.com/"),
    ("YouTube", "youtube", "https://www.youtube.com/"),
    ("Instagram", "instagram", "https://www.instagram.com/"),
]

FOOTER_LINKS = [
    (FooterLink.QUICK, "Horaires des messes", "Godziny Mszy", "/horaires"),
    (FooterLink.QUICK, "Baptême", "Chrzest", "/faq"),
    (FooterLink.QUICK, "Mariage", "Ślub", "/faq"),
    (FooterLink.QUICK, "Catéchèse", "Katecheza", "/faq"),
    (FooterLink.QUICK, "Obsèques", "Pogrzeb", "/contact"),
    (FooterLink.QUICK, "Bulletin paroissial", "Biuletyn parafialny", "/articles"),
    (FooterLink.LEGAL, "Mentions légales", "Nota prawna", "/mentions-legales"),
    (FooterLink.LEGAL, "Politique de confidentialité", "Polityka prywatności", "/confidentialite"),
    (FooterLink.LEGAL, "Gestion des cookies", "Pliki cookie", "/cookies"),
]


class Command(BaseCommand):
    help = "Cree les contenus par defaut de la paroisse (horaires, pages legales, liens). Rejouable sans doublon."

    def add_arguments(self, parser):
        parser.add_argument("--skip-schedules", action="store_true", help="Ne pas creer les horaires de messe")

    @transaction.atomic
    def handle(self, *args, **opts):
        created = 0

        if not opts["skip_schedules"]:
            for order, (day_fr, day_pl, at, location, description) in enumerate(SCHEDULES):
                _, new = MassSchedule.objects.get_or_create(
                    is_special=False,
                    day_of_week=day_fr,
                    time=at,
                    defaults={
                        "day_of_week_fr": day_fr,
                        "day_of_week_pl": day_pl,
                        "location": location,
                        "location_fr": location,
                        "description": description,
                        "description_fr": description,
                        "sort_order": order,
                    },
                )
                created += new

        for slug, title_fr, title_pl, content in LEGAL_PAGES:
            _, new = Page.objects.get_or_create(
                slug=slug,
                defaults={"title": title_fr, "title_fr": title_fr, "title_pl": title_pl, "content": content, "content_fr": content},
            )
            created += new

        for order, (name, icon, url) in enumerate(SOCIAL_LINKS):
            _, new = SocialLink.objects.get_or_create(icon=icon, defaults={"name": name, "url": url, "sort_order": order})
            created += new

        for order, (section, label_fr, label_pl, url) in enumerate(FOOTER_LINKS):
            _, new = FooterLink.objects.get_or_create(
                section=section,
                url=url,
                label=label_fr,
                defaults={"label_fr": label_fr, "label_pl": label_pl, "sort_order": order},
            )
            created += new

        self.stdout.write(self.style.SUCCESS(f"{created} ligne(s) creee(s)"))
