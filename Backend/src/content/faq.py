"""Foire aux questions: catalogue statique bilingue (fr / pl)."""
from common.i18n import PL

FAQ = [
    {
        "title": {"fr": "Sacrements", "pl": "Sakramenty"},
        "questions": [
            {
                "question": {"fr": "Comment préparer un baptême ?", "pl": "Jak przygotować chrzest?"},
                "answer": {
                    "fr": "Pour préparer un baptême, contactez le secrétariat paroissial au moins 3 mois à l'avance. "
                          "Une préparation avec l'équipe baptême est obligatoire. Vous aurez besoin d'un extrait "
                          "d'acte de naissance et de choisir un parrain et/ou une marraine baptisé(e) et confirmé(e).",
                    "pl": "Aby przygotować chrzest, skontaktuj się z kancelarią parafialną co najmniej 3 miesiące "
                          "wcześniej. Przygotowanie z zespołem chrzcielnym jest obowiązkowe. Potrzebny będzie odpis "
                          "aktu urodzenia oraz ochrzczony i bierzmowany chrzestny lub chrzestna.",
                },
            },
            {
                "question": {
                    "fr": "Quelles sont les étapes pour se marier à l'église ?",
                    "pl": "Jakie są etapy zawarcia ślubu kościelnego?",
                },
                "answer": {
                    "fr": "Prenez contact avec la paroisse au moins un an avant la date souhaitée. Vous suivrez une "
                          "préparation au mariage comprenant plusieurs rencontres. Les documents nécessaires incluent : "
                          "extraits d'acte de naissance, certificats de baptême, et attestation de préparation.",
                    "pl": "Skontaktuj się z parafią co najmniej rok przed planowaną datą. Czeka was przygotowanie do "
                          "małżeństwa obejmujące kilka spotkań. Potrzebne dokumenty to: odpisy aktów urodzenia, "
                          "świadectwa chrztu oraz zaświadczenie o odbytym przygotowaniu.",
                },
            },
            {
                "question": {"fr": "Comment se confesser ?", "pl": "Jak się wyspowiadać?"},
                "answer": {
                    "fr": "Les confessions sont possibles 30 minutes avant chaque messe ou sur rendez-vous auprès "
                          "d'un prêtre. N'hésitez pas à demander si c'est votre première confession, le prêtre vous guidera.",
                    "pl": "Spowiedź jest możliwa 30 minut przed każdą Mszą lub po umówieniu się z kapłanem. "
                          "Jeśli to Twoja pierwsza spowiedź, śmiało zapytaj, kapłan Cię poprowadzi.",
                },
            },
            {
                "question": {
                    "fr": "Comment recevoir le sacrement des malades ?",
                    "pl": "Jak przyjąć sakrament namaszczenia chorych?",
                },
                "answer": {
                    "fr": "Contactez le secrétariat ou directement un prêtre. Ce sacrement peut être donné à domicile, "
                          "à l'hôpital ou lors de célébrations communautaires organisées dans l'année.",
                    "pl": "Skontaktuj się z kancelarią lub bezpośrednio z kapłanem. Sakrament może być udzielony "
                          "w domu, w szpitalu lub podczas wspólnotowych celebracji organizowanych w ciągu roku.",
                },
            },
        ],
    },
    {
        "title": {"fr": "Vie paroissiale", "pl": "Życie parafii"},
        "questions": [
            {
                "question": {
                    "fr": "Comment inscrire mon enfant au catéchisme ?",
                    "pl": "Jak zapisać dziecko na katechezę?",
                },
                "answer": {
                    "fr": "Les inscriptions se font en septembre pour l'année scolaire. Le catéchisme est ouvert aux "
                          "enfants du CE1 au CM2. Contactez le secrétariat ou la responsable de la catéchèse pour "
                          "plus d'informations.",
                    "pl": "Zapisy odbywają się we wrześniu na cały rok szkolny. Katecheza jest otwarta dla dzieci "
                          "od CE1 do CM2. Więcej informacji udzieli kancelaria lub osoba odpowiedzialna za katechezę.",
                },
            },
            {
                "question": {"fr": "Comment rejoindre la chorale ?", "pl": "Jak dołączyć do chóru?"},
                "answer": {
                    "fr": "La chorale accueille tous les volontaires, même sans formation musicale ! Les répétitions "
                          "ont lieu le jeudi soir à 20h30. Contactez le chef de chorale via le secrétariat.",
                    "pl": "Chór przyjmuje wszystkich chętnych, także bez wykształcenia muzycznego! Próby odbywają się "
                          "w czwartki o 20:30. Z dyrygentem można się skontaktować przez kancelarię.",
                },
            },
            {
                "question": {"fr": "Y a-t-il des activités pour les jeunes ?", "pl": "Czy są zajęcia dla młodzieży?"},
                "answer": {
                    "fr": "Oui ! Nous proposons l'aumônerie pour les collégiens et lycéens, des groupes scouts, et "
                          "diverses activités (retraites, pèlerinages, soirées). Consultez notre page Actualités ou "
                          "contactez-nous.",
                    "pl": "Tak! Prowadzimy duszpasterstwo dla uczniów gimnazjów i liceów, grupy harcerskie oraz "
                          "różne inicjatywy (rekolekcje, pielgrzymki, wieczory). Zajrzyj do Aktualności lub napisz do nas.",
                },
            },
            {
                "question": {"fr": "Comment devenir bénévole ?", "pl": "Jak zostać wolontariuszem?"},
                "answer": {
                    "fr": "De nombreux services ont besoin de bénévoles : accueil, fleurissement, entretien, "
                          "catéchèse, accompagnement des malades... Contactez le secrétariat pour découvrir où vos "
                          "talents peuvent servir.",
                    "pl": "Wiele posług potrzebuje wolontariuszy: recepcja, dekoracja kwiatowa, porządki, katecheza, "
                          "odwiedziny chorych... Skontaktuj się z kancelarią, aby znaleźć miejsce dla swoich talentów.",
                },
            },
        ],
    },
    {
        "title": {"fr": "Informations pratiques", "pl": "Informacje praktyczne"},
        "questions": [
            {
                "question": {"fr": "Quels sont les horaires des messes ?", "pl": "Jakie są godziny Mszy?"},
                "answer": {
                    "fr": "Dimanche : 9h00, 11h00 et 18h30. Samedi : 18h00 (messe anticipée). En semaine : mardi et "
                          "jeudi à 8h30, mercredi et vendredi à 18h30. Les horaires peuvent varier pendant les fêtes.",
                    "pl": "Niedziela: 9:00, 11:00 i 18:30. Sobota: 18:00 (Msza wigilijna). W tygodniu: wtorek "
                          "i czwartek o 8:30, środa i piątek o 18:30. W święta godziny mogą się zmieniać.",
                },
            },
            {
                "question": {
                    "fr": "L'église est-elle accessible aux personnes à mobilité réduite ?",
                    "pl": "Czy kościół jest dostępny dla osób z niepełnosprawnością ruchową?",
                },
                "answer": {
                    "fr": "Oui, l'église dispose d'une rampe d'accès et d'un emplacement réservé. Une boucle "
                          "magnétique est également disponible pour les malentendants.",
                    "pl": "Tak, kościół ma podjazd i wydzielone miejsce. Dla osób niedosłyszących dostępna jest "
                          "również pętla indukcyjna.",
                },
            },
            {
                "question": {"fr": "Comment faire un don à la paroisse ?", "pl": "Jak przekazać darowiznę na parafię?"},
                "answer": {
                    "fr": "Vous pouvez donner lors des quêtes, par chèque, par virement ou en ligne sur notre page "
                          "\"Faire un don\". Les dons sont déductibles des impôts à hauteur de 66%. Un reçu fiscal "
                          "vous sera envoyé.",
                    "pl": "Można wesprzeć parafię podczas zbiórki, czekiem, przelewem lub online na stronie "
                          "\"Przekaż darowiznę\". Darowizny można odliczyć od podatku w wysokości 66%. "
                          "Otrzymasz pokwitowanie podatkowe.",
                },
            },
            {
                "question": {
                    "fr": "Comment réserver la salle paroissiale ?",
                    "pl": "Jak zarezerwować salę parafialną?",
                },
                "answer": {
                    "fr": "La salle paroissiale peut être réservée pour des événements en lien avec la vie de "
                          "l'Église. Contactez le secrétariat pour connaître les disponibilités et les conditions.",
                    "pl": "Salę parafialną można zarezerwować na wydarzenia związane z życiem Kościoła. "
                          "O terminy i warunki zapytaj w kancelarii.",
                },
            },
        ],
    },
]


def faq_for(lang: str):
    """Catalogue dans la langue demandee (francais par defaut)."""
    pick = (lambda text: text.get(PL) or text["fr"]) if lang == PL else (lambda text: text["fr"])
    return [
        {
            "title": pick(category["title"]),
            "questions": [
                {"question": pick(q["question"]), "answer": pick(q["answer"])}
                for q in category["questions"]
            ],
        }
        for category in FAQ
    ]
