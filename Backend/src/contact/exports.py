"""Exports CSV (separateur ';', BOM UTF-8 pour Excel)."""
import pandas as pd
from django.http import HttpResponse
from django.utils import timezone


def _yes_no(value) -> str:
    return "Oui" if value else "Non"


def _local(dt) -> str:
    return timezone.localtime(dt).strftime("%d/%m/%Y %H:%M") if dt else ""


def csv_response(df: pd.DataFrame, prefix: str) -> HttpResponse:
    filename = f"{prefix}_{timezone.localdate().isoformat()}.csv"
    body = "\ufeff" + df.to_csv(sep=";", index=False, lineterminator="\n")
    response = HttpResponse(body, content_type="text/csv; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


def messages_frame(messages) -> pd.DataFrame:
    rows = [
        {
            "Date": _local(m.created_at),
            "Nom": m.name,
            "Email": m.email,
            "Sujet": m.subject,
            "Message": m.message,
            "Newsletter": _yes_no(m.newsletter_optin),
            "Lu": _yes_no(m.read),
        }
        for m in messages
    ]
    return pd.DataFrame(rows, columns=["Date", "Nom", "Email", "Sujet", "Message", "Newsletter", "Lu"])


def subscribers_frame(subscribers) -> pd.DataFrame:
    rows = [
        {
            "Date": _local(s.created_at),
            "Email": s.email,
            "Nom": s.name or "",
            "Langue": s.language,
            "Actif": _yes_no(s.active),
        }
        for s in subscribers
    ]
    return pd.DataFrame(rows, columns=["Date", "Email", "Nom", "Langue", "Actif"])
