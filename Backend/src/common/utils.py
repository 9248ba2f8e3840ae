import os
from typing import Any, Dict, Iterable, List, Optional


def env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.lower() in {"1", "true", "yes", "on"}


def blank_to_none(data: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """Les champs optionnels vides sont stockes a NULL (comme les formulaires d'origine)."""
    for name in fields:
        if name in data and isinstance(data[name], str) and not data[name].strip():
            data[name] = None
    return data


def missing_required(attrs: Dict[str, Any], instance: Optional[object], fields: Iterable[str]) -> List[str]:
    """
    Champs requis absents ou vides, en tenant compte de la ligne existante
    pour les mises a jour partielles.
    """
    missing = []
    for name in fields:
        if name in attrs:
            value = attrs[name]
        else:
            value = getattr(instance, name, None) if instance is not None else None
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def truncate(text: Optional[str], length: int = 60) -> Optional[str]:
    if not text:
        return text
    if len(text) <= length:
        return text
    return text[:length] + "..."
