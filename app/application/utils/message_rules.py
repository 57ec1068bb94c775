from __future__ import annotations

import re
import unicodedata

RESET_COMMANDS = ("menu", "0")

AFFIRMATIVE_ANSWERS = {"si", "ok", "dale", "pagar", "pagar ahora"}
NEGATIVE_ANSWERS = {"no", "luego", "despues", "mas tarde"}

NO_EXTRAS_ANSWERS = {
    "no",
    "nada",
    "ninguno",
    "ninguna",
    "sin extras",
    "no gracias",
    "asi esta bien",
}

DELIVERY_TERMS = ("delivery",)
IN_STORE_TERMS = ("tienda", "comer", "para llevar", "llevar", "retirar")

MIN_QUANTITY = 1
MAX_QUANTITY = 20
MIN_DETAIL_LENGTH = 4


def normalize_text(text: str) -> str:
    """
    Canonical form used for all keyword matching: lowercase, accents removed,
    punctuation turned into spaces, whitespace collapsed.
    """
    normalized = unicodedata.normalize("NFD", (text or "").lower())
    normalized = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    normalized = re.sub(r"[^a-z0-9\s]", " ", normalized)
    normalized = re.sub(r"\s+", " ", normalized).strip()
    return normalized


def is_reset_command(normalized: str) -> bool:
    return normalized in RESET_COMMANDS


def is_affirmative(normalized: str) -> bool:
    return normalized in AFFIRMATIVE_ANSWERS


def is_negative(normalized: str) -> bool:
    return normalized in NEGATIVE_ANSWERS


def is_no_extras(normalized: str) -> bool:
    return normalized in NO_EXTRAS_ANSWERS


def parse_quantity(normalized: str) -> int | None:
    """Return the quantity if the whole message is an integer in range, else None."""
    if not normalized.isdigit():
        return None
    quantity = int(normalized)
    if quantity < MIN_QUANTITY or quantity > MAX_QUANTITY:
        return None
    return quantity


def wants_delivery(normalized: str) -> bool:
    return any(term in normalized for term in DELIVERY_TERMS)


def wants_in_store(normalized: str) -> bool:
    return any(term in normalized for term in IN_STORE_TERMS)


def has_enough_detail(text: str) -> bool:
    return len((text or "").strip()) >= MIN_DETAIL_LENGTH
