from __future__ import annotations


def build_greeting(business_name: str) -> str:
    return f"Hola, bienvenido a {business_name}. Soy el asistente virtual y te ayudo con tu pedido."


HANDOFF_ACK = "Ya un asesor fue notificado y te respondera por aqui en breve. Gracias por tu paciencia."

ANYTHING_ELSE = "Te ayudo con algo mas? Escribe *menu* para ver las opciones."

OUT_OF_HOURS_NOTE = (
    "En este momento estamos fuera de horario, pero dejanos tu mensaje y te responderemos apenas abramos."
)
