from __future__ import annotations

from app.domain.entities.keyword_rule import FixedReply, KeywordRule, StartAction, VariedReply


GREETING = KeywordRule(
    key="greeting",
    keywords=(
        "hola", "holi", "hey", "epa", "epale", "buenas", "buen dia", "buenos dias",
        "buenas tardes", "buenas noches", "que tal", "q tal", "que hubo", "qlq",
        "qloq", "que lo que", "como estas",
    ),
    reply=VariedReply(
        options=(
            "Hola! En que te puedo ayudar hoy? Escribe *menu* para ver las opciones.",
            "Hola, que gusto saludarte. Escribe *menu* para ver nuestra carta y opciones.",
            "Buenas! Estoy para ayudarte con tu pedido. Escribe *menu* cuando quieras.",
        )
    ),
)

CATEGORY_HAMBURGUESAS = KeywordRule(
    key="category_hamburguesas",
    keywords=("hamburguesa", "burger"),
    start_action=StartAction.BROWSE_CATEGORY,
    category="hamburguesas",
)

CATEGORY_PIZZAS = KeywordRule(
    key="category_pizzas",
    keywords=("pizza",),
    start_action=StartAction.BROWSE_CATEGORY,
    category="pizzas",
)

CATEGORY_BEBIDAS = KeywordRule(
    key="category_bebidas",
    keywords=("bebida", "refresco", "jugo", "tomar"),
    start_action=StartAction.BROWSE_CATEGORY,
    category="bebidas",
)

CATEGORY_POSTRES = KeywordRule(
    key="category_postres",
    keywords=("postre", "dulce", "helado", "torta", "quesillo"),
    start_action=StartAction.BROWSE_CATEGORY,
    category="postres",
)

MAIN_MENU = KeywordRule(
    key="main_menu",
    keywords=("menu", "carta", "opciones", "ayuda", "info", "informacion"),
    start_action=StartAction.SHOW_MENU,
)

START_ORDER = KeywordRule(
    key="start_order",
    keywords=("pedido", "pedir", "ordenar", "quiero comprar"),
    start_action=StartAction.START_ORDER,
)

PRICES = KeywordRule(
    key="prices",
    keywords=("precio", "precios", "costo", "costos", "valor", "tarifa", "cuanto cuesta"),
    reply=FixedReply("Los precios estan en cada categoria del menu. Escribe 1 a 4 para verlas."),
    ask_more=True,
)

HOURS = KeywordRule(
    key="hours",
    keywords=("horario", "horarios", "abren", "abierto", "cierran", "cerrado"),
    reply=FixedReply(
        "Horario: lunes a jueves 12:00 a 22:00. Viernes y sabado 12:00 a 23:00. Domingo 12:00 a 20:00."
    ),
    ask_more=True,
)

LOCATION = KeywordRule(
    key="location",
    keywords=("ubicacion", "direccion", "donde estan", "donde quedan"),
    reply=FixedReply("Estamos en Guatire. Si quieres, te envio la ubicacion exacta y como llegar."),
    ask_more=True,
)

RESERVATION = KeywordRule(
    key="reservation",
    keywords=("reservar", "reserva", "reservas", "mesa", "agendar"),
    reply=FixedReply("Claro. Para reservar dime fecha, hora y cantidad de personas."),
    start_action=StartAction.RESERVE,
)

DELIVERY = KeywordRule(
    key="delivery",
    keywords=("delivery", "envio", "entrega", "domicilio"),
    reply=FixedReply("Si tenemos delivery. Indica tu zona y direccion para confirmar cobertura."),
    start_action=StartAction.DELIVERY,
)

PAYMENT_METHODS = KeywordRule(
    key="payment_methods",
    keywords=("pago", "pagos", "transferencia", "zelle", "efectivo", "pago movil"),
    reply=FixedReply("Aceptamos pago movil, transferencia, Zelle y efectivo."),
    ask_more=True,
)

PROMOS = KeywordRule(
    key="promos",
    keywords=("promo", "promos", "promocion", "promociones", "oferta", "ofertas"),
    reply=VariedReply(
        options=(
            "Esta semana: 2 hamburguesas clasicas + 2 refrescos por Bs. 14.",
            "Promo del dia: pizza margarita + jugo natural por Bs. 12.",
        )
    ),
    ask_more=True,
)

EVENTS = KeywordRule(
    key="events",
    keywords=("cumple", "cumpleanos", "evento", "eventos", "grupo"),
    reply=FixedReply("Atendemos eventos. Dime fecha, cantidad de personas y tipo de evento."),
    ask_more=True,
)

DIETARY = KeywordRule(
    key="dietary",
    keywords=("alergia", "alergias", "sin gluten", "vegetariano", "vegano"),
    reply=FixedReply("Tenemos opciones especiales. Dime tu restriccion y te recomiendo platos."),
    ask_more=True,
)

COMPLAINT = KeywordRule(
    key="complaint",
    keywords=("reclamo", "queja", "problema", "soporte"),
    reply=FixedReply("Lamento el inconveniente. Cuentame que paso y te ayudamos de inmediato."),
    ask_more=True,
)

HANDOFF = KeywordRule(
    key="handoff",
    keywords=("asesor", "humano", "operador", "atencion", "persona real"),
    reply=FixedReply("Te paso con un asesor. Deja tu nombre y un resumen de lo que necesitas."),
    start_action=StartAction.HANDOFF,
)

THANKS = KeywordRule(
    key="thanks",
    keywords=("gracias", "ok", "perfecto", "listo"),
    reply=VariedReply(
        options=(
            "Con gusto. Si necesitas algo mas, avisame.",
            "A la orden! Aqui estoy si necesitas algo mas.",
        )
    ),
)

FALLBACK = KeywordRule(
    key="fallback",
    keywords=(),
    reply=VariedReply(
        options=(
            'Gracias por escribir. Escribe "menu" para ver opciones rapidas.',
            'No te entendi bien. Escribe "menu" para ver lo que puedo hacer.',
            'Disculpa, no capte eso. Escribe "menu" y te muestro las opciones.',
        )
    ),
)

# Order is priority: first rule with a keyword contained in the text wins.
KEYWORD_RULES: tuple[KeywordRule, ...] = (
    GREETING,
    CATEGORY_HAMBURGUESAS,
    CATEGORY_PIZZAS,
    CATEGORY_BEBIDAS,
    CATEGORY_POSTRES,
    MAIN_MENU,
    START_ORDER,
    PRICES,
    HOURS,
    LOCATION,
    RESERVATION,
    DELIVERY,
    PAYMENT_METHODS,
    PROMOS,
    EVENTS,
    DIETARY,
    COMPLAINT,
    HANDOFF,
    THANKS,
)

# Exact-equality shortcuts, checked before the keyword table.
NUMERIC_SHORTCUTS: dict[str, KeywordRule] = {
    "0": MAIN_MENU,
    "1": CATEGORY_HAMBURGUESAS,
    "2": CATEGORY_PIZZAS,
    "3": CATEGORY_BEBIDAS,
    "4": CATEGORY_POSTRES,
    "5": START_ORDER,
    "6": RESERVATION,
    "7": HOURS,
    "8": LOCATION,
    "9": HANDOFF,
}
