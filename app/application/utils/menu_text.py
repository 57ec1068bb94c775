from __future__ import annotations

from app.application.ports.menu_catalog import MenuCatalogPort
from app.domain.entities.menu_catalog import Category
from app.domain.entities.reply import InteractiveList, ListRow, ListSection, Reply

# Row ids are the numeric shortcuts so a list reply routes exactly like typing the number.
EXTRA_OPTIONS = (
    ("5", "Hacer pedido", "Escribe tu pedido libremente"),
    ("6", "Reservas", "Reserva una mesa"),
    ("7", "Horarios", None),
    ("8", "Ubicacion", None),
    ("9", "Hablar con asesor", "Te atiende una persona"),
)

MENU_HEADER = "Menu principal"
MENU_FOOTER = "Responde con el numero de la opcion. Escribe *menu* o *0* para volver aqui."


def build_main_menu(catalog: MenuCatalogPort, intro: str | None = None) -> Reply:
    options: list[tuple[str, str, str | None]] = []
    for index, category in enumerate(catalog.list_categories(), start=1):
        options.append((str(index), category.title, f"Ver {category.title.lower()}"))
    options.extend(EXTRA_OPTIONS)

    lines = [f"*{MENU_HEADER}*"]
    lines.extend(f"{option_id}) {title}" for option_id, title, _ in options)
    lines.append("")
    lines.append(MENU_FOOTER)
    menu_text = "\n".join(lines)

    body = "Elige una opcion del menu."
    if intro:
        menu_text = f"{intro}\n\n{menu_text}"
        body = f"{intro}\n\n{body}"

    interactive = InteractiveList(
        header=MENU_HEADER,
        body=body,
        button="Ver opciones",
        sections=(
            ListSection(
                title="Opciones",
                rows=tuple(
                    ListRow(id=option_id, title=title, description=description)
                    for option_id, title, description in options
                ),
            ),
        ),
    )
    return Reply(text=menu_text, interactive=interactive, meta={"kind": "main_menu"})


def build_category_reply(category: Category) -> Reply:
    lines = [f"*{category.title}*"]
    for item in category.items:
        line = f"{item.id} - {item.title} - {item.price}"
        if item.description:
            line += f" ({item.description})"
        lines.append(line)
    lines.append("")
    lines.append("Escribe el codigo del producto (por ejemplo *{}*) o escribe tu pedido.".format(category.items[0].id))

    interactive = InteractiveList(
        header=category.title,
        body="Elige un producto de la lista o escribe tu pedido.",
        button="Ver productos",
        sections=(
            ListSection(
                title=category.title,
                rows=tuple(
                    ListRow(id=item.id, title=item.title, description=f"{item.price} {item.description}".strip())
                    for item in category.items
                ),
            ),
        ),
    )
    return Reply(text="\n".join(lines), interactive=interactive, meta={"kind": "category", "category": category.key})
