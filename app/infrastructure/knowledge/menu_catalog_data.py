from __future__ import annotations

from app.domain.entities.menu_catalog import Category, Item


MENU_CATALOG: tuple[Category, ...] = (
    Category(
        key="hamburguesas",
        title="Hamburguesas",
        items=(
            Item(id="h1", title="Hamburguesa clasica", price="Bs. 6", description="Carne, queso, lechuga y tomate"),
            Item(id="h2", title="Hamburguesa doble", price="Bs. 9", description="Doble carne y doble queso"),
            Item(id="h3", title="Hamburguesa tocineta", price="Bs. 8", description="Con tocineta y cebolla caramelizada"),
            Item(id="h4", title="Hamburguesa de pollo", price="Bs. 7", description="Pechuga empanizada"),
        ),
    ),
    Category(
        key="pizzas",
        title="Pizzas",
        items=(
            Item(id="p1", title="Pizza margarita", price="Bs. 10", description="Tomate, mozzarella y albahaca"),
            Item(id="p2", title="Pizza pepperoni", price="Bs. 12", description="Mozzarella y pepperoni"),
            Item(id="p3", title="Pizza vegetariana", price="Bs. 11", description="Pimenton, champinones y aceitunas"),
        ),
    ),
    Category(
        key="bebidas",
        title="Bebidas",
        items=(
            Item(id="b1", title="Refresco", price="Bs. 2", description="Lata 355 ml"),
            Item(id="b2", title="Jugo natural", price="Bs. 3", description="Parchita, mango o fresa"),
            Item(id="b3", title="Agua mineral", price="Bs. 1.5"),
        ),
    ),
    Category(
        key="postres",
        title="Postres",
        items=(
            Item(id="d1", title="Quesillo", price="Bs. 3"),
            Item(id="d2", title="Torta de chocolate", price="Bs. 4", description="Porcion"),
            Item(id="d3", title="Helado", price="Bs. 2.5", description="Dos bolas"),
        ),
    ),
)
