from bebe_care import create_app
from bebe_care.extensions import db
from bebe_care.models.food import Food
from bebe_care.models.recipe import Recipe

FOODS = [
    # frutas
    ("Plátano", "fruta", False),
    ("Manzana", "fruta", False),
    ("Pera", "fruta", False),
    ("Melocotón", "fruta", False),
    ("Mandarina", "fruta", False),
    ("Uva", "fruta", False),
    ("Mango", "fruta", False),
    # verduras (sin hojas verdes <12m)
    ("Patata", "verdura", False),
    ("Zanahoria", "verdura", False),
    ("Calabacín", "verdura", False),
    ("Calabaza", "verdura", False),
    ("Brócoli", "verdura", False),
    ("Judías verdes", "verdura", False),
    ("Boniato", "verdura", False),
    # proteínas
    ("Pollo", "proteina", False),
    ("Pavo", "proteina", False),
    ("Ternera", "proteina", False),
    ("Merluza", "proteina", True),  # pescado = alérgeno
    ("Huevo", "proteina", True),
    # cereales / gluten
    ("Galleta maría (sin azúcar)", "cereal", True),
    ("Pan", "cereal", True),
    ("Arroz", "cereal", False),
    ("Avena", "cereal", False),
]

RECIPES = [
    ("Calabacín + Patata (6m)", 6,
     "Cocer al vapor ½ calabacín y ½ patata (10–12 min). Triturar fino. Añadir 1 cdita AOVE.",
     ["Calabacín", "Patata"]),
    ("Pollo + Calabacín + Patata (6m)", 6,
     "Cocer 20–25 g de pechuga con calabacín y patata. Triturar muy fino.",
     ["Pollo", "Calabacín", "Patata"]),
]

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    # only seed an empty catalog
    if Food.query.count() == 0:
        for name, category, allergen in FOODS:
            db.session.add(Food(name=name, category=category, allergen=allergen))
        db.session.flush()

        for title, suitable_from, steps, food_names in RECIPES:
            recipe = Recipe(title=title, suitable_from=suitable_from, steps=steps, freeze_ok=True)
            recipe.foods = Food.query.filter(Food.name.in_(food_names)).all()
            db.session.add(recipe)

        db.session.commit()
        print("✅ Seed completed.")
    else:
        print("Foods already present, seed skipped.")
