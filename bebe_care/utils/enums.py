from enum import Enum

class FoodCategory(str, Enum):
    FRUIT = "fruta"
    VEGETABLE = "verdura"
    PROTEIN = "proteina"
    CEREAL = "cereal"

class Outcome(str, Enum):
    OK = "ok"
    DOUBTFUL = "dudoso"
    BAD = "malo"

class MealSlot(str, Enum):
    MORNING = "manana"
    LUNCH = "comida"
    SNACK = "merienda"
    DINNER = "cena"
