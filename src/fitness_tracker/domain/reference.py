"""Static nutrition reference data used for food matching."""

from types import MappingProxyType

from fitness_tracker.domain.foods import NutritionFact

_FACTS = (
    NutritionFact(
        key="apple",
        name="Apple",
        calories=95,
        protein_g=0.5,
        carbs_g=25,
        fat_g=0.3,
        serving_size="1 medium (182g)",
        category="Fruits",
        aliases=("red apple", "green apple", "granny smith"),
    ),
    NutritionFact(
        key="banana",
        name="Banana",
        calories=105,
        protein_g=1.3,
        carbs_g=27,
        fat_g=0.4,
        serving_size="1 medium (118g)",
        category="Fruits",
        aliases=("yellow banana", "ripe banana"),
    ),
    NutritionFact(
        key="chicken_breast",
        name="Chicken Breast",
        calories=231,
        protein_g=43.5,
        carbs_g=0,
        fat_g=5,
        serving_size="100g cooked",
        category="Protein",
        aliases=("grilled chicken", "chicken breast", "cooked chicken"),
    ),
    NutritionFact(
        key="rice",
        name="White Rice",
        calories=205,
        protein_g=4.3,
        carbs_g=45,
        fat_g=0.4,
        serving_size="1 cup cooked (158g)",
        category="Grains",
        aliases=("white rice", "steamed rice", "cooked rice"),
    ),
    NutritionFact(
        key="broccoli",
        name="Broccoli",
        calories=55,
        protein_g=3.7,
        carbs_g=11,
        fat_g=0.6,
        serving_size="1 cup chopped (91g)",
        category="Vegetables",
        aliases=("green broccoli", "steamed broccoli"),
    ),
    NutritionFact(
        key="salmon",
        name="Salmon",
        calories=231,
        protein_g=25.4,
        carbs_g=0,
        fat_g=13.4,
        serving_size="100g cooked",
        category="Protein",
        aliases=("grilled salmon", "baked salmon", "salmon fillet"),
    ),
    NutritionFact(
        key="oatmeal",
        name="Oatmeal",
        calories=300,
        protein_g=10,
        carbs_g=54,
        fat_g=6,
        serving_size="1 cup cooked",
        category="Grains",
        aliases=("oats", "porridge", "rolled oats"),
    ),
    NutritionFact(
        key="eggs",
        name="Eggs",
        calories=155,
        protein_g=13,
        carbs_g=1.1,
        fat_g=10.6,
        serving_size="2 large eggs",
        category="Protein",
        aliases=("scrambled eggs", "boiled eggs", "fried eggs"),
    ),
    NutritionFact(
        key="avocado",
        name="Avocado",
        calories=234,
        protein_g=2.9,
        carbs_g=12,
        fat_g=21,
        serving_size="1 medium (150g)",
        category="Fruits",
        aliases=("fresh avocado", "ripe avocado"),
    ),
    NutritionFact(
        key="greek_yogurt",
        name="Greek Yogurt",
        calories=100,
        protein_g=17,
        carbs_g=6,
        fat_g=0,
        serving_size="170g container",
        category="Dairy",
        aliases=("plain greek yogurt", "non-fat greek yogurt"),
    ),
)

NUTRITION_FACTS: MappingProxyType[str, NutritionFact] = MappingProxyType(
    {fact.key: fact for fact in _FACTS}
)

MEAL_PLANS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "breakfast": ("oatmeal", "eggs", "banana", "greek_yogurt"),
        "lunch": ("chicken_breast", "rice", "broccoli", "salmon"),
        "dinner": ("salmon", "chicken_breast", "broccoli", "rice"),
        "snacks": ("apple", "banana", "greek_yogurt", "avocado"),
    }
)

DEFAULT_MEAL_PLAN: tuple[str, ...] = ("apple", "banana", "chicken_breast")
