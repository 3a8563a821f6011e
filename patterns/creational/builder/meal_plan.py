"""
Standard and vegetarian meal plans assembled by the same director.
"""

from abc import ABC, abstractmethod


class MealPlan:
    def __init__(self) -> None:
        self.main_course = ""
        self.side_dish = ""
        self.dessert = ""

    def list_items(self) -> None:
        print(f"Main Course: {self.main_course}")
        print(f"Side Dish: {self.side_dish}")
        print(f"Dessert: {self.dessert}")


class MealPlanBuilder(ABC):
    def __init__(self) -> None:
        self._meal_plan = MealPlan()

    @abstractmethod
    def add_main_course(self) -> "MealPlanBuilder":
        pass

    @abstractmethod
    def add_side_dish(self) -> "MealPlanBuilder":
        pass

    @abstractmethod
    def add_dessert(self) -> "MealPlanBuilder":
        pass

    def get_meal_plan(self) -> MealPlan:
        meal_plan = self._meal_plan
        self._meal_plan = MealPlan()
        return meal_plan


class StandardMealPlanBuilder(MealPlanBuilder):
    def add_main_course(self) -> "MealPlanBuilder":
        self._meal_plan.main_course = "Steak"
        return self

    def add_side_dish(self) -> "MealPlanBuilder":
        self._meal_plan.side_dish = "French Fries"
        return self

    def add_dessert(self) -> "MealPlanBuilder":
        self._meal_plan.dessert = "Ice Cream"
        return self


class VegetarianMealPlanBuilder(MealPlanBuilder):
    def add_main_course(self) -> "MealPlanBuilder":
        self._meal_plan.main_course = "Vegetarian Burger"
        return self

    def add_side_dish(self) -> "MealPlanBuilder":
        self._meal_plan.side_dish = "Salad"
        return self

    def add_dessert(self) -> "MealPlanBuilder":
        self._meal_plan.dessert = "Fruit Salad"
        return self


class MealPlanDirector:
    def build_full_meal(self, builder: MealPlanBuilder) -> MealPlan:
        return builder.add_main_course().add_side_dish().add_dessert().get_meal_plan()

    def build_light_meal(self, builder: MealPlanBuilder) -> MealPlan:
        return builder.add_main_course().add_side_dish().get_meal_plan()


def main() -> None:
    director = MealPlanDirector()

    print("Standard Meal Plan:")
    director.build_full_meal(StandardMealPlanBuilder()).list_items()

    print("\nVegetarian Meal Plan:")
    director.build_full_meal(VegetarianMealPlanBuilder()).list_items()

    print("\nLight Vegetarian Meal Plan:")
    director.build_light_meal(VegetarianMealPlanBuilder()).list_items()


if __name__ == "__main__":
    main()
