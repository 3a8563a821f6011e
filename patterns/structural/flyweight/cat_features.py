"""
A cat database where cats with the same breed and looks share one record.

Name, age and owner are unique per cat (extrinsic state); breed, picture,
color, texture, fur and size repeat a lot and live in shared ``CatVariation``
flyweights (intrinsic state).
"""

import csv
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from app.config import settings
from app.exceptions import NotFoundError

VARIATION_FIELDS = ("breed", "image", "color", "texture", "fur", "size")


class CatVariation:
    def __init__(self, breed: str, image: str, color: str, texture: str, fur: str, size: str):
        self.breed = breed
        self.image = image
        self.color = color
        self.texture = texture
        self.fur = fur
        self.size = size

    def render_profile(self, name: str, age: str, owner: str) -> None:
        print(f"= {name} =")
        print(f"Age: {age}")
        print(f"Owner: {owner}")
        print(f"Breed: {self.breed}")
        print(f"Image: {self.image}")
        print(f"Color: {self.color}")
        print(f"Texture: {self.texture}")


class Cat:
    def __init__(self, name: str, age: str, owner: str, variation: CatVariation):
        self.name = name
        self.age = age
        self.owner = owner
        self.variation = variation

    def matches(self, query: Dict[str, Any]) -> bool:
        """True when every key of the query equals the cat's own or shared field"""
        for key, value in query.items():
            if key in ("name", "age", "owner"):
                if getattr(self, key) != value:
                    return False
            elif key in VARIATION_FIELDS:
                if getattr(self.variation, key) != value:
                    return False
            else:
                return False
        return True

    def render(self) -> None:
        self.variation.render_profile(self.name, self.age, self.owner)


class CatDataBase:
    def __init__(self):
        self.cats: List[Cat] = []
        self.variations: Dict[Tuple[str, ...], CatVariation] = {}

    def add_cat(
        self,
        name: str,
        age: str,
        owner: str,
        breed: str,
        image: str,
        color: str,
        texture: str,
        fur: str,
        size: str,
    ) -> Cat:
        variation = self.get_variation(breed, image, color, texture, fur, size)
        cat = Cat(name, age, owner, variation)
        self.cats.append(cat)
        print(f"CatDataBase: Added a cat ({name}, {breed}).")
        return cat

    def get_variation(self, *features: str) -> CatVariation:
        if features not in self.variations:
            self.variations[features] = CatVariation(*features)
        return self.variations[features]

    def load_csv(self, path: Union[str, Path]) -> int:
        """Add every cat in a CSV file; column names are matched case-insensitively"""
        path = Path(path)
        if not path.is_file():
            raise NotFoundError(f'The file "{path}" does not exist.', code="FILE_NOT_FOUND")

        added = 0
        with path.open(newline="", encoding="utf-8") as handle:
            for row in csv.DictReader(handle):
                fields = {key.lower(): value for key, value in row.items()}
                self.add_cat(
                    fields["name"],
                    fields["age"],
                    fields["owner"],
                    *(fields[field] for field in VARIATION_FIELDS),
                )
                added += 1
        return added

    def find_cat(self, query: Dict[str, Any]) -> Optional[Cat]:
        for cat in self.cats:
            if cat.matches(query):
                return cat
        print("CatDataBase: Sorry, your query does not yield any results.")
        return None


def main() -> None:
    db = CatDataBase()

    print(f'Client: Let\'s see what we have in "{settings.cats_csv_path.name}".')
    db.load_csv(settings.cats_csv_path)
    print(
        f"CatDataBase: {len(db.cats)} cats share {len(db.variations)} variations."
    )

    for name in ("Siri", "Bob"):
        print(f'\nClient: Let\'s look for a cat named "{name}".')
        cat = db.find_cat({"name": name})
        if cat:
            cat.render()


if __name__ == "__main__":
    main()
