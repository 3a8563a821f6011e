"""
A forest of many trees built from a handful of shared tree types.
"""

import weakref
from typing import List


class TreeType:
    """
    Shared tree appearance.

    Instances are pooled by ``(name, color, texture)``: constructing the same
    combination twice returns the object already in the pool for as long as
    some tree still references it.
    """

    _pool: "weakref.WeakValueDictionary" = weakref.WeakValueDictionary()

    def __new__(cls, name: str, color: str, texture: str):
        key = (name, color, texture)
        obj = cls._pool.get(key)
        if obj is None:
            obj = object.__new__(cls)
            obj.name, obj.color, obj.texture = key
            cls._pool[key] = obj
        return obj

    def render(self, x: int, y: int) -> None:
        print(
            f"Rendering a tree of type {self.name} at ({x}, {y}) "
            f"with color {self.color} and texture {self.texture}."
        )


class Tree:
    def __init__(self, x: int, y: int, tree_type: TreeType):
        self.x = x
        self.y = y
        self.type = tree_type

    def render(self) -> None:
        self.type.render(self.x, self.y)


class TreeFactory:
    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        return TreeType(name, color, texture)


class Forest:
    def __init__(self, tree_factory: TreeFactory):
        self.trees: List[Tree] = []
        self.tree_factory = tree_factory

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree_type = self.tree_factory.get_tree_type(name, color, texture)
        tree = Tree(x, y, tree_type)
        self.trees.append(tree)
        return tree

    def distinct_types(self) -> int:
        return len({id(tree.type) for tree in self.trees})

    def render(self) -> None:
        for tree in self.trees:
            tree.render()


def main() -> None:
    forest = Forest(TreeFactory())
    forest.plant_tree(0, 0, "Oak", "green", "rough")
    forest.plant_tree(1, 1, "Birch", "white", "smooth")
    forest.plant_tree(5, 5, "Oak", "green", "rough")
    forest.plant_tree(10, 10, "Pine", "dark green", "needle-like")

    print("Rendering forest:")
    forest.render()
    print(f"{len(forest.trees)} trees share {forest.distinct_types()} tree types.")


if __name__ == "__main__":
    main()
