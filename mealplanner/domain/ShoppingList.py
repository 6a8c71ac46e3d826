"""ShoppingList aggregate: ingredient totals for a completed weekly plan."""
from typing import Iterable, List


class ShoppingListEntry:
    def __init__(self, ingredient: str, count: int):
        self.ingredient = ingredient
        self.count = count

    def render(self) -> str:
        '''"<ingredient> x<count>" when needed more than once, the bare name otherwise.'''
        if self.count > 1:
            return f"{self.ingredient} x{self.count}"
        return self.ingredient

    def __eq__(self, other):
        if not isinstance(other, ShoppingListEntry):
            return NotImplemented
        return (self.ingredient, self.count) == (other.ingredient, other.count)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ShoppingListEntry({self.ingredient!r}, {self.count})"


class ShoppingList:
    def __init__(self, entries: Iterable[ShoppingListEntry] = ()):
        self.entries: List[ShoppingListEntry] = list(entries)

    def get_items(self):
        return self.entries

    def lines(self) -> List[str]:
        return [entry.render() for entry in self.entries]

    def as_dict(self):
        return {entry.ingredient: entry.count for entry in self.entries}

    def __len__(self):
        return len(self.entries)

    def __str__(self) -> str:
        items_str = ",\n\t".join(self.lines())
        return f"Shopping List Items:\n\t{items_str}"

    __repr__ = __str__
