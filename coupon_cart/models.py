from dataclasses import dataclass, field, FrozenInstanceError
from enum import Enum
from typing import Dict, Iterator, List, Sequence, Tuple, Union, TYPE_CHECKING

from .pricing import sum_discounted, sum_seller

if TYPE_CHECKING:
    from .coupons import Coupon


class Category(Enum):
    CAR = "car"
    BIKE = "bike"
    SCOOTER = "scooter"

    @classmethod
    def parse(cls, name: str) -> "Category":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown category: {name!r}") from None


@dataclass(eq=False)
class Item:
    category: Category
    seller_price: float
    discounted_price: float = field(init=False)

    def __post_init__(self) -> None:
        self.discounted_price = self.seller_price

    def __setattr__(self, name, value):
        # category and seller_price are write-once
        if name in ("category", "seller_price") and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def to_dict(self) -> Dict[str, object]:
        return {
            "category": self.category.name,
            "seller_price": self.seller_price,
            "discounted_price": self.discounted_price,
        }


Entry = Union[Item, "Coupon"]


def is_item(entry: Entry) -> bool:
    return isinstance(entry, Item)


class Cart:
    """An ordered run of items and coupons, priced once at construction.

    Building a cart groups its items by category and then applies every
    coupon, in entry order, against the current item prices. After that the
    cart is read-only: ``final_price`` and ``without_discount_price`` only fold
    over the already discounted items.
    """

    def __init__(self, entries: Sequence[Entry]):
        self.entries: Tuple[Entry, ...] = tuple(entries)
        self._by_category: Dict[Category, List[int]] = {c: [] for c in Category}

        for index, entry in enumerate(self.entries):
            if is_item(entry):
                self._by_category[entry.category].append(index)

        for position, entry in enumerate(self.entries):
            if not is_item(entry):
                entry.apply(self, position)

    def items(self) -> List[Item]:
        return [e for e in self.entries if is_item(e)]

    def items_in(self, category: Category) -> List[Item]:
        return [self.entries[i] for i in self._by_category[category]]

    def coupons(self) -> Iterator[Tuple[int, "Coupon"]]:
        for position, entry in enumerate(self.entries):
            if not is_item(entry):
                yield position, entry

    def final_price(self) -> float:
        return sum_discounted(self.items())

    def without_discount_price(self) -> float:
        grouped = [item for category in Category for item in self.items_in(category)]
        return sum_seller(grouped)
