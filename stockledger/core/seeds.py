# Reference data the shop starts with. The remote store is authoritative once seeded.

CATEGORY_OPTIONS: tuple[str, ...] = (
    "LPG",
    "Butane",
    "Coca-cola",
    "Pepsi Softdrinks",
    "Beer",
)

WEIGHT_OPTIONS: tuple[str, ...] = (
    "11kg",
    "225g",
    "170g",
    "500ml",
    "355ml (12oz)",
    "235ml (8oz)",
    "1L",
)


def is_valid_category(value: str) -> bool:
    return value in CATEGORY_OPTIONS


def is_valid_weight(value: str) -> bool:
    return value in WEIGHT_OPTIONS
