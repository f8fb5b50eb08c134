from enum import Enum
from typing import Dict, Type, TypeVar

V = TypeVar("V")


def exhaustive(table: Dict[Enum, V], enum_cls: Type[Enum]) -> Dict[Enum, V]:
    """Fail at import time when a lookup table misses (or invents) an enum member."""
    missing = set(enum_cls) - set(table)
    extra = set(table) - set(enum_cls)
    if missing or extra:
        raise RuntimeError(
            f"{enum_cls.__name__} table out of sync: "
            f"missing={sorted(m.value for m in missing)} extra={sorted(map(str, extra))}"
        )
    return table
