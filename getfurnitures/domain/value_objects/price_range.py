"""Price range value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceRange:
    min: float
    max: float

    def __post_init__(self):
        if self.min is None or self.max is None:
            raise ValueError("Both minimum and maximum price are required")
        if self.min < 0:
            raise ValueError("Price cannot be negative")
        if self.max < self.min:
            raise ValueError("Maximum price cannot be lower than minimum price")

    def __str__(self) -> str:
        return f"{self.min:g} - {self.max:g}"
