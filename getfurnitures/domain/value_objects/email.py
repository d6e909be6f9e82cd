"""Email value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self):
        normalized = (self.value or "").strip().lower()
        if "@" not in normalized or normalized.startswith("@") or normalized.endswith("@"):
            raise ValueError(f"Invalid email address: {self.value!r}")
        # Emails are unique case-insensitively, store the lower-cased form
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
