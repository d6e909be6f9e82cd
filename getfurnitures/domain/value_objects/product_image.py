"""Stored product image metadata"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ProductImage:
    filename: str
    path: str
    mimetype: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['ProductImage']:
        if not data:
            return None
        return cls(
            filename=data.get("filename", ""),
            path=data.get("path", ""),
            mimetype=data.get("mimetype", ""),
        )
