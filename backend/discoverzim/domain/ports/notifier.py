"""
Notifier Port - Surfaces a user-visible notice ({title, description, variant}).
"""

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class AccessNotice:
    title: str
    description: str
    variant: str = "default"

    def as_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "variant": self.variant,
        }


Notifier = Callable[[AccessNotice], None]
