from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class Post:
    slug: str
    title: str
    date: str
    excerpt: str
    content: Optional[str] = None

    def as_summary(self) -> Dict[str, str]:
        """Listing representation without the post body."""
        return {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "excerpt": self.excerpt,
        }

    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)
