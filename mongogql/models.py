from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Post:
    id: int
    slug: str
    title: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> 'Post':
        # Missing fields decode to empty values.
        return cls(id=doc.get('ID', 0), slug=doc.get('slug', ''), title=doc.get('title', ''))

    def to_document(self) -> Dict[str, Any]:
        return {'ID': self.id, 'title': self.title, 'slug': self.slug}


SEED_POSTS = (
    Post(id=1, slug='first-post', title='First post'),
    Post(id=2, slug='second-post', title='Second post'),
    Post(id=3, slug='third-post', title='Third post'),
)
