# app/shared/schemas/common.py
from pydantic import BaseModel, PlainSerializer
from typing import Annotated, Any, Dict, Iterable, List, Optional
from decimal import Decimal

# Montos exactos en memoria, número JSON en la respuesta
Monto = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Link(BaseModel):
    rel: str
    href: str


class LinkSet:
    """Enlaces hipermedia de un recurso, serializados al estilo HAL"""

    def __init__(self, links: Optional[Iterable[Link]] = None):
        self._links: List[Link] = list(links or [])

    def add(self, rel: str, href: str) -> "LinkSet":
        self._links.append(Link(rel=rel, href=href))
        return self

    def get(self, rel: str) -> Optional[Link]:
        for link in self._links:
            if link.rel == rel:
                return link
        return None

    @property
    def rels(self) -> List[str]:
        return [link.rel for link in self._links]

    def to_hal(self) -> Dict[str, Dict[str, str]]:
        return {link.rel: {"href": link.href} for link in self._links}


def entity_model(content: Any, links: LinkSet) -> Dict[str, Any]:
    """Recurso con sus campos en el primer nivel y `_links` al lado"""
    if isinstance(content, BaseModel):
        body = content.model_dump(mode="json")
    else:
        body = dict(content)
    body["_links"] = links.to_hal()
    return body


def collection_model(relation: str, items: List[Dict[str, Any]], links: LinkSet) -> Dict[str, Any]:
    """Colección HAL: items bajo `_embedded.<relation>`"""
    return {
        "_embedded": {relation: items},
        "_links": links.to_hal(),
    }
