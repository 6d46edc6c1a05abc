"""Entity metadata shared by every record exchanged with the Yext API."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

EntityType = str


class UnorderedStrings:
    """Immutable set of strings that serializes as a JSON array.

    Equality ignores order and duplicates; iteration keeps first-seen order.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[str] = ()):
        self._items: tuple[str, ...] = tuple(dict.fromkeys(items))

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnorderedStrings):
            return frozenset(self._items) == frozenset(other._items)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._items))

    def __repr__(self) -> str:
        return f"UnorderedStrings({list(self._items)!r})"

    def to_list(self) -> list[str]:
        return list(self._items)


@runtime_checkable
class Entity(Protocol):
    """Anything that can report its id and entity type."""

    def get_entity_id(self) -> str: ...

    def get_entity_type(self) -> EntityType: ...


@dataclass
class EntityMeta:
    """The ``meta`` object attached to every entity.

    ``None`` means the field is unset, which is distinct from an explicit
    empty string or empty list.
    """

    id: str | None = None
    account_id: str | None = None
    entity_type: EntityType = ""
    folder_id: str | None = None
    label_ids: UnorderedStrings | None = None
    category_ids: list[str] | None = None
    language: str | None = None
    country_code: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EntityMeta:
        label_ids = data.get("labelIds")
        category_ids = data.get("categoryIds")
        return cls(
            id=data.get("id"),
            account_id=data.get("accountId"),
            entity_type=data.get("entityType") or "",
            folder_id=data.get("folderId"),
            label_ids=UnorderedStrings(label_ids) if label_ids is not None else None,
            category_ids=list(category_ids) if category_ids is not None else None,
            language=data.get("language"),
            country_code=data.get("countryCode"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the API shape, omitting unset fields."""
        out: dict[str, Any] = {}
        if self.id is not None:
            out["id"] = self.id
        if self.account_id is not None:
            out["accountId"] = self.account_id
        if self.entity_type:
            out["entityType"] = self.entity_type
        if self.folder_id is not None:
            out["folderId"] = self.folder_id
        if self.label_ids is not None:
            out["labelIds"] = self.label_ids.to_list()
        if self.category_ids is not None:
            out["categoryIds"] = list(self.category_ids)
        if self.language is not None:
            out["language"] = self.language
        if self.country_code is not None:
            out["countryCode"] = self.country_code
        return out


@dataclass
class BaseEntity:
    """Typed entity backed by an :class:`EntityMeta`.

    ``nil_is_empty`` is per-instance configuration: when set, callers treat
    unset fields on this entity as empty values rather than "leave alone".
    """

    meta: EntityMeta | None = None
    nil_is_empty: bool = field(default=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], nil_is_empty: bool = False) -> BaseEntity:
        meta = data.get("meta")
        return cls(
            meta=EntityMeta.from_dict(meta) if isinstance(meta, Mapping) else None,
            nil_is_empty=nil_is_empty,
        )

    def get_entity_id(self) -> str:
        if self.meta is not None and self.meta.id is not None:
            return self.meta.id
        return ""

    def get_entity_type(self) -> EntityType:
        if self.meta is not None:
            return self.meta.entity_type
        return ""


class RawEntity(dict[str, Any]):
    """Entity whose schema is unknown: the decoded JSON document itself.

    Lookups never raise; any unexpected shape yields an empty value.
    """

    def _meta_str(self, key: str) -> str:
        meta = self.get("meta")
        if not isinstance(meta, Mapping):
            return ""
        value = meta.get(key)
        return value if isinstance(value, str) else ""

    def get_entity_id(self) -> str:
        return self._meta_str("id")

    def get_entity_type(self) -> EntityType:
        return self._meta_str("entityType")
