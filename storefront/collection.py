# storefront/collection.py
import json
from typing import Any, Callable, Dict, Generic, Iterator, List, Tuple, TypeVar

from .logger import get_logger
from .storage import LocalStorage

logger = get_logger(__name__)

T = TypeVar("T")


class PersistentCollection(Generic[T]):
    """
    Ordered in-memory list of entries mirrored to one LocalStorage key.

    Hydrated once, in the constructor. Subclasses mutate self._entries and
    call self._commit(), which writes the whole list back and then tells
    subscribers. A missing or unreadable stored value means an empty start.
    """

    kind = "collection"

    def __init__(self, storage: LocalStorage, key: str):
        self._storage = storage
        self.key = key
        self._listeners: List[Callable[[Any], None]] = []
        self._entries: List[T] = self._hydrate()

    def _decode(self, raw: Dict[str, Any]) -> T:
        raise NotImplementedError

    def _encode(self, entry: T) -> Dict[str, Any]:
        raise NotImplementedError

    def _hydrate(self) -> List[T]:
        payload = self._storage.get_item(self.key)
        if payload is None:
            logger.debug("No stored %s under %s.", self.kind, self.key)
            return []
        try:
            raw = json.loads(payload)
            if not isinstance(raw, list):
                raise ValueError(f"expected a list, got {type(raw).__name__}")
            entries = [self._decode(r) for r in raw]
        except (ValueError, TypeError, KeyError, RecursionError) as e:
            logger.warning("Starting empty %s: key=%s reason=%s", self.kind, self.key, e)
            return []
        logger.debug("Hydrated %d %s entries from %s.", len(entries), self.kind, self.key)
        return entries

    def _persist(self) -> None:
        payload = json.dumps([self._encode(e) for e in self._entries])
        self._storage.set_item(self.key, payload)

    def _commit(self) -> None:
        self._persist()
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.exception("%s listener failed: %s", self.kind.capitalize(), e)

    def subscribe(self, listener: Callable[[Any], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def items(self) -> Tuple[T, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._entries))
