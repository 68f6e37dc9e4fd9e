from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")
S = TypeVar("S")

Observer = Callable[[T], None]
Unsubscribe = Callable[[], None]

_UNSET = object()


class ReadOnlyObservable(Generic[T]):
    """A value holder that pushes every update to its observers.

    Presentation code only ever sees this interface; mutation happens through
    the owning session.
    """

    def __init__(self, initial=_UNSET) -> None:
        self._value = initial
        self._observers: List[Observer] = []

    @property
    def value(self) -> Optional[T]:
        """Current value, or None if nothing has been published yet."""
        return None if self._value is _UNSET else self._value

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    def subscribe(self, observer: Observer, emit_current: bool = True) -> Unsubscribe:
        """Register an observer and return a callable that removes it again.

        With emit_current the observer immediately receives the current value,
        if one has been published.
        """
        self._observers.append(observer)
        if emit_current and self._value is not _UNSET:
            observer(self._value)

        def _unsubscribe() -> None:
            try:
                self._observers.remove(observer)
            except ValueError:
                pass

        return _unsubscribe

    def observer_count(self) -> int:
        return len(self._observers)

    def _publish(self, value: T) -> None:
        self._value = value
        # Snapshot so observers may unsubscribe while being notified.
        for observer in list(self._observers):
            observer(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Observable(ReadOnlyObservable[T]):
    """Mutable holder. Every set() notifies, even when the value is unchanged."""

    def set(self, value: T) -> None:
        self._publish(value)


class DerivedObservable(ReadOnlyObservable[T]):
    """Recomputes fn(source) on every upstream update and rebroadcasts it."""

    def __init__(self, source: ReadOnlyObservable[S], fn: Callable[[S], T]) -> None:
        super().__init__()
        self._fn = fn
        self._detach = source.subscribe(self._on_source, emit_current=True)

    def _on_source(self, value: S) -> None:
        self._publish(self._fn(value))

    def detach(self) -> None:
        """Stop following the source; the last derived value is kept."""
        self._detach()


def derived(source: ReadOnlyObservable[S], fn: Callable[[S], T]) -> DerivedObservable[T]:
    return DerivedObservable(source, fn)
