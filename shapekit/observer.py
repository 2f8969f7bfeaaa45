"""The observer pattern: subjects notify their attached observers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something to be told when a subject changes."""

    @abstractmethod
    def update(self) -> None: ...


class Subject:
    """Keeps an ordered list of observers and notifies them all."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove every attachment of ``observer``; raise ValueError if it has none."""
        remaining = [o for o in self._observers if o is not observer]
        if len(remaining) == len(self._observers):
            raise ValueError("observer passed-in is not found")
        self._observers = remaining

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update()

    def observers(self) -> list[Observer]:
        return list(self._observers)