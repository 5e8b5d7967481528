"""Bus d'évènements synchrone."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Type

Subscriber = Callable[[object], None]


class EventBus:
    """Diffuse les évènements aux abonnés, dans l'ordre d'abonnement.

    Un abonné peut filtrer sur un type d'évènement. Une exception levée par un
    abonné interrompt la diffusion et remonte à l'appelant de `publish`.
    """

    __slots__ = ("_subscribers",)

    def __init__(self) -> None:
        self._subscribers: List[Tuple[Optional[Type[object]], Subscriber]] = []

    def subscribe(
        self,
        callback: Subscriber,
        event_type: Optional[Type[object]] = None,
    ) -> Callable[[], None]:
        """Enregistre ``callback`` et retourne la fonction de désabonnement."""

        entry = (event_type, callback)
        self._subscribers.append(entry)

        def unsubscribe() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return unsubscribe

    def publish(self, event: object) -> None:
        # Copie: un abonné peut se désabonner pendant la diffusion
        for event_type, callback in list(self._subscribers):
            if event_type is None or isinstance(event, event_type):
                callback(event)
