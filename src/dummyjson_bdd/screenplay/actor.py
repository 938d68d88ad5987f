from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from dummyjson_bdd.errors import MissingAbilityError, NoActorInSpotlightError

logger = logging.getLogger(__name__)

A = TypeVar("A")


class Actor:
    def __init__(self, name: str) -> None:
        self.name = name
        self._abilities: Dict[type, Any] = {}
        self._memory: Dict[str, Any] = {}

    def who_can(self, *abilities: Any) -> "Actor":
        for ability in abilities:
            self._abilities[type(ability)] = ability
        return self

    def _find(self, kind: type) -> Optional[Any]:
        for ability in self._abilities.values():
            if isinstance(ability, kind):
                return ability
        return None

    def can(self, kind: type) -> bool:
        return self._find(kind) is not None

    def ability_to(self, kind: Type[A]) -> A:
        ability = self._find(kind)
        if ability is None:
            raise MissingAbilityError(f"{self.name} does not have the ability {kind.__name__}")
        return ability

    def attempt(self, *performables) -> None:
        """
        Perform tasks and interactions in order. Any error (TransportError
        included) aborts whatever remains.
        """
        for performable in performables:
            logger.debug("%s attempts to %s", self.name, performable)
            performable.perform_as(self)

    def ask(self, question):
        return question.answered_by(self)

    def remember(self, key: str, value: Any) -> None:
        self._memory[key] = value

    def recall(self, key: str) -> Any:
        try:
            return self._memory[key]
        except KeyError:
            raise KeyError(f"{self.name} does not remember {key!r}") from None

    def close(self) -> None:
        for ability in self._abilities.values():
            close = getattr(ability, "close", None)
            if close is not None:
                close()

    def __repr__(self) -> str:
        return f"Actor({self.name!r})"


class Stage:
    """
    Actors for one scenario. Actors are created on first reference by name
    and equipped by `cast`; the last referenced actor is in the spotlight.
    Create one Stage per scenario and close it when the scenario ends.
    """

    def __init__(self, cast: Optional[Callable[[Actor], Any]] = None) -> None:
        self._cast = cast
        self._actors: Dict[str, Actor] = {}
        self._spotlight: Optional[Actor] = None

    def actor(self, name: str) -> Actor:
        actor = self._actors.get(name)
        if actor is None:
            actor = Actor(name)
            if self._cast is not None:
                self._cast(actor)
            self._actors[name] = actor
            logger.debug("New actor on stage: %s", name)
        self._spotlight = actor
        return actor

    def actor_in_the_spotlight(self) -> Actor:
        if self._spotlight is None:
            raise NoActorInSpotlightError("No actor has been called onto the stage yet")
        return self._spotlight

    @property
    def actors(self) -> List[Actor]:
        return list(self._actors.values())

    def close(self) -> None:
        for actor in self._actors.values():
            actor.close()
        self._actors.clear()
        self._spotlight = None

    def __enter__(self) -> "Stage":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
