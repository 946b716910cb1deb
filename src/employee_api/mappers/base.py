"""Base mapper interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

D = TypeVar("D")
E = TypeVar("E")


class Mapper(ABC, Generic[D, E]):
    """Bidirectional conversion between a transfer object and a storage entity."""

    @abstractmethod
    def to_entity(self, dto: D) -> E:
        """Build a new, unsaved entity from a transfer object.

        Args:
            dto: Transfer object received from a client

        Returns:
            Entity carrying the transfer object's fields
        """
        pass

    @abstractmethod
    def to_dto(self, entity: E) -> D:
        """Build a transfer object from a stored entity.

        Args:
            entity: Stored entity

        Returns:
            Transfer object to return to a client
        """
        pass

    @abstractmethod
    def apply(self, dto: D, entity: E) -> E:
        """Copy a transfer object's fields onto an existing entity.

        Args:
            dto: Transfer object received from a client
            entity: Entity to overwrite

        Returns:
            The same entity, modified in place
        """
        pass
