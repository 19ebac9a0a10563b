"""
Module: GroupDirectory

Group lookups used when validating the groups an "after time" wizard targets.

Classes:
    - GroupDirectory: Interface answering whether a named group exists.
    - InMemoryGroupDirectory: Set-backed implementation for tests and local use.
"""

from typing import Iterable


class GroupDirectory:
    """
    Interface for group existence lookups.

    Implementations raise on infrastructure failures; "no such group" must be
    reported by returning False, never by raising.
    """

    def group_exists(self, name: str) -> bool:
        """
        Checks whether a group called ``name`` exists.

        :param name: The group name.
        :type name: str
        :return: True if the group exists.
        :rtype: bool
        :raises NotImplementedError: Must be implemented in a subclass.
        """
        raise NotImplementedError


class InMemoryGroupDirectory(GroupDirectory):
    """Group directory backed by a set of names."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self.names = set(names)

    def group_exists(self, name: str) -> bool:
        return name in self.names
