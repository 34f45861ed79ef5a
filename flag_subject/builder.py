from typing import Any, Dict, Optional, Set

from flag_subject.constants import (
    ANONYMOUS,
    AVATAR,
    COUNTRY,
    EMAIL,
    FIRST_NAME,
    IP,
    KEY,
    LAST_NAME,
    NAME,
    SECONDARY,
)
from flag_subject.types import Attributes, AttributeValue
from flag_subject.user import User


class UserBuilder:
    """Accumulates user attributes and produces immutable :class:`User` records.

    Every setter returns the builder, so calls can be chained::

        user = UserBuilder("user-123").email("alice@example.com").set("plan", 1).build()

    A builder is meant to be used by a single thread.
    """

    def __init__(self, key: Any):
        self.__key = key
        self.__secondary: Optional[str] = None
        self.__ip: Optional[str] = None
        self.__country: Optional[str] = None
        self.__email: Optional[str] = None
        self.__name: Optional[str] = None
        self.__avatar: Optional[str] = None
        self.__first_name: Optional[str] = None
        self.__last_name: Optional[str] = None
        self.__anonymous: Optional[bool] = None
        self.__custom: Attributes = {}
        self.__private: Set[str] = set()

    @classmethod
    def from_user(cls, user: User) -> "UserBuilder":
        """Creates a builder holding all attributes of an existing user"""
        builder = cls(user.key)
        builder.__secondary = user.secondary
        builder.__ip = user.ip
        builder.__country = user.country
        builder.__email = user.email
        builder.__name = user.name
        builder.__avatar = user.avatar
        builder.__first_name = user.first_name
        builder.__last_name = user.last_name
        builder.__anonymous = user.anonymous
        builder.__custom = user.custom
        builder.__private = set(user.private_attribute_names)
        return builder

    def build(self) -> User:
        return User(
            key=self.__key,
            secondary=self.__secondary,
            ip=self.__ip,
            country=self.__country,
            email=self.__email,
            name=self.__name,
            avatar=self.__avatar,
            first_name=self.__first_name,
            last_name=self.__last_name,
            anonymous=self.__anonymous,
            custom=self.__custom,
            private_attribute_names=frozenset(self.__private),
        )

    def key(self, key: Any) -> "UserBuilder":
        self.__key = key
        return self

    def secondary(self, secondary: Optional[str]) -> "UserBuilder":
        self.__secondary = secondary
        return self

    def ip(self, ip: Optional[str]) -> "UserBuilder":
        self.__ip = ip
        return self

    def country(self, country: Optional[str]) -> "UserBuilder":
        self.__country = country
        return self

    def email(self, email: Optional[str]) -> "UserBuilder":
        self.__email = email
        return self

    def name(self, name: Optional[str]) -> "UserBuilder":
        self.__name = name
        return self

    def avatar(self, avatar: Optional[str]) -> "UserBuilder":
        self.__avatar = avatar
        return self

    def first_name(self, first_name: Optional[str]) -> "UserBuilder":
        self.__first_name = first_name
        return self

    def last_name(self, last_name: Optional[str]) -> "UserBuilder":
        self.__last_name = last_name
        return self

    def anonymous(self, anonymous: Optional[bool]) -> "UserBuilder":
        self.__anonymous = anonymous
        return self

    def custom(self, custom: Optional[Dict[str, AttributeValue]]) -> "UserBuilder":
        """Replaces all custom attributes; ``None`` clears them"""
        self.__custom = dict(custom) if custom else {}
        return self

    def set(self, attribute: str, value: AttributeValue) -> "UserBuilder":
        """Sets an attribute by its wire name

        Built-in names (``email``, ``firstName``, ...) set the built-in attribute,
        any other name sets a custom attribute.
        """
        if attribute == KEY:
            return self.key(value)
        elif attribute == SECONDARY:
            return self.secondary(value)  # type: ignore
        elif attribute == IP:
            return self.ip(value)  # type: ignore
        elif attribute == COUNTRY:
            return self.country(value)  # type: ignore
        elif attribute == EMAIL:
            return self.email(value)  # type: ignore
        elif attribute == NAME:
            return self.name(value)  # type: ignore
        elif attribute == AVATAR:
            return self.avatar(value)  # type: ignore
        elif attribute == FIRST_NAME:
            return self.first_name(value)  # type: ignore
        elif attribute == LAST_NAME:
            return self.last_name(value)  # type: ignore
        elif attribute == ANONYMOUS:
            return self.anonymous(value)  # type: ignore

        self.__custom[attribute] = value
        return self

    def private(self, *attributes: str) -> "UserBuilder":
        """Marks attributes, built-in or custom, as private

        Private attributes are left out of formatted event users; they are still used
        for flag evaluation.
        """
        self.__private.update(attributes)
        return self
