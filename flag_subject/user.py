import copy
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, Optional

from pydantic import (
    PrivateAttr,
    TypeAdapter,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

from flag_subject.base_model import SdkBaseModel
from flag_subject.constants import (
    ANONYMOUS,
    AVATAR,
    COUNTRY,
    CUSTOM,
    EMAIL,
    FIRST_NAME,
    IP,
    KEY,
    LAST_NAME,
    NAME,
    SECONDARY,
)
from flag_subject.types import Attributes, AttributeValue
from flag_subject.validation import normalize_key

_attributes_adapter: TypeAdapter[Attributes] = TypeAdapter(Attributes)


class User(SdkBaseModel):
    """Attributes of a user, device or account that flags are evaluated against.

    The only identifying property is ``key``. For authenticated users it may be a
    username or e-mail address, for anonymous users an IP address or session ID.
    Instances are frozen; use :meth:`with_changes` or
    :class:`flag_subject.builder.UserBuilder` to derive a modified copy.
    """

    key: Optional[str] = None
    secondary: Optional[str] = None
    ip: Optional[str] = None
    # ISO 3166-1 alpha-2 code, e.g. "US"
    country: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    # URL of the avatar image
    avatar: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    anonymous: Optional[bool] = None
    private_attribute_names: FrozenSet[str] = frozenset()

    # only handed out as a copy, see ``custom``
    _custom: Attributes = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _store_custom(cls, data: Any, handler: ValidatorFunctionWrapHandler) -> "User":
        if not isinstance(data, Mapping):
            return handler(data)

        data = dict(data)
        custom = _attributes_adapter.validate_python(
            _to_attribute_value(data.pop(CUSTOM, None) or {})
        )
        user = handler(data)
        user._custom = custom
        return user

    @field_validator("key", mode="before")
    @classmethod
    def _normalize_key(cls, value: Any) -> Optional[str]:
        return normalize_key(value)

    @field_validator("private_attribute_names", mode="before")
    @classmethod
    def _coalesce_private(cls, value: Any) -> Any:
        return frozenset() if value is None else value

    @classmethod
    def from_dict(cls, props: Dict[str, Any]) -> "User":
        """Creates a user from its JSON representation

        Keys use the camelCase wire names (``firstName``, ``privateAttributeNames``),
        custom attributes live under ``custom``. Unknown keys are ignored.
        """
        return cls.model_validate(props)

    def with_changes(self, **changes: Any) -> "User":
        """Returns a new user with the given attributes replaced

        Changes are validated like constructor arguments, so ``with_changes(key=42)``
        stores the key ``"42"``. ``custom`` replaces all custom attributes.
        """
        props = self.model_dump()
        props[CUSTOM] = self._custom
        props.update(changes)
        return User.model_validate(props)

    @property
    def custom(self) -> Attributes:
        """A copy of the custom attributes; changing it does not affect the user."""
        return copy.deepcopy(self._custom)

    def value_for(self, attribute: str) -> AttributeValue:
        """Looks up an attribute by name for rule matching

        Built-in attributes are matched by their exact wire name, everything else is
        read from the custom attributes. ``secondary`` is never returned. Unknown
        attributes yield ``None``.
        """
        if attribute == KEY:
            return self.key
        elif attribute == SECONDARY:
            return None
        elif attribute == IP:
            return self.ip
        elif attribute == COUNTRY:
            return self.country
        elif attribute == EMAIL:
            return self.email
        elif attribute == NAME:
            return self.name
        elif attribute == AVATAR:
            return self.avatar
        elif attribute == FIRST_NAME:
            return self.first_name
        elif attribute == LAST_NAME:
            return self.last_name
        elif attribute == ANONYMOUS:
            return self.anonymous
        return self._custom.get(attribute, None)

    def is_key_blank(self) -> bool:
        # a missing key is not a blank key
        return self.key is not None and self.key == ""

    def __repr_args__(self):
        yield from super().__repr_args__()
        yield CUSTOM, self._custom


def _to_attribute_value(value: Any) -> Any:
    # tuples and other mappings are accepted as lists and dicts
    if isinstance(value, Mapping):
        return {k: _to_attribute_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [_to_attribute_value(v) for v in value]
    return value
