import logging
from typing import Any, Dict, List, Optional

from flag_subject.config import Config
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
    LOG_PREFIX,
    NAME,
    PRIVATE_ATTRS,
    SECONDARY,
)
from flag_subject.user import User
from flag_subject.validation import validate_present


logger = logging.getLogger(__name__)


class UserFormatter:
    """Turns users into the dictionaries sent with analytics events.

    Attributes declared private, either on the user or in the configuration, are left
    out and their names reported under ``privateAttrs``. ``key`` and ``anonymous``
    are always sent.
    """

    def __init__(self, config: Optional[Config] = None):
        config = config or Config()
        config._validate()
        self.__all_attributes_private = config.all_attributes_private
        self.__private_attribute_names = config.private_attribute_names
        self.__is_graceful_mode = config.is_graceful_mode

    def format_user(self, user: User) -> Optional[Dict[str, Any]]:
        try:
            return self.__format_user(user)
        except ValueError as e:
            if self.__is_graceful_mode:
                logger.error(f"{LOG_PREFIX} Error formatting user: " + str(e))
                return None
            raise e

    def set_is_graceful_mode(self, is_graceful_mode: bool):
        self.__is_graceful_mode = is_graceful_mode

    def __format_user(self, user: User) -> Dict[str, Any]:
        if user.is_key_blank():
            # an empty key is still sent, only a missing key is rejected
            logger.warning(
                f"{LOG_PREFIX} User key is blank, events for this user cannot be "
                "told apart"
            )
        else:
            validate_present(KEY, user.key)

        private_attrs: List[str] = []
        formatted: Dict[str, Any] = {KEY: user.key}

        built_in = (
            (SECONDARY, user.secondary),
            (IP, user.ip),
            (COUNTRY, user.country),
            (EMAIL, user.email),
            (NAME, user.name),
            (AVATAR, user.avatar),
            (FIRST_NAME, user.first_name),
            (LAST_NAME, user.last_name),
        )
        for attribute, value in built_in:
            if value is None:
                continue
            if self.__is_private(user, attribute):
                private_attrs.append(attribute)
            else:
                formatted[attribute] = value

        if user.anonymous is not None:
            formatted[ANONYMOUS] = user.anonymous

        custom: Dict[str, Any] = {}
        for attribute, value in user.custom.items():
            if self.__is_private(user, attribute):
                private_attrs.append(attribute)
            else:
                custom[attribute] = value
        if custom:
            formatted[CUSTOM] = custom

        if private_attrs:
            formatted[PRIVATE_ATTRS] = sorted(private_attrs)
        return formatted

    def __is_private(self, user: User, attribute: str) -> bool:
        return (
            self.__all_attributes_private
            or attribute in self.__private_attribute_names
            or attribute in user.private_attribute_names
        )
