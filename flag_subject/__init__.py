from flag_subject.builder import UserBuilder
from flag_subject.config import Config
from flag_subject.types import Attributes, AttributeValue
from flag_subject.user import User
from flag_subject.user_formatter import UserFormatter
from flag_subject.version import __version__

__all__ = [
    "Attributes",
    "AttributeValue",
    "Config",
    "User",
    "UserBuilder",
    "UserFormatter",
    "__version__",
]
