from typing import FrozenSet

from flag_subject.base_model import SdkBaseModel
from flag_subject.validation import validate_not_blank


class Config(SdkBaseModel):
    # redact every attribute except key and anonymous
    all_attributes_private: bool = False
    # redacted for every user, in addition to the user's own private attributes
    private_attribute_names: FrozenSet[str] = frozenset()
    is_graceful_mode: bool = True

    def _validate(self):
        for attribute in self.private_attribute_names:
            validate_not_blank("private_attribute_names", attribute)
