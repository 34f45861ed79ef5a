import logging

import pytest

from flag_subject.builder import UserBuilder
from flag_subject.config import Config
from flag_subject.user import User
from flag_subject.user_formatter import UserFormatter

user = (
    UserBuilder("user-1")
    .secondary("bucket-1")
    .ip("127.0.0.1")
    .country("NZ")
    .email("alice@example.com")
    .name("Alice Smith")
    .first_name("Alice")
    .last_name("Smith")
    .anonymous(False)
    .set("plan", "gold")
    .set("seats", 5)
    .build()
)


def test_format_user_without_private_attributes():
    assert UserFormatter().format_user(user) == {
        "key": "user-1",
        "secondary": "bucket-1",
        "ip": "127.0.0.1",
        "country": "NZ",
        "email": "alice@example.com",
        "name": "Alice Smith",
        "firstName": "Alice",
        "lastName": "Smith",
        "anonymous": False,
        "custom": {"plan": "gold", "seats": 5},
    }


def test_format_user_leaves_out_unset_attributes():
    assert UserFormatter().format_user(User(key="user-1")) == {"key": "user-1"}


def test_format_user_with_user_private_attributes():
    private_user = (
        UserBuilder.from_user(user).private("email", "plan", "avatar").build()
    )
    formatted = UserFormatter().format_user(private_user)

    assert "email" not in formatted
    assert formatted["custom"] == {"seats": 5}
    # avatar was never set, so it is not reported
    assert formatted["privateAttrs"] == ["email", "plan"]
    assert formatted["firstName"] == "Alice"


def test_format_user_with_configured_private_attributes():
    formatter = UserFormatter(
        Config(private_attribute_names=frozenset({"lastName", "seats"}))
    )
    formatted = formatter.format_user(
        UserBuilder.from_user(user).private("country").build()
    )

    assert formatted["privateAttrs"] == ["country", "lastName", "seats"]
    assert formatted["custom"] == {"plan": "gold"}
    assert "lastName" not in formatted
    assert "country" not in formatted


def test_format_user_with_all_attributes_private():
    formatter = UserFormatter(Config(all_attributes_private=True))
    formatted = formatter.format_user(user)

    assert formatted == {
        "key": "user-1",
        "anonymous": False,
        "privateAttrs": [
            "country",
            "email",
            "firstName",
            "ip",
            "lastName",
            "name",
            "plan",
            "seats",
            "secondary",
        ],
    }


def test_format_user_never_redacts_key():
    private_user = (
        UserBuilder("user-1").anonymous(True).private("key", "anonymous").build()
    )
    assert UserFormatter().format_user(private_user) == {
        "key": "user-1",
        "anonymous": True,
    }


def test_format_user_does_not_change_user():
    private_user = UserBuilder.from_user(user).private("plan").build()
    formatted = UserFormatter(Config(all_attributes_private=True)).format_user(
        private_user
    )
    formatted["key"] = "changed"

    assert private_user.key == "user-1"
    assert private_user.value_for("plan") == "gold"
    assert private_user.private_attribute_names == frozenset({"plan"})


def test_format_user_without_key_in_graceful_mode(caplog):
    with caplog.at_level(logging.ERROR):
        assert UserFormatter().format_user(User(email="alice@example.com")) is None
    assert "Error formatting user" in caplog.text
    assert "cannot be missing" in caplog.text


def test_format_user_without_key_not_graceful():
    formatter = UserFormatter(Config(is_graceful_mode=False))
    with pytest.raises(ValueError, match="Invalid value for key: cannot be missing"):
        formatter.format_user(User())


def test_set_is_graceful_mode():
    formatter = UserFormatter()
    formatter.set_is_graceful_mode(False)
    with pytest.raises(ValueError):
        formatter.format_user(User())

    formatter.set_is_graceful_mode(True)
    assert formatter.format_user(User()) is None


def test_format_user_with_blank_key(caplog):
    with caplog.at_level(logging.WARNING):
        formatted = UserFormatter(Config(is_graceful_mode=False)).format_user(
            User(key="", email="alice@example.com")
        )
    assert formatted == {"key": "", "email": "alice@example.com"}
    assert "User key is blank" in caplog.text


def test_invalid_config():
    with pytest.raises(ValueError, match="cannot be blank"):
        UserFormatter(Config(private_attribute_names=frozenset({"email", ""})))
