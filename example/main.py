import logging
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from flag_subject import Config, UserBuilder, UserFormatter  # noqa


def build_and_format():
    logging.basicConfig(level=logging.INFO)

    user = (
        UserBuilder(1234)
        .first_name("Alice")
        .email("alice@example.com")
        .country("NZ")
        .set("plan", "gold")
        .private("email")
        .build()
    )

    for attribute in ("key", "firstName", "plan", "secondary", "unknown"):
        print(f"{attribute}: {user.value_for(attribute)!r}")

    formatter = UserFormatter(Config(private_attribute_names=frozenset({"country"})))
    print(formatter.format_user(user))

    # a user without a key is dropped with an error log
    print(formatter.format_user(UserBuilder(None).build()))


if __name__ == "__main__":
    build_and_format()
