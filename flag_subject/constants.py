# wire names of the built-in user attributes
KEY = "key"
SECONDARY = "secondary"
IP = "ip"
COUNTRY = "country"
EMAIL = "email"
NAME = "name"
AVATAR = "avatar"
FIRST_NAME = "firstName"
LAST_NAME = "lastName"
ANONYMOUS = "anonymous"
CUSTOM = "custom"

# formatter output
PRIVATE_ATTRS = "privateAttrs"
LOG_PREFIX = "[flag-subject]"
