"""Global constants for the rallybook application."""

# Player field limits
NICKNAME_MIN_LENGTH = 2
NICKNAME_MAX_LENGTH = 20
FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 50
ADDRESS_MIN_LENGTH = 10
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15

# Game field limits
COURT_NAME_MIN_LENGTH = 2

# Each skill level spans this many strength positions on the skill scale
STRENGTHS_PER_LEVEL = 3

# Default game settings
DEFAULT_COURT_NAME = "Court 1"
DEFAULT_COURT_RATE = 400.0
DEFAULT_SHUTTLE_PRICE = 150.0
DEFAULT_DIVIDE_EQUALLY = True
DEFAULT_CURRENCY_SYMBOL = "₱"

# Display fallbacks
UNTITLED_GAME = "Untitled Game"
NO_SCHEDULE = "No schedule"

# Storage keys shared by the to_dict/from_dict representations
FIELD_ID = "id"
FIELD_CREATED_AT = "createdAt"
FIELD_UPDATED_AT = "updatedAt"
