from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Selection policy
MEALS_PER_DAY: Final[int] = 3
MAX_ITEM_QUANTITY: Final[int] = 3
# Upper bound applied to a single addition step. Numerically equal to
# MAX_ITEM_QUANTITY today but tracked separately.
PER_STEP_SERVING_CAP: Final[int] = 3
LOWER_BAND: Final[float] = 0.9
UPPER_BAND: Final[float] = 1.1

UNNAMED_ITEM: Final[str] = "Unnamed"
