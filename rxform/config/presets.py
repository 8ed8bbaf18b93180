"""Named validation presets shared by the store manager forms."""

VALIDATION_PRESETS = {
    # Prices: decimals, no negatives, two places
    "PRICE": {
        "allow_decimals": True,
        "allow_negative": False,
        "max_decimals": 2,
        "min": 0
    },
    # Quantities and stock counts: whole numbers only
    "QUANTITY": {
        "allow_decimals": False,
        "allow_negative": False,
        "min": 0
    },
    "PERCENTAGE": {
        "allow_decimals": True,
        "allow_negative": False,
        "max_decimals": 2,
        "min": 0,
        "max": 100
    },
    "POSITIVE_NUMBER": {
        "allow_decimals": True,
        "allow_negative": False,
        "max_decimals": 2,
        "min": 0
    },
    "INTEGER": {
        "allow_decimals": False,
        "allow_negative": False,
        "min": 0
    }
}
