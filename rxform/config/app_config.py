"""Centralized configuration for the project."""
import os

# Logging settings
LOG_DIR = "logs"
LOG_FILE = os.path.join(LOG_DIR, "rxform.log")
LOG_LEVEL = "INFO"
LOG_TO_FILE = True

# Numeric option defaults
DEFAULT_ALLOW_DECIMALS = True
DEFAULT_ALLOW_NEGATIVE = False
DEFAULT_MAX_DECIMALS = 2

# ITU-T E.164 caps a phone number at 15 digits
PHONE_MAX_DIGITS = 15

# Inventory form fields (store manager "add medicine" form)
INPUT_FIELDS = [
    {
        "path": "stripInfo.stock",
        "prompt": "Strip stock",
        "kind": "numeric",
        "preset": "QUANTITY"
    },
    {
        "path": "stripInfo.purchasePrice",
        "prompt": "Strip purchase price",
        "kind": "numeric",
        "preset": "PRICE"
    },
    {
        "path": "stripInfo.sellingPrice",
        "prompt": "Strip selling price",
        "kind": "numeric",
        "preset": "PRICE"
    },
    {
        "path": "stripInfo.mrp",
        "prompt": "Strip MRP",
        "kind": "numeric",
        "preset": "PRICE"
    },
    {
        "path": "individualInfo.stock",
        "prompt": "Individual unit stock",
        "kind": "numeric",
        "preset": "QUANTITY"
    },
    {
        "path": "individualInfo.sellingPrice",
        "prompt": "Individual unit selling price",
        "kind": "numeric",
        "preset": "PRICE"
    },
    {
        "path": "unitTypes.unitsPerStrip",
        "prompt": "Units per strip",
        "kind": "numeric",
        "preset": "QUANTITY",
        "overrides": {"min": 1}
    },
    {
        "path": "discount.value",
        "prompt": "Discount (%)",
        "kind": "numeric",
        "preset": "PERCENTAGE"
    },
    {
        "path": "customer.creditLimit",
        "prompt": "Customer credit limit",
        "kind": "numeric",
        "preset": "POSITIVE_NUMBER"
    },
    {
        "path": "supplier.phone",
        "prompt": "Supplier phone",
        "kind": "phone"
    }
]
