# video_rental/utils/constants.py

"""
Global constants for price codes and statement kinds.
These constants are imported by both models and services.
"""


class PriceCode:
    REGULAR = "regular"
    NEW_RELEASE = "new_release"
    CHILDRENS = "childrens"


# Integer classification codes kept for callers that still send them.
PRICE_CODE_ALIASES = {
    0: PriceCode.REGULAR,
    1: PriceCode.NEW_RELEASE,
    2: PriceCode.CHILDRENS,
}


class StatementKind:
    TEXT = "text"
    HTML = "html"
