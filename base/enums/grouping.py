from enum import Enum

class GROUPING(Enum):
    """
    Accepted values of the `grouping` query param on product listings
    """
    CATEGORY = "category"
    MODEL = "model"
