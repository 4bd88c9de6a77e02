from enum import Enum

class CATEGORY(Enum):
    """
    Categories for ProductModel
    """
    SMARTPHONE = "Smartphone"
    LAPTOP = "Laptop"
    APPLIANCE = "Appliance"
