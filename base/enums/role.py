from enum import Enum

class ROLE(Enum):
    """
    Roles for UserModel
    """
    CUSTOMER = "Customer"
    MANAGER = "Manager"
    ADMIN = "Admin"
