from .role import ROLE
from .category import CATEGORY
from .grouping import GROUPING
