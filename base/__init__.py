from .constants import Constants
