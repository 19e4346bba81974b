# No dependencies
from enum import Enum


class CompatibilityLevel(str, Enum):
    HTML4 = "html4"
    CSS1 = "css1"
    CSS2 = "css2"
    CSS2_1 = "css2.1"
    CSS3 = "css3"
    HTML5_LEGACY = "html5-legacy"


HTML_WHITESPACE = " \t\n\f\r"

LEGACY_MAX_LENGTH = 128
LEGACY_MAX_COMPONENT = 8

BYTE_MAX = 255
PERCENT_MAX = 100
HUE_360 = 360
