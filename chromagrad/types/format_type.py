# No dependencies
from enum import Enum


class OutputFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGB255 = "rgb255"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"


max_channel = {
    "unit": 1.0,
    "byte": 255,
    "percentage": 100.0,
}
