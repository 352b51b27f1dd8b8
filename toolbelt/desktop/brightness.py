"""External display brightness control through ddcutil.

Contains:
- parse_brightness: Read the current value from `ddcutil getvcp 10` output
- compute_brightness: Work out the new brightness for a request
- get_brightness: Query the display
- set_brightness: Apply a new brightness
"""

import re

from toolbelt.desktop.exceptions import BrightnessError, CommandError
from toolbelt.desktop.runner import run_command

# VCP feature code for luminance
BRIGHTNESS_FEATURE = "10"

MIN_BRIGHTNESS = 30
MAX_BRIGHTNESS = 100
STEP = 10
# Floor reached by stepping down, below the manual minimum
STEP_FLOOR = 10

CURRENT_VALUE_PATTERN = re.compile(r"current value =\s+(\d+)")

USAGE = 'You must specify a parameter, one of: "increase", "decrease", or a number from 30 to 100'
INVALID_PARAMETER = "Invalid parameter. It must be either 'increase', 'decrease', or a number from 30 to 100"


def parse_brightness(output: str) -> int:
    """Extract the current brightness from ddcutil getvcp output.

    Raises:
        BrightnessError: If the output has no current value.
    """
    match = CURRENT_VALUE_PATTERN.search(output)
    if not match:
        raise BrightnessError(f"Could not read the current brightness from:\n{output}")
    return int(match.group(1))


def compute_brightness(current: int, param: str) -> int:
    """Compute the target brightness.

    Args:
        current: The current brightness percentage.
        param: "increase", "decrease" or a number from 30 to 100.

    Returns:
        The new brightness percentage.

    Raises:
        BrightnessError: If param is missing or invalid.
    """
    param = (param or "").strip().lower()
    if not param:
        raise BrightnessError(USAGE)

    if param == "increase":
        return MAX_BRIGHTNESS if current >= MAX_BRIGHTNESS - STEP else current + STEP
    if param == "decrease":
        return STEP_FLOOR if current <= STEP_FLOOR + STEP else current - STEP
    if param.isdigit() and MIN_BRIGHTNESS <= int(param) <= MAX_BRIGHTNESS:
        return int(param)

    raise BrightnessError(INVALID_PARAMETER)


def get_brightness() -> int:
    """Read the current brightness from the display.

    Raises:
        BrightnessError: If ddcutil fails or prints no current value.
    """
    try:
        output = run_command(["sudo", "ddcutil", "getvcp", BRIGHTNESS_FEATURE])
    except CommandError as e:
        raise BrightnessError(f"{e}\n\nDo you need to run 'sudo modprobe i2c-dev'?")
    return parse_brightness(output)


def set_brightness(value: int) -> None:
    """Set the display brightness.

    Raises:
        BrightnessError: If ddcutil fails.
    """
    try:
        run_command(["sudo", "ddcutil", "setvcp", BRIGHTNESS_FEATURE, str(value)])
    except CommandError as e:
        raise BrightnessError(
            f"Encountered error setting external display brightness to {value}%\n\n{e}"
        )
