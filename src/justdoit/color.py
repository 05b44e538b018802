# SPDX-License-Identifier: MIT

# Shared
HINT_COLOR = "bright_black"
COMPLETED_COLOR = "green"

# Default theme
DEFAULT_TITLE_COLOR = "dark_orange"
DEFAULT_BAR_COLOR = "dark_orange"
DEFAULT_BORDER_COLOR = "plum1"
DEFAULT_LABEL_COLOR = "sandy_brown"

# Retro theme, green phosphor
RETRO_TEXT_COLOR = "bright_green"
RETRO_RULE_COLOR = "green"

# Synthwave theme, neon on dark violet
SYNTHWAVE_BACKGROUND_COLOR = "#3b3255"
SYNTHWAVE_TEXT_COLOR = "#30c0b7"
SYNTHWAVE_BORDER_COLOR = "#498099"
SYNTHWAVE_BAR_COLOR = "#ee227d"
SYNTHWAVE_ACCENT_COLOR = "#fd8083"

# Hourglass theme
HOURGLASS_FRAME_COLOR = "sandy_brown"
HOURGLASS_SAND_COLOR = "gold1"
HOURGLASS_EMPTY_COLOR = "grey37"
HOURGLASS_DROPLET_COLOR = "light_goldenrod1"
