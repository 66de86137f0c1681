# Named starting points for the Dimension Model.
# Board sizes include the usual overshoot past the book block.

DEFAULT_PRESET = "a5"

PRESETS = {
    # A5 book (148 x 210) with 5mm/6mm board overshoot
    "a5": {
        "unit": "mm",
        "board_width": 153.0,
        "board_height": 216.0,
        "spine_width": 20.0,
        "hinge_gap": 7.0,  # usually 5-7mm
        "turn_in": 18.0,  # usually 15-20mm
        "bleed": 0.0,  # usually 3-5mm when used
    },
    # US trade 6 x 9 in with 1/8in overshoot
    "6x9": {
        "unit": "in",
        "board_width": 6.125,
        "board_height": 9.25,
        "spine_width": 1.0,
        "hinge_gap": 0.3125,
        "turn_in": 0.75,
        "bleed": 0.125,
    },
}
