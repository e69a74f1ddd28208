# Colour palettes, keyed by theme name. "clock_running" is used for the clock while counting down, "clock_idle"
# while cleared or paused.
THEMES = {
    "Light": {
        "bg": "#FFF8F0",
        "text": "#3E2723",
        "card_bg": "#D7B899",
        "card_text": "#3E2723",
        "button_bg": "#A1887F",
        "button_text": "#FFFFFF",
        "button_hover": "#8D6E63",
        "button_pressed": "#6D4C41",
        "clock_running": "#4E342E",
        "clock_idle": "#BCAAA4",
    },
    "Dark": {
        "bg": "#1E1A18",
        "text": "#EFEBE9",
        "card_bg": "#5D4037",
        "card_text": "#EFEBE9",
        "button_bg": "#795548",
        "button_text": "#FFFFFF",
        "button_hover": "#8D6E63",
        "button_pressed": "#4E342E",
        "clock_running": "#D7CCC8",
        "clock_idle": "#6D4C41",
    },
}
