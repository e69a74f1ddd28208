from .colors import THEMES


# Builds the application-wide Qt stylesheet for the given theme name. Unknown names fall back to "Light".
def build_stylesheet(theme_name):
    t = THEMES.get(theme_name, THEMES["Light"])
    return f"""
        QMainWindow, QWidget {{
            background-color: {t['bg']};
            color: {t['text']};
        }}
        #adjusterCard {{
            background-color: {t['card_bg']};
            border-radius: 6px;
        }}
        #adjusterCard QLabel, #adjusterCard QToolButton {{
            background: transparent;
            color: {t['card_text']};
        }}
        QPushButton {{
            background-color: {t['button_bg']};
            color: {t['button_text']};
            border: none;
            border-radius: 4px;
            padding: 6px 16px;
        }}
        QPushButton:hover {{
            background-color: {t['button_hover']};
        }}
        QPushButton:pressed {{
            background-color: {t['button_pressed']};
        }}
    """
