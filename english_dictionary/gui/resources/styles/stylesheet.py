"""Application stylesheet."""

import re

from english_dictionary.presenters import MessageLevel

from ._variables import get_variable_dict

LEVEL_COLORS = {
    MessageLevel.INFO: "#2563eb",
    MessageLevel.SUCCESS: "#16a34a",
    MessageLevel.WARNING: "#d97706",
    MessageLevel.DANGER: "#dc2626",
}

_QSS = """
QWidget#dictionary-card {
    background-color: #ffffff;
    border-radius: ${border-radius-large}px;
}
QLabel#title {
    font-size: ${font-size-title}px;
    font-weight: bold;
}
QLineEdit#search-input {
    font-size: ${font-size-body}px;
    padding: ${spacing-xs}px;
    border: 1px solid #d1d5db;
    border-radius: ${border-radius-default}px;
}
QLabel#info {
    color: #4b5563;
    font-size: ${font-size-body}px;
}
QLabel#headword {
    font-size: ${font-size-headword}px;
    font-weight: bold;
}
QLabel#subtitle, QLabel#caption {
    color: #6b7280;
    font-size: ${font-size-caption}px;
}
QLabel#section-title {
    font-size: ${font-size-section}px;
    font-weight: bold;
}
QPushButton#synonym {
    border: 1px solid #d1d5db;
    border-radius: ${border-radius-small}px;
    padding: ${spacing-xxs}px ${spacing-xs}px;
    color: #2563eb;
}
QPushButton#synonym:hover {
    background-color: #eff6ff;
}
QToolButton {
    border: none;
}
QFrame#notification QLabel {
    color: white;
}
"""


def build_stylesheet() -> str:
    """Build the application stylesheet with ${variable-name} placeholders substituted."""
    variables = get_variable_dict()

    def replace_var(match: re.Match) -> str:
        return variables.get(match.group(1), match.group(0))

    return re.sub(r"\$\{([a-z0-9-]+)\}", replace_var, _QSS)
