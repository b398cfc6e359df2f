from PyQt5.QtGui import QFont

WARNING_COLOUR = "red"


def get_font():
    return QFont("FreeSans", 11)


def get_stylesheet(colour):
    """Window stylesheet; the colour button shows the current line colour."""
    return """
    QLabel#warning {{
        color: {warning};
    }}
    QLabel#usage {{
        color: rgb(90, 90, 90);
    }}
    QPushButton#colour {{
        background-color: {colour};
        border: 1px solid rgb(51, 51, 51);
        min-height: 20px;
    }}
    """.format(warning=WARNING_COLOUR, colour=colour)


def get_total_style(warn):
    """Style for the shape count label, red once the run gets large."""
    return f"color: {WARNING_COLOUR if warn else 'black'};"
