from rich.color import Color
from rich.style import Style
from rich.theme import Theme

galaxy_primary = Color.parse("#C4A7F7")
galaxy_secondary = Color.parse("#a684e8")
galaxy_warning = Color.parse("#af9b28")
galaxy_error = Color.parse("#FF4500")
galaxy_success = Color.parse("#00cc7e")
galaxy_accent = Color.parse("#FF69B4")

HEXFRAME_THEME = Theme(
    {
        "hexframe.border": Style(color=galaxy_secondary, dim=True),
        "hexframe.offset": Style(color=galaxy_warning),
        "hexframe.offset_pad": Style(dim=True),
        "hexframe.byte_zero": Style(dim=True),
        "hexframe.byte_printable": Style(color=galaxy_primary, bold=True),
        "hexframe.byte_other": Style(color=galaxy_success),
        "hexframe.char": Style(color=galaxy_accent),
        "hexframe.dot": Style(dim=True),
        "hexframe.error": Style(color=galaxy_error, bold=True),
    }
)
