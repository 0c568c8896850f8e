from typing import Optional

from markupsafe import Markup, escape


def quebras_de_linha(texto: Optional[str]) -> Markup:
    """Escape the text and turn line breaks into ``<br>`` for the details panel."""
    if not texto:
        return Markup("")
    return Markup("<br>").join(escape(texto).split("\n"))
