from typing import Mapping
import pystache
from contract_notifier.domain.ports import TemplateRenderer

# Mesma tabela de escape do mustache.js, usado pelo Veda para os modelos de e-mail
_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "/": "&#x2F;",
    "`": "&#x60;",
    "=": "&#x3D;",
}

def escape_html(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)

class MustacheTemplateRenderer(TemplateRenderer):
    def __init__(self):
        self._renderer = pystache.Renderer(escape=escape_html, missing_tags="ignore")

    def render(self, template: str, view: Mapping[str, object]) -> str:
        return self._renderer.render(template, dict(view))
