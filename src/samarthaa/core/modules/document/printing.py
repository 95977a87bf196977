"""Printable HTML rendering, for browsers that print to PDF themselves."""

from liquid import Environment

from samarthaa.core.modules.document.utils import DISCLAIMER, is_heading, outline_document


PRINT_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ locale | escape }}">
<head>
<meta charset="utf-8">
<title>{{ title | escape }}</title>
<style>
  @page { size: A4; margin: 2cm; }
  body { font-family: "Times New Roman", serif; font-size: 12pt; line-height: 1.5; color: #000; }
  h1 { text-align: center; font-size: 16pt; margin-bottom: 24pt; }
  p { text-align: justify; margin: 4pt 0; }
  p.heading { font-weight: bold; text-align: left; margin-top: 10pt; }
  p.disclaimer { font-size: 8pt; color: #666; text-align: center; margin-top: 24pt; }
</style>
</head>
<body onload="window.print()">
<h1>{{ title | escape }}</h1>
{% for block in blocks %}<p{% if block.heading %} class="heading"{% endif %}>{{ block.text | escape }}</p>
{% endfor %}<p class="disclaimer">{{ disclaimer | escape }}</p>
</body>
</html>
"""

_environment = Environment()
_template = _environment.from_string(PRINT_TEMPLATE)


def render_print_html(content: str, locale: str = "en-IN") -> str:
    """Render document content as a standalone HTML page that opens the print dialog."""
    outline = outline_document(content)
    blocks = [{"text": line, "heading": is_heading(line)} for line in outline.lines]
    return _template.render(title=outline.title, blocks=blocks, disclaimer=DISCLAIMER, locale=locale)
