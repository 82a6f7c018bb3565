"""Static Swagger UI page for the generated documentation."""

import json
from html import escape
from typing import List, Sequence

from .config import BuildSettings
from .models import SpecInput, SwaggerUrl

MERGED_SPEC_URL = "./openapi.json"

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>{title}</title>
  <link rel="stylesheet" href="{cdn}/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="{cdn}/swagger-ui-bundle.js"></script>
  <script src="{cdn}/swagger-ui-standalone-preset.js"></script>
  <script>
    SwaggerUIBundle({{
      urls: {urls},
      "urls.primaryName": {primary_name},
      dom_id: '#swagger-ui',
      presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
      layout: 'StandaloneLayout'
    }});
  </script>
</body>
</html>"""


def build_urls(inputs: Sequence[SpecInput], all_apis_name: str) -> List[SwaggerUrl]:
    """The unified document first, then every input in file order."""
    urls = [SwaggerUrl(url=MERGED_SPEC_URL, name=all_apis_name)]
    urls.extend(
        SwaggerUrl(url=f"./specs/{spec.file}", name=spec.title)
        for spec in inputs
    )
    return urls


def _script_json(value) -> str:
    # keep "</script>" in a title from closing the inline script
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


def render_index(urls: Sequence[SwaggerUrl], settings: BuildSettings) -> str:
    return INDEX_TEMPLATE.format(
        title=escape(settings.title),
        cdn=escape(settings.swagger_ui_cdn.rstrip("/"), quote=True),
        urls=_script_json([u.model_dump() for u in urls]),
        primary_name=_script_json(settings.all_apis_name),
    )
