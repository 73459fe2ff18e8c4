from html import escape

from schemas.video import Catalog

PAGE_TITLE = "Video Server"

INDEX_HEAD = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 40px; }}
        h1 {{ color: #333; }}
        .server-info {{
            background-color: #e7f3ff;
            padding: 15px;
            border-radius: 5px;
            margin-bottom: 20px;
        }}
        .video-list {{ list-style-type: none; padding: 0; }}
        .video-item {{
            margin: 10px 0;
            padding: 15px;
            background-color: #f5f5f5;
            border-radius: 5px;
        }}
        .video-name {{ font-weight: bold; margin-bottom: 5px; }}
        .video-url {{ font-size: 0.9em; color: #666; word-break: break-all; }}
        .video-item a {{ text-decoration: none; color: #007bff; }}
        .video-item a:hover {{ text-decoration: underline; }}
    </style>
</head>
<body>
    <h1>{title}</h1>
"""

VIDEO_ITEM = """<li class="video-item">
    <div class="video-name">{name}</div>
    <div class="video-url"><a href="{url}" target="_blank">{url}</a></div>
</li>"""


def display_name(filename: str) -> str:
    """
    Names that aren't valid UTF-8 come back from the filesystem with
    surrogate escapes; show them with replacement characters instead.
    """
    return filename.encode("utf-8", "replace").decode("utf-8")


def render_index(catalog: Catalog, base_url: str) -> str:
    parts = [
        INDEX_HEAD.format(title=PAGE_TITLE),
        f'<div class="server-info"><strong>Server URL:</strong> {escape(base_url)}</div>',
    ]

    if catalog.is_empty():
        parts.append("<p>No video files found in the directory.</p>")
    else:
        parts.append('<ul class="video-list">')
        for entry in catalog.entries:
            parts.append(
                VIDEO_ITEM.format(
                    name=escape(display_name(entry.filename)),
                    url=escape(f"{base_url}/{entry.alias}"),
                )
            )
        parts.append("</ul>")

    parts.append("</body></html>")
    return "\n".join(parts)


def render_error(status_code: int, detail: str) -> str:
    return f"<h1>{status_code} {escape(detail)}</h1>"
