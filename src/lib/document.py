"""
Standalone HTML document builder

Wraps a rendered fragment in a complete HTML page (used when a rendered
report is opened on its own or written by the CLI with --standalone).
"""

import html


DOCUMENT_STYLE = """
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; max-width: 800px; margin: 0 auto; padding: 20px; }
        h1, h2, h3, .md-h1, .md-h2, .md-h3 { color: #333; }
        pre, .md-codeblock { white-space: pre-wrap; font-family: 'Monaco', 'Courier New', monospace; background: #f5f5f5; padding: 15px; border-radius: 5px; }
        code, .md-code { font-family: 'Monaco', 'Courier New', monospace; background: #f5f5f5; padding: 0 3px; }
        blockquote, .md-blockquote { border-left: 4px solid #ddd; margin: 0; padding-left: 1em; color: #666; }
        .todo-item { list-style: none; }
        .md-preview-more { color: #999; }"""


def document_build(body: str, title: str = "Report") -> str:
    """
    Build a complete HTML document around a rendered fragment

    Args:
        body: Rendered HTML fragment (inserted as-is)
        title: Document title (HTML-escaped)

    Returns:
        Complete HTML5 document
    """
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title)}</title>
    <style>{DOCUMENT_STYLE}
    </style>
</head>
<body>
    <main class="markdown-preview">
{body}
    </main>
</body>
</html>"""
