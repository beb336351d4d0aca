"""Default prompts and the status page template."""
from __future__ import annotations
from collections.abc import Iterable

DEFAULT_DOCUMENT_PROMPT = "Summarize this document"
DEFAULT_AUDIO_PROMPT = "Transcribe this audio"

STATUS_PAGE_TEMPLATE = """
<h1>GenAI API server is running!</h1>
<p>The server is up and accepting POST requests on:</p>
<ul>
{{endpoints}}
</ul>
"""

def render_status_page(endpoints: Iterable[str], template: str = STATUS_PAGE_TEMPLATE) -> str:
    """
    Render the endpoint list into the status page.

    Args:
        endpoints: Paths to list, in display order.
        template: HTML containing {{endpoints}}.

    Returns:
        Rendered HTML.
    """
    items = "\n".join(f"  <li><code>{path}</code></li>" for path in endpoints)
    return template.replace("{{endpoints}}", items)
