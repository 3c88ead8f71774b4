# helpdesk/core/sanitize.py
import re

_TAG = re.compile(r"<[^>]*>")


def strip_tags(value: str | None) -> str | None:
    """Drop every markup tag from ``value`` and keep the text between them.

    ``"App <script>is not working</script>"`` becomes ``"App is not working"``.
    """
    if value is None:
        return None
    return _TAG.sub("", value)
