import sys
from pathlib import Path

STDOUT = "-"


def write_output(html: str, destination: str) -> None:
    """Write the rendered report to *destination*.

    ``-`` streams the document to stdout instead of a file; otherwise missing
    parent directories are created.
    """
    if destination == STDOUT:
        sys.stdout.write(html if html.endswith("\n") else html + "\n")
        return
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
