"""
JokoUI Application Bootstrap

Builds a page with a host element, mounts the demo App into it and prints the
resulting markup.

    python -m jokoui.demo
"""

import logging

from ..client import HttpClient
from ..config import ApplicationConfig, configure_logging
from ..dom import Document, mount
from .app import App

logger = logging.getLogger("jokoui.demo")

PAGE = """<!doctype html>
<html>
<head><title>JokoUI</title></head>
<body><div id="{host_id}"></div></body>
</html>"""

BANNER = (
    "╔═══════════════════════════════════════╗",
    "║         🎯 JokoUI Framework           ║",
    "║    Python • Reactive • Lightweight    ║",
    "╚═══════════════════════════════════════╝",
)


def main(config: ApplicationConfig = None) -> Document:
    config = config or ApplicationConfig.from_environment()
    configure_logging(config.logging)

    for line in BANNER:
        logger.info(line)

    document = Document(PAGE.format(host_id=config.runtime.host_id), parser=config.runtime.parser)
    app = App(HttpClient(config.client))
    mount(app, config.runtime.host_id, document)

    print(document.html())
    return document


if __name__ == "__main__":
    main()
