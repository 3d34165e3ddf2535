import logging
import sys

from lobbyview.config import LOG_LEVEL

# Logging setup
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# urllib3 logs every connection at DEBUG; keep polling quiet
logging.getLogger("urllib3").setLevel(logging.WARNING)

if __name__ == "__main__":
    import flet as ft
    from lobbyview.app_main import main

    try:
        ft.app(target=main)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        sys.exit(1)
