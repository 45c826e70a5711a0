"""Launch the assistant API together with the chat page and paper widget.

RUN_MODE=integrated (default) serves both on one port; RUN_MODE=separate
starts the API on :8000 and the UI on :8080. In either mode the UI reaches
the API through ASSISTANT_API_URL.
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Mount the NiceGUI pages on the FastAPI app and serve them with uvicorn."""
    import uvicorn
    from nicegui import ui

    from scholar_chat.api.app import create_app
    from scholar_chat.ui.chat_page import chat_page  # noqa: F401 - registers / and /papers/{id}

    app = create_app()
    ui.run_with(
        app,
        title="Scholar Chat",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "scholar-chat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Chat page on http://localhost:{port}/, paper widget on /papers/<id>")
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the API and the UI as two child processes until either exits."""
    import subprocess
    import time

    host = os.getenv("HOST", "0.0.0.0")
    children = [
        subprocess.Popen(
            [sys.executable, "-m", "uvicorn", "scholar_chat.api.app:app", "--host", host,
             "--port", "8000"]
        ),
        subprocess.Popen(
            [sys.executable, "-c", "from scholar_chat.ui.chat_page import main; main()"]
        ),
    ]
    logger.info("API on :8000, UI on :8080")

    try:
        while all(child.poll() is None for child in children):
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping API and UI")
    finally:
        for child in children:
            child.terminate()
            child.wait()


def main() -> None:
    mode = os.getenv("RUN_MODE", "integrated").lower()
    logger.info(f"Starting Scholar Chat ({mode})")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
