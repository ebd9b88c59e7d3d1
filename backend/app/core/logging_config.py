"""
Console logging for the user API.

``create_app`` calls ``setup_logging`` with ``settings.log_level`` so the
service layer's create/update/delete and store-failure records reach
stderr.  Handlers are attached only once per process, which keeps repeated
``create_app`` calls in the test suite from duplicating output.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger at ``level``.

    Unknown level names fall back to ``INFO``.  Does nothing if the root
    logger already has handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", "%Y-%m-%d %H:%M:%S")
    )
    root.addHandler(handler)
