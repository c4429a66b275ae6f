import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure global logging for the gateway.
    The level normally comes from Settings.log_level.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Every outbound request is already logged by the clients on failure
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
