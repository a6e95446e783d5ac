import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura el logging raíz una sola vez al crear la aplicación."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    # SQLAlchemy solo a partir de WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
