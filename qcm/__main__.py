import logging
import socket
import sys

import uvicorn

from .core.config import settings
from .core.logging_config import setup_logging
from .domain.errors import BankError
from .main import create_app
from .repositories.qcm_repository import QcmRepository

logger = logging.getLogger("qcm")


def get_local_ip() -> str:
    """Перша не-loopback IPv4-адреса машини (для посилання в мережі)."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            # UDP connect нічого не надсилає, лише обирає інтерфейс
            s.connect(("10.255.255.255", 1))
            ip = s.getsockname()[0]
    except OSError:
        return "127.0.0.1"
    return ip if not ip.startswith("127.") else "127.0.0.1"


def main() -> None:
    setup_logging(settings.LOG_LEVEL)

    try:
        bank = QcmRepository(settings.QCM_FILE).load()
    except BankError as e:
        logger.error("%s", e)
        sys.exit(1)

    app = create_app(bank=bank, settings=settings)

    logger.info("QCM server started at http://%s:%d", settings.HOST, settings.PORT)
    logger.info("Local access: http://localhost:%d", settings.PORT)
    logger.info("Network access: http://%s:%d", get_local_ip(), settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
