import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def setup_logging(level: str = "INFO") -> None:
    # basicConfig нічого не робить, якщо root вже налаштований (uvicorn, pytest)
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
