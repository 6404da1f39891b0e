import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    LOG_FORMAT = data.get("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Swiss QR-bill defaults
    QR_DEFAULT_COUNTRY = data.get("QR_DEFAULT_COUNTRY", "CH")  # ISO-2, used when an address has no country
    QR_DEFAULT_CURRENCY = data.get("QR_DEFAULT_CURRENCY", "CHF")  # Used when an invoice has no currency

    # Invoice total verification
    TOTAL_MISMATCH_POLICY = data.get("TOTAL_MISMATCH_POLICY", "warn")  # "warn" or "error"
    TOTAL_TOLERANCE = str(data.get("TOTAL_TOLERANCE", "0.00"))  # Accepted absolute difference
