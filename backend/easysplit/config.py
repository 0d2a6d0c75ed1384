"""Runtime settings read from the environment."""
import os

DEFAULT_CURRENCY = os.getenv("EASYSPLIT_DEFAULT_CURRENCY", "PKR")

# Fold recorded settlements into balances before optimizing debts.
APPLY_SETTLEMENTS = os.getenv("EASYSPLIT_APPLY_SETTLEMENTS", "true").strip().lower() in ("1", "true", "yes")

# "insertion" keeps balance-map order, "id" sorts creditors/debtors by participant id.
DEBT_ORDER = os.getenv("EASYSPLIT_DEBT_ORDER", "insertion")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

_origins_env = os.getenv("ALLOWED_ORIGINS", "")
ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()] if _origins_env else ["*"]
