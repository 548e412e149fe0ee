import yaml
import os

# Import YAML data
base = os.path.dirname(__file__)
with open(os.path.join(base, "defaults.yaml"), "r") as f:
    DEFAULTS = yaml.safe_load(f.read())["Defaults"]

# Component width in bits; a value packs two of these.
WIDTH = 32
INT32_MIN = -(2 ** (WIDTH - 1))
INT32_MAX = 2 ** (WIDTH - 1) - 1

MAX_SEARCH_DEPTH = int(DEFAULTS["max_search_depth"])
FLOAT_TOLERANCE = float(DEFAULTS["float_tolerance"])
BYTE_ORDER = DEFAULTS["byte_order"]
REBALANCE_STRIDE = int(DEFAULTS["rebalance_stride"])

if BYTE_ORDER not in ("big", "little"):
    raise ValueError(f"defaults.yaml: unsupported byte_order {BYTE_ORDER!r}")
