import sys

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "FATAL": 50}

_threshold = LEVELS["INFO"]

def set_log_level(level: str) -> str:
    """Set the minimum level that gets written. Unknown names mean INFO."""
    global _threshold
    name = (level or "").upper()
    if name == "WARN":
        name = "WARNING"
    if name not in LEVELS:
        name = "INFO"
    _threshold = LEVELS[name]
    return name

def log(message: str, level: str = "INFO"):
    if LEVELS.get(level, LEVELS["INFO"]) < _threshold:
        return
    output = f"[kube-ns-gc] [{level}] {message}"
    eprint(output)

def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)
