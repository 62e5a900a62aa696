"""Application-wide constants."""

APP_TITLE = "pxt"

DEFAULT_SESSION: str = "default"
DEFAULT_LISTEN: str = "127.0.0.1:8080"
DEFAULT_UPSTREAM: str = ""

QUIT_MODAL_SIZE: tuple[int, int] = (36, 5)

# Quit is bound to y; the legend names y rather than q so it matches the binding.
QUIT_LEGEND: tuple[str, ...] = (
    "<y> - quit",
    "<d> - detach",
    "<Escape> - cancel",
)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
