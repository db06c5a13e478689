"""Map defaults (zoom, tiles, popup and pan settings)."""

DEFAULT_ZOOM = 13

TILE_URL_TEMPLATE = "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)

POPUP_MAX_WIDTH = 250
POPUP_MIN_WIDTH = 100

PAN_DURATION_SEC = 1.0
