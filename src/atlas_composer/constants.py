"""
Constants used internally by the atlas composer.

These describe the exported file formats and should not be overridden
via config files or CLI arguments.
"""

# Tiled tileset descriptor literals
# See: https://doc.mapeditor.org/en/stable/reference/json-map-format/#tileset
TILED_VERSION = "1.7.2"
TILESET_FORMAT_VERSION = "1.6"
TILESET_TYPE = "tileset"
TILESET_MARGIN = 0

# Output filename suffixes appended to the user supplied base name
TEXTURE_SUFFIX = "_texture.png"
TILESET_SUFFIX = "_tileset.json"
TILESET_NAME_SUFFIX = "_tileset"

# Internal color constants
COLOR_MODE_RGBA = "RGBA"
COLOR_TRANSPARENT = (0, 0, 0, 0)

# Encoding
PNG_FORMAT = "PNG"
JSON_ENCODING = "utf-8"

# Fallback export location when the requested directory cannot be created
FALLBACK_OUTPUT_DIR = "atlas_composer_output"
