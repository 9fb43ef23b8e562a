# src/symfreq/config.py

SYMBOLS = (
    ".", ",", "<", ">", "?", "/", "!", '"', "@", "$",
    "%", "'", "(", ")", "|", "{", "}", "^", "&", "*",
    "~", "-", "[", "]", "#", "=", "+", ":", "\\", ";",
)

# Read in this order from every visited directory when no extension filter is given
IGNORE_FILE_NAMES = [
    ".gitignore",
    ".ignore",
]

DEFAULT_ENCODING = "utf-8"
