# Codec configs
DIGIT_BITS: int = 8  # bits per file digit (one byte), so each size category holds 2^(8*N) files

# File I/O configs
CHUNK_SIZE: int = 1 << 20  # number of bytes to read or write at once

# Logging configs
LOGGER_NAME: str = "bijective_compress"
LOG_FORMAT: str = "[%(name)s] %(message)s"

# Usage text printed by -h (program name substituted for %(prog)s)
HELP_TEXT: str = (
    "This program compresses and uncompresses files.\n"
    "Its compression ratio is very near to no compression\n"
    "(a fraction of a bit), but it ALWAYS compresses,\n"
    "so you can ALWAYS get 0-length compressed files.\n"
    "Experiment with very small files first.\n"
    "Use repeatedly (billions of times or even more).\n"
    "Usage: %(prog)s [-v] -c FILENAME       compress\n"
    "       %(prog)s      -C 5 FILENAME     compress 5 times\n"
    "       %(prog)s      -D 5 FILENAME     decompress 5 times\n"
    "       %(prog)s      -d FILENAME       decompress\n"
    " -v  debug mode.\n"
)
