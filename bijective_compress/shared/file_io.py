"""
Plain file access for the target file.
Reads the whole file into memory and writes it back in place.
Any failure surfaces as FileAccessError.
"""

from os import access, path, R_OK, W_OK

from tqdm import tqdm

from bijective_compress.shared.config import CHUNK_SIZE
from bijective_compress.shared.errors import FileAccessError
from bijective_compress.shared.log import get_logger

logger = get_logger("io")


def check_target(file_path: str) -> None:
    """Raise FileAccessError unless file_path is a readable, writable regular file."""
    if not path.isfile(file_path) or not access(file_path, R_OK | W_OK):
        raise FileAccessError()


def read_file(file_path: str, chunk_size: int = CHUNK_SIZE, verbose: bool = False) -> bytes:
    """
    Read the full contents of a regular file.
    - Reads chunk_size bytes at a time (progress bar in verbose mode)
    - Fails if fewer bytes than the file size could be read
    """
    if not path.isfile(file_path):
        raise FileAccessError()

    contents = bytearray()
    try:
        filesize: int = path.getsize(file_path)
        with open(file_path, "rb") as target_file:
            with tqdm(total=filesize, desc="Reading file", unit="B", unit_scale=True, disable=not verbose) as progress:
                while len(contents) < filesize:
                    chunk = target_file.read(min(chunk_size, filesize - len(contents)))
                    if not chunk: break
                    contents.extend(chunk)
                    progress.update(len(chunk))
    except OSError as e:
        raise FileAccessError() from e

    if len(contents) != filesize:
        raise FileAccessError()

    logger.debug("Read %d bytes from %s", filesize, file_path)
    return bytes(contents)


def write_file(file_path: str, data: bytes, chunk_size: int = CHUNK_SIZE, verbose: bool = False) -> None:
    """
    Overwrite file_path with data (truncating it first).
    Nothing is added to the contents: the file length is the size category.
    """
    view = memoryview(data)
    try:
        with open(file_path, "wb") as target_file:
            with tqdm(total=len(data), desc="Writing file", unit="B", unit_scale=True, disable=not verbose) as progress:
                for start in range(0, len(data), chunk_size):
                    written = target_file.write(view[start : start + chunk_size])
                    progress.update(written)
    except OSError as e:
        raise FileAccessError() from e

    logger.debug("Wrote %d bytes to %s", len(data), file_path)
