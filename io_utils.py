import os
from typing import Dict

REQUEST_KEYS = ("inputs", "outputs", "style")

class RequestError(Exception):
    pass

def parse_request(text: str) -> Dict[str, str]:
    """
    Parse request text made of 'key: value' lines, e.g.

        inputs:  p, q
        outputs: !p+q, !(p.q)
        style:   T/F

    Keys are inputs, outputs and style; each may appear once. Blank lines and
    lines starting with '#' are ignored. Only the first ':' splits a line, so
    values may contain ':'.
    """
    request: Dict[str, str] = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition(":")
        key = key.strip().lower()
        if not sep:
            raise RequestError(f"Line {lineno}: expected 'key: value', got {raw!r}")
        if key not in REQUEST_KEYS:
            raise RequestError(f"Line {lineno}: unknown key '{key}' (expected one of {', '.join(REQUEST_KEYS)})")
        if key in request:
            raise RequestError(f"Line {lineno}: '{key}' given more than once")
        request[key] = value.strip()
    return request

def read_request(path: str) -> Dict[str, str]:
    """Read and parse a request file."""
    if not os.path.isfile(path):
        raise RequestError(f"input file not found: {path}")
    if not os.access(path, os.R_OK):
        raise RequestError(f"input file is not readable: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RequestError(f"failed to read input file: {e}") from e
    return parse_request(text)

def check_output_path(path: str) -> None:
    if not path.lower().endswith(".md"):
        raise RequestError(f"output file must be a .md file: {path}")
    out_dir = os.path.dirname(path) or "."
    if not os.path.isdir(out_dir):
        raise RequestError(f"output directory does not exist: {out_dir}")
    if not os.access(out_dir, os.W_OK):
        raise RequestError(f"output directory is not writable: {out_dir}")

def write_table(path: str, table: str) -> None:
    check_output_path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(table)
    except OSError as e:
        raise RequestError(f"failed to write output file '{path}': {e}") from e
