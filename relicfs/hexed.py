"""Convert hexadecimal text dumps in a directory into binary image files."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

OUTPUT_SUBDIR = "image"
LOG_FILENAME = "conversion.log"
DEFAULT_INPUT_DIR = "anomali"
_BASE_NAME_LIMIT = 127


def hexchar_to_int(c: str) -> int | None:
    """Return the value of a single hexadecimal digit, or None if it is not one."""
    if len(c) == 1 and c in "0123456789abcdefABCDEF":
        return int(c, 16)
    return None


def decode_hex_text(text: str) -> bytes:
    """Decode hex digits in ``text``, ignoring everything else.

    A trailing unpaired digit is dropped.
    """
    nibbles = [v for v in map(hexchar_to_int, text) if v is not None]
    return bytes((hi << 4) | lo for hi, lo in zip(nibbles[::2], nibbles[1::2]))


def _base_name(filename: str) -> str:
    base = filename[:_BASE_NAME_LIMIT]
    if "." in base:
        base = base.rpartition(".")[0]
    return base


def convert_file(input_dir, filename: str, now: datetime | None = None) -> Path:
    """Convert ``input_dir/filename`` and return the path of the written image."""
    input_dir = Path(input_dir)
    text = (input_dir / filename).read_text(errors="replace")

    now = now or datetime.now()
    date_str = now.strftime("%Y-%m-%d")
    time_str = now.strftime("%H:%M:%S")

    output_dir = input_dir / OUTPUT_SUBDIR
    output_dir.mkdir(mode=0o755, exist_ok=True)
    output_path = output_dir / f"{_base_name(filename)}_image_{date_str}_{time_str}.png"
    output_path.write_bytes(decode_hex_text(text))

    try:
        with open(input_dir / LOG_FILENAME, "a") as log:
            log.write(
                f"[{date_str}][{time_str}]: Successfully converted hexadecimal text "
                f"{filename} to {output_path.name}.\n"
            )
    except OSError:
        pass
    return output_path


def convert_directory(input_dir) -> list[Path]:
    """Convert every regular ``.txt`` file in ``input_dir``; return the images written."""
    input_dir = Path(input_dir)
    written = []
    with _scandir(input_dir) as entries:
        for entry in entries:
            if not entry.is_file(follow_symlinks=False):
                continue
            if "." not in entry.name or entry.name.rpartition(".")[2] != "txt":
                continue
            try:
                output = convert_file(input_dir, entry.name)
            except OSError as exc:
                print(f"Failed to convert {entry.name}: {exc}", file=sys.stderr)
                continue
            print(f"SUCCESS: {entry.name} -> {output}")
            written.append(output)
    return written


def _scandir(path: Path):
    import os

    return os.scandir(path)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Convert hex text files to images.")
    parser.add_argument("input_dir", nargs="?", default=DEFAULT_INPUT_DIR)
    args = parser.parse_args(argv)
    try:
        convert_directory(args.input_dir)
    except OSError as exc:
        print(f"Failed to open directory: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())