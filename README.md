# relicfs

Three small file tools:

- **`relicfs.hexed`** turns text files full of hexadecimal digits into binary
  images.
- **`relicfs.baymax`** stores files as numbered chunks (1024 bytes by default)
  and reads them back as whole files.
- **`relicfs.antink`** gives a view of a host directory. It reverses
  "dangerous" names in listings and ROT13-encodes text files when they are read.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Converting hex text to images

```
relicfs-hexed [DIRECTORY]
```

`DIRECTORY` defaults to `anomali`. The command looks at every regular `*.txt`
file in it. Whitespace and any other non-hex characters are skipped, and each
pair of hex digits becomes one byte; a trailing unpaired digit is dropped. The
result is written to
`DIRECTORY/image/<name>_image_<YYYY-MM-DD>_<HH:MM:SS>.png`, and a
`SUCCESS: <file> -> <image path>` line is printed. Each conversion adds a line
to `DIRECTORY/conversion.log`:

```
[2025-01-01][12:00:00]: Successfully converted hexadecimal text a.txt to a_image_2025-01-01_12:00:00.png.
```

If the directory cannot be opened the command exits with status 1.

You can do the same from Python:

```python
from datetime import datetime
from relicfs.hexed import decode_hex_text, convert_file, convert_directory

decode_hex_text("48 65 6c 6c 6f")   # b"Hello"
convert_file("anomali", "a.txt", datetime(2025, 1, 1, 12, 0, 0))
convert_directory("anomali")         # list of image paths written
```

## Chunked relic storage

```python
from relicfs.baymax import RelicStore

store = RelicStore("relics", "activity.log", 1024)
store.write("/photo.jpg", data)       # relics/photo.jpg.000, .001, ...
store.getattr("/photo.jpg").size      # total size of all chunks
store.readdir("/")                    # [".", "..", "photo.jpg"]
store.read("/photo.jpg", len(data))
store.unlink("/photo.jpg")            # number of chunks removed
```

`getattr` returns a `FileAttr` with `mode`, `nlink` and `size`, and raises
`FileNotFoundError` when the first chunk of a file does not exist. `write`,
`open` and `unlink` record their work in the log file with `log_activity`.

## Filtered host view

```python
import os
from relicfs.antink import AntinkFS

fs = AntinkFS("/it24_host", "it24.log")
[entry.name for entry in fs.readdir("/")]   # "nafis.txt" is listed as "txt.sifan"
fs.read("/notes.txt", 4096, 0)              # text comes back ROT13-encoded
fs.create("/new.txt", 0o644, os.O_CREAT | os.O_WRONLY)
fs.write("/new.txt", b"hello", 0)
fs.unlink("/new.txt")
```

`readdir` returns `DirEntry` objects with `name`, `inode` and `mode`. A name
counts as dangerous if it contains `nafis` or `kimcun`; reads of dangerous
files, and of paths without `.txt`, are returned unchanged. You can also call
the helpers on their own: `is_dangerous`, `reverse_name` and `rot13`. Opening,
creating, writing and deleting files each add a line to the log file through
`write_log`.

Errors from the host filesystem are raised as `OSError`.

## What this package does not do

`RelicStore` and `AntinkFS` provide filesystem operations as plain Python
methods. The package does not mount them as a filesystem and has no command
that serves them; you call the methods yourself.