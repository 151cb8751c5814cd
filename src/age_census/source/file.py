"""File-backed age sources: one integer per line, one file per region."""

from pathlib import Path

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

DEFAULT_SUFFIX = ".txt"


def parse_age_line(raw_line: bytes) -> int | None:
    """
    Parse one raw line into an age.

    Returns None for blank lines. Raises ValueError for anything that is not
    a base-10 integer.
    """
    line = raw_line.strip()
    if not line:
        return None
    return int(line)


class FileAgeSource:
    """Lazily yields ages from a text file until exhausted."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._handle = open(self._path, "rb", buffering=BUFFER_SIZE)  # noqa: SIM115
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> "FileAgeSource":
        return self

    def __next__(self) -> int:
        for raw_line in self._handle:
            age = parse_age_line(raw_line)
            if age is not None:
                return age
        raise StopIteration

    def close(self) -> None:
        if not self._closed:
            self._handle.close()
            self._closed = True


class DirectorySourceFactory:
    """Maps region `name` to the file `<root>/<name><suffix>`."""

    def __init__(self, root: str | Path, suffix: str = DEFAULT_SUFFIX):
        self.root = Path(root)
        self.suffix = suffix

    def path_for(self, region: str) -> Path:
        # Region names are plain file stems, never paths.
        if not region or Path(region).name != region:
            raise ValueError(f"region name is not a plain file stem: {region!r}")
        return self.root / f"{region}{self.suffix}"

    def __call__(self, region: str) -> FileAgeSource:
        return FileAgeSource(self.path_for(region))
