"""INFO column decoding.

INFO is a semicolon-delimited list of ``KEY=VALUE`` pairs and bare flags::

    GENE=EGFR;AF=0.35;SOMATIC;ANN=G|missense_variant|MODERATE|EGFR|...

Values are kept as strings; flags map to ``True``. Keys keep their original
spelling, while lookups of recognized keys (GENE, AF, HGVS, ...) ignore case.
"""

from collections.abc import Iterable, Iterator, Mapping

InfoValue = str | bool


class InfoMap(Mapping[str, InfoValue]):
    """Decoded INFO field with case-insensitive lookup helpers."""

    def __init__(self, items: Iterable[tuple[str, InfoValue]] = ()):
        self._data: dict[str, InfoValue] = {}
        self._folded: dict[str, str] = {}
        for key, value in items:
            self._data[key] = value
            self._folded.setdefault(key.casefold(), key)

    def __getitem__(self, key: str) -> InfoValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"InfoMap({self._data!r})"

    def lookup(self, key: str) -> InfoValue | None:
        """Return the value for ``key`` ignoring case, exact spelling first."""
        if key in self._data:
            return self._data[key]
        original = self._folded.get(key.casefold())
        if original is None:
            return None
        return self._data[original]

    def get_text(self, key: str) -> str | None:
        """Return a non-empty string value for ``key``; flags and '.' are None."""
        value = self.lookup(key)
        if not isinstance(value, str):
            return None
        value = value.strip()
        if value in ("", "."):
            return None
        return value

    def first_text(self, keys: Iterable[str]) -> str | None:
        for key in keys:
            value = self.get_text(key)
            if value is not None:
                return value
        return None


def parse_info(info_field: str) -> InfoMap:
    """Decode a raw INFO column.

    Args:
        info_field: Raw INFO text; '.' or empty means no entries

    Returns:
        InfoMap in column order; a repeated key keeps its last value
    """
    info_field = info_field.strip()
    if info_field in ("", "."):
        return InfoMap()

    items: list[tuple[str, InfoValue]] = []
    for token in info_field.split(";"):
        token = token.strip()
        if not token:
            continue
        if "=" in token:
            key, value = token.split("=", 1)
            items.append((key.strip(), value))
        else:
            items.append((token, True))
    return InfoMap(items)
