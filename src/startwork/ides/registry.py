"""Static registry of IDEs that can receive a start-work deep link.

Each ``IDERecord`` names one desktop IDE, the custom URI scheme prefix its
CodeStream extension listens on, and the short moniker stored as the
board's IDE preference. The catalogue is compiled in: no entry is created,
changed, or removed at runtime.

Grouping Notes:
    ``sep_after`` only draws a separator in selection controls after the
    entry (VS Code family | JetBrains family | Atom). It never affects
    lookup or link construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from startwork.exceptions import DuplicateMonikerError, RegistryError

_VSC_MARKETPLACE = "https://marketplace.visualstudio.com/items?itemName="
_JETBRAINS_PLUGIN = "https://plugins.jetbrains.com/plugin/12206-codestream"


@dataclass(frozen=True)
class IDERecord:
    """One IDE target in the catalogue.

    Attributes:
        ide_name: Human-readable display name (e.g., "VS Code").
        protocol: URI scheme prefix used as the link base, ends with ``/``.
        moniker: Short identifier persisted as the board preference.
        download_url: Where to get the extension. Informational only.
        sep_after: Draw a group separator after this entry in UI lists.
    """

    ide_name: str
    protocol: str
    moniker: str
    download_url: str
    sep_after: bool = False


def _jetbrains(ide_name: str, product: str, moniker: str, *, sep_after: bool = False) -> IDERecord:
    return IDERecord(
        ide_name=ide_name,
        protocol=f"jetbrains://{product}/codestream/",
        moniker=moniker,
        download_url=_JETBRAINS_PLUGIN,
        sep_after=sep_after,
    )


# Declaration order is presentation order; the first entry is the default.
IDE_RECORDS: tuple[IDERecord, ...] = (
    # -- VS Code family --
    IDERecord(
        ide_name="VS Code",
        protocol="vscode://codestream.codestream/",
        moniker="vsc",
        download_url=_VSC_MARKETPLACE + "CodeStream.codestream",
    ),
    IDERecord(
        ide_name="VS Code Insiders",
        protocol="vscode-insiders://codestream.codestream/",
        moniker="vsc-insiders",
        download_url=_VSC_MARKETPLACE + "CodeStream.codestream",
    ),
    IDERecord(
        ide_name="Visual Studio",
        protocol="codestream-vs://codestream/",
        moniker="vs",
        download_url=_VSC_MARKETPLACE + "CodeStream.codestream-vs",
        sep_after=True,
    ),
    # -- JetBrains family --
    _jetbrains("Android Studio", "studio", "jb-studio"),
    _jetbrains("IntelliJ IDEA", "idea", "jb-idea"),
    _jetbrains("PyCharm", "pycharm", "jb-pycharm"),
    _jetbrains("WebStorm", "web-storm", "jb-web-storm"),
    _jetbrains("PhpStorm", "php-storm", "jb-phpstorm"),
    _jetbrains("RubyMine", "rubymine", "jb-rubymine"),
    _jetbrains("Rider", "rd", "jb-rider"),
    _jetbrains("CLion", "clion", "jb-clion"),
    _jetbrains("GoLand", "goland", "jb-goland"),
    _jetbrains("DataGrip", "datagrip", "jb-datagrip"),
    _jetbrains("AppCode", "appcode", "jb-appcode", sep_after=True),
    # -- Others --
    IDERecord(
        ide_name="Atom",
        protocol="atom://codestream/",
        moniker="atom",
        download_url="https://atom.io/packages/codestream",
    ),
)


class IDERegistry:
    """Immutable, moniker-indexed view over a catalogue of ``IDERecord``.

    Duplicates are rejected on insert: two records with the same moniker
    raise ``DuplicateMonikerError``, so lookup is always deterministic.
    Duplicate display names or protocol prefixes raise ``RegistryError``.

    Usage::

        registry = IDERegistry(IDE_RECORDS)
        ide = registry.resolve(stored_moniker)  # default when unknown
    """

    def __init__(self, records: Iterable[IDERecord]) -> None:
        self._records: tuple[IDERecord, ...] = tuple(records)
        if not self._records:
            raise RegistryError("IDE registry must contain at least one record")

        self._by_moniker: dict[str, IDERecord] = {}
        names: set[str] = set()
        protocols: set[str] = set()
        for record in self._records:
            if record.moniker in self._by_moniker:
                raise DuplicateMonikerError(
                    f"Duplicate moniker '{record.moniker}' "
                    f"({self._by_moniker[record.moniker].ide_name} and {record.ide_name})"
                )
            if record.ide_name in names:
                raise RegistryError(f"Duplicate IDE name '{record.ide_name}'")
            if record.protocol in protocols:
                raise RegistryError(f"Duplicate protocol '{record.protocol}'")
            if not record.protocol.endswith("/"):
                raise RegistryError(
                    f"Protocol for {record.ide_name} must end with '/': {record.protocol!r}"
                )
            self._by_moniker[record.moniker] = record
            names.add(record.ide_name)
            protocols.add(record.protocol)

    def lookup(self, moniker: str | None) -> IDERecord | None:
        """Return the record for ``moniker``, or None if it is unknown."""
        if moniker is None:
            return None
        return self._by_moniker.get(moniker)

    def all(self) -> tuple[IDERecord, ...]:
        """Return every record in declaration order."""
        return self._records

    @property
    def default(self) -> IDERecord:
        """The first-declared record, used when no preference applies."""
        return self._records[0]

    def resolve(self, moniker: str | None) -> IDERecord:
        """Look up ``moniker``, falling back to ``default`` when unknown."""
        record = self.lookup(moniker)
        return record if record is not None else self.default

    def groups(self) -> list[tuple[IDERecord, ...]]:
        """Split the catalogue into presentation groups at ``sep_after``."""
        groups: list[tuple[IDERecord, ...]] = []
        current: list[IDERecord] = []
        for record in self._records:
            current.append(record)
            if record.sep_after:
                groups.append(tuple(current))
                current = []
        if current:
            groups.append(tuple(current))
        return groups

    def __contains__(self, moniker: object) -> bool:
        return moniker in self._by_moniker

    def __iter__(self) -> Iterator[IDERecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


_DEFAULT_REGISTRY = IDERegistry(IDE_RECORDS)


def default_registry() -> IDERegistry:
    """Return the registry over the compiled-in ``IDE_RECORDS``."""
    return _DEFAULT_REGISTRY
