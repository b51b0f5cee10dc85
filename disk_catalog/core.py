import logging
from typing import Iterable, Optional, Tuple
from .models import Disk, Partition
from .dataset import build_default_disks

logger = logging.getLogger(__name__)


class DiskNotFoundError(LookupError):
    """Raised when no disk in the catalog has the requested letter."""

    def __init__(self, letter: str):
        super().__init__(f"Disk {letter!r} not found")
        self.letter = letter


class DiskCatalog:
    """Read-only queries over a fixed set of disks."""

    def __init__(self, disks: Iterable[Disk]):
        self._disks: Tuple[Disk, ...] = tuple(disks)

        seen = set()
        for d in self._disks:
            if d.letter in seen:
                raise ValueError(f"Duplicate disk letter: {d.letter}")
            seen.add(d.letter)

        logger.debug(f"Disk catalog loaded with {len(self._disks)} disks")

    def list_disks(self) -> Tuple[Disk, ...]:
        """
        Returns every disk in catalog order.
        """
        return self._disks

    def list_partitions(self, letter: str) -> Tuple[Partition, ...]:
        """
        Returns the partitions of the disk with the given letter.
        Matching is exact and case-sensitive.
        Raises DiskNotFoundError if no disk has that letter.
        """
        for d in self._disks:
            if d.letter == letter:
                return d.partitions
        raise DiskNotFoundError(letter)


def create_catalog(disks: Optional[Iterable[Disk]] = None) -> DiskCatalog:
    """
    Builds a DiskCatalog, defaulting to the built-in dataset.
    """
    if disks is None:
        disks = build_default_disks()
    return DiskCatalog(disks)
