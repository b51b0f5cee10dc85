from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class PartitionType(Enum):
    """MBR-style partition classification. Static, never derived."""
    PRIMARY = "P"
    EXTENDED = "E"


class FitLabel(Enum):
    """Allocation strategy label shown next to a partition."""
    FIRST_FIT = "FF"
    WORST_FIT = "WF"
    BEST_FIT = "BF"


@dataclass(frozen=True)
class Partition:
    """Represents a logical partition on a catalog disk."""
    name: str  # e.g. 'C1', 'CEXT'
    size_kb: int
    type: PartitionType
    fit: FitLabel

    def to_dict(self):
        """Helper to serialize to a dictionary for the JSON API."""
        return {
            'name': self.name,
            'sizeKB': self.size_kb,
            'type': self.type.value,
            'fit': self.fit.value,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data['name'],
            size_kb=int(data['sizeKB']),
            type=PartitionType(data['type']),
            fit=FitLabel(data['fit']),
        )


@dataclass(frozen=True)
class Disk:
    """Represents a storage volume identified by a single letter."""
    letter: str  # e.g. 'A'
    size_mb: int
    # Display order; sizes are not checked against size_mb
    partitions: Tuple[Partition, ...] = field(default_factory=tuple)

    def to_dict(self):
        """Helper to serialize to a dictionary for the JSON API."""
        return {
            'letter': self.letter,
            'sizeMB': self.size_mb,
            'partitions': [p.to_dict() for p in self.partitions],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            letter=data['letter'],
            size_mb=int(data['sizeMB']),
            partitions=tuple(Partition.from_dict(p) for p in data.get('partitions', [])),
        )


@dataclass(frozen=True)
class ErrorResponse:
    """JSON error envelope returned to the client."""
    error: str

    def to_dict(self):
        return {'error': self.error}
