from typing import List
from .models import Disk, Partition, PartitionType, FitLabel

P = PartitionType.PRIMARY
E = PartitionType.EXTENDED
FF = FitLabel.FIRST_FIT
WF = FitLabel.WORST_FIT
BF = FitLabel.BEST_FIT


def _disk(letter, size_mb, *partitions):
    return Disk(
        letter=letter,
        size_mb=size_mb,
        partitions=tuple(Partition(name, size_kb, kind, fit) for name, size_kb, kind, fit in partitions),
    )


def build_default_disks() -> List[Disk]:
    """
    Returns the fixed catalog served by the API.
    Built once at startup and handed to DiskCatalog.
    """
    return [
        _disk('A', 10,
              ('A1', 1000, P, FF),
              ('A2', 1500, P, WF),
              ('A3', 1200, P, BF),
              ('A4', 800, P, FF)),
        _disk('B', 15,
              ('B1', 2000, P, BF),
              ('B2', 1000, P, FF),
              ('B3', 500, P, WF),
              ('B4', 2500, P, FF)),
        _disk('C', 20,
              ('C1', 3000, P, FF),
              ('C2', 1500, P, WF),
              ('CEXT', 4000, E, BF)),
        _disk('D', 25,
              ('D1', 3500, P, BF),
              ('D2', 2000, P, WF),
              ('DEXT', 5000, E, FF)),
        _disk('E', 20,
              ('E1', 3000, P, FF),
              ('EEXT', 1500, E, WF)),
        _disk('F', 25,
              ('F1', 3000, P, FF),
              ('F2', 1500, P, WF)),
    ]
