import sys
import os
import json
import unittest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from disk_catalog.core import DiskCatalog, DiskNotFoundError, create_catalog
from disk_catalog.dataset import build_default_disks
from disk_catalog.models import Disk, Partition, PartitionType, FitLabel, ErrorResponse

class TestDiskModels(unittest.TestCase):
    def test_partition_to_dict_uses_wire_names(self):
        part = Partition('CEXT', 4000, PartitionType.EXTENDED, FitLabel.BEST_FIT)
        self.assertEqual(part.to_dict(), {'name': 'CEXT', 'sizeKB': 4000, 'type': 'E', 'fit': 'BF'})

    def test_disk_json_round_trip(self):
        disk = build_default_disks()[0]
        decoded = Disk.from_dict(json.loads(json.dumps(disk.to_dict())))
        self.assertEqual(decoded, disk)
        self.assertEqual([p.name for p in decoded.partitions], ['A1', 'A2', 'A3', 'A4'])

    def test_disk_without_partitions(self):
        disk = Disk.from_dict({'letter': 'Z', 'sizeMB': 5})
        self.assertEqual(disk.partitions, ())
        self.assertEqual(disk.to_dict()['partitions'], [])

    def test_unknown_label_rejected(self):
        with self.assertRaises(ValueError):
            Partition.from_dict({'name': 'X1', 'sizeKB': 10, 'type': 'L', 'fit': 'FF'})

    def test_error_response(self):
        self.assertEqual(ErrorResponse('Disco no encontrado').to_dict(), {'error': 'Disco no encontrado'})


class TestDefaultDataset(unittest.TestCase):
    def setUp(self):
        self.disks = build_default_disks()

    def test_six_disks_in_letter_order(self):
        self.assertEqual([d.letter for d in self.disks], ['A', 'B', 'C', 'D', 'E', 'F'])
        self.assertEqual([d.size_mb for d in self.disks], [10, 15, 20, 25, 20, 25])

    def test_partition_names_unique_per_disk(self):
        for d in self.disks:
            names = [p.name for p in d.partitions]
            self.assertEqual(len(names), len(set(names)), d.letter)

    def test_partition_sizes_positive(self):
        for d in self.disks:
            for p in d.partitions:
                self.assertGreater(p.size_kb, 0)

    def test_disks_are_immutable(self):
        with self.assertRaises(AttributeError):
            self.disks[0].size_mb = 99


class TestDiskCatalog(unittest.TestCase):
    def setUp(self):
        self.catalog = create_catalog()

    def test_list_disks(self):
        disks = self.catalog.list_disks()
        self.assertEqual(len(disks), 6)
        self.assertEqual(disks, self.catalog.list_disks())

    def test_list_partitions_for_every_letter(self):
        for letter in 'ABCDEF':
            partitions = self.catalog.list_partitions(letter)
            self.assertTrue(partitions, letter)
            for p in partitions:
                self.assertIsInstance(p, Partition)
                self.assertIsInstance(p.type, PartitionType)
                self.assertIsInstance(p.fit, FitLabel)

    def test_list_partitions_disk_c(self):
        partitions = self.catalog.list_partitions('C')
        self.assertEqual([p.to_dict() for p in partitions], [
            {'name': 'C1', 'sizeKB': 3000, 'type': 'P', 'fit': 'FF'},
            {'name': 'C2', 'sizeKB': 1500, 'type': 'P', 'fit': 'WF'},
            {'name': 'CEXT', 'sizeKB': 4000, 'type': 'E', 'fit': 'BF'},
        ])

    def test_unknown_letter(self):
        with self.assertRaises(DiskNotFoundError) as ctx:
            self.catalog.list_partitions('Z')
        self.assertEqual(ctx.exception.letter, 'Z')

    def test_lookup_is_case_sensitive(self):
        with self.assertRaises(DiskNotFoundError):
            self.catalog.list_partitions('c')

    def test_disk_with_no_partitions_returns_empty(self):
        catalog = DiskCatalog([Disk('G', 5)])
        self.assertEqual(catalog.list_partitions('G'), ())

    def test_duplicate_letters_rejected(self):
        with self.assertRaises(ValueError):
            DiskCatalog([Disk('A', 10), Disk('A', 20)])

if __name__ == '__main__':
    unittest.main()
