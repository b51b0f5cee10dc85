import logging
from flask import jsonify, current_app
from . import disk_catalog
from .core import DiskCatalog, DiskNotFoundError
from .models import ErrorResponse

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = 'Disco no encontrado'


def get_catalog() -> DiskCatalog:
    return current_app.extensions['disk_catalog']

@disk_catalog.errorhandler(DiskNotFoundError)
def disk_not_found(e):
    logger.warning(f"Partition lookup for unknown disk {e.letter!r}")
    return jsonify(ErrorResponse(NOT_FOUND_MESSAGE).to_dict()), 404

@disk_catalog.route('/api/discos', methods=['GET'])
def list_disks():
    disks = get_catalog().list_disks()
    return jsonify([d.to_dict() for d in disks])

@disk_catalog.route('/api/discos/<letter>/particiones', methods=['GET'])
def list_partitions(letter):
    partitions = get_catalog().list_partitions(letter)
    return jsonify([p.to_dict() for p in partitions])
