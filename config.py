import os

class Config:
    # Address the API server binds to
    HOST = os.environ.get('DISK_CATALOG_HOST') or '0.0.0.0'
    PORT = int(os.environ.get('DISK_CATALOG_PORT') or 8080)

    # Front-end origin allowed to call the API (Angular dev server)
    CORS_ORIGIN = os.environ.get('DISK_CATALOG_CORS_ORIGIN') or 'http://localhost:4200'

    LOG_LEVEL = os.environ.get('DISK_CATALOG_LOG_LEVEL') or 'INFO'
    DEBUG = (os.environ.get('DISK_CATALOG_DEBUG') or 'false').lower() == 'true'
