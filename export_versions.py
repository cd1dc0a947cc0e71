#!/usr/bin/env python3
import argparse
import os
import sys
from deps_versions.services.versions_export_service import VersionsExportService
from deps_versions.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main():
    parser = argparse.ArgumentParser(description="Versions Export Service")
    parser.add_argument('--dry-run', action='store_true', help='Print the exported table instead of writing it')
    args = parser.parse_args()
    logger = setup_logger("VersionsExporter")
    try:
        source = os.environ.get("VERSIONS_FILE", f"{ROOT_DIR}/versions.yaml")
        target = os.environ.get("VERSIONS_BZL_FILE", f"{ROOT_DIR}/deps_versions.bzl")
        logger.info(f"Exporting versions from {source} to {target}")
        service = VersionsExportService(source, target, args.dry_run)
        service.run()
        logger.info("Versions export completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Versions export failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
