#!/usr/bin/env python3
import os
import sys
from deps_versions.services.registry_validation_service import RegistryValidationService
from deps_versions.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))

def main():
    logger = setup_logger("VersionsValidator")

    try:
        versions_file = os.environ.get("VERSIONS_FILE", f"{ROOT_DIR}/versions.yaml")
        logger.info(f"Starting validation of versions file: {versions_file}")
        service = RegistryValidationService(versions_file)
        service.run()
        logger.info("Versions validation completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Versions validation failed: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
