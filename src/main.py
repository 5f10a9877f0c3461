#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Adress-Konverter - Haupteinstiegspunkt

Wandelt eine Adress-CSV-Datei in das historische Fixed-Width-Format um.

Verwendung:
    python run.py                       -- Standardpfade (NFS-Freigabe)
    python run.py EINGABE.csv AUSGABE.txt

Diagnosemeldungen gehen ueber logging an stderr (und in die Logdatei),
niemals in die Ausgabedatei.
"""

import sys
import os
import logging
from logging.handlers import RotatingFileHandler
from typing import List, Optional

# Pfad zum src-Verzeichnis
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from config.settings import (
    LOG_FORMAT, LOG_FILE_NAME, LOG_MAX_BYTES, LOG_BACKUP_COUNT,
    get_log_dir, resolve_paths,
)
from layouts.address_layout import get_layout_info
from services.converter import convert, ConversionError

logger = logging.getLogger(__name__)


def setup_logging(log_dir: Optional[str] = None):
    """Konfiguriert Logging mit Console + File Output.

    Ohne log_dir wird nur auf die Console (stderr) geloggt.
    Mehrfache Aufrufe fuegen keine weiteren Handler hinzu.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    if any(getattr(h, "_converter_handler", False) for h in root_logger.handlers):
        return

    formatter = logging.Formatter(LOG_FORMAT)

    # Console Handler (stderr)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler._converter_handler = True
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return

    # File Handler mit Rotation (1 MB, 2 Backups)
    log_file = os.path.join(log_dir, LOG_FILE_NAME)
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler._converter_handler = True
        root_logger.addHandler(file_handler)
    except (OSError, PermissionError) as e:
        root_logger.warning(f"File logging unavailable, console only: {e}")


def run(args: List[str]) -> int:
    """Fuehrt die Konvertierung aus und gibt den Exit-Code zurueck."""
    input_path, output_path = resolve_paths(args)

    logger.info(f"Reading from: {input_path}")
    logger.info(f"Writing to: {output_path}")
    logger.debug(f"Output layout:\n{get_layout_info()}")

    try:
        convert(input_path, output_path)
    except ConversionError as e:
        logger.error(f"Error: {e}")
        return 1

    logger.info("Processing complete")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Haupteinstiegspunkt (auch fuer das Console-Script)."""
    if argv is None:
        argv = sys.argv[1:]
    setup_logging(get_log_dir())
    return run(argv)


if __name__ == "__main__":
    sys.exit(main())
