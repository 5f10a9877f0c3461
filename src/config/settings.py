"""
Zentrale Einstellungen des Konverters.

Standardpfade entsprechen dem urspruenglichen COBOL-Programm (NFS-Freigabe).
"""

import os
from typing import Sequence, Tuple

DEFAULT_INPUT_PATH = "/nfs_dir/input/info.csv"
DEFAULT_OUTPUT_PATH = "/nfs_dir/output/output.txt"

INPUT_ENCODING = "utf-8"
OUTPUT_ENCODING = "utf-8"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", ".."))
LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "converter.log"
LOG_MAX_BYTES = 1_048_576  # 1 MB
LOG_BACKUP_COUNT = 2


def get_log_dir(project_root: str = PROJECT_ROOT) -> str:
    """Ermittelt das Log-Verzeichnis.

    Im Quellverzeichnis (mit run.py) liegt es im Projekt-Root, bei einer
    installierten Version im aktuellen Arbeitsverzeichnis.
    """
    if os.path.isfile(os.path.join(project_root, "run.py")):
        return os.path.join(project_root, LOG_DIR_NAME)
    return os.path.join(os.getcwd(), LOG_DIR_NAME)


def resolve_paths(args: Sequence[str]) -> Tuple[str, str]:
    """Ermittelt (Eingabe, Ausgabe) aus den Kommandozeilen-Argumenten.

    Nur genau zwei Argumente ueberschreiben die Standardpfade. Jede andere
    Anzahl (auch ein einzelnes Argument) faellt komplett auf beide Defaults zurueck.
    """
    if len(args) == 2:
        return args[0], args[1]
    return DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH
