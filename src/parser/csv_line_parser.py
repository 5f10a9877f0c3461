#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CSV-Zeilen-Parser

Zerlegt eine Eingabezeile am Komma in die sechs Adressfelder.
Entspricht der COBOL-Logik UNSTRING ... DELIMITED BY ",":
kein Quoting, kein Escaping. Ein Komma im Feldwert ist nicht
von einem Trennzeichen zu unterscheiden.
"""

from typing import Optional

from domain.models import AddressRecord


FIELD_DELIMITER = ","
FIELD_COUNT = len(AddressRecord.field_names())


def parse_line(line: str) -> Optional[AddressRecord]:
    """
    Parst eine Zeile in einen AddressRecord.

    Args:
        line: Die Rohzeile (ohne oder mit Zeilenende)

    Returns:
        AddressRecord mit getrimmten Feldern, oder None wenn die Zeile
        nicht genau sechs Felder enthält
    """
    parts = line.split(FIELD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        return None

    return AddressRecord.from_values([part.strip() for part in parts])
