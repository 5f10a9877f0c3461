#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Erstellt eine Beispiel-Adress-CSV-Datei zum Testen.

Enthaelt gueltige Zeilen, Leerzeilen, eine Zeile mit zu wenig Feldern
und einen ueberlangen Nachnamen.
"""

import os

# Erwartete Anzahl gueltiger Datensaetze in sample.csv
EXPECTED_RECORDS = 5
# Erwartete (1-basierte) Zeilennummern der uebersprungenen Zeilen
EXPECTED_SKIPPED = [4, 8]

SAMPLE_LINES = [
    "Smith,John,123 Main St,Springfield,IL,62701",
    "Doe,Jane,456 Oak Ave,Portland,OR,97201",
    "",
    "OnlyFourFields,A,B,C",
    "Wolfeschlegelsteinhausenbergerdorff,Hubert,1 Long Name Rd,Philadelphia,PA,19103",
    "   ",
    " Garcia , Maria , 789 Pine Rd , Austin , TX , 73301 ",
    "Too,Many,Fields,In,This,Line,Here",
    "Nguyen,,,,,",
]


def create_test_file(output_path: str):
    """Schreibt die Beispielzeilen in output_path."""
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        for line in SAMPLE_LINES:
            f.write(line + "\n")


if __name__ == "__main__":
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sample.csv")
    create_test_file(path)
    print(f"Testdatei erstellt: {path} ({len(SAMPLE_LINES)} Zeilen)")
