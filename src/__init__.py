# Adress-Konverter - Hauptpaket
"""
Adress-Konverter: CSV-Adressdatensaetze -> historisches Fixed-Width-Format.

Struktur:
- src/layouts/    - Satzbeschreibung des Ausgabesatzes
- src/domain/     - Domain-Modell (AddressRecord)
- src/parser/     - CSV-Zeilen-Parser und Fixed-Width-Serialisierung
- src/services/   - Konvertierungs-Pipeline
- src/config/     - Standardpfade, Logging-Einstellungen
- src/main.py     - Haupteinstiegspunkt
"""

__version__ = "0.1.0"
