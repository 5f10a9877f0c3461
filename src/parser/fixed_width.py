#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Fixed-Width-Serialisierung

Baut aus einem AddressRecord eine Fixed-Width-Zeile anhand des Adress-Layouts.

Hauptfunktionen:
- pad_to_width(): Wert auf exakte Feldlänge auffüllen bzw. kürzen
- format_record(): Kompletten Datensatz in eine Zeile umwandeln
"""

from domain.models import AddressRecord
from layouts.address_layout import ADDRESS_LAYOUT, LayoutDefinition, get_field_widths


def pad_to_width(text: str, width: int) -> str:
    """
    Formatiert einen Wert linksbündig auf exakt `width` Zeichen.

    Zu lange Werte werden abgeschnitten, kürzere mit Leerzeichen aufgefüllt.
    """
    if len(text) >= width:
        return text[:width]
    return text.ljust(width)


def format_record(
    record: AddressRecord,
    layout: LayoutDefinition = ADDRESS_LAYOUT
) -> str:
    """
    Baut aus einem AddressRecord eine Fixed-Width-Zeile.

    Pro Feld wird der Inhalt auf die Feldbreite gebracht, danach folgt der
    Filler (nur Leerzeichen). Die Zeile enthält kein Zeilenende.

    Args:
        record: Der zu serialisierende Datensatz
        layout: Das Satzlayout (Standard: Adress-Layout)

    Returns:
        Die Fixed-Width-Zeile als String
    """
    parts = []
    # Feldwerte und Layout sind positionsgleich ausgerichtet
    for value, (width, filler) in zip(record.values(), get_field_widths(layout)):
        parts.append(pad_to_width(value, width))
        parts.append(pad_to_width("", filler))
    return "".join(parts)
