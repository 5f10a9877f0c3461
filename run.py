#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Startskript fuer den Adress-Konverter.

Verwendung:
    python run.py                          -- Standardpfade verwenden
    python run.py EINGABE.csv AUSGABE.txt  -- Eigene Pfade verwenden
"""

import sys
import os

# Fuege src-Verzeichnis zum Python-Pfad hinzu
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from main import main

if __name__ == "__main__":
    sys.exit(main())
