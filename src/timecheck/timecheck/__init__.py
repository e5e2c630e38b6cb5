"""TimeCheck package.

Barcode-driven attendance kiosk: feature modules (employees, attendance, scanner,
settings, reports) with a thin Flask controller layer over service/repository layers.
"""
