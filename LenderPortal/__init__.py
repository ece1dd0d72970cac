# LenderPortal/__init__.py
