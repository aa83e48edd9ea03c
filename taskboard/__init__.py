"""Task management with regular and urgent lists, a demo, a console menu and a web board."""

__version__ = "0.1.0"