from nutriapp.gateway.backends.base import Filter, TableBackend, TextSearch, escape_like

__all__ = ["Filter", "TableBackend", "TextSearch", "escape_like"]
