"""Servicios del core: fachada tipada y sincronización de recursos."""
