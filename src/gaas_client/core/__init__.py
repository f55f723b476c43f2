"""Core del cliente: dominio, configuración, errores y servicios.

El core no conoce la CLI; solo depende de adaptadores a través de contratos
(`core.interfaces`) y de utilidades puras (escape de rutas, codec).
"""
