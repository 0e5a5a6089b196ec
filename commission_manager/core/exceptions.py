# commission_manager/core/exceptions.py
"""
Taxonomía de errores del dominio.

Los servicios lanzan estas excepciones en lugar de HTTPException; los
handlers registrados en core/middleware.py las convierten en respuestas HTTP.
"""

class CommissionManagerError(Exception):
    """Base de todos los errores de dominio"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CommissionManagerError):
    """Entrada mal formada: id inválido, cantidad < 1, mes/año fuera de rango..."""

    status_code = 400


class NotFoundError(CommissionManagerError):
    """La venta, vendedor o producto referenciado no existe"""

    status_code = 404


class BusinessRuleViolation(CommissionManagerError):
    """Vendedor o producto inactivo al momento de registrar la venta"""

    status_code = 400
