from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict

class ApiBaseModel(BaseModel):
    """
    Clase base para los esquemas de respuesta (Pydantic v2).
    Lee atributos de los registros del dominio y serializa Decimal como número.
    """
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={
            Decimal: float,
            datetime: lambda v: v.isoformat(),
        }
    )
