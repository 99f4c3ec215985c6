from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RetreatOut(BaseModel):
    fecha: str
    lugar: str = ""


class BirthdayOut(BaseModel):
    nombre: str
    fecha: str


class SheetSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    retiros_proximos: List[RetreatOut] = Field(
        default_factory=list, alias="retirosProximos"
    )
    mes_retiros_label: Optional[str] = Field(None, alias="mesRetirosLabel")
    ces: List[Dict[str, str]] = Field(default_factory=list)
    crt_cv: List[Dict[str, str]] = Field(default_factory=list, alias="crtCv")
    cumpleanos_proximos: List[BirthdayOut] = Field(
        default_factory=list, alias="cumpleanosProximos"
    )


class ErrorOut(BaseModel):
    error: str
